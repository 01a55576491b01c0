from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class IsoDateTime:
    """予約作成時に受け取る運行日時(ISO 8601形式)

    日付のみの文字列（例: 2025-03-01）はその日の 00:00 として扱う。
    末尾の "Z" は UTC として解釈し、保存時はそのままの時差で書き戻す。
    """

    value: datetime

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        if not isinstance(s, str) or not s.strip():
            raise ValueError(f"Invalid ISO 8601 datetime: {s!r}")
        try:
            dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    def __str__(self) -> str:
        return self.value.isoformat()
