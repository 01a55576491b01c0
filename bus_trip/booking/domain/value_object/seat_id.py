from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class SeatId:
    """座席ID（正の整数、全予約を通して一意）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Invalid seat id: {self.value}")
        if self.value < 1:
            raise ValueError(f"Seat id must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def from_string(cls, s: str) -> SeatId:
        """パスパラメータ等の文字列から生成"""
        if not isinstance(s, str) or not s.strip().isdigit():
            raise ValueError(f"Invalid seat id: {s}")
        return cls(value=int(s))
