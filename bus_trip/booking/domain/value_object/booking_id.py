from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class BookingId:
    """予約ID（正の整数）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Invalid booking id: {self.value}")
        if self.value < 1:
            raise ValueError(f"Booking id must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def from_string(cls, s: str) -> BookingId:
        """パスパラメータ等の文字列から生成"""
        if not isinstance(s, str) or not s.strip().isdigit():
            raise ValueError(f"Invalid booking id: {s}")
        return cls(value=int(s))
