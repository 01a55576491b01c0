from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from .iso_date_time import IsoDateTime

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True, order=True)
class TripDate:
    """運行日（カレンダー日単位）

    予約日付の比較は必ずこの値で行う。時刻は切り捨てる。
    例: 2025-03-01
    """

    value: date

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^\d{4}-\d{2}-\d{2}$")

    def __str__(self) -> str:
        return self.value.isoformat()

    @classmethod
    def from_string(cls, s: str) -> TripDate:
        """YYYY-MM-DD 形式の文字列から生成（時刻付きは不可）"""
        if not isinstance(s, str) or not cls.PATTERN.match(s):
            raise ValueError(
                f"Invalid date format: {s}. Expected format: YYYY-MM-DD"
            )
        try:
            return cls(value=date.fromisoformat(s))
        except ValueError as e:
            raise ValueError(f"Invalid date: {s}") from e

    @classmethod
    def from_date_time(cls, date_time: IsoDateTime) -> TripDate:
        """日時からカレンダー日を取り出す"""
        return cls(value=date_time.value.date())

    @classmethod
    def today(cls) -> TripDate:
        return cls(value=date.today())

    @property
    def year(self) -> int:
        return self.value.year

    @property
    def month(self) -> int:
        return self.value.month

    def formatted(self) -> str:
        """表示用の日付（例: March 1, 2025）"""
        return f"{MONTH_NAMES[self.month - 1]} {self.value.day}, {self.year}"
