from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class CommissionPercent:
    """手数料率（0〜100 の百分率）"""

    value: Decimal

    DEFAULT = Decimal("10")

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            try:
                object.__setattr__(self, "value", Decimal(str(self.value)))
            except InvalidOperation as e:
                raise ValueError(
                    f"Invalid commission percent: {self.value}"
                ) from e
        if not self.value.is_finite() or not (0 <= self.value <= 100):
            raise ValueError(
                f"Commission percent must be between 0 and 100: {self.value}"
            )

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def default(cls) -> CommissionPercent:
        return cls(value=cls.DEFAULT)
