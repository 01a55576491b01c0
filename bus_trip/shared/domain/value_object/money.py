from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        if self.currency != other.currency:
            raise ValueError("Cannot add money with different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def percentage(self, percent: Decimal) -> Money:
        """金額の percent % を返す（手数料計算用）"""
        return Money(amount=self.amount * percent / 100, currency=self.currency)

    @classmethod
    def zero(cls, currency: Currency) -> Money:
        return cls(amount=Decimal("0"), currency=currency)

    @classmethod
    def usd(cls, amount: Decimal | int | str) -> Money:
        """米ドルで Money を生成"""
        return cls(amount=Decimal(str(amount)), currency=Currency.usd())
