from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class PriceTier:
    """座席番号 last_seat までに適用される価格帯

    last_seat が None の場合は残り全ての座席に適用される。
    """

    last_seat: int | None
    price: Decimal

    def __post_init__(self) -> None:
        if self.last_seat is not None and self.last_seat < 1:
            raise ValueError(f"Tier upper bound must be positive: {self.last_seat}")
        if self.price < 0:
            raise ValueError("Tier price cannot be negative")


@dataclass(frozen=True)
class SeatPricing:
    """座席位置による既定価格表

    既定値: 1〜10番 85 / 11〜25番 75 / 26番以降 65
    """

    tiers: tuple[PriceTier, ...]

    def __post_init__(self) -> None:
        if not self.tiers:
            raise ValueError("Seat pricing needs at least one tier")
        if self.tiers[-1].last_seat is not None:
            raise ValueError("The last price tier must cover all remaining seats")
        bounds = [tier.last_seat for tier in self.tiers[:-1]]
        if None in bounds or bounds != sorted(set(bounds)):
            raise ValueError("Price tier bounds must be strictly increasing")

    def price_for(self, seat_number: int) -> Decimal:
        """座席番号（1始まり）の既定価格"""
        if seat_number < 1:
            raise ValueError(f"Seat number must be positive: {seat_number}")
        for tier in self.tiers:
            if tier.last_seat is None or seat_number <= tier.last_seat:
                return tier.price
        raise AssertionError("unreachable: the last tier is open-ended")

    @classmethod
    def default(cls) -> SeatPricing:
        return cls(
            tiers=(
                PriceTier(last_seat=10, price=Decimal("85")),
                PriceTier(last_seat=25, price=Decimal("75")),
                PriceTier(last_seat=None, price=Decimal("65")),
            )
        )

    @classmethod
    def from_string(cls, s: str) -> SeatPricing:
        """設定文字列から生成

        形式: "<最終座席番号>:<価格>" をカンマ区切りで並べ、最後は "*:<価格>"。
        例: "10:85,25:75,*:65"
        """
        tiers: list[PriceTier] = []
        for part in s.split(","):
            bound, sep, price = part.strip().partition(":")
            if not sep:
                raise ValueError(f"Invalid price tier: {part!r}")
            try:
                tiers.append(
                    PriceTier(
                        last_seat=None if bound.strip() == "*" else int(bound),
                        price=Decimal(price.strip()),
                    )
                )
            except (InvalidOperation, ValueError) as e:
                raise ValueError(f"Invalid price tier: {part!r}") from e
        return cls(tiers=tuple(tiers))
