from __future__ import annotations

import os
from dataclasses import dataclass, field

from bus_trip.booking.domain.value_object import SeatPricing
from bus_trip.shared.domain import CommissionPercent, Currency


@dataclass(frozen=True)
class BookingSettings:
    """環境変数から読み込む実行時設定

    不正な値は起動時に ValueError とする。
    """

    seat_count: int = 35
    seat_pricing: SeatPricing = field(default_factory=SeatPricing.default)
    upcoming_limit: int = 6
    default_commission_percent: CommissionPercent = field(
        default_factory=CommissionPercent.default
    )
    currency: Currency = field(default_factory=Currency.usd)
    table_name: str | None = None

    def __post_init__(self) -> None:
        if self.seat_count < 1:
            raise ValueError(f"SEAT_COUNT must be positive: {self.seat_count}")
        if self.upcoming_limit < 1:
            raise ValueError(f"UPCOMING_LIMIT must be positive: {self.upcoming_limit}")

    @classmethod
    def from_env(cls) -> BookingSettings:
        return cls(
            seat_count=_int_env("SEAT_COUNT", 35),
            seat_pricing=SeatPricing.from_string(
                os.getenv("SEAT_PRICE_TIERS", "10:85,25:75,*:65")
            ),
            upcoming_limit=_int_env("UPCOMING_LIMIT", 6),
            default_commission_percent=CommissionPercent(
                os.getenv("DEFAULT_COMMISSION_PERCENT", "10")
            ),
            currency=Currency(os.getenv("CURRENCY", "USD")),
            table_name=os.getenv("TABLE_NAME") or None,
        )

    @property
    def uses_dynamodb(self) -> bool:
        return self.table_name is not None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer: {raw!r}") from e
