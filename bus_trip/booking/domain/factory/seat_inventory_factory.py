from collections.abc import Sequence

from bus_trip.booking.domain.entity.seat import Seat
from bus_trip.booking.domain.value_object import BookingId, SeatId, SeatPricing
from bus_trip.shared.domain import CommissionPercent, Currency, Money


class SeatInventoryFactory:
    """予約1件分の座席一式を生成するFactory

    - 座席数は固定（既定 35）
    - 価格は座席位置による価格表から決まる
    - IDの採番は呼び出し側（Repository）の責務。Factory 自体は副作用を持たない
    """

    def __init__(
        self,
        seat_count: int = 35,
        pricing: SeatPricing | None = None,
        currency: Currency | None = None,
        commission_percent: CommissionPercent | None = None,
    ) -> None:
        if seat_count < 1:
            raise ValueError(f"Seat count must be positive: {seat_count}")
        self._seat_count = seat_count
        self._pricing = pricing or SeatPricing.default()
        self._currency = currency or Currency.usd()
        self._commission_percent = commission_percent or CommissionPercent.default()

    @property
    def seat_count(self) -> int:
        return self._seat_count

    def generate(self, booking_id: BookingId, seat_ids: Sequence[SeatId]) -> list[Seat]:
        """採番済みの座席IDから、座席番号順の座席一式を生成する"""
        if len(seat_ids) != self._seat_count:
            raise ValueError(
                f"Expected {self._seat_count} seat ids, got {len(seat_ids)}"
            )

        return [
            Seat(
                id=seat_id,
                booking_id=booking_id,
                seat_number=seat_number,
                price=Money(
                    amount=self._pricing.price_for(seat_number),
                    currency=self._currency,
                ),
                commission_percent=self._commission_percent,
            )
            for seat_number, seat_id in enumerate(seat_ids, start=1)
        ]
