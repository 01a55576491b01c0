from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from bus_trip.booking.domain.entity import Booking
from bus_trip.shared.domain import TripDate


@dataclass(frozen=True)
class UpcomingTrip:
    """今後の運行の概要（予約済み座席数と売上）"""

    date: TripDate
    booked_seats: int
    revenue: Decimal

    @classmethod
    def from_booking(cls, booking: Booking) -> UpcomingTrip:
        return cls(
            date=booking.trip_date,
            booked_seats=len(booking.booked_seats()),
            revenue=booking.gross_revenue().amount,
        )
