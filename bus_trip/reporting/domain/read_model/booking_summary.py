from dataclasses import dataclass, field
from decimal import Decimal

from bus_trip.shared.domain import TripDate


@dataclass(frozen=True)
class BookingSummary:
    """運行日ごとの集計（永続化しない）"""

    date: TripDate
    formatted_date: str
    total_seats: int
    booked_seats: int
    available_seats: int
    total_revenue: Decimal
    total_commission: Decimal
    net_revenue: Decimal
    average_price: Decimal
    occupancy_rate: float
    commissions_by_agent: dict[str, Decimal] = field(default_factory=dict)
