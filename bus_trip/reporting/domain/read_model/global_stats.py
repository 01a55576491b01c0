from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class GlobalStats:
    total_bookings: int
    total_customers: int
    total_revenue: Decimal
    average_occupancy: float
