from .booking_id import BookingId as BookingId
from .commission_attribution import CommissionAttribution as CommissionAttribution
from .commission_attribution import EmployeeAttribution as EmployeeAttribution
from .commission_attribution import ManualAttribution as ManualAttribution
from .seat_id import SeatId as SeatId
from .seat_pricing import PriceTier as PriceTier
from .seat_pricing import SeatPricing as SeatPricing
