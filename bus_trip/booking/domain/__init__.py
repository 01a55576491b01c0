from .entity import Booking as Booking
from .entity import Seat as Seat
from .entity import SeatChanges as SeatChanges
from .factory import SeatInventoryFactory as SeatInventoryFactory
from .read_model import UpcomingTrip as UpcomingTrip
from .repository import BookingRepository as BookingRepository
from .value_object import BookingId as BookingId
from .value_object import CommissionAttribution as CommissionAttribution
from .value_object import EmployeeAttribution as EmployeeAttribution
from .value_object import ManualAttribution as ManualAttribution
from .value_object import SeatId as SeatId
from .value_object import SeatPricing as SeatPricing
