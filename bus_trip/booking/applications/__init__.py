from .create_booking import CreateBookingService as CreateBookingService
from .get_booking import BookingQueryService as BookingQueryService
from .get_booking import parse_trip_date as parse_trip_date
from .update_seat import SeatPatch as SeatPatch
from .update_seat import UpdateSeatService as UpdateSeatService
