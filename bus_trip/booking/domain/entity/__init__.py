from .booking import Booking as Booking
from .seat import Seat as Seat
from .seat import SeatChanges as SeatChanges
