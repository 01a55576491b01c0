from bus_trip.booking.domain.entity import Booking
from bus_trip.booking.domain.read_model import UpcomingTrip
from bus_trip.booking.domain.repository import BookingRepository
from bus_trip.booking.domain.repository.booking_repository import (
    DEFAULT_UPCOMING_LIMIT,
)
from bus_trip.booking.domain.value_object import BookingId
from bus_trip.shared.domain import TripDate
from bus_trip.shared.domain.exception import (
    InvalidInputException,
    ResourceNotFoundException,
)


class BookingQueryService:
    """予約参照ユースケース"""

    def __init__(
        self,
        repository: BookingRepository,
        upcoming_limit: int = DEFAULT_UPCOMING_LIMIT,
    ) -> None:
        self._repository = repository
        self._upcoming_limit = upcoming_limit

    def list_bookings(self) -> list[Booking]:
        return self._repository.list_all()

    def get_by_id(self, booking_id: BookingId) -> Booking:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking with ID {booking_id} not found")
        return booking

    def get_by_date(self, date: str) -> Booking:
        """運行日（YYYY-MM-DD）で予約を取得する

        Raises:
            InvalidInputException: 日付の形式が不正な場合（検索前に判定する）
            ResourceNotFoundException: その日の予約が存在しない場合
        """
        booking = self._repository.find_by_date(parse_trip_date(date))
        if booking is None:
            raise ResourceNotFoundException("Booking not found for this date")
        return booking

    def list_upcoming(self, as_of: TripDate | None = None) -> list[UpcomingTrip]:
        """as_of（既定は今日）以降の予約を日付順に返す"""
        return self._repository.list_upcoming(
            as_of or TripDate.today(), limit=self._upcoming_limit
        )


def parse_trip_date(value: str) -> TripDate:
    try:
        return TripDate.from_string(value)
    except ValueError as e:
        raise InvalidInputException(str(e)) from e
