from bus_trip.booking.domain.entity import Booking
from bus_trip.booking.domain.repository import BookingRepository
from bus_trip.shared.domain import IsoDateTime, TripDate
from bus_trip.shared.domain.exception import (
    BookingAlreadyExistsException,
    DuplicateResourceException,
    InvalidInputException,
)


class CreateBookingService:
    """予約作成ユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def create(self, date: str) -> Booking:
        """運行日の予約と座席一式を作成する

        時刻付きの日時も受け付けるが、重複判定はカレンダー日で行う。

        Raises:
            InvalidInputException: 日時として解釈できない場合
            BookingAlreadyExistsException: 同じ運行日の予約が既に存在する場合
        """
        try:
            date_time = IsoDateTime.from_string(date)
        except ValueError as e:
            raise InvalidInputException(str(e)) from e

        try:
            return self._repository.create(date_time)
        except DuplicateResourceException as e:
            trip_date = TripDate.from_date_time(date_time)
            raise BookingAlreadyExistsException(
                "A booking for this date already exists",
                existing=self._repository.find_by_date(trip_date),
            ) from e
