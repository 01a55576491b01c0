from unittest.mock import MagicMock

import pytest

from bus_trip.booking.applications import BookingQueryService
from bus_trip.booking.domain.value_object import BookingId
from bus_trip.shared.domain import IsoDateTime, TripDate
from bus_trip.shared.domain.exception import (
    InvalidInputException,
    ResourceNotFoundException,
)


class TestBookingQueryService:
    def test_get_by_date(self, booking_repository):
        created = booking_repository.create(IsoDateTime.from_string("2025-03-01"))
        service = BookingQueryService(booking_repository)

        assert service.get_by_date("2025-03-01").id == created.id

    def test_get_by_date_not_found(self, booking_repository):
        service = BookingQueryService(booking_repository)

        with pytest.raises(ResourceNotFoundException):
            service.get_by_date("2025-03-01")

    @pytest.mark.parametrize("value", ["2025-13-01", "03/01/2025", "2025-03-01T00:00"])
    def test_malformed_date_fails_before_lookup(self, value):
        mock_repository = MagicMock()
        service = BookingQueryService(mock_repository)

        with pytest.raises(InvalidInputException):
            service.get_by_date(value)

        mock_repository.find_by_date.assert_not_called()

    def test_get_by_id_not_found(self, booking_repository):
        with pytest.raises(ResourceNotFoundException):
            BookingQueryService(booking_repository).get_by_id(BookingId(value=1))

    def test_list_upcoming_uses_configured_limit(self, booking_repository):
        for day in range(1, 10):
            booking_repository.create(IsoDateTime.from_string(f"2025-03-{day:02d}"))
        service = BookingQueryService(booking_repository, upcoming_limit=3)

        upcoming = service.list_upcoming(TripDate.from_string("2025-03-04"))

        assert [str(t.date) for t in upcoming] == [
            "2025-03-04",
            "2025-03-05",
            "2025-03-06",
        ]

    def test_list_upcoming_defaults_to_today(self):
        mock_repository = MagicMock()
        service = BookingQueryService(mock_repository)

        service.list_upcoming()

        mock_repository.list_upcoming.assert_called_once_with(TripDate.today(), limit=6)
