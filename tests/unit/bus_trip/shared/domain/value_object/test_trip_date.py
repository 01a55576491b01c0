from datetime import date

import pytest

from bus_trip.shared.domain import IsoDateTime, TripDate


class TestTripDate:
    def test_from_string(self):
        assert TripDate.from_string("2025-03-01").value == date(2025, 3, 1)

    @pytest.mark.parametrize(
        "value",
        ["2025-3-1", "2025/03/01", "2025-03-01T09:00:00", "", "not-a-date"],
    )
    def test_malformed_string_is_rejected(self, value):
        with pytest.raises(ValueError, match="Expected format: YYYY-MM-DD"):
            TripDate.from_string(value)

    def test_impossible_day_is_rejected(self):
        with pytest.raises(ValueError, match="Invalid date"):
            TripDate.from_string("2025-02-30")

    def test_from_date_time_drops_time(self):
        """同じ日の異なる時刻は同じ運行日になる"""
        morning = IsoDateTime.from_string("2025-03-01T06:00:00")
        evening = IsoDateTime.from_string("2025-03-01T21:30:00")
        assert TripDate.from_date_time(morning) == TripDate.from_date_time(evening)

    def test_ordering(self):
        assert TripDate.from_string("2025-03-01") < TripDate.from_string("2025-03-02")

    def test_formatted(self):
        assert TripDate.from_string("2025-03-01").formatted() == "March 1, 2025"

    def test_str_is_iso_date(self):
        assert str(TripDate.from_string("2025-12-24")) == "2025-12-24"


class TestIsoDateTime:
    def test_date_only_string(self):
        dt = IsoDateTime.from_string("2025-03-01")
        assert dt.value.hour == 0

    def test_utc_suffix(self):
        dt = IsoDateTime.from_string("2025-03-01T09:00:00Z")
        assert dt.value.utcoffset() is not None

    def test_invalid_string(self):
        with pytest.raises(ValueError):
            IsoDateTime.from_string("tomorrow")

    @pytest.mark.parametrize("value", ["", "   ", None])
    def test_blank_string(self, value):
        with pytest.raises(ValueError):
            IsoDateTime.from_string(value)

    def test_round_trips_through_str(self):
        dt = IsoDateTime.from_string("2025-03-01T09:30:00+09:00")
        assert IsoDateTime.from_string(str(dt)) == dt
