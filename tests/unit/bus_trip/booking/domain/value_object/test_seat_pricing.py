from decimal import Decimal

import pytest

from bus_trip.booking.domain.value_object import PriceTier, SeatPricing


class TestSeatPricing:
    @pytest.mark.parametrize(
        "seat_number, price",
        [(1, "85"), (10, "85"), (11, "75"), (25, "75"), (26, "65"), (35, "65")],
    )
    def test_default_tiers(self, seat_number, price):
        assert SeatPricing.default().price_for(seat_number) == Decimal(price)

    def test_from_string_matches_default(self):
        assert SeatPricing.from_string("10:85,25:75,*:65") == SeatPricing.default()

    def test_single_open_tier(self):
        pricing = SeatPricing.from_string("*:50")
        assert pricing.price_for(1) == pricing.price_for(100) == Decimal("50")

    @pytest.mark.parametrize(
        "value",
        ["10:85,25:75", "25:75,10:85,*:65", "10:85,10:75,*:65", "abc", "10=85,*:65"],
    )
    def test_invalid_tables(self, value):
        with pytest.raises(ValueError):
            SeatPricing.from_string(value)

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValueError):
            PriceTier(last_seat=None, price=Decimal("-1"))

    def test_seat_number_must_be_positive(self):
        with pytest.raises(ValueError):
            SeatPricing.default().price_for(0)
