from decimal import Decimal

import pytest

from bus_trip.shared.domain import CommissionPercent, EmailAddress


class TestCommissionPercent:
    @pytest.mark.parametrize("value", ["0", "10", "12.5", "100"])
    def test_accepts_values_in_range(self, value):
        assert CommissionPercent(value).value == Decimal(value)

    @pytest.mark.parametrize("value", ["-0.1", "100.01", "abc", "NaN"])
    def test_rejects_values_out_of_range(self, value):
        with pytest.raises(ValueError):
            CommissionPercent(value)

    def test_default_is_ten_percent(self):
        assert CommissionPercent.default().value == Decimal("10")


class TestEmailAddress:
    def test_valid_address_is_stripped(self):
        assert EmailAddress(" alice@example.com ").value == "alice@example.com"

    @pytest.mark.parametrize(
        "value",
        [
            "alice",
            "alice@",
            "@example.com",
            "a b@c.d",
            "a..b@example.com",
            ".alice@example.com",
            "alice@exa_mple.com",
        ],
    )
    def test_invalid_address(self, value):
        with pytest.raises(ValueError):
            EmailAddress(value)

    def test_domain_is_normalized(self):
        assert EmailAddress("alice@Example.COM").value == "alice@example.com"
