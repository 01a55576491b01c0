from decimal import Decimal

import pytest

from bus_trip.employee.domain.entity import DEFAULT_ROLE
from bus_trip.employee.domain.factory import EmployeeFactory
from bus_trip.employee.domain.value_object import EmployeeId, EmployeeName
from bus_trip.shared.domain import CommissionPercent, EmailAddress
from bus_trip.shared.domain.exception import BusinessRuleViolationException


class TestEmployeeName:
    @pytest.mark.parametrize("value", ["", "   ", "x" * 101])
    def test_invalid_names(self, value):
        with pytest.raises(ValueError):
            EmployeeName(value=value)

    def test_str_returns_value(self):
        assert str(EmployeeName(value="Alice")) == "Alice"


class TestEmployeeId:
    def test_from_string(self):
        assert EmployeeId.from_string("3") == EmployeeId(value=3)

    @pytest.mark.parametrize("value", ["", "x", "-3", "0"])
    def test_invalid_string(self, value):
        with pytest.raises(ValueError):
            EmployeeId.from_string(value)


class TestEmployee:
    def test_defaults(self, create_employee):
        employee = create_employee()
        assert employee.role == DEFAULT_ROLE
        assert employee.active is True

    def test_apply_changes_only_present_fields(self, create_employee):
        employee = create_employee(email="alice@example.com")

        employee.apply(
            {"phone": "555-0100", "commission_percent": CommissionPercent("15")}
        )

        assert employee.phone == "555-0100"
        assert employee.commission_percent.value == Decimal("15")
        assert employee.email == EmailAddress("alice@example.com")

    def test_optional_fields_can_be_cleared(self, create_employee):
        employee = create_employee(email="alice@example.com")
        employee.apply({"email": None})
        assert employee.email is None

    @pytest.mark.parametrize("field", ["name", "role", "commission_percent", "active"])
    def test_required_fields_cannot_be_cleared(self, create_employee, field):
        with pytest.raises(BusinessRuleViolationException):
            create_employee().apply({field: None})


class TestEmployeeFactory:
    def test_create_applies_defaults(self):
        employee = EmployeeFactory().create(EmployeeId(value=1), {"name": "Alice"})

        assert employee.id == EmployeeId(value=1)
        assert str(employee.name) == "Alice"
        assert employee.role == "agent"
        assert employee.commission_percent.value == Decimal("10")
        assert employee.active is True
        assert employee.email is None

    def test_configured_default_commission(self):
        factory = EmployeeFactory(commission_percent=CommissionPercent("7.5"))

        employee = factory.create(EmployeeId(value=1), {"name": "Alice"})

        assert employee.commission_percent.value == Decimal("7.5")

    def test_explicit_values(self):
        employee = EmployeeFactory().create(
            EmployeeId(value=2),
            {
                "name": "Bob",
                "email": "bob@example.com",
                "phone": "555-0101",
                "role": "manager",
                "commission_percent": Decimal("0"),
                "active": False,
            },
        )

        assert str(employee.email) == "bob@example.com"
        assert employee.role == "manager"
        assert employee.commission_percent.value == Decimal("0")
        assert employee.active is False

    def test_validate_missing_name(self):
        with pytest.raises(KeyError):
            EmployeeFactory().validate({})
