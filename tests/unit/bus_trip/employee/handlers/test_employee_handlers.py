import json

import pytest

from bus_trip.employee.applications import (
    EmployeeQueryService,
    RegisterEmployeeService,
    UpdateEmployeeService,
)
from bus_trip.employee.domain.factory import EmployeeFactory
from bus_trip.employee.handlers import (
    create_employee,
    get_employee,
    list_employees,
    update_employee,
)


def _body(response: dict) -> dict:
    return json.loads(response["body"])


@pytest.fixture(autouse=True)
def services(monkeypatch, employee_repository):
    query_service = EmployeeQueryService(employee_repository)
    monkeypatch.setattr(list_employees, "service", query_service)
    monkeypatch.setattr(get_employee, "service", query_service)
    monkeypatch.setattr(
        create_employee,
        "service",
        RegisterEmployeeService(employee_repository, EmployeeFactory()),
    )
    monkeypatch.setattr(
        update_employee, "service", UpdateEmployeeService(employee_repository)
    )


@pytest.fixture
def alice(employee_repository, create_employee):
    employee = create_employee(employee_id=1, name="Alice", email="a@example.com")
    employee_repository.save(employee)
    return employee


class TestCreateEmployeeHandler:
    def test_created_with_defaults(self, api_event, lambda_context):
        event = api_event("POST", "/employees", body={"name": "Alice"})

        response = create_employee.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 201
        assert _body(response) == {
            "employee_id": 1,
            "name": "Alice",
            "email": None,
            "phone": None,
            "role": "agent",
            "commission_percent": "10",
            "active": True,
        }

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"name": ""},
            {"name": "Alice", "email": "bad"},
            {"name": "Alice", "commission_percent": 101},
            {"name": "   "},
        ],
    )
    def test_bad_request(self, api_event, lambda_context, body):
        event = api_event("POST", "/employees", body=body)

        response = create_employee.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400


class TestGetEmployeeHandlers:
    def test_get(self, api_event, lambda_context, alice):
        event = api_event("GET", "/employees/1", {"id": "1"})

        response = get_employee.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert _body(response)["name"] == "Alice"

    @pytest.mark.parametrize("raw_id, status_code", [("1", 404), ("abc", 400)])
    def test_errors(self, api_event, lambda_context, raw_id, status_code):
        event = api_event("GET", f"/employees/{raw_id}", {"id": raw_id})

        response = get_employee.lambda_handler(event, lambda_context)

        assert response["statusCode"] == status_code

    def test_list(self, api_event, lambda_context, alice):
        response = list_employees.lambda_handler(
            api_event("GET", "/employees"), lambda_context
        )

        assert _body(response)["count"] == 1


class TestUpdateEmployeeHandler:
    def _event(self, api_event, raw_id, body):
        return api_event("PATCH", f"/employees/{raw_id}", {"id": raw_id}, body=body)

    def test_patch(self, api_event, lambda_context, alice):
        event = self._event(api_event, "1", {"commission_percent": 15})

        response = update_employee.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        body = _body(response)
        assert body["commission_percent"] == "15"
        assert body["name"] == "Alice"
        assert body["email"] == "a@example.com"

    def test_clear_email(self, api_event, lambda_context, alice):
        event = self._event(api_event, "1", {"email": None})

        body = _body(update_employee.lambda_handler(event, lambda_context))

        assert body["email"] is None

    @pytest.mark.parametrize("body", [{"name": None}, {"active": None}, {"role": ""}])
    def test_bad_request(self, api_event, lambda_context, alice, body):
        event = self._event(api_event, "1", body)

        response = update_employee.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400

    def test_not_found(self, api_event, lambda_context):
        event = self._event(api_event, "9", {"phone": "555-0100"})

        response = update_employee.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404
