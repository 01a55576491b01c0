import json
from dataclasses import dataclass
from decimal import Decimal

import pytest

from bus_trip.booking.domain.entity import Booking, Seat
from bus_trip.booking.domain.factory import SeatInventoryFactory
from bus_trip.booking.domain.value_object import BookingId, SeatId
from bus_trip.booking.infrastructure import InMemoryBookingRepository
from bus_trip.employee.domain.entity import Employee
from bus_trip.employee.domain.value_object import EmployeeId, EmployeeName
from bus_trip.employee.infrastructure import InMemoryEmployeeRepository
from bus_trip.shared.domain import (
    CommissionPercent,
    EmailAddress,
    IsoDateTime,
    Money,
)


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    )
    aws_request_id: str = "request-id"


@pytest.fixture
def lambda_context():
    """inject_lambda_context 用の LambdaContext フィクスチャ"""
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway HTTP API (v2) のイベントを生成する Factory fixture"""

    def _factory(
        method: str = "GET",
        path: str = "/",
        path_parameters: dict | None = None,
        query: dict | None = None,
        body: dict | str | None = None,
    ) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "version": "2.0",
            "routeKey": f"{method} {path}",
            "rawPath": path,
            "rawQueryString": "",
            "headers": {"content-type": "application/json"},
            "queryStringParameters": query,
            "pathParameters": path_parameters,
            "requestContext": {
                "http": {"method": method, "path": path},
                "requestId": "request-id",
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory


@pytest.fixture
def create_seat():
    """Seat を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        seat_id: int = 1,
        booking_id: int = 1,
        seat_number: int = 1,
        price: Decimal | str = Decimal("85"),
        customer_name: str | None = None,
        customer_phone: str | None = None,
        customer_email: str | None = None,
        employee_id: int | None = None,
        agent_name: str | None = None,
        commission_percent: Decimal | str = Decimal("10"),
    ) -> Seat:
        return Seat(
            id=SeatId(value=seat_id),
            booking_id=BookingId(value=booking_id),
            seat_number=seat_number,
            price=Money.usd(price),
            customer_name=customer_name,
            customer_phone=customer_phone,
            customer_email=(
                EmailAddress(customer_email) if customer_email is not None else None
            ),
            employee_id=EmployeeId(value=employee_id) if employee_id else None,
            agent_name=agent_name,
            commission_percent=CommissionPercent(Decimal(commission_percent)),
        )

    return _factory


@pytest.fixture
def create_booking(create_seat):
    """Booking を生成する Factory fixture

    seats を省略すると seat_count 席の空席を持つ予約を作る。
    """

    def _factory(
        booking_id: int = 1,
        date: str = "2025-03-01T09:00:00",
        seats: list[Seat] | None = None,
        seat_count: int = 4,
    ) -> Booking:
        if seats is None:
            seats = [
                create_seat(
                    seat_id=booking_id * 100 + number,
                    booking_id=booking_id,
                    seat_number=number,
                )
                for number in range(1, seat_count + 1)
            ]
        return Booking(
            id=BookingId(value=booking_id),
            date=IsoDateTime.from_string(date),
            seats=seats,
        )

    return _factory


@pytest.fixture
def create_employee():
    def _factory(
        employee_id: int = 1,
        name: str = "Alice",
        commission_percent: Decimal | str = Decimal("12"),
        email: str | None = None,
    ) -> Employee:
        return Employee(
            id=EmployeeId(value=employee_id),
            name=EmployeeName(value=name),
            email=EmailAddress(email) if email is not None else None,
            commission_percent=CommissionPercent(Decimal(commission_percent)),
        )

    return _factory


@pytest.fixture
def seat_factory():
    """既定の価格表で35席を生成する SeatInventoryFactory"""
    return SeatInventoryFactory()


@pytest.fixture
def booking_repository(seat_factory):
    return InMemoryBookingRepository(seat_factory)


@pytest.fixture
def employee_repository():
    return InMemoryEmployeeRepository()
