"""Lambda 実行環境ごとに設定・リポジトリ・サービスを組み立てる

コールドスタート時に一度だけ生成し、以降の呼び出しで使い回す。
TABLE_NAME が設定されていれば DynamoDB、なければインメモリのリポジトリを使う。
"""

from functools import lru_cache

from bus_trip.booking.applications import (
    BookingQueryService,
    CreateBookingService,
    UpdateSeatService,
)
from bus_trip.booking.domain.factory import SeatInventoryFactory
from bus_trip.booking.domain.repository import BookingRepository
from bus_trip.booking.infrastructure import (
    DynamoDBBookingRepository,
    InMemoryBookingRepository,
)
from bus_trip.employee.applications import (
    EmployeeQueryService,
    RegisterEmployeeService,
    UpdateEmployeeService,
)
from bus_trip.employee.domain.factory import EmployeeFactory
from bus_trip.employee.domain.repository import EmployeeRepository
from bus_trip.employee.infrastructure import (
    DynamoDBEmployeeRepository,
    InMemoryEmployeeRepository,
)
from bus_trip.reporting.applications import ReportService
from bus_trip.reporting.domain import AggregationEngine
from bus_trip.shared.config import BookingSettings


@lru_cache(maxsize=1)
def get_settings() -> BookingSettings:
    return BookingSettings.from_env()


@lru_cache(maxsize=1)
def get_booking_repository() -> BookingRepository:
    settings = get_settings()
    factory = SeatInventoryFactory(
        seat_count=settings.seat_count,
        pricing=settings.seat_pricing,
        currency=settings.currency,
        commission_percent=settings.default_commission_percent,
    )
    if settings.uses_dynamodb:
        return DynamoDBBookingRepository(factory, table_name=settings.table_name)
    return InMemoryBookingRepository(factory)


@lru_cache(maxsize=1)
def get_employee_repository() -> EmployeeRepository:
    settings = get_settings()
    if settings.uses_dynamodb:
        return DynamoDBEmployeeRepository(table_name=settings.table_name)
    return InMemoryEmployeeRepository()


def get_create_booking_service() -> CreateBookingService:
    return CreateBookingService(get_booking_repository())


def get_booking_query_service() -> BookingQueryService:
    return BookingQueryService(
        get_booking_repository(), upcoming_limit=get_settings().upcoming_limit
    )


def get_update_seat_service() -> UpdateSeatService:
    return UpdateSeatService(
        get_booking_repository(),
        get_employee_repository(),
        currency=get_settings().currency,
    )


def get_employee_query_service() -> EmployeeQueryService:
    return EmployeeQueryService(get_employee_repository())


def get_register_employee_service() -> RegisterEmployeeService:
    settings = get_settings()
    return RegisterEmployeeService(
        get_employee_repository(),
        EmployeeFactory(commission_percent=settings.default_commission_percent),
    )


def get_update_employee_service() -> UpdateEmployeeService:
    return UpdateEmployeeService(get_employee_repository())


def get_report_service() -> ReportService:
    settings = get_settings()
    return ReportService(
        get_booking_repository(),
        get_employee_repository(),
        AggregationEngine(
            default_seat_count=settings.seat_count, currency=settings.currency
        ),
    )
