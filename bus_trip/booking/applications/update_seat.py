from decimal import Decimal
from typing import TypedDict

from bus_trip.booking.applications.get_booking import parse_trip_date
from bus_trip.booking.domain.entity import Seat, SeatChanges
from bus_trip.booking.domain.repository import BookingRepository
from bus_trip.booking.domain.value_object import (
    BookingId,
    CommissionAttribution,
    EmployeeAttribution,
    ManualAttribution,
    SeatId,
)
from bus_trip.employee.domain.repository import EmployeeRepository
from bus_trip.shared.domain import CommissionPercent, Currency, EmailAddress, Money
from bus_trip.shared.domain.exception import (
    InvalidInputException,
    ResourceNotFoundException,
)


class SeatPatch(TypedDict, total=False):
    """座席更新の入力データ（プリミティブ型、存在するキーだけ更新する）"""

    price: Decimal
    customer_name: str | None
    customer_phone: str | None
    customer_email: str | None
    commission_percent: Decimal


class UpdateSeatService:
    """座席更新ユースケース

    手数料の帰属先（従業員 / 手入力の担当者名）はここで一度だけ解決し、
    agent_name と commission_percent の組として座席に保存する。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        employee_repository: EmployeeRepository,
        currency: Currency | None = None,
    ) -> None:
        self._booking_repository = booking_repository
        self._employee_repository = employee_repository
        self._currency = currency or Currency.usd()

    def update(
        self,
        booking_id: BookingId,
        seat_id: SeatId,
        patch: SeatPatch,
        attribution: CommissionAttribution | None = None,
    ) -> Seat:
        """座席を部分更新する

        Raises:
            InvalidInputException: 値が不正な場合（何も変更しない）
            ResourceNotFoundException: 予約・座席・従業員が存在しない場合
        """
        changes = self._to_changes(patch)
        if attribution is not None:
            if "commission_percent" in patch and isinstance(
                attribution, EmployeeAttribution
            ):
                raise InvalidInputException(
                    "commission_percent cannot be combined with an employee"
                )
            changes.update(self._resolve(attribution))

        return self._booking_repository.update_seat(booking_id, seat_id, changes)

    def update_on_date(
        self,
        date: str,
        seat_id: str,
        patch: SeatPatch,
        attribution: CommissionAttribution | None = None,
    ) -> Seat:
        """運行日（YYYY-MM-DD）と座席IDの文字列で座席を更新する"""
        trip_date = parse_trip_date(date)
        try:
            parsed_seat_id = SeatId.from_string(seat_id)
        except ValueError as e:
            raise InvalidInputException(str(e)) from e

        booking = self._booking_repository.find_by_date(trip_date)
        if booking is None:
            raise ResourceNotFoundException("Booking not found for this date")

        return self.update(booking.id, parsed_seat_id, patch, attribution)

    def _resolve(self, attribution: CommissionAttribution) -> SeatChanges:
        """帰属先を agent_name / commission_percent / employee_id に解決する"""
        if isinstance(attribution, EmployeeAttribution):
            employee = self._employee_repository.find_by_id(attribution.employee_id)
            if employee is None:
                raise ResourceNotFoundException(
                    f"Employee with ID {attribution.employee_id} not found"
                )
            return {
                "employee_id": employee.id,
                "agent_name": str(employee.name),
                "commission_percent": employee.commission_percent,
            }

        if isinstance(attribution, ManualAttribution):
            changes: SeatChanges = {
                "employee_id": None,
                "agent_name": attribution.agent_name,
            }
            if attribution.commission_percent is not None:
                changes["commission_percent"] = attribution.commission_percent
            return changes

        raise InvalidInputException(f"Unknown commission attribution: {attribution!r}")

    def _to_changes(self, patch: SeatPatch) -> SeatChanges:
        """プリミティブ型の入力を検証し、Value Object に変換する"""
        changes: SeatChanges = {}
        try:
            if "price" in patch:
                changes["price"] = Money(amount=patch["price"], currency=self._currency)
            if "customer_name" in patch:
                changes["customer_name"] = patch["customer_name"]
            if "customer_phone" in patch:
                changes["customer_phone"] = patch["customer_phone"]
            if "customer_email" in patch:
                email = patch["customer_email"]
                changes["customer_email"] = (
                    EmailAddress(email) if email is not None else None
                )
            if "commission_percent" in patch:
                changes["commission_percent"] = CommissionPercent(
                    patch["commission_percent"]
                )
        except (ArithmeticError, TypeError, ValueError) as e:
            raise InvalidInputException(str(e)) from e
        return changes
