from __future__ import annotations

from typing import TypedDict

from bus_trip.booking.domain.value_object import BookingId, SeatId
from bus_trip.employee.domain.value_object import EmployeeId
from bus_trip.shared.domain import CommissionPercent, EmailAddress, Entity, Money
from bus_trip.shared.domain.exception import BusinessRuleViolationException


class SeatChanges(TypedDict, total=False):
    """座席の部分更新（存在するキーだけ上書きし、None はクリアを意味する）"""

    price: Money
    customer_name: str | None
    customer_phone: str | None
    customer_email: EmailAddress | None
    employee_id: EmployeeId | None
    agent_name: str | None
    commission_percent: CommissionPercent


_MUTABLE_FIELDS = SeatChanges.__optional_keys__
_NON_NULLABLE_FIELDS = frozenset({"price", "commission_percent"})


class Seat(Entity[SeatId]):
    """座席エンティティ

    予約の生成時にまとめて作られ、以降は merged() による置き換えでのみ変化する。
    """

    def __init__(
        self,
        id: SeatId,
        booking_id: BookingId,
        seat_number: int,
        price: Money,
        customer_name: str | None = None,
        customer_phone: str | None = None,
        customer_email: EmailAddress | None = None,
        employee_id: EmployeeId | None = None,
        agent_name: str | None = None,
        commission_percent: CommissionPercent | None = None,
    ) -> None:
        if seat_number < 1:
            raise BusinessRuleViolationException(
                f"Seat number must be positive: {seat_number}"
            )

        super().__init__(id)

        self._booking_id = booking_id
        self._seat_number = seat_number
        self._price = price
        self._customer_name = customer_name
        self._customer_phone = customer_phone
        self._customer_email = customer_email
        self._employee_id = employee_id
        self._agent_name = agent_name
        self._commission_percent = commission_percent or CommissionPercent.default()

    @property
    def booking_id(self) -> BookingId:
        return self._booking_id

    @property
    def seat_number(self) -> int:
        return self._seat_number

    @property
    def price(self) -> Money:
        return self._price

    @property
    def customer_name(self) -> str | None:
        return self._customer_name

    @property
    def customer_phone(self) -> str | None:
        return self._customer_phone

    @property
    def customer_email(self) -> EmailAddress | None:
        return self._customer_email

    @property
    def employee_id(self) -> EmployeeId | None:
        return self._employee_id

    @property
    def agent_name(self) -> str | None:
        return self._agent_name

    @property
    def commission_percent(self) -> CommissionPercent:
        return self._commission_percent

    @property
    def is_booked(self) -> bool:
        """顧客名が設定されていれば予約済み（空文字でも予約済みとみなす）"""
        return self._customer_name is not None

    def commission(self) -> Money:
        """この座席の手数料（未予約または担当者なしの場合は 0）"""
        if not self.is_booked or self._agent_name is None:
            return Money.zero(self._price.currency)
        return self._price.percentage(self._commission_percent.value)

    def merged(self, changes: SeatChanges) -> Seat:
        """部分更新を適用した新しい座席を返す（自身は変更しない）"""
        unknown = set(changes) - _MUTABLE_FIELDS
        if unknown:
            raise BusinessRuleViolationException(
                f"Seat fields cannot be changed: {', '.join(sorted(unknown))}"
            )
        cleared = {
            name
            for name in _NON_NULLABLE_FIELDS
            if name in changes and changes[name] is None
        }
        if cleared:
            raise BusinessRuleViolationException(
                f"Seat fields cannot be cleared: {', '.join(sorted(cleared))}"
            )

        fields = {
            "price": self._price,
            "customer_name": self._customer_name,
            "customer_phone": self._customer_phone,
            "customer_email": self._customer_email,
            "employee_id": self._employee_id,
            "agent_name": self._agent_name,
            "commission_percent": self._commission_percent,
        }
        fields.update(changes)
        return Seat(
            id=self._id,
            booking_id=self._booking_id,
            seat_number=self._seat_number,
            **fields,
        )

    def __repr__(self) -> str:
        return (
            f"Seat(id={self._id}, seat_number={self._seat_number}, "
            f"booked={self.is_booked})"
        )
