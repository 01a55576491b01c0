from __future__ import annotations

from pydantic import BaseModel

from bus_trip.booking.domain.entity import Booking, Seat
from bus_trip.booking.domain.read_model import UpcomingTrip


class SeatData(BaseModel):
    """座席のレスポンスモデル"""

    seat_id: int
    booking_id: int
    seat_number: int
    price: str
    currency: str
    customer_name: str | None
    customer_phone: str | None
    customer_email: str | None
    employee_id: int | None
    agent_name: str | None
    commission_percent: str
    is_booked: bool


class BookingData(BaseModel):
    """予約のレスポンスモデル"""

    booking_id: int
    date: str
    trip_date: str
    seats: list[SeatData]


class UpcomingTripData(BaseModel):
    date: str
    booked_seats: int
    revenue: str


def to_seat_data(seat: Seat) -> dict:
    """Seat エンティティをレスポンス辞書に変換する"""
    return SeatData(
        seat_id=seat.id.value,
        booking_id=seat.booking_id.value,
        seat_number=seat.seat_number,
        price=str(seat.price.amount),
        currency=str(seat.price.currency),
        customer_name=seat.customer_name,
        customer_phone=seat.customer_phone,
        customer_email=(
            str(seat.customer_email) if seat.customer_email is not None else None
        ),
        employee_id=seat.employee_id.value if seat.employee_id is not None else None,
        agent_name=seat.agent_name,
        commission_percent=str(seat.commission_percent),
        is_booked=seat.is_booked,
    ).model_dump()


def to_booking_data(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingData(
        booking_id=booking.id.value,
        date=str(booking.date),
        trip_date=str(booking.trip_date),
        seats=[to_seat_data(seat) for seat in booking.seats],
    ).model_dump()


def to_upcoming_trip_data(trip: UpcomingTrip) -> dict:
    return UpcomingTripData(
        date=str(trip.date),
        booked_seats=trip.booked_seats,
        revenue=str(trip.revenue),
    ).model_dump()
