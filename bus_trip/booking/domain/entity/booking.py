from __future__ import annotations

from bus_trip.booking.domain.entity.seat import Seat
from bus_trip.booking.domain.value_object import BookingId, SeatId
from bus_trip.shared.domain import AggregateRoot, IsoDateTime, Money, TripDate
from bus_trip.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)


class Booking(AggregateRoot[BookingId]):
    """運行日ごとの予約（座席在庫の集約）

    座席数は生成時に固定され、座席は replace_seat() で置き換えるだけで
    追加・削除はできない。
    """

    def __init__(
        self,
        id: BookingId,
        date: IsoDateTime,
        seats: list[Seat],
    ) -> None:
        super().__init__(id)

        self._date = date
        self._seats = list(seats)

        self._validate_seats()

    def _validate_seats(self) -> None:
        """座席が1つ以上あり、全てこの予約に属し、IDと座席番号が重複しない"""
        if not self._seats:
            raise BusinessRuleViolationException("Booking must have at least one seat")
        if any(seat.booking_id != self.id for seat in self._seats):
            raise BusinessRuleViolationException(
                f"All seats must belong to booking {self.id}"
            )
        if len({seat.id for seat in self._seats}) != len(self._seats):
            raise BusinessRuleViolationException("Seat ids must be unique")
        if len({seat.seat_number for seat in self._seats}) != len(self._seats):
            raise BusinessRuleViolationException("Seat numbers must be unique")

    @property
    def date(self) -> IsoDateTime:
        return self._date

    @property
    def trip_date(self) -> TripDate:
        """比較用のカレンダー日"""
        return TripDate.from_date_time(self._date)

    @property
    def seats(self) -> tuple[Seat, ...]:
        return tuple(self._seats)

    @property
    def seat_count(self) -> int:
        return len(self._seats)

    def find_seat(self, seat_id: SeatId) -> Seat | None:
        for seat in self._seats:
            if seat.id == seat_id:
                return seat
        return None

    def replace_seat(self, seat: Seat) -> None:
        """同じIDの座席を同じ位置で置き換える"""
        for index, current in enumerate(self._seats):
            if current.id == seat.id:
                moved = seat.seat_number != current.seat_number
                if seat.booking_id != self.id or moved:
                    raise BusinessRuleViolationException(
                        f"Seat {seat.id} cannot move to another booking or position"
                    )
                self._seats[index] = seat
                return
        raise ResourceNotFoundException(
            f"Seat with ID {seat.id} not found in booking {self.id}"
        )

    def booked_seats(self) -> list[Seat]:
        return [seat for seat in self._seats if seat.is_booked]

    def gross_revenue(self) -> Money:
        """予約済み座席の価格合計"""
        total = Money.zero(self._seats[0].price.currency)
        for seat in self.booked_seats():
            total = total.add(seat.price)
        return total

    def occupancy_rate(self) -> float:
        """予約率（0〜100）"""
        return len(self.booked_seats()) / self.seat_count * 100
