import copy
import threading

from bus_trip.booking.domain.entity import Booking, Seat, SeatChanges
from bus_trip.booking.domain.factory import SeatInventoryFactory
from bus_trip.booking.domain.repository import BookingRepository
from bus_trip.booking.domain.value_object import BookingId, SeatId
from bus_trip.shared.domain import IdSequence, TripDate
from bus_trip.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from bus_trip.shared.infrastructure import InMemoryIdSequence
from bus_trip.shared.utils import get_logger

logger = get_logger("booking")


class InMemoryBookingRepository(BookingRepository):
    """プロセス内メモリを使用した BookingRepository の具象実装

    予約・座席をそれぞれIDをキーにした dict で保持し、
    運行日 -> 予約ID、座席ID -> 予約ID のインデックスを同じロックの下で更新する。
    読み取りは deepcopy したスナップショットを返す。
    """

    def __init__(
        self,
        factory: SeatInventoryFactory,
        booking_sequence: IdSequence | None = None,
        seat_sequence: IdSequence | None = None,
    ) -> None:
        super().__init__(factory)
        self._booking_sequence = booking_sequence or InMemoryIdSequence()
        self._seat_sequence = seat_sequence or InMemoryIdSequence()

        self._bookings: dict[BookingId, Booking] = {}
        self._seats: dict[SeatId, Seat] = {}
        self._bookings_by_date: dict[TripDate, BookingId] = {}
        self._booking_by_seat: dict[SeatId, BookingId] = {}
        self._lock = threading.RLock()

    def next_booking_id(self) -> BookingId:
        return BookingId(value=self._booking_sequence.next_value())

    def next_seat_ids(self, count: int) -> list[SeatId]:
        return [SeatId(value=v) for v in self._seat_sequence.next_values(count)]

    def save(self, booking: Booking) -> None:
        """予約を保存する（運行日が重複する場合は保存しない）"""
        trip_date = booking.trip_date
        stored = copy.deepcopy(booking)

        with self._lock:
            if trip_date in self._bookings_by_date:
                raise DuplicateResourceException(
                    f"A booking for {trip_date} already exists"
                )
            if booking.id in self._bookings:
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                )
            if any(seat.id in self._seats for seat in stored.seats):
                raise DuplicateResourceException(
                    f"Seat ids of booking {booking.id} are already in use"
                )

            self._bookings[booking.id] = stored
            self._bookings_by_date[trip_date] = booking.id
            for seat in stored.seats:
                self._seats[seat.id] = seat
                self._booking_by_seat[seat.id] = booking.id

        logger.info(
            "Booking saved",
            extra={"booking_id": booking.id.value, "trip_date": str(trip_date)},
        )

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        with self._lock:
            return copy.deepcopy(self._bookings.get(booking_id))

    def find_by_date(self, trip_date: TripDate) -> Booking | None:
        with self._lock:
            booking_id = self._bookings_by_date.get(trip_date)
            if booking_id is None:
                return None
            return copy.deepcopy(self._bookings[booking_id])

    def list_all(self) -> list[Booking]:
        with self._lock:
            return copy.deepcopy(list(self._bookings.values()))

    def find_seat(self, seat_id: SeatId) -> Seat | None:
        """座席インデックスから座席を取得する"""
        with self._lock:
            return copy.deepcopy(self._seats.get(seat_id))

    def update_seat(
        self, booking_id: BookingId, seat_id: SeatId, changes: SeatChanges
    ) -> Seat:
        """座席を部分更新し、予約の座席列と座席インデックスの両方に書き戻す"""
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                raise ResourceNotFoundException(
                    f"Booking with ID {booking_id} not found"
                )
            if self._booking_by_seat.get(seat_id) != booking_id:
                raise ResourceNotFoundException(
                    f"Seat with ID {seat_id} not found in booking {booking_id}"
                )

            updated = self._seats[seat_id].merged(changes)
            booking.replace_seat(updated)
            self._seats[seat_id] = updated

        logger.info(
            "Seat updated",
            extra={
                "booking_id": booking_id.value,
                "seat_id": seat_id.value,
                "fields": sorted(changes),
            },
        )
        return copy.deepcopy(updated)
