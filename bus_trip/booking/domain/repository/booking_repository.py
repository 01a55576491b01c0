from abc import abstractmethod

from bus_trip.booking.domain.entity import Booking, Seat, SeatChanges
from bus_trip.booking.domain.factory import SeatInventoryFactory
from bus_trip.booking.domain.read_model import UpcomingTrip
from bus_trip.booking.domain.value_object import BookingId, SeatId
from bus_trip.shared.domain import IsoDateTime, Repository, TripDate

DEFAULT_UPCOMING_LIMIT = 6


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリ

    - 運行日1日につき予約は最大1件（save は日付をキーにした条件付き挿入）
    - 座席の更新は予約の座席列と座席インデックスの両方に原子的に反映する
    """

    def __init__(self, factory: SeatInventoryFactory) -> None:
        self._factory = factory

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規の予約を保存する

        Raises:
            DuplicateResourceException: 同じ運行日の予約が既に存在する場合
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_date(self, trip_date: TripDate) -> Booking | None:
        """運行日（カレンダー日単位）で検索"""
        raise NotImplementedError

    @abstractmethod
    def list_all(self) -> list[Booking]:
        """全ての予約を返す"""
        raise NotImplementedError

    @abstractmethod
    def update_seat(
        self, booking_id: BookingId, seat_id: SeatId, changes: SeatChanges
    ) -> Seat:
        """座席を部分更新する

        Raises:
            ResourceNotFoundException: 予約が存在しない、または座席がその予約に属さない場合
        """
        raise NotImplementedError

    @abstractmethod
    def next_booking_id(self) -> BookingId:
        raise NotImplementedError

    @abstractmethod
    def next_seat_ids(self, count: int) -> list[SeatId]:
        raise NotImplementedError

    def create(self, date: IsoDateTime) -> Booking:
        """予約と座席一式を生成して保存する

        IDは書き込みより前に採番するため、失敗しても部分的な書き込みは残らない。
        """
        booking_id = self.next_booking_id()
        seat_ids = self.next_seat_ids(self._factory.seat_count)
        seats = self._factory.generate(booking_id, seat_ids)

        booking = Booking(id=booking_id, date=date, seats=seats)
        self.save(booking)
        return booking

    def list_upcoming(
        self, as_of: TripDate, limit: int = DEFAULT_UPCOMING_LIMIT
    ) -> list[UpcomingTrip]:
        """as_of 以降の予約を日付の昇順で limit 件まで返す"""
        upcoming = sorted(
            (b for b in self.list_all() if b.trip_date >= as_of),
            key=lambda b: b.trip_date,
        )
        return [UpcomingTrip.from_booking(b) for b in upcoming[:limit]]
