from bus_trip.booking.applications import parse_trip_date
from bus_trip.booking.domain.repository import BookingRepository
from bus_trip.employee.domain.repository import EmployeeRepository
from bus_trip.reporting.domain import (
    AggregationEngine,
    BookingSummary,
    GlobalStats,
    MonthlyProfit,
)
from bus_trip.shared.domain.exception import InvalidInputException


class ReportService:
    """集計レポートのユースケース

    リポジトリから読み出したスナップショットを AggregationEngine に渡すだけで、
    書き込みは行わない。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        employee_repository: EmployeeRepository,
        engine: AggregationEngine,
    ) -> None:
        self._booking_repository = booking_repository
        self._employee_repository = employee_repository
        self._engine = engine

    def summarize(self, date: str) -> BookingSummary:
        """運行日（YYYY-MM-DD）の集計。予約がない日も空の集計を返す"""
        trip_date = parse_trip_date(date)
        booking = self._booking_repository.find_by_date(trip_date)
        return self._engine.summarize(booking, trip_date)

    def global_stats(self) -> GlobalStats:
        return self._engine.global_stats(self._booking_repository.list_all())

    def monthly_profit(self, month: int, year: int) -> MonthlyProfit:
        """
        Raises:
            InvalidInputException: month が 1〜12 の範囲外の場合
        """
        if not 1 <= month <= 12:
            raise InvalidInputException(f"Month must be between 1 and 12: {month}")

        return self._engine.monthly_profit(
            self._booking_repository.list_all(),
            self._employee_repository.list_all(),
            month=month,
            year=year,
        )
