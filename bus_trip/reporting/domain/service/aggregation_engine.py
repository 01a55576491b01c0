from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal

from bus_trip.booking.domain.entity import Booking
from bus_trip.employee.domain.entity import Employee
from bus_trip.reporting.domain.read_model import (
    BookingSummary,
    GlobalStats,
    MonthlyProfit,
)
from bus_trip.shared.domain import Currency, Money, TripDate
from bus_trip.shared.domain.value_object.trip_date import MONTH_NAMES

DEFAULT_SEAT_COUNT = 35

CENTS = Decimal("0.01")


class AggregationEngine:
    """予約のスナップショットから集計値を計算する

    状態を持たず、受け取った予約を変更することもない。
    手数料は「予約済み」かつ「担当者名あり」の座席だけが対象。
    """

    def __init__(
        self,
        default_seat_count: int = DEFAULT_SEAT_COUNT,
        currency: Currency | None = None,
    ) -> None:
        self._default_seat_count = default_seat_count
        self._currency = currency or Currency.usd()

    def summarize(self, booking: Booking | None, trip_date: TripDate) -> BookingSummary:
        """運行日の集計を返す（予約がない日は全座席空席として扱う）"""
        if booking is None:
            zero = Decimal("0")
            return BookingSummary(
                date=trip_date,
                formatted_date=trip_date.formatted(),
                total_seats=self._default_seat_count,
                booked_seats=0,
                available_seats=self._default_seat_count,
                total_revenue=zero,
                total_commission=zero,
                net_revenue=zero,
                average_price=zero,
                occupancy_rate=0.0,
            )

        booked = booking.booked_seats()
        total_revenue = booking.gross_revenue().amount
        commissions_by_agent = self._commissions_by_agent([booking])
        total_commission = sum(commissions_by_agent.values(), Decimal("0"))

        return BookingSummary(
            date=trip_date,
            formatted_date=trip_date.formatted(),
            total_seats=booking.seat_count,
            booked_seats=len(booked),
            available_seats=booking.seat_count - len(booked),
            total_revenue=total_revenue,
            total_commission=total_commission,
            net_revenue=total_revenue - total_commission,
            average_price=self._average_price(total_revenue, len(booked)),
            occupancy_rate=booking.occupancy_rate(),
            commissions_by_agent=commissions_by_agent,
        )

    def global_stats(self, bookings: Sequence[Booking]) -> GlobalStats:
        """全予約の統計

        total_customers は予約済み座席数（同名の顧客も別々に数える）。
        average_occupancy は予約ごとの予約率の単純平均。
        """
        total_customers = 0
        total_revenue = Money.zero(self._currency)
        occupancy_sum = 0.0
        for booking in bookings:
            total_customers += len(booking.booked_seats())
            total_revenue = total_revenue.add(booking.gross_revenue())
            occupancy_sum += booking.occupancy_rate()

        return GlobalStats(
            total_bookings=len(bookings),
            total_customers=total_customers,
            total_revenue=total_revenue.amount,
            average_occupancy=occupancy_sum / len(bookings) if bookings else 0.0,
        )

    def monthly_profit(
        self,
        bookings: Iterable[Booking],
        employees: Iterable[Employee],
        month: int,
        year: int,
        expenses: Decimal = Decimal("0"),
    ) -> MonthlyProfit:
        """指定した年月の利益レポート

        employees は受け取るだけで使わない（手数料は座席にコピー済みの値で計算する）。

        Raises:
            ValueError: month が 1〜12 の範囲外の場合
        """
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12: {month}")

        in_month = [
            booking
            for booking in bookings
            if booking.trip_date.year == year and booking.trip_date.month == month
        ]
        total_revenue = Money.zero(self._currency)
        for booking in in_month:
            total_revenue = total_revenue.add(booking.gross_revenue())
        commissions = self._commissions_by_agent(in_month)

        return MonthlyProfit(
            month=MONTH_NAMES[month - 1],
            year=year,
            total_revenue=total_revenue.amount,
            total_expenses=expenses,
            profit=total_revenue.amount
            - expenses
            - sum(commissions.values(), Decimal("0")),
            commissions=commissions,
        )

    @staticmethod
    def _average_price(total_revenue: Decimal, booked_count: int) -> Decimal:
        """予約済み座席の平均価格（セント単位に四捨五入）"""
        if booked_count == 0:
            return Decimal("0")
        return (total_revenue / booked_count).quantize(CENTS, rounding=ROUND_HALF_UP)

    @staticmethod
    def _commissions_by_agent(bookings: Iterable[Booking]) -> dict[str, Decimal]:
        commissions: dict[str, Decimal] = {}
        for booking in bookings:
            for seat in booking.booked_seats():
                if seat.agent_name is None:
                    continue
                commissions[seat.agent_name] = (
                    commissions.get(seat.agent_name, Decimal("0"))
                    + seat.commission().amount
                )
        return commissions
