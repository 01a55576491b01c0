from __future__ import annotations

from pydantic import BaseModel

from bus_trip.reporting.domain import BookingSummary, GlobalStats, MonthlyProfit


class BookingSummaryData(BaseModel):
    """運行日集計のレスポンスモデル"""

    date: str
    formatted_date: str
    total_seats: int
    booked_seats: int
    available_seats: int
    total_revenue: str
    total_commission: str
    net_revenue: str
    average_price: str
    occupancy_rate: float
    commissions_by_agent: dict[str, str]


class GlobalStatsData(BaseModel):
    total_bookings: int
    total_customers: int
    total_revenue: str
    average_occupancy: float


class MonthlyProfitData(BaseModel):
    """月次利益レポートのレスポンスモデル"""

    month: str
    year: int
    total_revenue: str
    total_expenses: str
    commissions: dict[str, str]
    profit: str


def to_summary_data(summary: BookingSummary) -> dict:
    return BookingSummaryData(
        date=str(summary.date),
        formatted_date=summary.formatted_date,
        total_seats=summary.total_seats,
        booked_seats=summary.booked_seats,
        available_seats=summary.available_seats,
        total_revenue=str(summary.total_revenue),
        total_commission=str(summary.total_commission),
        net_revenue=str(summary.net_revenue),
        average_price=str(summary.average_price),
        occupancy_rate=summary.occupancy_rate,
        commissions_by_agent={
            agent: str(amount) for agent, amount in summary.commissions_by_agent.items()
        },
    ).model_dump()


def to_stats_data(stats: GlobalStats) -> dict:
    return GlobalStatsData(
        total_bookings=stats.total_bookings,
        total_customers=stats.total_customers,
        total_revenue=str(stats.total_revenue),
        average_occupancy=stats.average_occupancy,
    ).model_dump()


def to_monthly_profit_data(report: MonthlyProfit) -> dict:
    return MonthlyProfitData(
        month=report.month,
        year=report.year,
        total_revenue=str(report.total_revenue),
        total_expenses=str(report.total_expenses),
        commissions={
            agent: str(amount) for agent, amount in report.commissions.items()
        },
        profit=str(report.profit),
    ).model_dump()
