from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class MonthlyProfit:
    """月次の利益レポート

    profit = total_revenue - total_expenses - sum(commissions)
    commissions は担当者名（文字列）ごとの合計で、同名の従業員は合算される。
    """

    month: str
    year: int
    total_revenue: Decimal
    total_expenses: Decimal
    profit: Decimal
    commissions: dict[str, Decimal] = field(default_factory=dict)
