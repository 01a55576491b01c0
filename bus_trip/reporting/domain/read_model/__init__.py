from .booking_summary import BookingSummary as BookingSummary
from .global_stats import GlobalStats as GlobalStats
from .monthly_profit import MonthlyProfit as MonthlyProfit
