from .read_model import BookingSummary as BookingSummary
from .read_model import GlobalStats as GlobalStats
from .read_model import MonthlyProfit as MonthlyProfit
from .service import AggregationEngine as AggregationEngine
