from .aggregation_engine import AggregationEngine as AggregationEngine
