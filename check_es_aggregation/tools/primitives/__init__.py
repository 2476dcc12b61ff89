"""
Primitive building blocks of a check run.
"""

from .query import QueryBuilder
from .aggregate import AggregationBuilder, metric_name, percentile_key
from .search import search_aggregation
from .extract import extract_metric_value
from .thresholds import evaluate, fallback_status

__all__ = [
    # Request building
    "QueryBuilder",
    "AggregationBuilder",
    "metric_name",
    "percentile_key",
    # Search
    "search_aggregation",
    # Result handling
    "extract_metric_value",
    "evaluate",
    "fallback_status",
]
