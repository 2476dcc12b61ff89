"""
Type definitions for the aggregation check.
"""

from .primitives import (
    FilterKind,
    FilterClause,
    AggregationKind,
    QueryRequest,
    AggregationQuery,
    AggregationResponse,
)

from .check import (
    Status,
    ThresholdRange,
    PerfDatum,
    CheckOutcome,
)

__all__ = [
    # Primitives
    "FilterKind",
    "FilterClause",
    "AggregationKind",
    "QueryRequest",
    "AggregationQuery",
    "AggregationResponse",
    # Check results
    "Status",
    "ThresholdRange",
    "PerfDatum",
    "CheckOutcome",
]
