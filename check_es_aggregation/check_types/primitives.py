"""
Primitive layer type definitions.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Optional, Tuple
from enum import Enum


class FilterKind(str, Enum):
    """Filter clause types accepted on the command line."""
    EXISTS = "exists"
    TERM = "term"
    MATCH = "match"
    PREFIX = "prefix"
    REGEXP = "regexp"
    RANGE = "range"


class AggregationKind(str, Enum):
    """Supported metric reductions."""
    MIN = "min"
    MAX = "max"
    AVG = "avg"
    SUM = "sum"
    PCT = "pct"
    PCTR = "pctr"
    STDEV = "stdev"
    STDEVMIN = "stdevmin"
    STDEVMAX = "stdevmax"
    VAR = "var"

    @property
    def metric_type(self) -> str:
        """Elasticsearch metric aggregation requested for this kind."""
        return _METRIC_TYPES[self]

    @property
    def statistic(self) -> str:
        """Field of the metric result holding the scalar."""
        return _STATISTICS[self]

    @property
    def uses_percentile(self) -> bool:
        return self in (AggregationKind.PCT, AggregationKind.PCTR)


_METRIC_TYPES = {
    AggregationKind.MIN: "min",
    AggregationKind.MAX: "max",
    AggregationKind.AVG: "avg",
    AggregationKind.SUM: "sum",
    AggregationKind.PCT: "percentiles",
    AggregationKind.PCTR: "percentile_ranks",
    AggregationKind.STDEV: "extended_stats",
    AggregationKind.STDEVMIN: "extended_stats",
    AggregationKind.STDEVMAX: "extended_stats",
    AggregationKind.VAR: "extended_stats",
}

_STATISTICS = {
    AggregationKind.MIN: "value",
    AggregationKind.MAX: "value",
    AggregationKind.AVG: "value",
    AggregationKind.SUM: "value",
    AggregationKind.PCT: "values",
    AggregationKind.PCTR: "values",
    AggregationKind.STDEV: "std_deviation",
    AggregationKind.STDEVMIN: "min",
    AggregationKind.STDEVMAX: "max",
    AggregationKind.VAR: "variance",
}


@dataclass(frozen=True)
class FilterClause:
    """One unscored restriction parsed from a command line flag."""
    field: str
    value: str = ""
    negate: bool = False
    kind: FilterKind = FilterKind.TERM

    def __post_init__(self):
        if not self.field:
            raise ValueError("Filter field cannot be empty")


@dataclass(frozen=True)
class QueryRequest:
    """Everything needed to build the search of one check run."""
    index_pattern: str
    aggregation_field: str
    query_string: str = "*"
    filters: Tuple[FilterClause, ...] = ()
    time_window: timedelta = timedelta(minutes=5)
    aggregation_kind: AggregationKind = AggregationKind.MAX
    percentile: float = 99.0
    timestamp_field: str = "@timestamp"


@dataclass
class AggregationQuery:
    """Aggregation query structure."""
    index_pattern: str
    query: Dict[str, Any] = field(default_factory=lambda: {"match_all": {}})
    aggregations: Dict[str, Any] = field(default_factory=dict)
    size: int = 0  # Don't return documents by default

    def to_dict(self) -> Dict[str, Any]:
        """Convert to Elasticsearch search keyword arguments."""
        return {
            "query": self.query,
            "aggs": self.aggregations,
            "size": self.size,
            "track_total_hits": True,
        }


@dataclass
class AggregationResponse:
    """Elasticsearch aggregation response."""
    took: int
    timed_out: bool
    total_hits: int
    aggregations: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AggregationResponse":
        """Create from Elasticsearch response dict."""
        total = data.get("hits", {}).get("total", 0)
        if isinstance(total, dict):
            total = total.get("value", 0)

        return cls(
            took=data.get("took", 0),
            timed_out=data.get("timed_out", False),
            total_hits=int(total or 0),
            aggregations=data.get("aggregations"),
        )
