"""
Primitive aggregation operations for Elasticsearch.
"""

from datetime import datetime, timedelta
from typing import Dict, Any, Optional, Union

from ...check_types.primitives import AggregationKind
from ...errors import ConfigError
from ...utils.query_builder import build_date_range_aggregation, build_metric_aggregation


TIME_RANGE_AGGREGATION = "aggr"
DEFAULT_PERCENTILE = 99.0


def metric_name(kind: AggregationKind, field: str) -> str:
    """Name of the metric sub-aggregation, e.g. "max_duration"."""
    return f"{kind.value}_{field}"


def percentile_key(percentile: float) -> str:
    """Key under which Elasticsearch reports a requested percentile."""
    return f"{float(percentile):.1f}"


class AggregationBuilder:
    """
    Builds the time window bucket holding one metric aggregation.

    The window is a single ``date_range`` bucket covering
    ``[now - time_window, now)`` on the timestamp field; the metric is
    computed inside it.
    """

    def __init__(
        self,
        time_window: timedelta,
        timestamp_field: str = "@timestamp",
        now: Optional[datetime] = None,
    ):
        self.time_window = time_window
        self.timestamp_field = timestamp_field
        self.now = now
        self.kind: Optional[AggregationKind] = None
        self.metric_name: Optional[str] = None
        self.percentile_key: Optional[str] = None
        self._metric: Optional[Dict[str, Any]] = None

    def add_metric(
        self,
        field: str,
        kind: Union[AggregationKind, str],
        percentile: Optional[float] = None,
    ) -> "AggregationBuilder":
        """
        Attach the metric sub-aggregation.

        Args:
            field: Numeric document field to reduce
            kind: Aggregation kind
            percentile: Percent (pct) or value (pctr), 99.0 if not given

        Raises:
            ConfigError: If a metric was already added or kind is unknown
        """
        if self._metric is not None:
            raise ConfigError("Only one metric aggregation can be computed per check")
        try:
            kind = AggregationKind(kind)
        except ValueError:
            raise ConfigError(f"Unknown aggregation '{kind}'") from None

        pct = None
        if kind.uses_percentile:
            pct = DEFAULT_PERCENTILE if percentile is None else float(percentile)
            self.percentile_key = percentile_key(pct)

        self.kind = kind
        self.metric_name = metric_name(kind, field)
        self._metric = build_metric_aggregation(kind.metric_type, field, pct)
        return self

    def build(self) -> Dict[str, Any]:
        """
        Build the aggregations section of the search body.

        Raises:
            ConfigError: If no metric was added
        """
        if self._metric is None:
            raise ConfigError("No metric aggregation configured")

        return {
            TIME_RANGE_AGGREGATION: build_date_range_aggregation(
                self.timestamp_field,
                self.time_window,
                now=self.now,
                sub_aggregations={self.metric_name: self._metric},
            )
        }
