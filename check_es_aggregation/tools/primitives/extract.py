"""
Extraction of the checked value from an aggregation response.
"""

import logging
import math
from typing import Optional, Union

from ...check_types.primitives import AggregationKind, AggregationResponse
from ...errors import EmptyResultError, MissingMetricError
from ...utils.response_parser import parse_buckets, parse_percentile_value
from .aggregate import TIME_RANGE_AGGREGATION


logger = logging.getLogger(__name__)


def extract_metric_value(
    response: AggregationResponse,
    kind: Union[AggregationKind, str],
    metric_name: str,
    percentile_key: Optional[str] = None,
) -> float:
    """
    Read the single value of the metric in the time window bucket.

    Args:
        response: Search response
        kind: Aggregation kind that was requested
        metric_name: Name of the metric sub-aggregation
        percentile_key: Percentile key for pct/pctr ("99.0")

    Returns:
        The metric value

    Raises:
        EmptyResultError: No hits, no time range aggregation, no bucket
            or no document in the time range
        MissingMetricError: The bucket lacks the requested statistic
    """
    kind = AggregationKind(kind)

    # Values of an empty search are never trusted
    if response.total_hits == 0:
        raise EmptyResultError("0 hits")

    aggregation = (response.aggregations or {}).get(TIME_RANGE_AGGREGATION)
    if aggregation is None:
        raise EmptyResultError("no aggregations")

    buckets = parse_buckets(aggregation)
    if not buckets:
        raise EmptyResultError("0 aggregation buckets")

    bucket = buckets[0]
    # Hits outside the window still count in total_hits
    if bucket.get("doc_count") == 0:
        raise EmptyResultError("0 documents in time range")

    metric = bucket.get(metric_name)
    if not isinstance(metric, dict):
        logger.debug("Bucket has no '%s' aggregation: %s", metric_name, bucket)
        raise MissingMetricError(kind.value)

    if kind.uses_percentile:
        value = parse_percentile_value(metric.get(kind.statistic), percentile_key)
    else:
        value = metric.get(kind.statistic)

    if value is None:
        logger.debug("No '%s' in %s result: %s", kind.statistic, metric_name, metric)
        raise MissingMetricError(kind.value)

    try:
        value = float(value)
    except (TypeError, ValueError):
        raise MissingMetricError(kind.value) from None
    # Percentiles over documents lacking the field come back as NaN
    if math.isnan(value):
        raise MissingMetricError(kind.value)
    return value
