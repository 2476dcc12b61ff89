"""
Response parsing utilities for Elasticsearch.
"""

from typing import Dict, Any, List, Optional, Union


def parse_buckets(aggregation: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Extract buckets from a bucket aggregation result.

    Range aggregations answer with a list, or with a dict keyed by range
    name when ``keyed`` is requested; both are returned as a list.
    """
    buckets = aggregation.get("buckets") or []
    if isinstance(buckets, dict):
        return list(buckets.values())
    return list(buckets)


def parse_percentile_value(
    values: Union[Dict[str, Any], List[Dict[str, Any]], None],
    key: str,
) -> Optional[float]:
    """
    Look up one percentile (or percentile rank) in a metric result.

    Args:
        values: The metric's "values", keyed ({"95.0": 12.3}) or
            a list of {"key": 95.0, "value": 12.3}
        key: Requested percent formatted with one decimal

    Returns:
        The value, or None if absent
    """
    if isinstance(values, dict):
        return values.get(key)
    if isinstance(values, list):
        for item in values:
            if f"{float(item.get('key', 'nan')):.1f}" == key:
                return item.get("value")
    return None
