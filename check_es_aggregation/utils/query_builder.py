"""
Query building utilities for Elasticsearch.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Any, List, Optional, Union

from ..errors import ConfigError


# Checked in this order so ">=" is never read as ">" followed by "=5"
RANGE_OPERATORS = (
    (">=", "gte"),
    ("<=", "lte"),
    (">", "gt"),
    ("<", "lt"),
)

RANGE_SEPARATOR = " TO "


def parse_range_expression(expr: str) -> Dict[str, str]:
    """
    Parse a document field range expression.

    Accepted forms are ``>X``, ``>=X``, ``<X``, ``<=X`` and ``X TO Y``
    (inclusive on both ends).

    Args:
        expr: Range expression

    Returns:
        Range bounds, e.g. {"gte": "400", "lte": "599"}

    Raises:
        ConfigError: If the expression has no usable bound
    """
    for operator, bound in RANGE_OPERATORS:
        if expr.startswith(operator):
            value = expr[len(operator):].strip()
            if not value:
                raise ConfigError(f"Invalid range expression '{expr}': missing bound")
            return {bound: value}

    if RANGE_SEPARATOR in expr:
        lower, upper = expr.split(RANGE_SEPARATOR, 1)
        lower, upper = lower.strip(), upper.strip()
        if not lower or not upper:
            raise ConfigError(f"Invalid range expression '{expr}': missing bound")
        return {"gte": lower, "lte": upper}

    raise ConfigError(
        f"Invalid range expression '{expr}', expected >X, >=X, <X, <=X or 'X TO Y'"
    )


def build_range_query(field: str, bounds: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build a range query.

    Args:
        field: Field name
        bounds: Range bounds (gt, gte, lt, lte)

    Returns:
        Range query dict
    """
    return {"range": {field: dict(bounds)}}


def build_term_query(field: str, value: str) -> Dict[str, Any]:
    """Build a term query (exact match on the indexed value)."""
    return {"term": {field: value}}


def build_match_query(field: str, value: str) -> Dict[str, Any]:
    """
    Build a match query.

    The value is analyzed like the field; any of the resulting terms
    may match.
    """
    return {"match": {field: {"query": value, "operator": "or"}}}


def build_prefix_query(field: str, prefix: str) -> Dict[str, Any]:
    """Build a prefix query."""
    return {"prefix": {field: prefix}}


def build_regexp_query(field: str, pattern: str) -> Dict[str, Any]:
    """Build a regexp query (Elasticsearch anchors the pattern on both ends)."""
    return {"regexp": {field: pattern}}


def build_exists_query(field: str) -> Dict[str, Any]:
    """Build an exists query."""
    return {"exists": {"field": field}}


def build_query_string_query(query: str) -> Dict[str, Any]:
    """Build a Lucene query string query."""
    return {"query_string": {"query": query}}


def build_bool_query(
    must: Optional[List[Dict[str, Any]]] = None,
    must_not: Optional[List[Dict[str, Any]]] = None,
    filter: Optional[Union[Dict[str, Any], List[Dict[str, Any]]]] = None,
) -> Dict[str, Any]:
    """
    Build a bool query, leaving out empty sections.

    Args:
        must: Scored queries that must match
        must_not: Queries that must not match
        filter: Unscored filter context, a query or a list of queries

    Returns:
        Bool query dict
    """
    bool_query: Dict[str, Any] = {}
    if must:
        bool_query["must"] = must
    if must_not:
        bool_query["must_not"] = must_not
    if filter:
        bool_query["filter"] = filter
    return {"bool": bool_query}


def build_date_range_aggregation(
    field: str,
    window: timedelta,
    now: Optional[datetime] = None,
    sub_aggregations: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build a date_range aggregation with a single bucket ending now.

    Args:
        field: Timestamp field name
        window: Bucket length
        now: End of the bucket (exclusive), current UTC time by default
        sub_aggregations: Aggregations computed inside the bucket

    Returns:
        Aggregation dict
    """
    if now is None:
        now = datetime.now(timezone.utc)
    start = now - window

    aggregation: Dict[str, Any] = {
        "date_range": {
            "field": field,
            "ranges": [{"from": start.isoformat(), "to": now.isoformat()}],
        }
    }
    if sub_aggregations:
        aggregation["aggs"] = sub_aggregations

    return aggregation


def build_metric_aggregation(
    metric_type: str,
    field: str,
    percentile: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Build a single metric aggregation.

    Args:
        metric_type: Elasticsearch metric (min, max, percentiles, extended_stats...)
        field: Numeric field to reduce
        percentile: Percent for "percentiles", value for "percentile_ranks"

    Returns:
        Metric aggregation dict
    """
    body: Dict[str, Any] = {"field": field}
    if metric_type == "percentiles":
        body["percents"] = [percentile]
    elif metric_type == "percentile_ranks":
        body["values"] = [percentile]

    return {metric_type: body}
