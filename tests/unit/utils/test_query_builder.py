"""
Unit tests for query DSL helpers.
"""

import pytest
from datetime import datetime, timedelta, timezone

from check_es_aggregation.errors import ConfigError
from check_es_aggregation.utils.query_builder import (
    build_bool_query,
    build_date_range_aggregation,
    build_metric_aggregation,
    build_term_query,
    parse_range_expression,
)


class TestParseRangeExpression:
    """Test cases for parse_range_expression."""

    @pytest.mark.parametrize("expr,bounds", [
        (">=10", {"gte": "10"}),
        ("<=1", {"lte": "1"}),
        (">10", {"gt": "10"}),
        ("<10", {"lt": "10"}),
        ("> 2.5", {"gt": "2.5"}),
        ("400 TO 599", {"gte": "400", "lte": "599"}),
        ("now-1h TO now", {"gte": "now-1h", "lte": "now"}),
    ])
    def test_forms(self, expr, bounds):
        assert parse_range_expression(expr) == bounds

    def test_operator_precedence(self):
        """'>=' is not read as '>' with a bound of '=5'."""
        assert parse_range_expression(">=5") == {"gte": "5"}
        assert parse_range_expression("<=5") == {"lte": "5"}

    @pytest.mark.parametrize("expr", ["", "10", "400-599", ">", "<=", " TO 5", "1 TO "])
    def test_invalid(self, expr):
        with pytest.raises(ConfigError):
            parse_range_expression(expr)


def test_build_term_query_keeps_field():
    assert build_term_query("host.keyword", "web-1") == {"term": {"host.keyword": "web-1"}}


def test_build_bool_query_skips_empty_parts():
    assert build_bool_query(must=[], filter=None) == {"bool": {}}
    assert build_bool_query(must_not=[{"match_all": {}}]) == {"bool": {"must_not": [{"match_all": {}}]}}


def test_build_date_range_aggregation():
    now = datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc)

    agg = build_date_range_aggregation("@timestamp", timedelta(seconds=90), now=now)

    assert agg == {
        "date_range": {
            "field": "@timestamp",
            "ranges": [{"from": "2024-02-29T23:58:30+00:00", "to": "2024-03-01T00:00:00+00:00"}],
        }
    }


def test_build_date_range_aggregation_defaults_to_now():
    agg = build_date_range_aggregation("@timestamp", timedelta(minutes=5))

    window = agg["date_range"]["ranges"][0]
    start = datetime.fromisoformat(window["from"])
    end = datetime.fromisoformat(window["to"])
    assert end - start == timedelta(minutes=5)
    assert end.tzinfo is not None


@pytest.mark.parametrize("metric_type,percentile,expected", [
    ("avg", None, {"avg": {"field": "f"}}),
    ("percentiles", 99.0, {"percentiles": {"field": "f", "percents": [99.0]}}),
    ("percentile_ranks", 5.0, {"percentile_ranks": {"field": "f", "values": [5.0]}}),
    ("extended_stats", None, {"extended_stats": {"field": "f"}}),
])
def test_build_metric_aggregation(metric_type, percentile, expected):
    assert build_metric_aggregation(metric_type, "f", percentile) == expected
