"""
Unit tests for the bool query builder.
"""

import pytest

from check_es_aggregation.check_types.primitives import FilterClause, FilterKind
from check_es_aggregation.errors import ConfigError
from check_es_aggregation.tools.primitives.query import QueryBuilder


class TestQueryBuilder:
    """Test cases for QueryBuilder."""

    def test_query_string_is_scored(self):
        """Free text goes to must, not to the filter."""
        query = QueryBuilder().add_query_string("status:error").build()

        assert query == {
            "bool": {"must": [{"query_string": {"query": "status:error"}}]}
        }

    def test_filters_are_separate_from_query(self):
        """Filters end up in a nested non-scoring bool."""
        query = (
            QueryBuilder()
            .add_query_string("*")
            .add_term_filter("hostname", "localhost")
            .add_exists_filter("message", negate=True)
            .build()
        )

        assert query["bool"]["must"] == [{"query_string": {"query": "*"}}]
        assert query["bool"]["filter"] == {
            "bool": {
                "must": [{"term": {"hostname": "localhost"}}],
                "must_not": [{"exists": {"field": "message"}}],
            }
        }

    def test_every_filter_kind(self):
        """Each filter method produces its query type."""
        builder = (
            QueryBuilder()
            .add_exists_filter("a")
            .add_term_filter("b", "x")
            .add_match_filter("c", "y z")
            .add_prefix_filter("d", "ker")
            .add_regex_filter("e", "ab.*")
            .add_range_filter("f", ">=10")
        )

        assert builder.filter_must == [
            {"exists": {"field": "a"}},
            {"term": {"b": "x"}},
            {"match": {"c": {"query": "y z", "operator": "or"}}},
            {"prefix": {"d": "ker"}},
            {"regexp": {"e": "ab.*"}},
            {"range": {"f": {"gte": "10"}}},
        ]
        assert builder.filter_must_not == []

    def test_negated_filters(self):
        """Negative filters go to must_not, keeping their order."""
        builder = (
            QueryBuilder()
            .add_prefix_filter("message", "kernel", negate=True)
            .add_regex_filter("path", "/tmp/.*", negate=True)
            .add_range_filter("exit_code", "<=1", negate=True)
        )

        assert builder.filter_must_not == [
            {"prefix": {"message": "kernel"}},
            {"regexp": {"path": "/tmp/.*"}},
            {"range": {"exit_code": {"lte": "1"}}},
        ]

    def test_range_between(self):
        """'400 TO 599' is an inclusive range."""
        builder = QueryBuilder().add_range_filter("code", "400 TO 599")

        assert builder.filter_must == [{"range": {"code": {"gte": "400", "lte": "599"}}}]

    def test_invalid_range_is_an_error(self):
        """A range expression without bound is refused."""
        with pytest.raises(ConfigError, match="Invalid range expression"):
            QueryBuilder().add_range_filter("code", "400")

    def test_add_clauses(self):
        """Parsed clauses are dispatched by kind."""
        clauses = [
            FilterClause("message", kind=FilterKind.EXISTS),
            FilterClause("host", "web-1", kind=FilterKind.TERM),
            FilterClause("code", "400 TO 599", negate=True, kind=FilterKind.RANGE),
        ]

        query = QueryBuilder().add_clauses(clauses).build()

        assert query == {
            "bool": {
                "filter": {
                    "bool": {
                        "must": [
                            {"exists": {"field": "message"}},
                            {"term": {"host": "web-1"}},
                        ],
                        "must_not": [
                            {"range": {"code": {"gte": "400", "lte": "599"}}},
                        ],
                    }
                }
            }
        }

    def test_empty_builder(self):
        """Nothing added matches everything."""
        assert QueryBuilder().build() == {"bool": {}}
