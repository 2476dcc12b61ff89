"""
Bool query assembly for the check search.
"""

from typing import Dict, Any, Iterable, List

from ...check_types.primitives import FilterClause, FilterKind
from ...utils.query_builder import (
    build_bool_query,
    build_exists_query,
    build_match_query,
    build_prefix_query,
    build_query_string_query,
    build_range_query,
    build_regexp_query,
    build_term_query,
    parse_range_expression,
)


class QueryBuilder:
    """
    Accumulates query and filter clauses into one bool query.

    Query strings are scored and go to ``must``. Filters are not scored
    (and are cached by Elasticsearch); positive ones go to the filter's
    ``must``, negative ones to its ``must_not``. Clauses keep insertion
    order.
    """

    def __init__(self):
        self.must: List[Dict[str, Any]] = []
        self.filter_must: List[Dict[str, Any]] = []
        self.filter_must_not: List[Dict[str, Any]] = []

    def _add_filter(self, query: Dict[str, Any], negate: bool) -> "QueryBuilder":
        if negate:
            self.filter_must_not.append(query)
        else:
            self.filter_must.append(query)
        return self

    def add_query_string(self, query: str) -> "QueryBuilder":
        self.must.append(build_query_string_query(query))
        return self

    def add_exists_filter(self, field: str, negate: bool = False) -> "QueryBuilder":
        return self._add_filter(build_exists_query(field), negate)

    def add_term_filter(self, field: str, value: str, negate: bool = False) -> "QueryBuilder":
        return self._add_filter(build_term_query(field, value), negate)

    def add_match_filter(self, field: str, value: str, negate: bool = False) -> "QueryBuilder":
        return self._add_filter(build_match_query(field, value), negate)

    def add_prefix_filter(self, field: str, prefix: str, negate: bool = False) -> "QueryBuilder":
        return self._add_filter(build_prefix_query(field, prefix), negate)

    def add_regex_filter(self, field: str, pattern: str, negate: bool = False) -> "QueryBuilder":
        return self._add_filter(build_regexp_query(field, pattern), negate)

    def add_range_filter(self, field: str, range_expr: str, negate: bool = False) -> "QueryBuilder":
        """
        Add a range filter.

        Raises:
            ConfigError: If range_expr is not a valid range expression
        """
        bounds = parse_range_expression(range_expr)
        return self._add_filter(build_range_query(field, bounds), negate)

    def add_clause(self, clause: FilterClause) -> "QueryBuilder":
        """Add a parsed command line filter clause."""
        if clause.kind is FilterKind.EXISTS:
            return self.add_exists_filter(clause.field, clause.negate)
        adders = {
            FilterKind.TERM: self.add_term_filter,
            FilterKind.MATCH: self.add_match_filter,
            FilterKind.PREFIX: self.add_prefix_filter,
            FilterKind.REGEXP: self.add_regex_filter,
            FilterKind.RANGE: self.add_range_filter,
        }
        return adders[clause.kind](clause.field, clause.value, clause.negate)

    def add_clauses(self, clauses: Iterable[FilterClause]) -> "QueryBuilder":
        for clause in clauses:
            self.add_clause(clause)
        return self

    def build(self) -> Dict[str, Any]:
        """
        Build the combined query.

        Returns:
            {"bool": {"must": [...], "filter": {"bool": {...}}}}
        """
        filter_query = None
        if self.filter_must or self.filter_must_not:
            filter_query = build_bool_query(
                must=self.filter_must,
                must_not=self.filter_must_not,
            )
        return build_bool_query(must=self.must, filter=filter_query)
