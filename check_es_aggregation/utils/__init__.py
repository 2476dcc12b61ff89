"""
Utility functions for the aggregation check.
"""

from .connection import get_elasticsearch_client
from .validation import (
    validate_index_pattern,
    parse_duration,
    clamp_value,
)
from .query_builder import (
    parse_range_expression,
    build_range_query,
    build_term_query,
    build_match_query,
    build_prefix_query,
    build_regexp_query,
    build_exists_query,
    build_query_string_query,
    build_bool_query,
    build_date_range_aggregation,
    build_metric_aggregation,
)
from .response_parser import (
    parse_buckets,
    parse_percentile_value,
)
from .filters import (
    parse_filter_token,
    filter_clause_from_token,
    exists_clause,
    parse_filter_tokens,
)
from .logging_setup import configure_logging, reset_logging

__all__ = [
    # Connection
    "get_elasticsearch_client",
    # Validation
    "validate_index_pattern",
    "parse_duration",
    "clamp_value",
    # Query building
    "parse_range_expression",
    "build_range_query",
    "build_term_query",
    "build_match_query",
    "build_prefix_query",
    "build_regexp_query",
    "build_exists_query",
    "build_query_string_query",
    "build_bool_query",
    "build_date_range_aggregation",
    "build_metric_aggregation",
    # Response parsing
    "parse_buckets",
    "parse_percentile_value",
    # Filter tokens
    "parse_filter_token",
    "filter_clause_from_token",
    "exists_clause",
    "parse_filter_tokens",
    # Logging
    "configure_logging",
    "reset_logging",
]
