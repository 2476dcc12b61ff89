"""
Parsing of command line filter tokens.

Filter flags take ``<field>:<value>`` or ``<field>=<value>``. Only the
first separator splits the token, so values may contain further colons
or equals signs (``url:http://host:80/a=b``).
"""

import re
from typing import Iterable, List, Tuple

from ..check_types.primitives import FilterClause, FilterKind
from ..errors import ConfigError
from .query_builder import parse_range_expression


FILTER_TOKEN_RE = re.compile(r"^([a-zA-Z0-9_.\-]+)[:=]\s*(.*)")


def parse_filter_token(token: str) -> Tuple[str, ...]:
    """
    Split a filter token into field and value.

    Args:
        token: Raw flag value, e.g. "hostname:localhost"

    Returns:
        (field, value), or an empty tuple if the token is malformed
    """
    match = FILTER_TOKEN_RE.match(token)
    if match is None:
        return ()
    return match.group(1), match.group(2)


def filter_clause_from_token(
    token: str,
    kind: FilterKind,
    negate: bool = False,
) -> FilterClause:
    """
    Build a filter clause from a ``field:value`` token.

    Range tokens are checked against the range expression grammar here
    so that a bad expression is reported before any search is sent.

    Raises:
        ConfigError: If the token or its range expression is malformed
    """
    if kind is FilterKind.EXISTS:
        return exists_clause(token, negate)

    parts = parse_filter_token(token)
    if not parts:
        raise ConfigError(
            f"Invalid {kind.value} filter '{token}', expected <field>:<value> or <field>=<value>"
        )
    field, value = parts
    if kind is FilterKind.RANGE:
        parse_range_expression(value)
    return FilterClause(field=field, value=value, negate=negate, kind=kind)


def exists_clause(field: str, negate: bool = False) -> FilterClause:
    """Build an exists filter clause from a bare field name."""
    field = field.strip()
    if not field:
        raise ConfigError("Exists filter requires a field name")
    return FilterClause(field=field, negate=negate, kind=FilterKind.EXISTS)


def parse_filter_tokens(
    tokens: Iterable[str],
    kind: FilterKind,
    negate: bool = False,
) -> Tuple[List[FilterClause], List[str]]:
    """
    Parse every occurrence of one filter flag.

    Returns:
        (clauses, error messages)
    """
    clauses: List[FilterClause] = []
    errors: List[str] = []
    for token in tokens:
        try:
            clauses.append(filter_clause_from_token(token, kind, negate))
        except ConfigError as e:
            errors.extend(e.messages)
    return clauses, errors
