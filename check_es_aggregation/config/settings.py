"""
Run configuration for one check.

The command line values and the environment are merged once into a
``CheckConfig`` which is then handed to every component explicitly.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from ..check_types.check import ThresholdRange
from ..check_types.primitives import AggregationKind, FilterClause, FilterKind, QueryRequest
from ..errors import ConfigError, MissingArgumentError
from ..utils.filters import parse_filter_tokens
from ..utils.validation import clamp_value, parse_duration, validate_index_pattern
from .environments import get_elasticsearch_config


DEFAULT_INDEX_PATTERN = "logstash-*"
DEFAULT_QUERY = "*"
DEFAULT_AGGREGATION = "max"
DEFAULT_PERCENTILE = 99.0
DEFAULT_DURATION = "5m"
DEFAULT_TIMESTAMP_FIELD = "@timestamp"
DEFAULT_NULL_CODE = 2

MAX_TIMEOUT_SECONDS = 3600.0


@dataclass(frozen=True)
class CheckConfig:
    """Validated configuration of a check run."""
    request: QueryRequest
    warning: ThresholdRange
    critical: ThresholdRange
    elasticsearch: Dict[str, Any] = field(default_factory=get_elasticsearch_config)
    unit: str = ""
    description: str = ""
    null_code: int = DEFAULT_NULL_CODE
    verbose: bool = False
    debug: bool = False

    @property
    def es_url(self) -> str:
        return self.elasticsearch["url"]

    @property
    def label(self) -> str:
        """Performance data label."""
        return self.request.aggregation_field


def _parse_threshold(raw: Optional[str], flag: str) -> ThresholdRange:
    if raw is None or not raw.strip():
        raise MissingArgumentError(flag)
    return ThresholdRange.parse(raw)


def build_check_config(
    key: Optional[str],
    warning: Optional[str],
    critical: Optional[str],
    *,
    es_url: Optional[str] = None,
    index_pattern: str = DEFAULT_INDEX_PATTERN,
    query: str = DEFAULT_QUERY,
    exists: Sequence[str] = (),
    not_exists: Sequence[str] = (),
    term: Sequence[str] = (),
    not_term: Sequence[str] = (),
    match: Sequence[str] = (),
    not_match: Sequence[str] = (),
    prefix: Sequence[str] = (),
    not_prefix: Sequence[str] = (),
    regex: Sequence[str] = (),
    not_regex: Sequence[str] = (),
    range_: Optional[str] = None,
    not_range: Optional[str] = None,
    aggregation: str = DEFAULT_AGGREGATION,
    percentile: float = DEFAULT_PERCENTILE,
    unit: str = "",
    desc: Optional[str] = None,
    duration: str = DEFAULT_DURATION,
    timestamp_field: str = DEFAULT_TIMESTAMP_FIELD,
    null_code: int = DEFAULT_NULL_CODE,
    timeout: Optional[float] = None,
    verbose: bool = False,
    debug: bool = False,
) -> CheckConfig:
    """
    Validate command line values and build the run configuration.

    Every problem is collected before raising so the operator sees
    all of them in one run.

    Raises:
        ConfigError: If any value is missing or malformed
    """
    errors: List[str] = []

    def collect(func, *args):
        try:
            return func(*args)
        except ConfigError as e:
            errors.extend(e.messages)
            return None

    if not key:
        errors.extend(MissingArgumentError("-k").messages)

    warning_range = collect(_parse_threshold, warning, "-w")
    critical_range = collect(_parse_threshold, critical, "-c")
    collect(validate_index_pattern, index_pattern)
    time_window = collect(parse_duration, duration)
    if timeout is not None and timeout <= 0:
        errors.append(f"Timeout must be positive, got '{timeout}'")

    try:
        kind = AggregationKind(aggregation)
    except ValueError:
        kind = None
        choices = ", ".join(k.value for k in AggregationKind)
        errors.append(f"Unknown aggregation '{aggregation}', expected one of: {choices}")

    try:
        elasticsearch = get_elasticsearch_config()
    except ValueError as e:
        elasticsearch = None
        errors.append(f"Invalid Elasticsearch environment configuration: {e}")

    filters: List[FilterClause] = []
    filter_options = (
        (exists, FilterKind.EXISTS, False),
        (not_exists, FilterKind.EXISTS, True),
        (term, FilterKind.TERM, False),
        (not_term, FilterKind.TERM, True),
        (match, FilterKind.MATCH, False),
        (not_match, FilterKind.MATCH, True),
        (prefix, FilterKind.PREFIX, False),
        (not_prefix, FilterKind.PREFIX, True),
        (regex, FilterKind.REGEXP, False),
        (not_regex, FilterKind.REGEXP, True),
        ([range_] if range_ else [], FilterKind.RANGE, False),
        ([not_range] if not_range else [], FilterKind.RANGE, True),
    )
    for tokens, filter_kind, negate in filter_options:
        clauses, filter_errors = parse_filter_tokens(tokens, filter_kind, negate)
        filters.extend(clauses)
        errors.extend(filter_errors)

    if errors:
        raise ConfigError(errors)

    if es_url:
        elasticsearch["url"] = es_url
    if timeout is not None:
        elasticsearch["timeout_ms"] = clamp_value(timeout, 0.001, MAX_TIMEOUT_SECONDS) * 1000.0

    request = QueryRequest(
        index_pattern=index_pattern,
        aggregation_field=key,
        query_string=query,
        filters=tuple(filters),
        time_window=time_window,
        aggregation_kind=kind,
        percentile=percentile,
        timestamp_field=timestamp_field,
    )

    return CheckConfig(
        request=request,
        warning=warning_range,
        critical=critical_range,
        elasticsearch=elasticsearch,
        unit=unit or "",
        description=desc or key,
        null_code=null_code,
        verbose=verbose,
        debug=debug,
    )
