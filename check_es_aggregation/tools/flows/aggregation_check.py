"""
Flow running one aggregation check end to end.
"""

import logging
from datetime import datetime
from typing import Optional, Tuple

from elasticsearch import Elasticsearch

from ...check_types.check import CheckOutcome, PerfDatum, Status
from ...check_types.primitives import AggregationQuery
from ...config.settings import CheckConfig
from ...errors import EmptyResultError, MissingMetricError, TransportError
from ...utils.connection import get_elasticsearch_client
from ..primitives.aggregate import AggregationBuilder
from ..primitives.extract import extract_metric_value
from ..primitives.query import QueryBuilder
from ..primitives.search import search_aggregation
from ..primitives.thresholds import evaluate, fallback_status


logger = logging.getLogger(__name__)


def build_search(
    config: CheckConfig,
    now: Optional[datetime] = None,
) -> Tuple[AggregationQuery, AggregationBuilder]:
    """
    Build the search request of a check.

    Args:
        config: Check configuration
        now: End of the time window (current time if not given)

    Returns:
        The request and the aggregation builder holding the metric name
        and percentile key needed to read the result
    """
    request = config.request

    query = (
        QueryBuilder()
        .add_query_string(request.query_string)
        .add_clauses(request.filters)
        .build()
    )

    aggregations = AggregationBuilder(
        request.time_window,
        timestamp_field=request.timestamp_field,
        now=now,
    ).add_metric(request.aggregation_field, request.aggregation_kind, request.percentile)

    agg_query = AggregationQuery(
        index_pattern=request.index_pattern,
        query=query,
        aggregations=aggregations.build(),
    )
    return agg_query, aggregations


def _perf_datum(config: CheckConfig, value: float) -> PerfDatum:
    return PerfDatum(
        label=config.label,
        unit=config.unit,
        value=value,
        warn=config.warning.raw,
        crit=config.critical.raw,
    )


def run_check(
    config: CheckConfig,
    es: Optional[Elasticsearch] = None,
    now: Optional[datetime] = None,
) -> CheckOutcome:
    """
    Run the check and classify its value.

    Runtime failures never escape: a failed connection or search is
    CRITICAL, a search without data gets the configured fallback status.

    Args:
        config: Check configuration
        es: Client to use; one is created from the configuration and
            closed afterwards if not given
        now: End of the time window (current time if not given)

    Returns:
        The check outcome
    """
    agg_query, aggregations = build_search(config, now=now)

    owns_client = es is None
    if owns_client:
        try:
            es = get_elasticsearch_client(config.elasticsearch)
        except Exception as e:
            logger.debug("Client creation failed", exc_info=True)
            return CheckOutcome(
                Status.CRITICAL,
                f"Failed to connect to {config.es_url}: {e}",
            )

    try:
        try:
            response = search_aggregation(es, agg_query)
        except TransportError as e:
            return CheckOutcome(
                Status.CRITICAL,
                f"Failed to execute search at {config.es_url}, "
                f"index {config.request.index_pattern}: {e}",
            )
    finally:
        if owns_client:
            es.close()

    desc, unit = config.description, config.unit
    try:
        value = extract_metric_value(
            response,
            aggregations.kind,
            aggregations.metric_name,
            aggregations.percentile_key,
        )
    except (EmptyResultError, MissingMetricError) as e:
        value = 0.0
        status = fallback_status(config.null_code)
        logger.debug("No value extracted (%s), falling back to %s", e, status.name)
        return CheckOutcome(
            status,
            f"{desc} {value:f}{unit} ({e})",
            _perf_datum(config, value),
        )

    status = evaluate(value, config.warning, config.critical)
    logger.debug("%s = %f -> %s", aggregations.metric_name, value, status.name)

    if status is Status.CRITICAL:
        message = f"{desc} {value:f}{unit} > {config.critical.raw}{unit}"
    elif status is Status.WARNING:
        message = f"{desc} {value:f}{unit} > {config.warning.raw}{unit}"
    else:
        message = f"{desc} {value:f}{unit}"

    return CheckOutcome(status, message, _perf_datum(config, value))
