"""
Primitive search operation for Elasticsearch.
"""

import logging

from elasticsearch import Elasticsearch

from ...check_types.primitives import AggregationQuery, AggregationResponse
from ...errors import TransportError
from ...utils.validation import validate_index_pattern


logger = logging.getLogger(__name__)


def search_aggregation(
    es: Elasticsearch,
    agg_query: AggregationQuery,
) -> AggregationResponse:
    """
    Execute an aggregation search.

    This is the only request a check sends.

    Args:
        es: Elasticsearch client
        agg_query: Index pattern, query and aggregations

    Returns:
        AggregationResponse with hit count and aggregation results

    Raises:
        ConfigError: If the index pattern is invalid
        TransportError: If the search fails
    """
    validate_index_pattern(agg_query.index_pattern)

    body = agg_query.to_dict()
    logger.debug("Searching %s with %s", agg_query.index_pattern, body)

    try:
        response = es.search(index=agg_query.index_pattern, **body)
    except Exception as e:
        raise TransportError(f"Elasticsearch aggregation failed: {str(e)}") from e

    # ObjectApiResponse wraps the decoded body
    data = getattr(response, "body", response)
    logger.debug("Search response: %s", data)
    return AggregationResponse.from_dict(data)
