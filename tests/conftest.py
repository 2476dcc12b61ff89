"""
Pytest configuration and fixtures for the aggregation check tests.
"""

import pytest
import os
import sys
from unittest.mock import Mock, patch
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)

from check_es_aggregation.config import build_check_config  # noqa: E402
from check_es_aggregation.utils import reset_logging  # noqa: E402


FIXED_NOW = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

ENV_VARS = (
    "ELASTIC_URL", "ELASTICSEARCH_URL",
    "ELASTIC_USERNAME", "ELASTICSEARCH_USERNAME",
    "ELASTIC_PASSWORD", "ELASTICSEARCH_PASSWORD",
    "ELASTIC_API_KEY", "ELASTICSEARCH_API_KEY",
    "ELASTIC_TIMEOUT", "ELASTICSEARCH_TIMEOUT",
    "ELASTIC_CA_CERTS", "ELASTICSEARCH_CA_CERTS",
    "ELASTIC_VERIFY_CERTS", "ELASTICSEARCH_VERIFY_CERTS",
    "LOG_LEVEL",
)


def build_search_response(
    total: int = 100,
    metric_name: Optional[str] = "max_dur",
    metric: Optional[Dict[str, Any]] = None,
    buckets: Optional[list] = None,
    with_aggregation: bool = True,
) -> Dict[str, Any]:
    """Build a search response with one time range bucket."""
    if buckets is None:
        bucket: Dict[str, Any] = {
            "key": "2024-01-15T10:25:00.000Z-2024-01-15T10:30:00.000Z",
            "doc_count": total,
        }
        if metric_name is not None:
            bucket[metric_name] = {"value": 20.0} if metric is None else metric
        buckets = [bucket]

    response: Dict[str, Any] = {
        "took": 7,
        "timed_out": False,
        "hits": {"total": {"value": total, "relation": "eq"}, "hits": []},
    }
    if with_aggregation:
        response["aggregations"] = {"aggr": {"buckets": buckets}}
    return response


@pytest.fixture(autouse=True)
def clean_environment(request, monkeypatch):
    """Keep the caller's Elasticsearch settings out of the tests."""
    if request.node.get_closest_marker("manual") is None:
        for name in ENV_VARS:
            monkeypatch.delenv(name, raising=False)
    yield
    reset_logging()


@pytest.fixture
def search_response():
    """Factory for canned search responses."""
    return build_search_response


@pytest.fixture
def mock_elasticsearch():
    """Mock Elasticsearch client for testing."""
    mock_es = Mock()
    mock_es.search.return_value = build_search_response()
    return mock_es


@pytest.fixture
def mock_es_client(mock_elasticsearch):
    """Patch client creation in the check flow."""
    with patch(
        'check_es_aggregation.tools.flows.aggregation_check.get_elasticsearch_client',
        return_value=mock_elasticsearch,
    ):
        yield mock_elasticsearch


@pytest.fixture
def make_config():
    """Factory building a validated configuration with test defaults."""
    def _make_config(**overrides):
        params = {"key": "dur", "warning": "15", "critical": "30"}
        params.update(overrides)
        return build_check_config(
            params.pop("key"),
            params.pop("warning"),
            params.pop("critical"),
            **params,
        )
    return _make_config


@pytest.fixture
def fixed_now():
    """End of the time window used in request assertions."""
    return FIXED_NOW
