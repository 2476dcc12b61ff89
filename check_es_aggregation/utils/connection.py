"""
Elasticsearch connection management.
"""

import logging
from typing import Any, Dict

from elasticsearch import Elasticsearch


logger = logging.getLogger(__name__)


def get_elasticsearch_client(settings: Dict[str, Any]) -> Elasticsearch:
    """
    Create an Elasticsearch client from connection settings.

    Args:
        settings: Connection settings as returned by
            ``get_elasticsearch_config()`` (url, timeout_ms, auth, TLS)

    Returns:
        Configured Elasticsearch client
    """
    # Build connection parameters
    params = {
        "hosts": [settings["url"]],
        "request_timeout": settings["timeout_ms"] / 1000.0,
        "verify_certs": settings.get("verify_certs", True),
    }

    # Add CA certificates if provided
    if settings.get("ca_certs"):
        params["ca_certs"] = settings["ca_certs"]

    # Add authentication
    if settings.get("api_key"):
        params["api_key"] = settings["api_key"]
    elif settings.get("username") and settings.get("password"):
        params["basic_auth"] = (settings["username"], settings["password"])

    logger.debug(
        "Connecting to %s (timeout %.1fs, auth: %s)",
        settings["url"],
        params["request_timeout"],
        "api_key" if "api_key" in params else "basic" if "basic_auth" in params else "none",
    )
    return Elasticsearch(**params)
