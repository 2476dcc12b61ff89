"""
Environment configuration for the Elasticsearch connection.
"""

import os
from typing import Dict, Any, Optional

from dotenv import load_dotenv


DEFAULT_URL = "http://localhost:9200"
DEFAULT_TIMEOUT_MS = 30000

_FALSE_VALUES = ("0", "false", "no", "off")


def _getenv(*names: str, default: Optional[str] = None) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


def load_environment(dotenv_path: Optional[str] = None) -> bool:
    """
    Load variables from a .env file into the process environment.

    Existing variables are not overridden.

    Args:
        dotenv_path: Explicit .env path (searched from the working directory if not given)

    Returns:
        True if a .env file was found and loaded
    """
    return load_dotenv(dotenv_path=dotenv_path, override=False)


def get_elasticsearch_config() -> Dict[str, Any]:
    """
    Get Elasticsearch configuration from the environment.

    Environment variables are read on every call so tests and callers
    can change them without reloading the module.

    Returns:
        Elasticsearch configuration dictionary
    """
    verify = _getenv("ELASTIC_VERIFY_CERTS", "ELASTICSEARCH_VERIFY_CERTS", default="true")
    return {
        "url": _getenv("ELASTIC_URL", "ELASTICSEARCH_URL", default=DEFAULT_URL),
        "username": _getenv("ELASTIC_USERNAME", "ELASTICSEARCH_USERNAME"),
        "password": _getenv("ELASTIC_PASSWORD", "ELASTICSEARCH_PASSWORD"),
        "api_key": _getenv("ELASTIC_API_KEY", "ELASTICSEARCH_API_KEY"),
        "timeout_ms": int(
            _getenv("ELASTIC_TIMEOUT", "ELASTICSEARCH_TIMEOUT", default=str(DEFAULT_TIMEOUT_MS))
        ),
        "verify_certs": verify.strip().lower() not in _FALSE_VALUES,
        "ca_certs": _getenv("ELASTIC_CA_CERTS", "ELASTICSEARCH_CA_CERTS"),
    }
