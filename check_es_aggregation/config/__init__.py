"""
Configuration management for the aggregation check.
"""

from .environments import get_elasticsearch_config, load_environment
from .settings import CheckConfig, build_check_config

__all__ = [
    "get_elasticsearch_config",
    "load_environment",
    "CheckConfig",
    "build_check_config",
]
