"""
Input validation utilities.
"""

import re
from datetime import timedelta
from typing import Any

from ..errors import ConfigError


DURATION_UNITS = {
    "ns": timedelta(microseconds=0.001),
    "us": timedelta(microseconds=1),
    "µs": timedelta(microseconds=1),
    "ms": timedelta(milliseconds=1),
    "s": timedelta(seconds=1),
    "m": timedelta(minutes=1),
    "h": timedelta(hours=1),
}

DURATION_PART_RE = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def validate_index_pattern(pattern: str) -> None:
    """
    Validate an Elasticsearch index pattern.

    A lone "*" is refused: a check must be scoped to the indices it watches.

    Args:
        pattern: Index pattern to validate

    Raises:
        ConfigError: If pattern is invalid
    """
    if not pattern or pattern == "*":
        raise ConfigError(f"Invalid ES index '{pattern}' given")

    if pattern.startswith("_"):
        raise ConfigError("Index pattern cannot start with underscore")

    # Commas separate several patterns, colons prefix a remote cluster
    invalid_chars = re.findall(r'[^a-zA-Z0-9\-_.*,:]', pattern)
    if invalid_chars:
        raise ConfigError(f"Invalid characters in index pattern: {invalid_chars}")


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration such as "5m", "90s" or "1h30m".

    Args:
        value: Duration string, a sequence of <number><unit> parts

    Returns:
        Parsed duration

    Raises:
        ConfigError: If the string is not a positive duration
    """
    text = value.strip()
    total = timedelta()
    position = 0
    for match in DURATION_PART_RE.finditer(text):
        if match.start() != position:
            break
        total += float(match.group(1)) * DURATION_UNITS[match.group(2)]
        position = match.end()

    if not text or position != len(text):
        raise ConfigError(f"Invalid duration '{value}', expected e.g. 90s, 5m or 1h30m")
    if total <= timedelta():
        raise ConfigError(f"Duration must be positive, got '{value}'")
    return total


def clamp_value(value: Any, min_value: Any, max_value: Any) -> Any:
    """
    Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_value, min(value, max_value))
