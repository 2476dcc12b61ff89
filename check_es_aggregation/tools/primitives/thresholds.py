"""
Classification of a checked value against threshold ranges.
"""

from ...check_types.check import Status, ThresholdRange


def evaluate(value: float, warning: ThresholdRange, critical: ThresholdRange) -> Status:
    """
    Classify a value.

    The critical range is checked first so a value alerting on both
    ranges is CRITICAL.
    """
    if critical.check(value):
        return Status.CRITICAL
    if warning.check(value):
        return Status.WARNING
    return Status.OK


def fallback_status(code: int) -> Status:
    """Status used when no value could be read (0, 1, 2, anything else UNKNOWN)."""
    if code in (Status.OK, Status.WARNING, Status.CRITICAL):
        return Status(code)
    return Status.UNKNOWN
