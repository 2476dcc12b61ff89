"""
Flow tools combining the primitives into a complete check.
"""

from .aggregation_check import build_search, run_check

__all__ = [
    "build_search",
    "run_check",
]
