"""
Check result type definitions.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum
from typing import Optional

from ..errors import ConfigError


class Status(IntEnum):
    """Monitoring plugin status, value is the process exit code."""
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class ThresholdRange:
    """
    Monitoring plugin threshold range.

    Grammar (whitespace around the expression is ignored):

        n       alert if value < 0 or value > n
        n:      alert if value < n
        ~:n     alert if value > n
        n:m     alert if value < n or value > m
        @n:m    alert if n <= value <= m

    Bounds are inclusive.
    """
    raw: str
    start: float = 0.0
    end: float = math.inf
    alert_on_inside: bool = False

    @classmethod
    def parse(cls, raw: str) -> "ThresholdRange":
        """
        Parse a range specifier.

        Args:
            raw: Range specifier as given on the command line

        Returns:
            Parsed ThresholdRange

        Raises:
            ConfigError: If the specifier does not follow the grammar
        """
        specifier = raw.strip(" \n\r")
        text = specifier
        start, end = 0.0, math.inf
        alert_on_inside = False

        if text.startswith("@"):
            alert_on_inside = True
            text = text[1:]
        if not text:
            raise ConfigError(f"Invalid range '{raw}': empty range")

        if ":" in text:
            lower, text = text.split(":", 1)
            if lower.startswith("~"):
                start = -math.inf
            else:
                start = _parse_bound(lower, raw, "lower")

        if text:
            end = _parse_bound(text, raw, "upper")

        if end < start:
            raise ConfigError(
                f"Invalid range '{raw}': min <= max violated"
            )

        return cls(raw=specifier, start=start, end=end, alert_on_inside=alert_on_inside)

    def check(self, value: float) -> bool:
        """Return True if value must raise an alert."""
        if self.start <= value <= self.end:
            return self.alert_on_inside
        return not self.alert_on_inside


def _parse_bound(text: str, raw: str, which: str) -> float:
    try:
        bound = float(text)
    except ValueError:
        raise ConfigError(
            f"Invalid range '{raw}': failed to parse {which} limit '{text}'"
        ) from None
    if math.isnan(bound):
        raise ConfigError(f"Invalid range '{raw}': {which} limit is not a number")
    return bound


def format_perf_value(value: float) -> str:
    """Render a number the way performance data expects it (no exponent, no trailing zeros)."""
    if math.isinf(value) or math.isnan(value):
        return ""
    return format(Decimal(repr(float(value))).normalize(), "f")


@dataclass(frozen=True)
class PerfDatum:
    """Performance data token appended to the status line."""
    label: str
    unit: str
    value: float
    warn: str
    crit: str
    min: float = 0.0
    max: float = math.inf

    def __str__(self) -> str:
        label = self.label
        if any(c in label for c in " ='"):
            label = "'" + label.replace("'", "''") + "'"
        return (
            f"{label}={format_perf_value(self.value)}{self.unit}"
            f";{self.warn};{self.crit}"
            f";{format_perf_value(self.min)};{format_perf_value(self.max)}"
        )


@dataclass(frozen=True)
class CheckOutcome:
    """Final result of one check run."""
    status: Status
    message: str
    perf_datum: Optional[PerfDatum] = None

    @property
    def exit_code(self) -> int:
        return int(self.status)

    def __str__(self) -> str:
        line = f"{self.status.name}: {self.message}"
        if self.perf_datum is not None:
            line += f" | {self.perf_datum}"
        return line
