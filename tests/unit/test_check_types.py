"""
Unit tests for check result types and their output format.
"""

import math

import pytest

from check_es_aggregation.check_types.check import (
    CheckOutcome,
    PerfDatum,
    Status,
    format_perf_value,
)


@pytest.mark.parametrize("value,text", [
    (20.0, "20"),
    (0.0, "0"),
    (12.5, "12.5"),
    (0.1, "0.1"),
    (-3.25, "-3.25"),
    (1e-7, "0.0000001"),
    (1e16, "10000000000000000"),
    (math.inf, ""),
    (-math.inf, ""),
])
def test_format_perf_value(value, text):
    assert format_perf_value(value) == text


class TestPerfDatum:

    def test_render(self):
        datum = PerfDatum("dur", "ms", 20.0, "15", "30")

        assert str(datum) == "dur=20ms;15;30;0;"

    def test_range_thresholds_kept_verbatim(self):
        datum = PerfDatum("latency", "s", 0.25, "@0.1:0.2", "~:1")

        assert str(datum) == "latency=0.25s;@0.1:0.2;~:1;0;"

    def test_quoted_label(self):
        datum = PerfDatum("response time", "", 1.0, "5", "10")

        assert str(datum) == "'response time'=1;5;10;0;"


class TestCheckOutcome:

    def test_with_perf_datum(self):
        outcome = CheckOutcome(
            Status.WARNING,
            "dur 20.000000ms > 15ms",
            PerfDatum("dur", "ms", 20.0, "15", "30"),
        )

        assert str(outcome) == "WARNING: dur 20.000000ms > 15ms | dur=20ms;15;30;0;"
        assert outcome.exit_code == 1

    def test_without_perf_datum(self):
        outcome = CheckOutcome(Status.CRITICAL, "Failed to connect")

        assert str(outcome) == "CRITICAL: Failed to connect"
        assert outcome.exit_code == 2

    @pytest.mark.parametrize("status,code", [
        (Status.OK, 0),
        (Status.WARNING, 1),
        (Status.CRITICAL, 2),
        (Status.UNKNOWN, 3),
    ])
    def test_exit_codes(self, status, code):
        assert CheckOutcome(status, "x").exit_code == code
