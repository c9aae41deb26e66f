"""Tests for the console report."""

from __future__ import annotations

from benfordcheck.counter import EMPTY_COUNT
from benfordcheck.accumulate import count_lines
from benfordcheck.report import (
    CATEGORY_WARNING,
    FAIL_MESSAGE,
    PASS_MESSAGE,
    format_header,
    format_percent,
    format_report,
    format_row,
)
from benfordcheck.scoring import evaluate
from benfordcheck.significance import SignificanceLevel


def test_header_lists_digit_columns() -> None:
    assert format_header() == "      |  1  |  2  |  3  |  4  |  5  |  6  |  7  |  8  |  9"


def test_row_uses_three_decimals() -> None:
    row = format_row("FOUND", [1.0] + [0.0] * 8)
    assert row == "FOUND |1.000|0.000|0.000|0.000|0.000|0.000|0.000|0.000|0.000"


def test_percent_formatting() -> None:
    assert format_percent(SignificanceLevel.ALPHA_10.percent) == "10%"
    assert format_percent(SignificanceLevel.ALPHA_05.percent) == "5%"
    assert format_percent(SignificanceLevel.ALPHA_01.percent) == "1%"


def test_report_contains_target_and_verdict() -> None:
    result = evaluate(count_lines(["1", "10", "100"]), SignificanceLevel.ALPHA_05)
    report = format_report(result)
    lines = report.splitlines()
    assert lines[0] == "Leading digit distribution"
    assert lines[3] == "TARGET|0.301|0.176|0.125|0.097|0.079|0.067|0.058|0.051|0.046"
    assert lines[4].startswith("FOUND |1.000|0.000")
    assert "Significance level: 5% (alpha=0.05)" in lines
    assert any(line.startswith("Found distance score: 1.300") for line in lines)
    assert PASS_MESSAGE in lines
    assert CATEGORY_WARNING in lines
    assert lines[-1] == "https://en.wikipedia.org/wiki/Benford's_law"


def test_report_for_empty_data_shows_nan_and_fails() -> None:
    result = evaluate(EMPTY_COUNT, SignificanceLevel.ALPHA_01)
    report = format_report(result)
    assert "FOUND |nan|nan|nan|nan|nan|nan|nan|nan|nan" in report
    assert "Found distance score: nan" in report
    assert FAIL_MESSAGE in report
    assert PASS_MESSAGE not in report
