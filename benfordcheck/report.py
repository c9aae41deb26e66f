"""Console report for a Benford conformance check."""

from __future__ import annotations

from typing import Iterable, List

from .config import BENFORD_REFERENCE_URL, DIGITS
from .scoring import BenfordResult
from .target import BENFORD_TARGET, TargetDistribution

PASS_MESSAGE = "✅ PASS!! data set seems to be natural!"
FAIL_MESSAGE = "❌ FAIL!! data set seems to be tampered with!"
CATEGORY_WARNING = "warning: Make sure the category of data your testing follows Benford's law."

_LABEL_WIDTH = 6


def format_header() -> str:
    cells = "|".join(f"  {digit}  " for digit in DIGITS)
    return f"{'':<{_LABEL_WIDTH}}|{cells.rstrip()}"


def format_row(label: str, values: Iterable[float]) -> str:
    """Render one table row: the label padded to the header width, then 3-decimal cells."""
    cells = "|".join(f"{float(value):.3f}" for value in values)
    return f"{label:<{_LABEL_WIDTH}}|{cells}"


def format_percent(percent: float) -> str:
    return f"{percent:g}%"


def format_report(result: BenfordResult, target: TargetDistribution = BENFORD_TARGET) -> str:
    lines: List[str] = [
        "Leading digit distribution",
        "",
        format_header(),
        format_row("TARGET", target.probabilities),
        format_row("FOUND", result.distribution),
        "",
        f"Significance level: {format_percent(result.level.percent)} (alpha={result.level.alpha:g})",
        f"Found distance score: {result.score}",
        "",
        PASS_MESSAGE if result.passed else FAIL_MESSAGE,
        "",
        CATEGORY_WARNING,
        BENFORD_REFERENCE_URL,
    ]
    return "\n".join(lines)


__all__ = [
    "CATEGORY_WARNING",
    "FAIL_MESSAGE",
    "PASS_MESSAGE",
    "format_header",
    "format_percent",
    "format_report",
    "format_row",
]
