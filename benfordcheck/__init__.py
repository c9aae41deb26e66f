"""Benford's Law conformance checks for line-oriented numeric data."""

from .accumulate import count_chunked, count_lines, count_text
from .counter import EMPTY_COUNT, DigitCount, count_line, merge
from .errors import InsufficientDataError, require_observations
from .pipeline import check_file, check_text
from .report import format_report
from .scoring import BenfordResult, distribution, evaluate, passes, score
from .significance import SignificanceLevel, SignificanceSpec, significance_spec
from .target import BENFORD_TARGET, TargetDistribution, digit_probability

__version__ = "0.1.0"

__all__ = [
    "BENFORD_TARGET",
    "BenfordResult",
    "DigitCount",
    "EMPTY_COUNT",
    "InsufficientDataError",
    "SignificanceLevel",
    "SignificanceSpec",
    "TargetDistribution",
    "check_file",
    "check_text",
    "count_chunked",
    "count_line",
    "count_lines",
    "count_text",
    "digit_probability",
    "distribution",
    "evaluate",
    "format_report",
    "merge",
    "passes",
    "require_observations",
    "score",
    "significance_spec",
]
