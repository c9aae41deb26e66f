"""Static defaults for the Benford conformance checker."""

from __future__ import annotations

from typing import Tuple

# Default CLI choices; callers may override these per run.
DEFAULT_SIGNIFICANCE = "0.05"
DEFAULT_ENCODING = "utf-8"

# ---------------------------------------------------------------------------
# Base-10 leading digits and the reference printed under every report.

DIGITS: Tuple[int, ...] = tuple(range(1, 10))
BENFORD_REFERENCE_URL = "https://en.wikipedia.org/wiki/Benford's_law"


__all__ = [
    "BENFORD_REFERENCE_URL",
    "DEFAULT_ENCODING",
    "DEFAULT_SIGNIFICANCE",
    "DIGITS",
]
