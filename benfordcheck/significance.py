"""Significance levels and their critical distance-score thresholds.

Each level maps to a single `SignificanceSpec` entry in `REGISTRY` so the
three calibration constants live in one place. The enum values double as the
CLI choices.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class SignificanceLevel(str, Enum):
    ALPHA_10 = "0.1"
    ALPHA_05 = "0.05"
    ALPHA_01 = "0.01"

    @property
    def threshold(self) -> float:
        """Critical score; a data set passes when its score is strictly below it."""
        return significance_spec(self).threshold

    @property
    def alpha(self) -> float:
        return significance_spec(self).alpha

    @property
    def percent(self) -> float:
        return significance_spec(self).alpha * 100.0


@dataclass(frozen=True)
class SignificanceSpec:
    """Calibration constants attached to a significance level."""

    threshold: float
    alpha: float


REGISTRY: Dict[SignificanceLevel, SignificanceSpec] = {
    SignificanceLevel.ALPHA_10: SignificanceSpec(threshold=1.21, alpha=0.10),
    SignificanceLevel.ALPHA_05: SignificanceSpec(threshold=1.330, alpha=0.05),
    SignificanceLevel.ALPHA_01: SignificanceSpec(threshold=1.569, alpha=0.01),
}


def significance_spec(level: SignificanceLevel | str) -> SignificanceSpec:
    """Look up the constants for `level`, accepting either the enum or its value."""
    try:
        key = SignificanceLevel(level)
    except ValueError as exc:
        choices = ", ".join(member.value for member in SignificanceLevel)
        raise ValueError(f"Unknown significance level '{level}'; expected one of: {choices}") from exc
    return REGISTRY[key]


__all__ = ["REGISTRY", "SignificanceLevel", "SignificanceSpec", "significance_spec"]
