"""Theoretical leading-digit distribution predicted by Benford's Law."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from .config import DIGITS


def digit_probability(digit: int) -> float:
    """Return log10(1 + 1/digit), the Benford probability of `digit` leading."""
    return math.log10(1.0 + 1.0 / digit)


@dataclass(frozen=True, eq=False)
class TargetDistribution:
    """Expected probability for each leading digit 1..9 (index 0 is digit 1)."""

    probabilities: np.ndarray = field(repr=False)

    def __post_init__(self) -> None:
        values = np.asarray(self.probabilities, dtype=float)
        if values.shape != (len(DIGITS),):
            raise ValueError(f"Target distribution needs {len(DIGITS)} probabilities, received shape {values.shape}.")
        values = values.copy()
        values.setflags(write=False)
        object.__setattr__(self, "probabilities", values)

    @classmethod
    def benford(cls) -> "TargetDistribution":
        return cls(np.asarray([digit_probability(digit) for digit in DIGITS], dtype=float))

    def probability(self, digit: int) -> float:
        return float(self.probabilities[digit - 1])

    def as_array(self) -> np.ndarray:
        """Return a writable copy of the nine probabilities."""
        return self.probabilities.copy()

    def __len__(self) -> int:
        return len(self.probabilities)


# Built once at import and passed into scoring calls as their default target.
BENFORD_TARGET = TargetDistribution.benford()


__all__ = ["BENFORD_TARGET", "TargetDistribution", "digit_probability"]
