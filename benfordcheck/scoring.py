"""Distance score and pass/fail verdict against a target distribution."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .counter import DigitCount
from .significance import SignificanceLevel
from .target import BENFORD_TARGET, TargetDistribution


@dataclass(frozen=True, eq=False)
class BenfordResult:
    """Outcome of comparing a tally with the target at one significance level."""

    counts: DigitCount
    distribution: np.ndarray = field(repr=False)
    score: float
    level: SignificanceLevel
    passed: bool

    @property
    def threshold(self) -> float:
        return self.level.threshold

    @property
    def conclusive(self) -> bool:
        """False when no line contributed, in which case score and distribution are NaN."""
        return self.counts.total > 0


def distribution(counts: DigitCount) -> np.ndarray:
    """Share of each leading digit among qualifying lines.

    A zero total yields NaN in every entry; callers that need finite values
    must check `counts.total` first.
    """
    buckets = np.asarray(counts.counts, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return buckets / float(counts.total)


def score(counts: DigitCount, target: TargetDistribution = BENFORD_TARGET) -> float:
    """Return sqrt(N * sum((observed - expected) ** 2)) over the nine digits."""
    diff = distribution(counts) - target.probabilities
    return float(np.sqrt(counts.total * np.sum(diff * diff)))


def passes(
    counts: DigitCount,
    level: SignificanceLevel,
    target: TargetDistribution = BENFORD_TARGET,
) -> bool:
    # NaN compares False, so an empty tally never passes.
    return bool(score(counts, target) < SignificanceLevel(level).threshold)


def evaluate(
    counts: DigitCount,
    level: SignificanceLevel,
    target: TargetDistribution = BENFORD_TARGET,
) -> BenfordResult:
    """Compute distribution, score and verdict for `counts` in one pass."""
    level = SignificanceLevel(level)
    value = score(counts, target)
    return BenfordResult(
        counts=counts,
        distribution=distribution(counts),
        score=value,
        level=level,
        passed=bool(value < level.threshold),
    )


__all__ = ["BenfordResult", "distribution", "evaluate", "passes", "score"]
