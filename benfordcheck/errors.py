"""Explicit signalling for tallies too small to score."""

from __future__ import annotations

from .counter import DigitCount


class InsufficientDataError(ValueError):
    """Raised when a tally holds fewer qualifying lines than required."""

    def __init__(self, total: int, minimum: int) -> None:
        self.total = total
        self.minimum = minimum
        super().__init__(
            f"Insufficient data: found {total} line(s) with a leading digit 1-9, need at least {minimum}."
        )


def require_observations(counts: DigitCount, minimum: int = 1) -> DigitCount:
    """Return `counts` unchanged, or raise when it holds fewer than `minimum` observations."""
    if minimum < 1:
        raise ValueError("minimum must be at least 1.")
    if counts.total < minimum:
        raise InsufficientDataError(counts.total, minimum)
    return counts


__all__ = ["InsufficientDataError", "require_observations"]
