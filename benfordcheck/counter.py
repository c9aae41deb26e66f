"""Leading-digit tallies and the per-line accumulation step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .config import DIGITS

_LEADING_DIGITS = "123456789"


@dataclass(frozen=True)
class DigitCount:
    """Number of qualifying lines and how many of them start with each digit 1..9."""

    total: int = 0
    counts: Tuple[int, ...] = (0,) * len(DIGITS)

    def __post_init__(self) -> None:
        counts = tuple(int(value) for value in self.counts)
        if len(counts) != len(DIGITS):
            raise ValueError(f"DigitCount expects {len(DIGITS)} buckets, received {len(counts)}.")
        if self.total < 0 or any(value < 0 for value in counts):
            raise ValueError("DigitCount fields must be non-negative.")
        object.__setattr__(self, "counts", counts)

    def digit(self, digit: int) -> int:
        """Return the bucket for leading digit `digit` (1..9)."""
        if digit not in DIGITS:
            raise ValueError(f"Leading digit must fall within 1..9, received {digit}.")
        return self.counts[digit - 1]

    @property
    def is_empty(self) -> bool:
        return self.total == 0


EMPTY_COUNT = DigitCount()


def count_line(line: str) -> DigitCount:
    """Tally a single line by its first character.

    Only an ASCII '1'..'9' in first position counts. Empty lines and lines
    starting with '0', a sign, a decimal point, whitespace or any other
    character map to `EMPTY_COUNT`.
    """
    if not line:
        return EMPTY_COUNT
    index = _LEADING_DIGITS.find(line[0])
    if index < 0:
        return EMPTY_COUNT
    counts = [0] * len(DIGITS)
    counts[index] = 1
    return DigitCount(total=1, counts=tuple(counts))


def merge(left: DigitCount, right: DigitCount) -> DigitCount:
    """Fieldwise sum of two tallies; `EMPTY_COUNT` is the identity."""
    return DigitCount(
        total=left.total + right.total,
        counts=tuple(a + b for a, b in zip(left.counts, right.counts)),
    )


__all__ = ["DigitCount", "EMPTY_COUNT", "count_line", "merge"]
