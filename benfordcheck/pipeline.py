"""High-level orchestration: read, tally and evaluate in one call."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .accumulate import count_chunked, count_text
from .config import DEFAULT_ENCODING, DEFAULT_SIGNIFICANCE
from .counter import DigitCount
from .io import read_text
from .scoring import BenfordResult, evaluate
from .significance import SignificanceLevel
from .target import BENFORD_TARGET, TargetDistribution


def tally_text(text: str, chunk_size: Optional[int] = None, progress: bool = False) -> DigitCount:
    """Tally `text` line by line, optionally through the chunked reduction."""
    if chunk_size is None:
        return count_text(text)
    return count_chunked(text.split("\n"), chunk_size, progress=progress)


def check_text(
    text: str,
    level: SignificanceLevel | str = DEFAULT_SIGNIFICANCE,
    target: TargetDistribution = BENFORD_TARGET,
    chunk_size: Optional[int] = None,
    progress: bool = False,
) -> BenfordResult:
    """Evaluate the leading digits of every line in `text`."""
    counts = tally_text(text, chunk_size=chunk_size, progress=progress)
    return evaluate(counts, SignificanceLevel(level), target)


def check_file(
    path: Path,
    level: SignificanceLevel | str = DEFAULT_SIGNIFICANCE,
    target: TargetDistribution = BENFORD_TARGET,
    chunk_size: Optional[int] = None,
    progress: bool = False,
    encoding: str = DEFAULT_ENCODING,
) -> BenfordResult:
    """
    Read `path` and evaluate its lines; I/O and decoding errors propagate.
    """
    text = read_text(path, encoding=encoding)
    return check_text(text, level=level, target=target, chunk_size=chunk_size, progress=progress)


__all__ = ["check_file", "check_text", "tally_text"]
