"""Fold lines of text into a single leading-digit tally."""

from __future__ import annotations

from functools import reduce
from math import ceil
from typing import Iterable, Iterator, Sequence

from tqdm import tqdm

from .counter import EMPTY_COUNT, DigitCount, count_line, merge


def count_lines(lines: Iterable[str]) -> DigitCount:
    """Tally every line and merge the results, starting from `EMPTY_COUNT`."""
    return reduce(merge, map(count_line, lines), EMPTY_COUNT)


def count_text(text: str) -> DigitCount:
    """Split `text` on newlines and tally each piece.

    A trailing newline produces a final empty line, which contributes nothing.
    """
    return count_lines(text.split("\n"))


def iter_chunks(lines: Sequence[str], chunk_size: int) -> Iterator[Sequence[str]]:
    if chunk_size < 1:
        raise ValueError("chunk_size must be a positive integer.")
    for start in range(0, len(lines), chunk_size):
        yield lines[start : start + chunk_size]


def count_chunked(
    lines: Sequence[str],
    chunk_size: int,
    progress: bool = False,
    desc: str = "Counting digits",
) -> DigitCount:
    """Tally `lines` chunk by chunk and merge the partial tallies.

    Merging is associative and commutative, so the result matches
    `count_lines(lines)` for any chunk size.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be a positive integer.")
    chunks = iter_chunks(lines, chunk_size)
    total = ceil(len(lines) / chunk_size) if lines else 0
    partials = (count_lines(chunk) for chunk in tqdm(chunks, total=total, desc=desc, leave=False, disable=not progress))
    return reduce(merge, partials, EMPTY_COUNT)


__all__ = ["count_chunked", "count_lines", "count_text", "iter_chunks"]
