"""Tests for folding lines and text into a tally."""

from __future__ import annotations

import pytest

from benfordcheck.accumulate import count_chunked, count_lines, count_text, iter_chunks
from benfordcheck.counter import EMPTY_COUNT
from benfordcheck.scoring import distribution


def test_count_lines_tallies_each_leading_digit() -> None:
    counts = count_lines(["100", "200", "300"])
    assert counts.total == 3
    assert counts.counts == (1, 1, 1, 0, 0, 0, 0, 0, 0)


def test_count_lines_single_bucket() -> None:
    counts = count_lines(["1", "10", "100"])
    assert counts.total == 3
    assert list(distribution(counts)) == [1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0]


def test_count_lines_skips_unqualified_lines() -> None:
    counts = count_lines(["", "0.5", "-12", "abc", "42"])
    assert counts.total == 1
    assert counts.digit(4) == 1


def test_count_lines_empty_iterable() -> None:
    assert count_lines([]) == EMPTY_COUNT


def test_count_text_splits_on_newline() -> None:
    counts = count_text("12\n34\n\n5\n")
    assert counts.total == 3
    assert counts.digit(1) == 1
    assert counts.digit(3) == 1
    assert counts.digit(5) == 1


def test_count_text_handles_crlf() -> None:
    assert count_text("12\r\n34\r\n") == count_text("12\n34\n")


@pytest.mark.parametrize("text", ["", "\n"])
def test_count_text_empty_input(text: str) -> None:
    assert count_text(text) == EMPTY_COUNT


# ---------------------------------------------------------------------------
# Chunked reduction


@pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 100])
def test_count_chunked_matches_sequential_fold(chunk_size: int) -> None:
    lines = [str(value) for value in range(0, 250, 3)] + ["", "-5", "x"]
    assert count_chunked(lines, chunk_size) == count_lines(lines)


def test_count_chunked_with_progress_bar() -> None:
    lines = ["1", "2", "3", "4"]
    assert count_chunked(lines, 2, progress=True) == count_lines(lines)


def test_count_chunked_empty_lines() -> None:
    assert count_chunked([], 10) == EMPTY_COUNT


def test_count_chunked_rejects_bad_chunk_size() -> None:
    with pytest.raises(ValueError):
        count_chunked(["1"], 0)
    with pytest.raises(ValueError):
        list(iter_chunks(["1"], -1))


def test_iter_chunks_partitions_in_order() -> None:
    chunks = [list(chunk) for chunk in iter_chunks(["a", "b", "c", "d", "e"], 2)]
    assert chunks == [["a", "b"], ["c", "d"], ["e"]]
