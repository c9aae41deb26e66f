"""File access for the checker."""

from __future__ import annotations

from pathlib import Path

from .config import DEFAULT_ENCODING


def read_text(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the whole file as text.

    `OSError` (missing file, directory, permissions) and `UnicodeDecodeError`
    (not valid text) propagate to the caller.
    """
    with Path(path).open("r", encoding=encoding, errors="strict", newline="") as handle:
        return handle.read()


__all__ = ["read_text"]
