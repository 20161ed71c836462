"""Whole-file reading and writing, and program names from paths."""

from __future__ import annotations

import os


def from_file(path: str | os.PathLike[str]) -> str:
    """The whole contents of ``path``, or an empty string if it cannot be read."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError):
        return ""


def to_file(path: str | os.PathLike[str], contents: str) -> bool:
    """Replace the contents of ``path``; False if the file cannot be written."""
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(contents)
    except OSError:
        return False
    return True


def get_program(path: str | None) -> str:
    """The part of ``path`` after its last slash or backslash.

    A separator in the very first position does not count.
    """
    if path is None:
        return "nullptr"
    index = max(path.rfind("/"), path.rfind("\\"))
    if index > 0:
        return path[index + 1:]
    return path