"""Small text and file helpers shared across the package."""

from __future__ import annotations

import os
from collections.abc import Iterable
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]

_LEFT_SPACE = " \t"
_RIGHT_SPACE = " \t\r\n"


def trim_left(text: str) -> str:
    """Strip spaces and tabs from the start of ``text``."""
    return text.lstrip(_LEFT_SPACE)


def trim_right(text: str) -> str:
    """Strip spaces, tabs and line breaks from the end of ``text``."""
    return text.rstrip(_RIGHT_SPACE)


def trim(text: str) -> str:
    """Strip blanks at both ends; line breaks only count at the end."""
    return trim_left(trim_right(text))


def _split_file_lines(content: str) -> list[str]:
    """Split on ``\\n`` the way line-by-line reading does: no empty tail line."""
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _read_text(filename: PathLike) -> str:
    with open(filename, encoding="utf-8", newline="") as handle:
        return handle.read()


def read_lines(filename: PathLike) -> list[str]:
    """Return the right-trimmed lines of a file, or an empty list if it cannot be read."""
    try:
        content = _read_text(filename)
    except OSError:
        return []
    return [trim_right(line) for line in _split_file_lines(content)]


def read_lines_to_set(filename: PathLike) -> set[str]:
    """Return the set of non-empty lines of a file; raises OSError if it cannot be read."""
    return {line for line in _split_file_lines(_read_text(filename)) if line}


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``; an empty text gives no parts."""
    if not text:
        return []
    return text.split(delimiter)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on newline characters."""
    return split(text, "\n")


def join_from(parts: list[str], start: int, delimiter: str) -> str:
    """Join the parts from index ``start`` onwards with ``delimiter``."""
    return delimiter.join(parts[start:])


def read_file_to_string(filename: PathLike) -> str:
    """Return the whole content of a file; raises OSError if it cannot be read."""
    return _read_text(filename)


def save_to_file(content: Union[str, Iterable[object]], filename: PathLike) -> None:
    """Write a string as is, or any other iterable one item per line."""
    with open(filename, "w", encoding="utf-8", newline="") as handle:
        if isinstance(content, str):
            handle.write(content)
        else:
            for line in content:
                handle.write(f"{line}\n")