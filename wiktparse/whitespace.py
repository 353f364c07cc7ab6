"""Whitespace rules of wikitext."""

from __future__ import annotations

from typing import NamedTuple

_WIKI_SPACE = frozenset(" \t\f\v")
_BREAKS = frozenset("\r\n")


class WhiteBreaks(NamedTuple):
    """Result of skipping a run of blanks and line breaks."""

    pos: int
    breaks: int
    spaces: int


def is_wiki_space(char: str) -> bool:
    """True for space, tab, form feed and vertical tab."""
    return char in _WIKI_SPACE


def is_break(char: str) -> bool:
    """True for carriage return and line feed."""
    return char in _BREAKS


def is_break_space(char: str) -> bool:
    """True for any blank or line break."""
    return is_wiki_space(char) or is_break(char)


def skip_whitespace(text: str, pos: int) -> int:
    """Return the position after the blanks starting at ``pos``."""
    while pos < len(text) and is_wiki_space(text[pos]):
        pos += 1
    return pos


def skip_line_breaks(text: str, pos: int) -> tuple[int, int]:
    """Skip line breaks; return the new position and the number of breaks.

    The number of breaks is the larger of the CR and LF counts, so that
    ``\\r\\n`` pairs count once.
    """
    count_cr = count_lf = 0
    while pos < len(text) and is_break(text[pos]):
        if text[pos] == "\r":
            count_cr += 1
        else:
            count_lf += 1
        pos += 1
    return pos, max(count_cr, count_lf)


def skip_white_breaks(text: str, pos: int) -> WhiteBreaks:
    """Skip blanks and line breaks, counting both."""
    breaks = spaces = 0
    while pos < len(text):
        if is_break(text[pos]):
            pos, found = skip_line_breaks(text, pos)
            breaks += found
        elif is_wiki_space(text[pos]):
            start = pos
            pos = skip_whitespace(text, pos)
            spaces += pos - start
        else:
            break
    return WhiteBreaks(pos, breaks, spaces)


def compact(text: str) -> str:
    """Collapse blank runs to one space and keep paragraph breaks.

    A run holding n > 1 line breaks becomes n - 1 newlines; a trailing
    run is dropped.
    """
    parts: list[str] = []
    pos = 0
    length = len(text)
    while pos < length:
        if is_break_space(text[pos]):
            pos, breaks, _ = skip_white_breaks(text, pos)
            if pos < length:
                parts.append("\n" * (breaks - 1) if breaks > 1 else " ")
        else:
            start = pos
            while pos < length and not is_break_space(text[pos]):
                pos += 1
            parts.append(text[start:pos])
    return "".join(parts)