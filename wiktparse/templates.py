"""Extraction of top-level template calls from page text."""

from __future__ import annotations

from .comments import clean_comments
from .textutils import PathLike, read_file_to_string


def extract_templates(text: str) -> list[str]:
    """Return every outermost ``{{...}}`` call; unclosed ones are dropped."""
    templates: list[str] = []
    pos = text.find("{{")
    while pos != -1:
        start = pos
        depth = 1
        pos += 2
        closed = False
        while pos < len(text):
            if text.startswith("{{", pos):
                depth += 1
                pos += 2
            elif text.startswith("}}", pos):
                depth -= 1
                pos += 2
                if depth == 0:
                    templates.append(text[start:pos])
                    closed = True
                    break
            else:
                pos += 1
        if not closed:
            break
        pos = text.find("{{", pos)
    return templates


def extract_templates_from_file(path: PathLike) -> list[str]:
    """Read a file, drop its comments and return its template calls."""
    return extract_templates(clean_comments(read_file_to_string(path)))