"""Position-based scanning shared by the wikitext parsers."""

from __future__ import annotations

from enum import Enum

from .whitespace import is_break, is_wiki_space


class StartSpecial(Enum):
    """What kind of markup may start at a position."""

    TAG = "tag"
    TEMPLATE = "template"
    WIKI_LINK = "wiki_link"
    EXTERNAL_LINK = "external_link"
    HEADER = "header"
    OTHER = "other"


class BaseParser:
    """Holds the text and the current position of a parser."""

    def __init__(self, text: str, pos: int) -> None:
        self.text = text
        self.pos = pos

    def starts_with(self, prefix: str) -> bool:
        """True when the text at the current position begins with ``prefix``."""
        return self.text.startswith(prefix, self.pos)

    def trimmed_eol_pos(self) -> int:
        """End of the current line, before any trailing blanks."""
        breaks = [
            found
            for found in (self.text.find("\r", self.pos), self.text.find("\n", self.pos))
            if found != -1
        ]
        end = min(breaks, default=len(self.text))
        while end > self.pos and is_wiki_space(self.text[end - 1]):
            end -= 1
        return end

    def special_at(self) -> StartSpecial:
        """Classify the markup that may start at the current position."""
        if self.pos >= len(self.text):
            return StartSpecial.OTHER
        char = self.text[self.pos]
        if char == "<":
            return StartSpecial.TAG
        if char == "{":
            return StartSpecial.TEMPLATE if self.starts_with("{{") else StartSpecial.OTHER
        if char == "=":
            if self.pos == 0 or is_break(self.text[self.pos - 1]):
                return StartSpecial.HEADER
            return StartSpecial.OTHER
        if char == "[":
            if self.starts_with("[["):
                return StartSpecial.WIKI_LINK
            return StartSpecial.EXTERNAL_LINK
        return StartSpecial.OTHER