"""Parser for HTML-like tags inside wikitext."""

from __future__ import annotations

from .base_parser import BaseParser
from .markup import Tag, TagType
from .tags import is_known_tag
from .whitespace import skip_whitespace

_NAME_PUNCTUATION = frozenset(":-_")
_UNQUOTED_STOP = frozenset(" \t\n\v\f\r/>")
_QUOTES = frozenset("\"'")


def _is_name_char(char: str) -> bool:
    return (char.isascii() and char.isalnum()) or char in _NAME_PUNCTUATION


class TagParser(BaseParser):
    """Parses one tag starting at a ``<``; ``pos`` ends after the tag."""

    def parse_name(self) -> str:
        """Read a tag or attribute name at the current position."""
        start = self.pos
        while self.pos < len(self.text) and _is_name_char(self.text[self.pos]):
            self.pos += 1
        return self.text[start:self.pos]

    def parse_attr_value(self) -> str:
        """Read an attribute value; the current position is at the ``=``."""
        text = self.text
        self.pos = skip_whitespace(text, self.pos + 1)
        if self.pos < len(text) and text[self.pos] in _QUOTES:
            quote = text[self.pos]
            start = self.pos + 1
            end = text.find(quote, start)
            if end == -1:
                self.pos = len(text)
                return text[start:]
            self.pos = end + 1
            return text[start:end]
        start = self.pos
        while self.pos < len(text) and text[self.pos] not in _UNQUOTED_STOP:
            self.pos += 1
        return text[start:self.pos]

    def _invalid(self, tag: Tag, start: int) -> Tag:
        tag.type = TagType.INVALID
        self.pos = start + 1
        return tag

    def parse(self) -> Tag:
        """Parse the tag; an unknown or broken tag comes back as INVALID.

        For an invalid tag the position is left just after the ``<``.
        Raises ValueError when the current position is not at a ``<``.
        """
        text = self.text
        if self.pos >= len(text) or text[self.pos] != "<":
            raise ValueError("tag must start with '<'")
        start = self.pos
        self.pos += 1
        tag = Tag(TagType.OPEN)
        if self.pos < len(text) and text[self.pos] == "/":
            tag.type = TagType.CLOSE
            self.pos += 1
        tag.name = self.parse_name()
        if not tag.name or not is_known_tag(tag.name):
            return self._invalid(tag, start)

        while self.pos < len(text):
            self.pos = skip_whitespace(text, self.pos)
            while self.pos < len(text) and not _is_name_char(text[self.pos]):
                char = text[self.pos]
                if text.startswith("/>", self.pos):
                    if tag.type is TagType.OPEN:
                        tag.type = TagType.SELF_CLOSING
                    self.pos += 2
                    return tag
                if char == ">":
                    self.pos += 1
                    return tag
                if char == "<":
                    return self._invalid(tag, start)
                self.pos += 1
            name = self.parse_name()
            self.pos = skip_whitespace(text, self.pos)
            value = ""
            if self.pos < len(text) and text[self.pos] == "=":
                value = self.parse_attr_value()
            tag.attributes.append((name, value))

        return self._invalid(tag, start)