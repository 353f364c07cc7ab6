"""Recursive parser for wikitext markup: text, tags, templates, links, headers."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

from .base_parser import BaseParser, StartSpecial
from .header_parser import HeaderParser
from .markup import (
    Markup,
    Markups,
    RichText,
    TagType,
    Template,
    TemplateParameter,
    WikiLink,
)
from .tag_parser import TagParser
from .whitespace import is_wiki_space, skip_white_breaks, skip_whitespace

_KEY_OR_SEPARATOR = re.compile(r"[|{\[=]")
_NEXT_SEPARATOR = re.compile(r"[|{\[]")


class CalledFrom(Enum):
    """Context a markup run is parsed in; it decides where the run stops."""

    TOP = "top"
    UNNAMED_PARAM = "unnamed_param"
    NAMED_PARAM = "named_param"
    WIKI_LINK = "wiki_link"


class MarkupParser(BaseParser):
    """Parses a run of markup into nodes."""

    def _at_stop(self, called_from: CalledFrom) -> bool:
        if called_from is CalledFrom.TOP:
            return False
        closer = "]]" if called_from is CalledFrom.WIKI_LINK else "}}"
        char = self.text[self.pos]
        if self.starts_with(closer) or char == "|":
            return True
        return called_from is CalledFrom.NAMED_PARAM and char == "\n"

    def _parse_special(self) -> Optional[tuple[Markup, int]]:
        special = self.special_at()
        if special is StartSpecial.TAG:
            tag_parser = TagParser(self.text, self.pos)
            tag = tag_parser.parse()
            return None if tag.type is TagType.INVALID else (tag, tag_parser.pos)
        if special is StartSpecial.TEMPLATE:
            template_parser = TemplateParser(self.text, self.pos)
            template = template_parser.parse()
            if template is None or template.invalid:
                return None
            return template, template_parser.pos
        if special is StartSpecial.WIKI_LINK:
            link_parser = WikiLinkParser(self.text, self.pos)
            link = link_parser.parse()
            return None if link is None else (link, link_parser.pos)
        if special is StartSpecial.HEADER:
            header_parser = HeaderParser(self.text, self.pos)
            header = header_parser.parse()
            return None if header.level == 0 else (header, header_parser.pos)
        return None

    def parse(self, called_from: CalledFrom = CalledFrom.TOP) -> Optional[Markup]:
        """Parse until the end of the context; None when nothing was read."""
        text = self.text
        parts: list[Markup] = []
        buffer: list[str] = []

        def flush() -> None:
            if buffer:
                parts.append(RichText("".join(buffer)))
                buffer.clear()

        if called_from is CalledFrom.NAMED_PARAM:
            self.pos = skip_white_breaks(text, self.pos).pos
        while self.pos < len(text):
            if self._at_stop(called_from):
                break
            found = self._parse_special()
            if found is None:
                buffer.append(text[self.pos])
                self.pos += 1
            else:
                flush()
                node, self.pos = found
                parts.append(node)
        flush()
        if not parts:
            return None
        if len(parts) == 1:
            return parts[0]
        return Markups(parts)


class TemplateParser(BaseParser):
    """Parses a template call starting at ``{{``."""

    def parse_name(self) -> Optional[str]:
        """Read the template name; None when the name is malformed."""
        text = self.text
        start = self.pos
        while (
            self.pos < len(text)
            and text[self.pos] not in "|\n"
            and not self.starts_with("}}")
            and not self.starts_with("{{")
        ):
            self.pos += 1
        name = text[start:self.pos]
        if self.pos < len(text) and text[self.pos] == "\n":
            self.pos = skip_white_breaks(text, self.pos).pos
            at_pipe = self.pos < len(text) and text[self.pos] == "|"
            if not at_pipe and not self.starts_with("}}"):
                return None
        if self.starts_with("{{"):
            return None
        return name

    def _parameter_key(self) -> Optional[str]:
        """Read ``key =`` before a named parameter and move past the ``=``."""
        text = self.text
        found = _KEY_OR_SEPARATOR.search(text, self.pos)
        if found is None or found.group() != "=":
            return None
        equals = found.start()
        key_end = equals
        while key_end > 0 and is_wiki_space(text[key_end - 1]):
            key_end -= 1
        key_start = skip_whitespace(text, self.pos)
        self.pos = equals + 1
        return text[key_start:key_end]

    def parse(self) -> Optional[Template]:
        """Parse the template; None when not at ``{{``."""
        if not self.starts_with("{{"):
            return None
        text = self.text
        self.pos = skip_whitespace(text, self.pos + 2)
        template = Template()
        name = self.parse_name()
        if name is None:
            template.invalid = True
            return template
        template.name = name
        while self.pos < len(text):
            self.pos = skip_white_breaks(text, self.pos).pos
            if self.starts_with("}}"):
                self.pos += 2
                break
            if self.pos < len(text) and text[self.pos] == "|":
                self.pos += 1
            key = self._parameter_key()
            parser = MarkupParser(text, self.pos)
            context = CalledFrom.UNNAMED_PARAM if key is None else CalledFrom.NAMED_PARAM
            value = parser.parse(context)
            if value is not None:
                template.parameters.append(TemplateParameter(key, value))
                self.pos = parser.pos
            else:
                separator = _NEXT_SEPARATOR.search(text, self.pos)
                if separator is None:
                    return template
                self.pos = separator.start()
        return template


def _is_ascii_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


class WikiLinkParser(BaseParser):
    """Parses an internal link starting at ``[[``."""

    def parse(self) -> Optional[WikiLink]:
        """Parse the link with its letter suffix; None when not at ``[[``."""
        if not self.starts_with("[["):
            return None
        text = self.text
        self.pos += 2
        link = WikiLink()
        while self.pos + 1 < len(text):
            if self.starts_with("]]"):
                self.pos += 2
                start = self.pos
                while self.pos < len(text) and _is_ascii_letter(text[self.pos]):
                    self.pos += 1
                link.suffix = text[start:self.pos]
                break
            parser = MarkupParser(text, self.pos)
            part = parser.parse(CalledFrom.WIKI_LINK)
            self.pos = parser.pos
            if part is not None:
                link.parts.append(part)
            if self.pos < len(text) and text[self.pos] == "|":
                self.pos += 1
        if link.parts:
            link.target = link.parts[0].dump()
        return link