"""Known HTML-like tags and how their content is rendered."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from .markup import Tag

KNOWN_TAGS = frozenset(
    {
        "nowiki", "abbr", "b", "bdi", "bdo", "big", "blockquote", "br",
        "caption", "center", "cite", "code", "col", "colgroup", "data", "dd",
        "del", "dfn", "div", "dl", "dt", "em", "font", "h1", "h2", "h3", "h4",
        "h5", "h6", "hr", "i", "ins", "kbd", "li", "link", "mark", "meta",
        "ol", "p", "pre", "q", "rb", "rp", "rt", "ruby", "s", "samp", "small",
        "span", "strike", "strong", "sub", "sup", "table", "td", "th", "time",
        "tr", "tt", "u", "ul", "var", "wbr",
    }
)


@dataclass(frozen=True)
class TagHandler:
    """Renders the content of a tag; by default the content is kept as is."""

    name: str
    self_closing_only: ClassVar[bool] = False

    def process(self, tag: Tag, content: str) -> str:
        """Return the text shown for ``content`` inside ``tag``."""
        return content


@dataclass(frozen=True)
class BrHandler(TagHandler):
    """Line break: always self-closing, renders as a newline."""

    name: str = "br"
    self_closing_only: ClassVar[bool] = True

    def process(self, tag: Tag, content: str) -> str:
        return content + "\n"


_SPECIAL_HANDLERS: dict[str, type[TagHandler]] = {"br": BrHandler}


def is_known_tag(name: str) -> bool:
    """True when ``name`` is a tag the parser recognises."""
    return name in KNOWN_TAGS


def create_handler(name: str) -> Optional[TagHandler]:
    """Return a handler for a known tag, or None for an unknown one."""
    if name not in KNOWN_TAGS:
        return None
    special = _SPECIAL_HANDLERS.get(name)
    return special() if special is not None else TagHandler(name)