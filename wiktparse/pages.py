"""Reading page texts out of decompressed dump chunks."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Optional

from .comments import clean_comments as _strip_comments
from .titles import TitleType, get_title_type

_XML_SPACE = " \t\r\n"


class PageXmlError(ValueError):
    """A chunk is not well-formed XML."""


def _node_text(element: Optional[ET.Element]) -> str:
    if element is None or element.text is None:
        return ""
    text = element.text
    return "" if not text.strip(_XML_SPACE) else text


def _pages(chunk: str) -> list[ET.Element]:
    try:
        root = ET.fromstring(f"<mediawiki>\n{chunk}</mediawiki>\n")
    except ET.ParseError as exc:
        raise PageXmlError(f"Error XML parsing: {exc}") from exc
    return root.findall("page")


@dataclass(frozen=True)
class PageXml:
    """Extracts page texts, optionally with comments removed."""

    clean_comments: bool = True

    def _page_text(self, page: ET.Element) -> Optional[str]:
        revision = page.find("revision")
        if revision is None:
            return None
        node = revision.find("text")
        if node is None:
            return None
        text = _node_text(node)
        return _strip_comments(text) if self.clean_comments else text

    def term_from_chunk(self, term: str, chunk: str) -> str:
        """Return the text of the page titled ``term``, or "" if absent.

        Raises PageXmlError when the chunk cannot be parsed.
        """
        for page in _pages(chunk):
            if _node_text(page.find("title")) == term:
                text = self._page_text(page)
                return text if text is not None else ""
        return ""

    def all_from_chunk(self, chunk: str) -> list[tuple[str, str]]:
        """Return ``(title, text)`` of every main, translation or thesaurus page.

        Raises PageXmlError when the chunk cannot be parsed.
        """
        result: list[tuple[str, str]] = []
        for page in _pages(chunk):
            title = _node_text(page.find("title"))
            if get_title_type(title)[0] is TitleType.OTHER:
                continue
            text = self._page_text(page)
            if text is not None:
                result.append((title, text))
        return result