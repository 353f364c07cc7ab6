"""Classification of page titles."""

from __future__ import annotations

from enum import Enum


class TitleType(Enum):
    """Kind of page a title names."""

    MAIN = "main"
    TRANSLATIONS = "translations"
    THESAURUS = "thesaurus"
    OTHER = "other"


def is_clear(text: str) -> bool:
    """True when ``text`` holds neither ``/`` nor ``:``."""
    return "/" not in text and ":" not in text


def get_title_type(title: str) -> tuple[TitleType, str]:
    """Return the kind of the title and the term it belongs to."""
    if is_clear(title):
        return TitleType.MAIN, title
    pos = title.find("/translations")
    if pos != -1:
        head, tail = title[:pos], title[pos + 1:]
        if is_clear(head) and is_clear(tail):
            return TitleType.TRANSLATIONS, head
        return TitleType.OTHER, title
    head, sep, tail = title.partition(":")
    if sep:
        if head == "Thesaurus" and is_clear(tail):
            return TitleType.THESAURUS, tail
        return TitleType.OTHER, title
    return TitleType.OTHER, title