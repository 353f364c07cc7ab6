"""Text split into active wikitext and literal (nowiki) fragments."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class WikiText(ABC):
    """A piece of page text."""

    @abstractmethod
    def render(self) -> str:
        """Return the text this piece stands for."""

    def __str__(self) -> str:
        return self.render()


@dataclass
class WikiFragment(WikiText):
    """A run of text; inactive fragments are not to be parsed as markup."""

    text: str
    is_active: bool

    def render(self) -> str:
        return self.text


@dataclass
class WikiGroup(WikiText):
    """A sequence of pieces rendered one after another."""

    parts: list[WikiText] = field(default_factory=list)

    def render(self) -> str:
        return "".join(part.render() for part in self.parts)