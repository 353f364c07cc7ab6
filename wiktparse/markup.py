"""Parsed wikitext nodes: plain text, tags, headers, templates and links."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .whitespace import compact


class Markup(ABC):
    """A node of parsed wikitext."""

    @abstractmethod
    def dump(self) -> str:
        """Return the node as wikitext."""

    @abstractmethod
    def raw_text(self) -> str:
        """Return the text the node shows, blanks kept as they are."""

    def display_text(self) -> str:
        """Return the shown text with blank runs collapsed."""
        return compact(self.raw_text())


@dataclass
class RichText(Markup):
    """Plain text without markup of its own."""

    text: str

    def dump(self) -> str:
        return self.text

    def raw_text(self) -> str:
        return self.text


@dataclass
class Markups(Markup):
    """A sequence of nodes."""

    parts: list[Markup] = field(default_factory=list)

    def dump(self) -> str:
        return "".join(part.dump() for part in self.parts)

    def raw_text(self) -> str:
        return "".join(part.raw_text() for part in self.parts)


class TagType(Enum):
    """Kind of an HTML-like tag."""

    OPEN = "open"
    CLOSE = "close"
    SELF_CLOSING = "self_closing"
    INVALID = "invalid"


@dataclass
class Tag(Markup):
    """An HTML-like tag such as ``<b>``, ``</b>`` or ``<br />``."""

    type: TagType = TagType.OPEN
    name: str = ""
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def dump(self) -> str:
        slash = "/" if self.type is TagType.CLOSE else ""
        tail = " /" if self.type is TagType.SELF_CLOSING else ""
        return f"<{slash}{self.name}{tail}>"

    def raw_text(self) -> str:
        return ""

    def matches_close(self, close_tag: Tag) -> bool:
        """True when ``close_tag`` closes this open tag."""
        return (
            self.type is TagType.OPEN
            and close_tag.type is TagType.CLOSE
            and self.name == close_tag.name
        )


@dataclass
class TaggedContent(Markup):
    """Content enclosed by an opening tag and an optional closing tag."""

    open_tag: Tag
    content: Markup
    close_tag: Optional[Tag] = None

    def dump(self) -> str:
        closing = self.close_tag.dump() if self.close_tag is not None else ""
        return self.open_tag.dump() + self.content.dump() + closing

    def raw_text(self) -> str:
        return self.content.raw_text()


@dataclass
class Header(Markup):
    """A section header such as ``==Noun==``."""

    name: str = ""
    level: int = 0

    def dump(self) -> str:
        equals = "=" * self.level
        return f"{equals}{self.name}{equals}"

    def raw_text(self) -> str:
        return self.name


@dataclass
class TemplateParameter:
    """A template argument; ``name`` is None for a positional one."""

    name: Optional[str]
    value: Markup

    def dump(self) -> str:
        prefix = f"{self.name}=" if self.name is not None else ""
        return f"|{prefix}{self.value.dump()}"

    def name_len(self) -> int:
        """Length of the name, 0 for a positional parameter."""
        return len(self.name) if self.name is not None else 0

    def print_align(self, name_field: int) -> str:
        """Return the parameter with its name padded to ``name_field`` columns."""
        if self.name is None:
            return f"|{self.value.dump()}"
        padding = " " * max(0, name_field - len(self.name))
        return f"| {self.name}{padding}= {self.value.dump()}"


@dataclass
class Template(Markup):
    """A template call such as ``{{name|arg|key=value}}``."""

    name: str = ""
    parameters: list[TemplateParameter] = field(default_factory=list)
    invalid: bool = False

    def _dumped_parameters(self) -> str:
        return "".join(parameter.dump() for parameter in self.parameters)

    def dump(self) -> str:
        return "{{" + self.name + self._dumped_parameters() + "}}"

    def format_str(self) -> str:
        """Return the call with one parameter per line and aligned ``=`` signs."""
        width = max((p.name_len() for p in self.parameters), default=0) + 1
        lines = ["{{" + self.name]
        lines.extend(parameter.print_align(width) for parameter in self.parameters)
        lines.append("}}")
        return "\n".join(lines)

    def raw_text(self) -> str:
        return self.name + self._dumped_parameters()


@dataclass
class WikiLink(Markup):
    """An internal link such as ``[[target|label]]suffix``."""

    parts: list[Markup] = field(default_factory=list)
    suffix: str = ""
    target: str = ""

    def dump(self) -> str:
        inner = "|".join(part.dump() for part in self.parts)
        return f"[[{inner}]]{self.suffix}"

    def raw_text(self) -> str:
        label = self.parts[-1].dump() if self.parts else ""
        return label + self.suffix