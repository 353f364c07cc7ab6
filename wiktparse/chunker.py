"""Groups multistream index lines into compressed chunks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

from .liner import Liner


@dataclass
class IndexElem:
    """A page of a chunk: its id and title."""

    id: int
    title: str


@dataclass
class IndexLine:
    """One parsed line ``offset:id:title`` of a multistream index."""

    start_pos: int = 0
    id: int = 0
    title: str = ""

    def elem(self) -> IndexElem:
        """Return the page part of the line."""
        return IndexElem(self.id, self.title)


@dataclass
class IndexChunk:
    """Pages stored in one compressed stream between two file offsets."""

    start_pos: int = 0
    end_pos: int = 0
    elems: list[IndexElem] = field(default_factory=list)


def parse_index_line(line: str) -> IndexLine:
    """Parse ``offset:id:title``; the title may hold further colons.

    Raises ValueError for a malformed line.
    """
    parts = line.split(":", 2)
    if len(parts) != 3:
        raise ValueError(f"malformed index line: {line!r}")
    start, page_id, title = parts
    return IndexLine(int(start), int(page_id), title)


class WikiChunker:
    """Reads index lines and yields one chunk per distinct stream offset.

    ``eos_pos`` is the end offset of the last chunk, usually the size of
    the compressed dump.
    """

    def __init__(self, liner: Liner, eos_pos: int) -> None:
        self._liner = liner
        self._eos_pos = eos_pos
        self._eos = False
        self._current: Optional[IndexLine] = None

    def get_chunk(self) -> Optional[IndexChunk]:
        """Return the next chunk, or None when the index is exhausted."""
        if self._eos:
            return None
        if self._current is None:
            line = self._liner.getline()
            if line is None:
                self._eos = True
                return None
            self._current = parse_index_line(line)
        chunk = IndexChunk(start_pos=self._current.start_pos, elems=[self._current.elem()])
        while (line := self._liner.getline()) is not None:
            ahead = parse_index_line(line)
            if ahead.start_pos == self._current.start_pos:
                chunk.elems.append(ahead.elem())
            else:
                self._current = ahead
                chunk.end_pos = ahead.start_pos
                return chunk
        self._eos = True
        chunk.end_pos = self._eos_pos
        return chunk

    def __iter__(self) -> Iterator[IndexChunk]:
        while (chunk := self.get_chunk()) is not None:
            yield chunk