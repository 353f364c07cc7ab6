"""The multistream index of a dump: page titles and chunk offsets."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .chunker import IndexChunk, WikiChunker
from .liner import Bz2Liner
from .wikiname import WikiName


@dataclass
class IndexedObject:
    """A page and the number of the chunk holding it; -1 when not indexed."""

    id: int
    title: str
    chunk_index: int


def _dump_size(path: str) -> int:
    try:
        return os.path.getsize(path)
    except OSError:
        return 0


class Index:
    """Reads the index of the dump named by ``wiki_name``.

    ``read_index`` loads the whole index into ``object_map`` and
    ``index_vec`` (chunk start offsets followed by the end offset of the
    last chunk); ``open`` and ``get_chunk`` stream it chunk by chunk.
    """

    def __init__(self, wiki_name: WikiName) -> None:
        self.wiki_name = wiki_name
        self.object_map: dict[str, IndexedObject] = {}
        self.index_vec: list[int] = []
        self._liner: Optional[Bz2Liner] = None
        self._chunker: Optional[WikiChunker] = None

    def read_index(self) -> None:
        """Load all titles and chunk offsets; raises OSError if unreadable."""
        object_map: dict[str, IndexedObject] = {}
        offsets: list[int] = []
        end = 0
        eos_pos = _dump_size(self.wiki_name.wiki_path)
        with Bz2Liner(self.wiki_name.index_path) as liner:
            for chunk in WikiChunker(liner, eos_pos):
                offsets.append(chunk.start_pos)
                number = len(offsets) - 1
                for elem in chunk.elems:
                    object_map[elem.title] = IndexedObject(elem.id, elem.title, number)
                end = chunk.end_pos
        offsets.append(end)
        self.object_map = object_map
        self.index_vec = offsets

    def open(self) -> None:
        """Start streaming chunks; raises RuntimeError if already open."""
        if self._liner is not None:
            raise RuntimeError("index is already open")
        liner = Bz2Liner(self.wiki_name.index_path)
        self._liner = liner
        self._chunker = WikiChunker(liner, _dump_size(self.wiki_name.wiki_path))

    def close(self) -> None:
        """Stop streaming chunks."""
        self._chunker = None
        if self._liner is not None:
            self._liner.close()
            self._liner = None

    def get_chunk(self) -> Optional[IndexChunk]:
        """Return the next chunk of an open index, or None at the end."""
        if self._chunker is None:
            raise RuntimeError("index is not open")
        return self._chunker.get_chunk()

    def get_indexed_object(self, term: str) -> IndexedObject:
        """Return the entry for ``term``, with chunk index -1 when it is absent."""
        found = self.object_map.get(term)
        if found is not None:
            return found
        return IndexedObject(0, term, -1)

    def __len__(self) -> int:
        return max(0, len(self.index_vec) - 1)

    def __enter__(self) -> "Index":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()