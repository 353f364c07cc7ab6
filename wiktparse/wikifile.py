"""Random access to the compressed chunks of a multistream dump."""

from __future__ import annotations

import bz2
import os
from typing import BinaryIO, Optional

from .chunker import IndexChunk
from .index import Index
from .pages import PageXml


class WikiFile:
    """The dump file behind an ``Index``; chunks are read by offset."""

    def __init__(self, index: Index) -> None:
        self.index = index
        self.wiki_name = index.wiki_name
        self.size = 0
        self._file: Optional[BinaryIO] = None

    def open(self) -> None:
        """Open the dump file and record its size; raises OSError on failure."""
        handle = open(self.wiki_name.wiki_path, "rb")
        handle.seek(0, os.SEEK_END)
        self.size = handle.tell()
        handle.seek(0)
        self._file = handle

    def close(self) -> None:
        """Close the dump file if open."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def _handle(self) -> BinaryIO:
        if self._file is None:
            raise RuntimeError("wiki file is not open")
        return self._file

    def decompress_chunk(self, start: int, length: int) -> str:
        """Decompress ``length`` bytes starting at offset ``start``."""
        handle = self._handle()
        handle.seek(start)
        data = handle.read(length)
        return bz2.decompress(data).decode("utf-8", errors="replace")

    def decompress_index_chunk(self, chunk: IndexChunk) -> str:
        """Decompress the chunk described by an index chunk."""
        return self.decompress_chunk(chunk.start_pos, chunk.end_pos - chunk.start_pos)

    def decompress_chunk_by_index(self, n: int) -> str:
        """Decompress the ``n``-th chunk of the loaded index."""
        offsets = self.index.index_vec
        return self.decompress_chunk(offsets[n], offsets[n + 1] - offsets[n])

    def file_pos(self) -> int:
        """Current offset in the dump file."""
        return self._handle().tell()

    def extract_term(self, term: str) -> str:
        """Return the text of the page titled ``term``, or "" if not indexed."""
        found = self.index.get_indexed_object(term)
        if found.chunk_index < 0:
            return ""
        chunk = self.decompress_chunk_by_index(found.chunk_index)
        return PageXml().term_from_chunk(term, chunk)

    def __enter__(self) -> "WikiFile":
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()