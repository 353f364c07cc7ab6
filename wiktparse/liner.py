"""Line readers over text files and buffered (for example bz2) streams."""

from __future__ import annotations

import bz2
import os
import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import BinaryIO, Optional, TextIO, Union

DEFAULT_BUFFER_LENGTH = 512 * 1024

_EOL = re.compile(rb"\r\n|[\r\n]")


class Liner(ABC):
    """Something that hands out one line at a time."""

    @abstractmethod
    def getline(self) -> Optional[str]:
        """Return the next line without its line break, or None at the end."""

    def close(self) -> None:
        """Release what the liner holds; nothing by default."""

    def __iter__(self) -> Iterator[str]:
        while (line := self.getline()) is not None:
            yield line

    def __enter__(self) -> "Liner":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class BufferedLiner(Liner):
    """Splits a stream of byte blocks into lines.

    A line ends at ``\\n``, ``\\r`` or ``\\r\\n``; a last line without a
    line break is returned too. Lines are decoded as UTF-8.
    """

    def __init__(self, buf_len: int) -> None:
        if buf_len <= 0:
            raise ValueError("buffer length must be positive")
        self.buf_len = buf_len
        self._buffer = b""
        self._start = 0
        self._eof = False

    @abstractmethod
    def read_buffer(self) -> bytes:
        """Return the next block of at most ``buf_len`` bytes; empty at the end."""

    def _fill(self) -> None:
        data = self.read_buffer()
        if not data:
            self._eof = True
        self._buffer = self._buffer[self._start:] + data
        self._start = 0

    @staticmethod
    def _decode(raw: bytes) -> str:
        return raw.decode("utf-8", errors="replace")

    def getline(self) -> Optional[str]:
        while True:
            match = _EOL.search(self._buffer, self._start)
            # A lone CR at the end of the buffer may be the first half of CRLF.
            pending_cr = (
                match is not None
                and match.group() == b"\r"
                and match.end() == len(self._buffer)
                and not self._eof
            )
            if match is not None and not pending_cr:
                line = self._buffer[self._start:match.start()]
                self._start = match.end()
                return self._decode(line)
            if self._eof:
                if self._start < len(self._buffer):
                    line = self._buffer[self._start:]
                    self._start = len(self._buffer)
                    return self._decode(line)
                return None
            self._fill()


class Bz2Liner(BufferedLiner):
    """Reads lines from a bz2-compressed file.

    ``source`` is either a path, opened here and closed by ``close``, or an
    already open binary stream that yields the decompressed bytes.
    """

    def __init__(
        self,
        source: Union[str, "os.PathLike[str]", BinaryIO],
        buf_len: int = DEFAULT_BUFFER_LENGTH,
    ) -> None:
        super().__init__(buf_len)
        if isinstance(source, (str, os.PathLike)):
            self._stream: BinaryIO = bz2.open(source, "rb")
            self._owned = True
        else:
            self._stream = source
            self._owned = False

    def read_buffer(self) -> bytes:
        return self._stream.read(self.buf_len)

    def close(self) -> None:
        if self._owned:
            self._stream.close()
            self._owned = False


class TextLiner(Liner):
    """Reads lines from an open text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def getline(self) -> Optional[str]:
        line = self._stream.readline()
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line