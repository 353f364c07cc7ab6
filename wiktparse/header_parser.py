"""Parser for section headers such as ``==Noun==``."""

from __future__ import annotations

from .base_parser import BaseParser
from .markup import Header
from .whitespace import is_break


class HeaderParser(BaseParser):
    """Parses a header line; a level of 0 means no header was found."""

    def parse(self) -> Header:
        """Parse the header at the current position.

        On success the position moves to the end of the line, before any
        trailing blanks.
        """
        header = Header()
        text = self.text
        start = self.pos
        if start >= len(text) or text[start] != "=":
            return header
        if start > 0 and not is_break(text[start - 1]):
            return header

        end = self.trimmed_eol_pos()
        line = text[start:end]
        count_left = len(line) - len(line.lstrip("="))
        count_right = len(line) - len(line.rstrip("="))
        line_len = len(line)
        if count_left + count_right < line_len:
            header.level = min(count_left, count_right)
            header.name = line[header.level:line_len - header.level]
        else:
            if line_len < 3:
                return header
            header.name = "=" if line_len % 2 else "=="
            header.level = (line_len - len(header.name)) // 2
        self.pos = end
        return header