"""Removal of HTML comments and splitting around nowiki sections."""

from __future__ import annotations

from typing import Optional

from .wikitext import WikiFragment, WikiGroup, WikiText

_OPEN_COMMENT = "<!--"
_CLOSE_COMMENT = "-->"
_OPEN_NOWIKI = "<nowiki>"
_CLOSE_NOWIKI = "</nowiki>"
_MARKERS = (_OPEN_COMMENT, _CLOSE_COMMENT, _OPEN_NOWIKI, _CLOSE_NOWIKI)

_Marker = tuple[int, str]
_Segment = tuple[int, int, bool]


def _marker_positions(text: str) -> list[_Marker]:
    found: list[_Marker] = []
    for marker in _MARKERS:
        pos = text.find(marker)
        while pos != -1:
            found.append((pos, marker))
            pos = text.find(marker, pos + 1)
    found.sort(key=lambda item: item[0])
    return found


def _find_marker(markers: list[_Marker], marker: str, start: int) -> int:
    return next(
        (index for index, (_, name) in enumerate(markers[start:], start) if name == marker),
        len(markers),
    )


def _comment_alone_on_line(text: str, start: int, end: int) -> bool:
    line_start = text.rfind("\n", 0, start) + 1
    newline = text.find("\n", end)
    line_end = len(text) if newline == -1 else newline + 1
    before = text[line_start:start]
    after = text[end:line_end]
    return all(c in " \t" for c in before) and all(c in " \t\n" for c in after)


def _segments(text: str, markers: list[_Marker], drop_lone_newline: bool) -> list[_Segment]:
    """Split ``text`` into kept segments, flagging nowiki content as inactive."""
    segments: list[_Segment] = []
    count = len(markers)
    length = len(text)
    index = 0
    start = 0
    while index < count:
        pos, marker = markers[index]
        if marker == _OPEN_NOWIKI:
            closing = _find_marker(markers, _CLOSE_NOWIKI, index + 1)
            if closing < count:
                if pos > start:
                    segments.append((start, pos, True))
                close_pos = markers[closing][0]
                segments.append((pos + len(_OPEN_NOWIKI), close_pos, False))
                start = close_pos + len(_CLOSE_NOWIKI)
                index = closing + 1
            else:
                index += 1
        elif marker == _OPEN_COMMENT:
            if pos > start:
                segments.append((start, pos, True))
            closing = _find_marker(markers, _CLOSE_COMMENT, index + 1)
            if closing < count:
                end = markers[closing][0] + len(_CLOSE_COMMENT)
                if (
                    drop_lone_newline
                    and end < length
                    and text[end] == "\n"
                    and _comment_alone_on_line(text, pos, end)
                ):
                    end += 1
                start = end
            else:
                start = length
            if closing >= count - 1:
                break
            index = closing + 1
        else:
            index += 1
    if length > start:
        segments.append((start, length, True))
    return segments


def clean_comments(text: str) -> str:
    """Remove comments and nowiki tags, keeping nowiki content.

    A comment alone on its line takes its line break with it.
    """
    segments = _segments(text, _marker_positions(text), drop_lone_newline=True)
    return "".join(text[begin:end] for begin, end, _ in segments)


def preparse(text: str) -> Optional[WikiText]:
    """Drop comments and split the text into active and nowiki fragments.

    Returns None for no content, a single fragment, or a group of them.
    """
    segments = _segments(text, _marker_positions(text), drop_lone_newline=False)
    parts: list[WikiText] = [
        WikiFragment(text[begin:end], active) for begin, end, active in segments
    ]
    if not parts:
        return None
    if len(parts) == 1:
        return parts[0]
    return WikiGroup(parts)