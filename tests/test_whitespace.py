import pytest

from wiktparse.whitespace import (
    compact,
    is_break,
    is_break_space,
    is_wiki_space,
    skip_line_breaks,
    skip_white_breaks,
    skip_whitespace,
)


@pytest.mark.parametrize("char", [" ", "\t", "\f", "\v"])
def test_wiki_spaces(char):
    assert is_wiki_space(char)
    assert is_break_space(char)
    assert not is_break(char)


@pytest.mark.parametrize("char", ["\r", "\n"])
def test_breaks(char):
    assert is_break(char)
    assert is_break_space(char)
    assert not is_wiki_space(char)


def test_letter_is_not_space():
    assert not is_break_space("a")


def test_skip_whitespace_stops_at_text():
    text = "ab \t\fcd"
    assert skip_whitespace(text, 2) == text.index("c")
    assert skip_whitespace(text, 0) == 0


def test_skip_whitespace_does_not_cross_break():
    assert skip_whitespace(" \n", 0) == 1


def test_crlf_pairs_count_once():
    text = "\r\n\r\nx"
    assert skip_line_breaks(text, 0) == (4, 2)


def test_plain_newlines_count_each():
    text = "\n\n\nx"
    assert skip_line_breaks(text, 0) == (3, 3)


def test_skip_white_breaks_counts_both():
    text = " \n  \nx"
    result = skip_white_breaks(text, 0)
    assert result.pos == text.index("x")
    assert result.breaks == 2
    assert result.spaces == 3


def test_compact_collapses_spaces():
    assert compact("a  \t b") == "a b"


def test_compact_keeps_paragraphs():
    assert compact("a\n\n\nb") == "a\n\nb"
    assert compact("a\nb") == "a b"


def test_compact_drops_trailing_run():
    assert compact("word \n\n") == "word"


def test_compact_has_no_double_spaces():
    result = compact("  x   y \t z  \n w ")
    assert "  " not in result
    assert not result.endswith(" ")