import pytest

from wiktparse.textutils import (
    join_from,
    read_file_to_string,
    read_lines,
    read_lines_to_set,
    save_to_file,
    split,
    split_lines,
    trim,
    trim_left,
    trim_right,
)


def test_trim_left_strips_spaces_and_tabs_only():
    assert trim_left("\t  abc ") == "abc "
    assert trim_left("\nabc") == "\nabc"


def test_trim_right_strips_line_breaks():
    assert trim_right("abc \t\r\n") == "abc"
    assert trim_right(" abc") == " abc"


def test_trim_blank_gives_empty():
    assert trim(" \t\r\n ") == ""
    assert trim("  word  ") == "word"


@pytest.mark.parametrize("text", ["a,b,,c", "a,", ",a", "single"])
def test_split_join_round_trip(text):
    assert ",".join(split(text, ",")) == text


def test_split_keeps_empty_parts():
    assert split("a,b,,c", ",") == ["a", "b", "", "c"]
    assert split("a,", ",") == ["a", ""]


def test_split_empty_text_gives_no_parts():
    assert split("", ",") == []
    assert split_lines("") == []


def test_split_lines_uses_newline():
    assert split_lines("x\ny\n") == ["x", "y", ""]


def test_join_from_skips_leading_parts():
    assert join_from(["a", "b", "c"], 1, "-") == "b-c"
    assert join_from(["a", "b"], 5, "-") == ""


def test_save_and_read_string_round_trip(tmp_path):
    path = tmp_path / "f.txt"
    save_to_file("line one\r\nline two", path)
    assert read_file_to_string(path) == "line one\r\nline two"


def test_save_iterable_writes_one_per_line(tmp_path):
    path = tmp_path / "f.txt"
    save_to_file(["x", "y"], path)
    assert read_lines(path) == ["x", "y"]


def test_read_lines_trims_right(tmp_path):
    path = tmp_path / "f.txt"
    save_to_file("a  \r\nb\n", path)
    assert read_lines(path) == ["a", "b"]


def test_read_lines_missing_file_is_empty(tmp_path):
    assert read_lines(tmp_path / "missing.txt") == []


def test_read_lines_to_set_skips_empty_lines(tmp_path):
    path = tmp_path / "f.txt"
    save_to_file("b\n\na\nb\n", path)
    assert read_lines_to_set(path) == {"a", "b"}


def test_read_lines_to_set_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_lines_to_set(tmp_path / "missing.txt")


def test_read_file_to_string_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_file_to_string(tmp_path / "missing.txt")