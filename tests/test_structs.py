import io

from wiktparse.structs import MAX_LIST_SIZE, LimitedListMap


def test_values_are_capped():
    lists = LimitedListMap()
    for value in range(MAX_LIST_SIZE + 5):
        lists.add("k", value)
    assert lists["k"] == list(range(MAX_LIST_SIZE))


def test_keys_are_independent():
    lists = LimitedListMap()
    lists.add("a", 1)
    lists.add("b", 2)
    assert len(lists) == 2
    assert lists["a"] == [1]


def test_write_format():
    lists = LimitedListMap()
    lists.add("b", "z")
    lists.add("a", "x")
    lists.add("a", "y")
    out = io.StringIO()
    lists.write(out)
    assert out.getvalue() == "a||x,y,\nb||z,\n"


def test_write_capped_line_has_max_items():
    lists = LimitedListMap()
    for value in range(MAX_LIST_SIZE * 2):
        lists.add("key", value)
    out = io.StringIO()
    lists.write(out)
    assert out.getvalue().count(",") == MAX_LIST_SIZE