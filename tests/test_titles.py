import pytest

from wiktparse.titles import TitleType, get_title_type, is_clear


@pytest.mark.parametrize("text,expected", [("word", True), ("a/b", False), ("a:b", False)])
def test_is_clear(text, expected):
    assert is_clear(text) is expected


def test_main_title():
    assert get_title_type("house") == (TitleType.MAIN, "house")


def test_translations_title():
    assert get_title_type("house/translations") == (TitleType.TRANSLATIONS, "house")


def test_translations_with_extra_part_is_other():
    title = "house/translations/extra"
    assert get_title_type(title) == (TitleType.OTHER, title)


def test_thesaurus_title():
    assert get_title_type("Thesaurus:house") == (TitleType.THESAURUS, "house")


@pytest.mark.parametrize("title", ["Category:Nouns", "Thesaurus:a/b", "a/b"])
def test_other_titles_keep_full_title(title):
    assert get_title_type(title) == (TitleType.OTHER, title)