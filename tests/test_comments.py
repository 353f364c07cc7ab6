import pytest

from wiktparse.comments import clean_comments, preparse
from wiktparse.wikitext import WikiFragment, WikiGroup


@pytest.mark.parametrize("text", ["", "plain text", "a -- > b", "x\ny"])
def test_clean_without_markers_is_identity(text):
    assert clean_comments(text) == text


def test_clean_removes_inline_comment():
    assert clean_comments("a<!-- note -->b") == "a" + "b"


def test_comment_alone_on_line_takes_newline():
    assert clean_comments("x\n<!-- c -->\ny") == "x\ny"


def test_comment_after_text_keeps_newline():
    assert clean_comments("x <!-- c -->\ny") == "x \ny"


def test_unclosed_comment_drops_rest():
    assert clean_comments("abc<!-- never closed") == "abc"


def test_nowiki_protects_comment_markers():
    assert clean_comments("<nowiki><!-- kept --></nowiki>") == "<!-- kept -->"


def test_unclosed_nowiki_is_left_alone():
    text = "a<nowiki>b"
    assert clean_comments(text) == text


def test_cleaned_text_has_no_comment_markers():
    result = clean_comments("a<!-- 1 -->b<!-- 2 -->c<!--3-->")
    assert "<!--" not in result
    assert "-->" not in result


def test_preparse_empty_is_none():
    assert preparse("") is None


def test_preparse_whole_comment_is_none():
    assert preparse("<!-- only -->") is None


def test_preparse_plain_is_single_active_fragment():
    assert preparse("plain") == WikiFragment("plain", True)


def test_preparse_nowiki_splits_fragments():
    result = preparse("a<nowiki>''b''</nowiki>c")
    assert isinstance(result, WikiGroup)
    assert [(part.text, part.is_active) for part in result.parts] == [
        ("a", True),
        ("''b''", False),
        ("c", True),
    ]


def test_preparse_keeps_newline_after_lone_comment():
    result = preparse("x\n<!-- c -->\ny")
    assert result.render() == "x\n\ny"


def test_preparse_render_matches_clean_for_inline_comments():
    text = "one<!-- a -->two<nowiki>[[x]]</nowiki>three"
    assert preparse(text).render() == clean_comments(text)