import pytest

from wiktparse.markup import (
    Header,
    Markups,
    RichText,
    Tag,
    TaggedContent,
    TagType,
    Template,
    TemplateParameter,
    WikiLink,
)
from wiktparse.whitespace import compact


def test_rich_text_dump_and_raw_are_text():
    node = RichText("some  text")
    assert node.dump() == "some  text"
    assert node.raw_text() == "some  text"


def test_display_text_is_compacted_raw_text():
    node = RichText("a  \n b\n\n\nc ")
    assert node.display_text() == compact(node.raw_text())
    assert node.display_text() == "a b\n\nc"


def test_markups_concatenate_parts():
    group = Markups([RichText("ab"), Tag(TagType.OPEN, "b"), RichText("cd")])
    assert group.dump() == "ab" + "<b>" + "cd"
    assert group.raw_text() == "abcd"


def test_empty_markups():
    assert Markups().dump() == ""
    assert Markups().raw_text() == ""


@pytest.mark.parametrize(
    "kind, expected",
    [
        (TagType.OPEN, "<br>"),
        (TagType.CLOSE, "</br>"),
        (TagType.SELF_CLOSING, "<br />"),
    ],
)
def test_tag_dump(kind, expected):
    assert Tag(kind, "br").dump() == expected


def test_tag_raw_text_is_empty():
    assert Tag(TagType.OPEN, "span", [("class", "x")]).raw_text() == ""


def test_tag_matches_close():
    open_tag = Tag(TagType.OPEN, "b")
    assert open_tag.matches_close(Tag(TagType.CLOSE, "b")) is True
    assert open_tag.matches_close(Tag(TagType.CLOSE, "i")) is False
    assert open_tag.matches_close(Tag(TagType.OPEN, "b")) is False
    assert Tag(TagType.SELF_CLOSING, "b").matches_close(Tag(TagType.CLOSE, "b")) is False


def test_tagged_content_with_close():
    node = TaggedContent(
        Tag(TagType.OPEN, "b"),
        Markups([RichText("bold")]),
        Tag(TagType.CLOSE, "b"),
    )
    assert node.dump() == "<b>bold</b>"
    assert node.raw_text() == "bold"


def test_tagged_content_without_close():
    content = Markups([RichText("x")])
    node = TaggedContent(Tag(TagType.OPEN, "i"), content)
    assert node.dump() == Tag(TagType.OPEN, "i").dump() + content.dump()


def test_header_dump_and_raw():
    header = Header("Noun", 3)
    assert header.dump() == "===Noun==="
    assert header.raw_text() == "Noun"
    assert header.dump().strip("=") == header.raw_text()


def test_header_level_zero_dumps_name():
    assert Header("plain", 0).dump() == "plain"


def test_parameter_dump():
    named = TemplateParameter("lang", RichText("en"))
    positional = TemplateParameter(None, RichText("word"))
    assert named.dump() == "|lang=en"
    assert positional.dump() == "|word"
    assert named.name_len() == len("lang")
    assert positional.name_len() == 0


def test_parameter_print_align_pads_name():
    parameter = TemplateParameter("a", RichText("x"))
    assert parameter.print_align(2) == "| a = x"
    assert TemplateParameter(None, RichText("y")).print_align(5) == "|y"


def _template():
    return Template(
        "t",
        [
            TemplateParameter("a", RichText("x")),
            TemplateParameter(None, RichText("y")),
            TemplateParameter("long", RichText("z")),
        ],
    )


def test_template_dump_and_raw():
    template = _template()
    assert template.dump() == "{{t|a=x|y|long=z}}"
    assert template.dump()[2:-2] == template.raw_text()


def test_template_format_str_aligns_equals():
    lines = _template().format_str().split("\n")
    assert lines[0] == "{{t"
    assert lines[-1] == "}}"
    assert len(lines) == 5
    named = [line for line in lines[1:-1] if "=" in line]
    assert len(named) == 2
    assert len({line.index("=") for line in named}) == 1


def test_template_without_parameters():
    template = Template("stub")
    assert template.dump() == "{{stub}}"
    assert template.format_str() == "{{stub\n}}"


def test_wikilink_dump_and_raw():
    link = WikiLink([RichText("cat"), RichText("kitty")], "s", "cat")
    assert link.dump() == "[[cat|kitty]]s"
    assert link.raw_text() == "kitty" + "s"


def test_wikilink_single_part_raw_is_target():
    link = WikiLink([RichText("dog")], "", "dog")
    assert link.raw_text() == link.target