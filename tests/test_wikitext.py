from wiktparse.wikitext import WikiFragment, WikiGroup


def test_fragment_renders_its_text():
    fragment = WikiFragment("some text", False)
    assert fragment.render() == "some text"
    assert str(fragment) == "some text"


def test_group_concatenates_parts():
    group = WikiGroup([WikiFragment("a", True), WikiFragment("b", False)])
    assert group.render() == "a" + "b"


def test_nested_groups():
    inner = WikiGroup([WikiFragment("x", True), WikiFragment("y", True)])
    outer = WikiGroup([inner, WikiFragment("z", False)])
    assert outer.render() == inner.render() + "z"


def test_empty_group_is_empty():
    assert WikiGroup().render() == ""