import pytest

from bear_skin.services.attributes import (
    add_class, class_list, clean_css_identifier, html_class, join_classes, render_attributes,
)


@pytest.mark.parametrize("value,expected", [
    ("page_1", "page-1"),
    ("Hello World", "Hello-World"),
    ("edit[title]", "edit-title"),
    ("a/b!c", "a-bc"),
    ("café", "café"),
])
def test_clean_css_identifier(value, expected):
    assert clean_css_identifier(value) == expected


def test_html_class_lowercases():
    assert html_class("Section/News Item") == "section-news-item"


def test_class_list():
    assert class_list(None) == []
    assert class_list("a  b") == ["a", "b"]
    assert class_list(("a", "b")) == ["a", "b"]


def test_add_class_normalises_string():
    attrs = {"class": "one"}
    assert add_class(attrs, "two", "")["class"] == ["one", "two"]


def test_render_attributes():
    html = render_attributes({"class": ["a", "b"], "title": None, "hidden": True, "open": False, "role": "list"})
    assert html == ' class="a b" role="list" hidden'


def test_render_attributes_escapes():
    assert render_attributes({"title": '"x"'}) == ' title="&quot;x&quot;"'


def test_join_classes():
    assert join_classes(["a", "", "b"]) == "a b"
