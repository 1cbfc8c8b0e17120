from pynom.Parsec import Error
from pynom.Prim import run_parser
from pynom.Xml import (
    Element,
    attribute_pair,
    attributes,
    element_start,
    single_element,
    tag_opener,
)


def test_tag_opener():
    res = tag_opener("<hello/>")
    assert res.value == "hello"
    assert res.remainder.rest == "/>"

    res = tag_opener("<!hello/>")
    assert isinstance(res, Error)
    assert res.input.rest == "!hello/>"


def test_attribute_pair():
    res = attribute_pair('one="1"')
    assert res.value == ("one", "1")
    assert res.remainder.rest == ""


def test_attributes():
    res = attributes(' one="1" two="2"')
    assert res.value == [("one", "1"), ("two", "2")]
    assert res.remainder.rest == ""


def test_attributes_keep_duplicates_in_order():
    res = attributes(' a="1" a="2"')
    assert res.value == [("a", "1"), ("a", "2")]


def test_element_start():
    res = element_start('<div class="float" id="x">')
    assert res.value == ("div", [("class", "float"), ("id", "x")])
    assert res.remainder.rest == ">"


def test_single_element():
    value, err = run_parser(single_element, '<div class="float"/>')
    assert err is None
    assert value == Element("div", [("class", "float")], [])


def test_single_element_allows_space_before_close():
    value, err = run_parser(single_element, "<br />")
    assert err is None
    assert value == Element("br")


def test_single_element_rejects_open_tag():
    value, err = run_parser(single_element, '<div class="float">')
    assert value is None
    assert err.message == "unexpected '>'"
