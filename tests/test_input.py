import pytest
from hypothesis import given
from hypothesis import strategies as st

from pynom.Parsec import Input, ParseError, SourcePos


def slow_reference_pos(text, name=""):
    curr = SourcePos(1, 1, name)
    for char in text:
        curr = curr.update(char)
    return curr


@given(st.text(), st.integers(min_value=0, max_value=200))
def test_pos_matches_reference(text, offset):
    offset = min(offset, len(text))
    expected = slow_reference_pos(text[:offset], "test")
    assert Input(text, offset, "test").pos == expected


def test_pos_after_newline(initial_input):
    inp = initial_input("<a>\n  <b/>").advance(6)
    assert inp.pos == SourcePos(2, 3, "test")
    assert str(inp.pos) == "test line 2, column 3"


def test_advance_is_immutable():
    inp = Input.of("hello")
    nxt = inp.advance(2)
    assert inp.rest == "hello"
    assert nxt.rest == "llo"
    assert nxt.source is inp.source


def test_advance_clamps_at_end():
    inp = Input.of("hi").advance(10)
    assert inp.is_eof
    assert inp.offset == 2
    assert inp.peek() == ""
    assert len(inp) == 0


def test_of_passes_input_through():
    inp = Input("abc", 1)
    assert Input.of(inp) is inp
    assert str(inp) == "bc"


def test_of_rejects_bytes():
    with pytest.raises(TypeError):
        Input.of(b"abc")


def test_startswith_respects_offset():
    inp = Input("<name>", 1)
    assert inp.startswith("name")
    assert not inp.startswith("<")


def test_parse_error_messages():
    assert ParseError.at(Input("ab", 1)).message == "unexpected 'b'"
    assert ParseError.at(Input("ab", 2)).message == "unexpected end of input"
