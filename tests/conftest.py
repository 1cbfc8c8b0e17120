# tests/conftest.py
import pytest

from pynom.Parsec import Error, Input, Ok, ParseResult


def assert_result_eq(res1: ParseResult, res2: ParseResult):
    """
    Deep comparison of two ParseResults.
    """
    if isinstance(res1, Ok):
        assert isinstance(res2, Ok), "Result mismatch: Ok vs Error"
        assert res1.value == res2.value
        assert res1.remainder.offset == res2.remainder.offset
        assert res1.remainder.rest == res2.remainder.rest
    else:
        assert isinstance(res2, Error), "Result mismatch: Error vs Ok"
        assert res1.input.offset == res2.input.offset
        assert res1.input.rest == res2.input.rest


@pytest.fixture
def initial_input():
    def _make(text):
        return Input(text, 0, "test")

    return _make


@pytest.fixture(scope="session")
def result_eq():
    return assert_result_eq
