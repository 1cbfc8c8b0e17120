import logging
from typing import Any, Callable, Optional, Tuple, Union

from .Parsec import Input, Parser, ParseError, ParseResult, Ok, Error, T

logger = logging.getLogger(__name__)


def parser(parse_fn: Callable[[Input], ParseResult[T]]) -> Parser[T]:
    """Decorator turning a hand-written parse function into a Parser."""
    return Parser(parse_fn)


def identity(p: Callable[[Input], ParseResult[T]]) -> Parser[T]:
    """
    Wrap anything parser-shaped into a Parser without changing its behaviour.

    This is how combinators accept plain functions and Parser instances alike.
    """
    if not callable(p):
        raise TypeError(f"expected a parser, got {type(p).__name__}")
    if isinstance(p, Parser):
        return Parser(p.parse)
    return Parser(lambda input: p(input))


def pure(value: T) -> Parser[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(input: Input) -> ParseResult[T]:
        return Ok(input, value)
    return Parser(parse)


def fail() -> Parser[Any]:
    """A parser that always fails at its input."""
    def parse(input: Input) -> ParseResult[Any]:
        return Error(input)
    return Parser(parse)


@parser
def take_first_char(input: Input) -> ParseResult[str]:
    """Consume exactly one character."""
    if input.is_eof:
        return Error(input)
    return Ok(input.advance(1), input.peek())


def match_literal(expected: str) -> Parser[None]:
    """
    Match a fixed string at the front of the input.

    The matched text is discarded, so the value is always None: this is meant
    for delimiters such as '<' or '/>'.
    """
    if not isinstance(expected, str):
        raise TypeError(f"literal must be str, got {type(expected).__name__}")

    def parse(input: Input) -> ParseResult[None]:
        if input.startswith(expected):
            return Ok(input.advance(len(expected)), None)
        return Error(input)
    return Parser(parse)


@parser
def identifier(input: Input) -> ParseResult[str]:
    """
    A letter followed by any number of letters, digits or dashes.

    Scans the underlying buffer by index; only the matched name is copied.
    """
    # ''.isalpha() is False, so end of input fails here too
    if not input.peek().isalpha():
        return Error(input)

    source = input.source
    end = input.offset + 1
    while end < len(source) and (source[end].isalnum() or source[end] == '-'):
        end += 1

    return Ok(input.advance(end - input.offset), source[input.offset:end])


def run_parser(p: Callable[[Input], ParseResult[T]],
               input_str: Union[str, Input],
               source_name: str = "") -> Tuple[Optional[T], Optional[ParseError]]:
    """
    Run a parser and convert the outcome into (value, error).

    Leftover input is not an error; end a grammar with eof() to require it.
    A non-empty source_name also renames an Input passed in.
    """
    input = Input.of(input_str, source_name)
    if source_name and input.name != source_name:
        input = Input(input.source, input.offset, source_name)
    result = identity(p)(input)
    if isinstance(result, Error):
        err = ParseError.at(result.input)
        logger.debug("%s", err)
        return None, err
    return result.value, None


def parse_test(p: Callable[[Input], ParseResult[Any]], input: str) -> None:
    """Test a parser and print the result."""
    value, err = run_parser(p, input)
    if err:
        print(err)
    else:
        print(value)
