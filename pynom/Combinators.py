import logging
from typing import Any, Callable, List, Optional, Tuple

from .Parsec import Input, Parser, ParseResult, Ok, Error, T, U
from .Prim import identity, pure, fail

logger = logging.getLogger(__name__)

ParserLike = Callable[[Input], ParseResult[Any]]


# 1. pair: Runs two parsers in sequence and keeps both values
def pair(parser1: ParserLike, parser2: ParserLike) -> Parser[Tuple[Any, Any]]:
    """
    Runs parser1, then parser2 on the remainder, returning both values.

    A failure of either parser is returned untouched. There is no rollback:
    when parser2 fails, its failure position is reported even though parser1
    already consumed input.
    """
    p1, p2 = identity(parser1), identity(parser2)

    def parse(input: Input) -> ParseResult[Tuple[Any, Any]]:
        result1 = p1(input)
        if isinstance(result1, Error):
            return result1

        result2 = p2(result1.remainder)
        if isinstance(result2, Error):
            return result2

        return Ok(result2.remainder, (result1.value, result2.value))
    return Parser(parse)


# 2. map: Transforms the value of a successful parse
def map(parser: Callable[[Input], ParseResult[T]], map_fn: Callable[[T], U]) -> Parser[U]:
    """
    Applies map_fn to the parsed value. The remainder and failures pass
    through unchanged.
    """
    p = identity(parser)

    def parse(input: Input) -> ParseResult[U]:
        result = p(input)
        if isinstance(result, Error):
            return result
        return Ok(result.remainder, map_fn(result.value))
    return Parser(parse)


# 3. left: Sequence keeping the first value (<*)
def left(parser1: Callable[[Input], ParseResult[T]], parser2: ParserLike) -> Parser[T]:
    return map(pair(parser1, parser2), lambda values: values[0])


# 4. right: Sequence keeping the second value (*>)
def right(parser1: ParserLike, parser2: Callable[[Input], ParseResult[U]]) -> Parser[U]:
    return map(pair(parser1, parser2), lambda values: values[1])


# 5. and_then: Monadic bind, the next parser depends on the parsed value
def and_then(parser: Callable[[Input], ParseResult[T]],
             f: Callable[[T], Callable[[Input], ParseResult[U]]]) -> Parser[U]:
    p = identity(parser)

    def parse(input: Input) -> ParseResult[U]:
        result = p(input)
        if isinstance(result, Error):
            return result
        return identity(f(result.value))(result.remainder)
    return Parser(parse)


# 6. pred: Succeeds only if the parsed value satisfies a predicate
def pred(parser: Callable[[Input], ParseResult[T]], predicate: Callable[[T], bool]) -> Parser[T]:
    """
    Runs parser and checks its value. A rejected value fails at the entry
    input, so nothing appears consumed.
    """
    p = identity(parser)

    def parse(input: Input) -> ParseResult[T]:
        result = p(input)
        if isinstance(result, Error):
            return result
        if predicate(result.value):
            return result
        return Error(input)
    return Parser(parse)


# 7. either: Tries the first parser, then the second on the same input (<|>)
def either(parser1: Callable[[Input], ParseResult[T]],
           parser2: Callable[[Input], ParseResult[T]]) -> Parser[T]:
    """
    Both branches start from the same input. When both fail, the failure
    of parser2 is returned.
    """
    p1, p2 = identity(parser1), identity(parser2)

    def parse(input: Input) -> ParseResult[T]:
        result = p1(input)
        if isinstance(result, Ok):
            return result
        return p2(input)
    return Parser(parse)


# 8. choice: Tries parsers in order until one succeeds
def choice(parsers: List[Callable[[Input], ParseResult[T]]]) -> Parser[T]:
    if not parsers:
        return fail()
    result = identity(parsers[0])
    for p in parsers[1:]:
        result = either(result, p)
    return result


# 9. zero_or_more: Applies a parser until it fails
def zero_or_more(parser: Callable[[Input], ParseResult[T]]) -> Parser[List[T]]:
    """
    Collects the values of repeated applications of parser.

    Iterative, so long inputs do not grow the call stack. A parser that
    succeeds without consuming input would repeat forever; that is reported
    as a failure at the entry input instead.
    """
    p = identity(parser)

    def parse(input: Input) -> ParseResult[List[T]]:
        values: List[T] = []
        current = input
        while True:
            result = p(current)
            if isinstance(result, Error):
                return Ok(current, values)
            if result.remainder.offset == current.offset:
                logger.warning("zero_or_more: parser succeeded without consuming input at %s", current.pos)
                return Error(input)
            values.append(result.value)
            current = result.remainder
    return Parser(parse)


# 10. one_or_more: Applies a parser at least once
def one_or_more(parser: Callable[[Input], ParseResult[T]]) -> Parser[List[T]]:
    return map(pair(parser, zero_or_more(parser)), lambda values: [values[0]] + values[1])


# 11. optional: Returns None instead of failing
def optional(parser: Callable[[Input], ParseResult[T]]) -> Parser[Optional[T]]:
    return either(parser, pure(None))


# 12. between: Parses open, p and close, returning the value of p
def between(open: ParserLike, close: ParserLike, p: Callable[[Input], ParseResult[T]]) -> Parser[T]:
    return right(open, left(p, close))


# 13. eof: Succeeds only at the end of input
def eof() -> Parser[None]:
    def parse(input: Input) -> ParseResult[None]:
        if input.is_eof:
            return Ok(input, None)
        return Error(input)
    return Parser(parse)


# 14. parserTrace: Debugging parser that logs the remaining input
def parser_trace(label_str: str) -> Parser[None]:
    def parse(input: Input) -> ParseResult[None]:
        # Input.pos scans the consumed text, so only compute it when logged
        if logger.isEnabledFor(logging.DEBUG):
            preview = input.source[input.offset:input.offset + 30]
            more = '...' if len(input) > 30 else ''
            logger.debug('%s: "%s%s" at %s', label_str, preview, more, input.pos)
        return Ok(input, None)
    return Parser(parse)


# 15. parserTraced: Logs entry to a parser and how it finished
def parser_traced(label_str: str, parser: Callable[[Input], ParseResult[T]]) -> Parser[T]:
    enter = right(parser_trace(label_str), parser)

    def parse(input: Input) -> ParseResult[T]:
        result = enter(input)
        if not logger.isEnabledFor(logging.DEBUG):
            return result
        if isinstance(result, Error):
            logger.debug("%s failed at %s", label_str, result.input.pos)
        else:
            logger.debug("%s succeeded, stopped at %s", label_str, result.remainder.pos)
        return result
    return Parser(parse)
