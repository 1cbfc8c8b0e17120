from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


@dataclass(frozen=True)
class SourcePos:
    """Represents a position in the input stream."""
    line: int = 1
    column: int = 1
    name: str = ""

    def update(self, token: str) -> 'SourcePos':
        """Update position based on a single character."""
        if token == '\n':
            return SourcePos(self.line + 1, 1, self.name)
        return SourcePos(self.line, self.column + 1, self.name)

    def __str__(self) -> str:
        return f"{self.name} line {self.line}, column {self.column}"


@dataclass(frozen=True)
class Input:
    """
    Immutable cursor over a string.

    A parser never copies the source: it returns a new cursor whose offset
    has moved forward. The remaining text is only materialised on demand.
    """
    source: str
    offset: int = 0
    name: str = ""

    @classmethod
    def of(cls, value: Union[str, 'Input'], name: str = "") -> 'Input':
        if isinstance(value, Input):
            return value
        if not isinstance(value, str):
            raise TypeError(f"expected str or Input, got {type(value).__name__}")
        return cls(value, 0, name)

    @property
    def rest(self) -> str:
        return self.source[self.offset:]

    @property
    def is_eof(self) -> bool:
        return self.offset >= len(self.source)

    def peek(self) -> str:
        """Return the next character, or '' at end of input."""
        return self.source[self.offset:self.offset + 1]

    def startswith(self, prefix: str) -> bool:
        return self.source.startswith(prefix, self.offset)

    def advance(self, n: int = 1) -> 'Input':
        # Clamped so a remainder never points past the end of the buffer
        return Input(self.source, min(self.offset + n, len(self.source)), self.name)

    @property
    def pos(self) -> SourcePos:
        """Line and column of the cursor, computed from the offset."""
        consumed = self.source[:self.offset]
        line = consumed.count('\n') + 1
        column = self.offset - (consumed.rfind('\n') + 1) + 1
        return SourcePos(line, column, self.name)

    def __len__(self) -> int:
        return len(self.source) - self.offset

    def __str__(self) -> str:
        return self.rest


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse: the unconsumed remainder and the parsed value."""
    remainder: Input
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Error:
    """Failed parse: the input at which matching could not proceed."""
    input: Input

    @property
    def is_ok(self) -> bool:
        return False


ParseResult = Union[Ok[T], Error]


@dataclass(frozen=True)
class ParseError:
    """Human readable description of a failure, produced by run_parser."""
    pos: SourcePos
    message: str

    @classmethod
    def at(cls, failed: Input) -> 'ParseError':
        if failed.is_eof:
            return cls(failed.pos, "unexpected end of input")
        return cls(failed.pos, f"unexpected {failed.peek()!r}")

    def __str__(self) -> str:
        return f"Parse error at {self.pos}: {self.message}"


class Parser(Generic[T]):
    """A parser wraps a function Input -> ParseResult[T]."""
    def __init__(self, parse_fn: Callable[[Input], ParseResult[T]]):
        if not callable(parse_fn):
            raise TypeError(f"parser must be callable, got {type(parse_fn).__name__}")
        self.parse_fn = parse_fn

    def parse(self, input: Union[str, Input]) -> ParseResult[T]:
        return self.parse_fn(Input.of(input))

    def __call__(self, input: Union[str, Input]) -> ParseResult[T]:
        return self.parse(input)

    # Operators delegate to Combinators, imported lazily (it imports Parser).
    # Binary operators take Parser operands only; wrap plain functions with identity()

    # Functor map (<$>)
    def map(self, f: Callable[[T], U]) -> 'Parser[U]':
        from .Combinators import map
        return map(self, f)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], Callable[[Input], ParseResult[U]]]) -> 'Parser[U]':
        from .Combinators import and_then
        return and_then(self, f)

    def __rshift__(self, f: Callable[[T], Callable[[Input], ParseResult[U]]]) -> 'Parser[U]':
        return self.bind(f)

    def pred(self, predicate: Callable[[T], bool]) -> 'Parser[T]':
        from .Combinators import pred
        return pred(self, predicate)

    # Sequence (&)
    def __and__(self, other: 'Parser[U]') -> 'Parser[Tuple[T, U]]':
        if not isinstance(other, Parser):
            return NotImplemented
        from .Combinators import pair
        return pair(self, other)

    # Sequence (<*)
    def __lt__(self, other: 'Parser[Any]') -> 'Parser[T]':
        if not isinstance(other, Parser):
            return NotImplemented
        from .Combinators import left
        return left(self, other)

    # Sequence (*>)
    def __gt__(self, other: 'Parser[U]') -> 'Parser[U]':
        if not isinstance(other, Parser):
            return NotImplemented
        from .Combinators import right
        return right(self, other)

    # Alternative (<|>)
    def __or__(self, other: 'Parser[T]') -> 'Parser[T]':
        if not isinstance(other, Parser):
            return NotImplemented
        from .Combinators import either
        return either(self, other)
