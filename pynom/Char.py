from typing import Callable, List

from .Parsec import Parser
from .Prim import take_first_char
from .Combinators import pred, left, right, zero_or_more, one_or_more, map

# Core function: Succeeds if the character satisfies a predicate
def satisfy(f: Callable[[str], bool]) -> Parser[str]:
    """Succeeds for any character where f returns True. Returns the parsed character."""
    return pred(take_first_char, f)

# Helper function: Parses a single character
def char(c: str) -> Parser[str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c)

# 1. anyChar: Parses any character
def any_char() -> Parser[str]:
    return take_first_char

# 2. letter: Parses an alphabetic character
def letter() -> Parser[str]:
    """Parses an alphabetic character and returns it."""
    return satisfy(str.isalpha)

# 3. alphaNum: Parses an alphanumeric character
def alpha_num() -> Parser[str]:
    """Parses an alphabetic or numeric character and returns it."""
    return satisfy(str.isalnum)

# 4. digit: Parses a digit
def digit() -> Parser[str]:
    return satisfy(str.isdigit)

# 5. whitespaceChar: Parses a single whitespace character
def whitespace_char() -> Parser[str]:
    return satisfy(str.isspace)

# 6. space0: Zero or more whitespace characters
def space0() -> Parser[List[str]]:
    return zero_or_more(whitespace_char())

# 7. space1: One or more whitespace characters
def space1() -> Parser[List[str]]:
    return one_or_more(whitespace_char())

# 8. quotedString: Text between double quotes, without escapes
def quoted_string() -> Parser[str]:
    """
    Parses '"..."' and returns the text between the quotes. A missing
    closing quote fails at the end of input.
    """
    body = zero_or_more(satisfy(lambda c: c != '"'))
    return map(right(char('"'), left(body, char('"'))), ''.join)
