# Core
from .Parsec import Parser, Input, Ok, Error, ParseResult, ParseError, SourcePos
from .Prim import (
    parser, identity, pure, fail, run_parser, parse_test,
    take_first_char, match_literal, identifier
)

# Combinators
from .Combinators import (
    pair, map, left, right, and_then, pred,
    either, choice, zero_or_more, one_or_more, optional, between, eof,
    parser_trace, parser_traced
)

# Characters
from .Char import (
    satisfy, char, any_char, letter, alpha_num, digit,
    whitespace_char, space0, space1, quoted_string
)

# Tag grammar
from .Xml import Element, tag_opener, attribute_pair, attributes, element_start, single_element
