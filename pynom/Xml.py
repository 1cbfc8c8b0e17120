"""
A small XML-like tag grammar built only from the primitives and combinators.

Covers identifiers, double-quoted attributes and self-closing tags such as
<div class="float"/>. Nested elements, text content, comments, CDATA,
entities and namespaces are not parsed.
"""
from dataclasses import dataclass, field
from typing import List, Tuple

from .Parsec import Parser
from .Prim import match_literal, identifier
from .Char import space0, space1, quoted_string
from .Combinators import pair, left, right, zero_or_more, map


@dataclass
class Element:
    name: str
    attributes: List[Tuple[str, str]] = field(default_factory=list)
    children: List['Element'] = field(default_factory=list)


# '<' followed by the tag name
tag_opener: Parser[str] = right(match_literal("<"), identifier)

# name="value"
attribute_pair: Parser[Tuple[str, str]] = pair(identifier, right(match_literal("="), quoted_string()))

# Each attribute is preceded by at least one whitespace character
attributes: Parser[List[Tuple[str, str]]] = zero_or_more(right(space1(), attribute_pair))

# '<' name attributes, without the closing part of the tag
element_start: Parser[Tuple[str, List[Tuple[str, str]]]] = right(match_literal("<"), pair(identifier, attributes))

single_element: Parser[Element] = map(
    left(element_start, right(space0(), match_literal("/>"))),
    lambda start: Element(start[0], start[1], []),
)
