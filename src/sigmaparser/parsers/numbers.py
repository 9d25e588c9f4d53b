"""Numeric literal parsers.

Both parsers match a fixed lexical pattern and convert the matched text. The
pattern already constrains the shape, so conversion cannot fail.

Note the integer pattern forbids leading zeros: on ``"-042"`` it matches only
``"-0"`` and stops at offset 2.
"""

from collections.abc import Callable

from sigmaparser.constants import (
    FLOAT_LABEL,
    FLOAT_PATTERN,
    INTEGER_LABEL,
    INTEGER_PATTERN,
)
from sigmaparser.core.parser import Parser
from sigmaparser.core.result import Result, Success

from .primitives import regexp

__all__ = ["float_", "integer"]


def _converted[N](lexeme: Parser[str], convert: Callable[[str], N], name: str) -> Parser[N]:
    def parse(source: str, pos: int) -> Result[N]:
        result = lexeme.parse(source, pos)
        if not result.is_ok:
            return result
        return Success(result.pos, result.span, convert(result.value))

    return Parser(parse, name=name)


def integer() -> Parser[int]:
    """Match ``-?(0|[1-9][0-9]*)`` and yield an int.

    Example:
        >>> integer().parse("-042", 0)
        Success(pos=2, span=(0, 2), value=0)
    """
    return _converted(regexp(INTEGER_PATTERN, INTEGER_LABEL), int, INTEGER_LABEL)


def float_() -> Parser[float]:
    """Match ``-?[0-9]+\\.[0-9]+`` and yield a float.

    Named with a trailing underscore to avoid shadowing the builtin.
    """
    return _converted(regexp(FLOAT_PATTERN, FLOAT_LABEL), float, FLOAT_LABEL)
