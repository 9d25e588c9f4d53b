"""Transform, sequence and ordered choice.

These three combinators carry all of the engine's failure policy:

- ``map_`` never touches a failure
- ``sequence`` returns its first failing child's result verbatim
- ``choice`` returns the first success, or else the furthest failure
"""

from collections.abc import Callable
from typing import Any

from sigmaparser.core.parser import Parser
from sigmaparser.core.result import Result, Span, Success
from sigmaparser.diagnostics.templates import ErrorTemplate

__all__ = ["choice", "map_", "sequence"]


def map_[T, U](parser: Parser[T], fn: Callable[[T, Span], U]) -> Parser[U]:
    """Transform a successful value.

    ``fn`` receives the child's value and span. ``pos`` and ``span`` of the
    result are those of the child. Failures pass through unchanged and ``fn``
    is not called.

    Args:
        parser: Child parser
        fn: Pure function ``(value, span) -> new value``

    Returns:
        Parser yielding ``fn(value, span)``

    Example:
        >>> from sigmaparser.parsers import string
        >>> upper = map_(string("ab"), lambda value, span: value.upper())
        >>> upper.parse("ab", 0).value
        'AB'
    """

    def parse(source: str, pos: int) -> Result[U]:
        result = parser.parse(source, pos)
        if not result.is_ok:
            return result
        return Success(result.pos, result.span, fn(result.value, result.span))

    return Parser(parse, name=parser.name)


def sequence(*parsers: Parser[Any]) -> Parser[list[Any]]:
    """Run parsers one after another.

    The value is the list of child values in order. The span runs from the
    starting offset to where the last child stopped. The first child failure
    is returned as-is, so callers can see which sub-parser failed and where.

    Args:
        *parsers: At least one parser

    Returns:
        Parser yielding a list of child values

    Raises:
        ValueError: If no parsers are given
    """
    if not parsers:
        raise ValueError(ErrorTemplate.empty_combinator("sequence"))

    def parse(source: str, pos: int) -> Result[list[Any]]:
        values: list[Any] = []
        next_pos = pos
        for parser in parsers:
            result = parser.parse(source, next_pos)
            if not result.is_ok:
                return result
            values.append(result.value)
            next_pos = result.pos
        return Success(next_pos, (pos, next_pos), values)

    return Parser(parse, name="sequence")


def choice(*parsers: Parser[Any]) -> Parser[Any]:
    """Ordered choice with furthest-failure reporting.

    Every alternative starts at the same offset. The first success is
    returned immediately. If all alternatives fail, the failure with the
    greatest ``pos`` is returned; on a tie the earliest alternative wins.

    Args:
        *parsers: At least one alternative, in priority order

    Returns:
        Parser yielding the winning alternative's value

    Raises:
        ValueError: If no parsers are given

    Example:
        >>> from sigmaparser.parsers import string
        >>> ab = choice(string("abc"), string("x"))
        >>> ab.parse("abd", 0)
        Failure(pos=3, span=(0, 3), expected='abc')
    """
    if not parsers:
        raise ValueError(ErrorTemplate.empty_combinator("choice"))

    first, *rest = parsers

    def parse(source: str, pos: int) -> Result[Any]:
        furthest = first.parse(source, pos)
        if furthest.is_ok:
            return furthest
        for parser in rest:
            result = parser.parse(source, pos)
            if result.is_ok:
                return result
            # Strict comparison: ties keep the earlier failure
            if furthest.pos < result.pos:
                furthest = result
        return furthest

    return Parser(parse, name="choice")
