"""Repetition and the combinators derived from it.

``many`` is the only combinator that loops. ``optional``, ``sep_by`` and
``take_mid`` are compositions of the basic combinators and ``many``.
"""

from typing import Any

from sigmaparser.core.parser import Parser
from sigmaparser.core.result import Result, Span, Success
from sigmaparser.parsers.primitives import nothing

from .basic import choice, map_, sequence

__all__ = ["many", "optional", "sep_by", "take_mid"]


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more repetitions; never fails.

    Stops at the first child failure (which is discarded), at the end of the
    source, or when the child succeeds without consuming anything. A
    zero-width success is not added to the values, so ``many(nothing())``
    yields ``[]`` instead of looping forever.

    Args:
        parser: Child parser

    Returns:
        Parser yielding the list of child values (possibly empty)

    Example:
        >>> from sigmaparser.parsers import string
        >>> many(string("ab")).parse("ababx", 0)
        Success(pos=4, span=(0, 4), value=['ab', 'ab'])
    """

    def parse(source: str, pos: int) -> Result[list[T]]:
        values: list[T] = []
        next_pos = pos
        end = len(source)
        while next_pos < end:
            result = parser.parse(source, next_pos)
            if not result.is_ok or result.pos == next_pos:
                break
            values.append(result.value)
            next_pos = result.pos
        return Success(next_pos, (pos, next_pos), values)

    return Parser(parse, name="many")


def optional[T](parser: Parser[T]) -> Parser[T | None]:
    """Match ``parser`` or nothing; yields None when absent."""
    return choice(parser, nothing())


def sep_by[T](item: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """Zero or more ``item`` separated by ``separator``.

    A failing first item is not an error: the result is an empty list with a
    zero-width span. Callers that need at least one item must check the
    list themselves. Separator values are discarded. A separator that is not
    followed by an item is left unconsumed.

    Args:
        item: Element parser
        separator: Separator parser

    Returns:
        Parser yielding the list of item values
    """
    tail = many(sequence(separator, item))

    def parse(source: str, pos: int) -> Result[list[T]]:
        head = item.parse(source, pos)
        if not head.is_ok:
            return Success(pos, (pos, pos), [])
        rest = tail.parse(source, head.pos)
        values = [head.value]
        values.extend(value for _, value in rest.value)
        return Success(rest.pos, (pos, rest.pos), values)

    return Parser(parse, name="sep_by")


def _middle(values: list[Any], span: Span) -> Any:
    return values[1]


def take_mid[T](
    open_: Parser[Any], middle: Parser[T], close: Parser[Any]
) -> Parser[T]:
    """Sequence three parsers and keep only the middle value.

    Example:
        >>> from sigmaparser.parsers import integer, string
        >>> take_mid(string("("), integer(), string(")")).parse("(42)", 0).value
        42
    """
    return map_(sequence(open_, middle, close), _middle)
