"""Leaf parsers: literal, pattern, empty and whitespace matches.

Pattern matching goes through ``re.Pattern.match(source, pos)``, which anchors
at ``pos`` without touching any shared cursor. A primitive instance can
therefore be reused across grammars and reentered freely.
"""

import re

from sigmaparser.constants import WHITESPACE_LABEL, WHITESPACE_PATTERN
from sigmaparser.core.parser import Parser
from sigmaparser.core.result import Failure, Result, Success

__all__ = ["nothing", "regexp", "string", "whitespace"]


def string(expected: str) -> Parser[str]:
    """Match an exact literal.

    On failure the span covers the characters that were compared (clamped to
    the end of the source and never before ``pos``), and ``pos`` is the end of
    that span.

    Args:
        expected: Literal text to match

    Returns:
        Parser yielding ``expected`` itself

    Example:
        >>> string("foo").parse("foobar", 0)
        Success(pos=3, span=(0, 3), value='foo')
        >>> string("foo").parse("fo", 0)
        Failure(pos=2, span=(0, 2), expected='foo')
    """
    length = len(expected)

    def parse(source: str, pos: int) -> Result[str]:
        next_pos = max(pos, min(pos + length, len(source)))
        span = (pos, next_pos)
        if source[pos:next_pos] == expected:
            return Success(next_pos, span, expected)
        return Failure(next_pos, span, expected)

    return Parser(parse, name=repr(expected))


def regexp(pattern: str | re.Pattern[str], expected: str) -> Parser[str]:
    """Match a regular expression anchored at the current position.

    A match that would start later than ``pos`` is never accepted.

    Args:
        pattern: Pattern source or compiled pattern
        expected: Label reported on failure

    Returns:
        Parser yielding the matched text verbatim

    Example:
        >>> regexp(r"[a-z]+", "word").parse("  abc", 2)
        Success(pos=5, span=(2, 5), value='abc')
        >>> regexp(r"[a-z]+", "word").parse("  abc", 0)
        Failure(pos=0, span=(0, 0), expected='word')
    """
    compiled = re.compile(pattern)

    def parse(source: str, pos: int) -> Result[str]:
        match = compiled.match(source, pos)
        if match is None:
            return Failure(pos, (pos, pos), expected)
        end = match.end()
        return Success(end, (pos, end), match.group())

    return Parser(parse, name=expected)


def _parse_nothing(source: str, pos: int) -> Result[None]:
    return Success(pos, (pos, pos), None)


def nothing() -> Parser[None]:
    """Always succeed without consuming input, yielding None."""
    return Parser(_parse_nothing, name="nothing")


def whitespace() -> Parser[str]:
    """Match one or more whitespace characters."""
    return regexp(WHITESPACE_PATTERN, WHITESPACE_LABEL)
