"""Parse result types.

Every parser returns a :data:`Result`: either a :class:`Success` carrying the
semantic value, or a :class:`Failure` carrying a label of what was expected.
Both record the span the attempt covered and the offset where the next parser
should resume.

Design:
    - Sum type of two frozen dataclasses, so a Failure has no value and a
      Success has no expected label
    - ``is_ok`` is a class-level constant for cheap tag dispatch
    - Combinators build new results from child fields; results are never
      mutated after construction

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import ClassVar, Literal

__all__ = ["Failure", "Result", "Span", "Success"]

type Span = tuple[int, int]
"""Half-open ``(start, end)`` offset range into the source."""


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful match.

    Attributes:
        pos: Offset immediately after the match (always ``span[1]``)
        span: Region of the source the match covers
        value: Semantic payload produced by the parser

    Example:
        >>> result = Success(pos=3, span=(0, 3), value="foo")
        >>> result.is_ok
        True
        >>> result.value
        'foo'
    """

    is_ok: ClassVar[Literal[True]] = True

    pos: int
    span: Span
    value: T


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed match.

    ``pos`` is how far the attempt got before failing. Ordered choice uses it
    to pick the most informative failure among its alternatives.

    Attributes:
        pos: Offset reached by the failed attempt (``>= span[0]``)
        span: Region of the source the attempt examined (may be zero-width)
        expected: Human-readable label of what was being looked for

    Example:
        >>> result = Failure(pos=2, span=(0, 2), expected="foo")
        >>> result.is_ok
        False
    """

    is_ok: ClassVar[Literal[False]] = False

    pos: int
    span: Span
    expected: str


type Result[T] = Success[T] | Failure
