"""The Parser capability.

Every primitive and combinator is a :class:`Parser` wrapping one parse
function ``(source, pos) -> Result``. There is no subclass per combinator:
behavior lives entirely in the wrapped closure.

The parse function sits in a slot so the grammar builder can swap it on a
placeholder after sibling rules have already captured the placeholder object.
Combinators capture Parser objects, never their functions, which is what
makes that late swap visible everywhere.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable

from .result import Result

__all__ = ["ParseFn", "Parser"]

type ParseFn[T] = Callable[[str, int], Result[T]]


class Parser[T]:
    """A value that can attempt a match against a source at an offset.

    Example:
        >>> from sigmaparser.core.result import Success
        >>> always = Parser(lambda source, pos: Success(pos, (pos, pos), None))
        >>> always.parse("abc", 1)
        Success(pos=1, span=(1, 1), value=None)
    """

    __slots__ = ("_parse_fn", "name")

    def __init__(self, parse_fn: ParseFn[T], name: str | None = None) -> None:
        """Wrap a parse function.

        Args:
            parse_fn: Function implementing the match
            name: Optional label used by repr() (rule name for grammar rules)
        """
        self._parse_fn = parse_fn
        self.name = name

    def parse(self, source: str, pos: int) -> Result[T]:
        """Attempt a match at ``pos``.

        Args:
            source: Full input text
            pos: Offset to start matching at

        Returns:
            Success or Failure
        """
        return self._parse_fn(source, pos)

    @property
    def parse_fn(self) -> ParseFn[T]:
        """The currently installed parse function."""
        return self._parse_fn

    def install(self, parse_fn: ParseFn[T]) -> None:
        """Replace the parse function in place.

        Used only by the grammar builder to patch rule placeholders. Object
        identity is preserved, so every combinator that already holds this
        parser sees the new behavior.

        Args:
            parse_fn: The resolved parse function
        """
        self._parse_fn = parse_fn

    def __repr__(self) -> str:
        if self.name is None:
            return f"<Parser at {id(self):#x}>"
        return f"<Parser {self.name}>"
