"""Entry point: run a parser over a whole source from offset zero.

``Runner.with_`` is lenient: it reports success even when trailing input is
left unconsumed, so a grammar can be used to parse a prefix. ``Runner.strict``
additionally requires the parse to reach the end of the source.

Example:
    >>> from sigmaparser.parsers import string
    >>> run(string("ab")).with_("abc")
    Success(pos=2, span=(0, 2), value='ab')
    >>> run(string("ab")).strict("abc")
    Failure(pos=2, span=(2, 3), expected='end of input')
"""

import logging
from dataclasses import dataclass

from sigmaparser.constants import END_OF_INPUT_LABEL
from sigmaparser.core.parser import Parser
from sigmaparser.core.result import Failure, Result

__all__ = ["Runner", "run"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Runner[T]:
    """Binds a parser to be run against whole inputs.

    Attributes:
        parser: Top-level parser
    """

    parser: Parser[T]

    def with_(self, source: str) -> Result[T]:
        """Parse ``source`` from offset 0; trailing input is ignored.

        Args:
            source: Input text

        Returns:
            The parser's raw result
        """
        return self.parser.parse(source, 0)

    def strict(self, source: str) -> Result[T]:
        """Parse ``source`` from offset 0 and require it to be fully consumed.

        Args:
            source: Input text

        Returns:
            The parser's result, or a Failure labelled "end of input" spanning
            the unconsumed tail
        """
        result = self.parser.parse(source, 0)
        if result.is_ok and result.pos < len(source):
            logger.debug(
                "Strict parse stopped at %d of %d characters", result.pos, len(source)
            )
            return Failure(result.pos, (result.pos, len(source)), END_OF_INPUT_LABEL)
        return result


def run[T](parser: Parser[T]) -> Runner[T]:
    """Prepare ``parser`` for running against inputs."""
    return Runner(parser)
