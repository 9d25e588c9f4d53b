"""Failure formatting service.

Turns a :class:`~sigmaparser.core.result.Failure` plus the source it came from
into human-readable or machine-readable text.
Python 3.13+. Zero external dependencies.
"""

import json
from dataclasses import dataclass
from enum import StrEnum

from sigmaparser.constants import DEFAULT_CONTEXT_LINES
from sigmaparser.core.position import LineOffsetCache
from sigmaparser.core.result import Failure

__all__ = [
    "FailureFormatter",
    "OutputFormat",
    "format_failure",
]


class OutputFormat(StrEnum):
    """Output format options for failure formatting."""

    SIMPLE = "simple"  # "line:col: expected '<label>'"
    CONTEXT = "context"  # Simple line plus source excerpt with caret
    JSON = "json"  # JSON object for tooling integration


@dataclass(frozen=True, slots=True)
class FailureFormatter:
    """Failure formatting service.

    Locations are taken from the start of the failure's span, which is where
    the failing parser began its attempt.

    Attributes:
        output_format: Output style (simple, context, json)
        context_lines: Source lines shown before/after the failing line

    Example:
        >>> failure = Failure(pos=2, span=(0, 2), expected="foo")
        >>> FailureFormatter().format(failure, "fo")
        "1:1: expected 'foo'"
        >>> print(FailureFormatter(OutputFormat.CONTEXT).format(failure, "fo"))
        1:1: expected 'foo'
        <BLANKLINE>
           1 | fo
             | ^^
    """

    output_format: OutputFormat = OutputFormat.SIMPLE
    context_lines: int = DEFAULT_CONTEXT_LINES

    def format(self, failure: Failure, source: str) -> str:
        """Format a single failure.

        Args:
            failure: Failure returned by a parser
            source: The source text that was parsed

        Returns:
            Formatted failure string
        """
        cache = LineOffsetCache(source)
        match self.output_format:
            case OutputFormat.SIMPLE:
                return self._format_simple(failure, cache)
            case OutputFormat.CONTEXT:
                return self._format_context(failure, source, cache)
            case OutputFormat.JSON:
                return self._format_json(failure, cache)

    def _format_simple(self, failure: Failure, cache: LineOffsetCache) -> str:
        line, col = cache.get_line_col(failure.span[0])
        return f"{line}:{col}: expected '{failure.expected}'"

    def _format_context(
        self, failure: Failure, source: str, cache: LineOffsetCache
    ) -> str:
        """Format failure with source excerpt and pointer.

        Example output:
            2:3: expected ']'
            <BLANKLINE>
               1 | [1,
               2 | 2 x
                 |   ^
        """
        start, end = failure.span
        line, col = cache.get_line_col(start)
        lines = [text.removesuffix("\r") for text in source.split("\n")]

        result_lines = [self._format_simple(failure, cache), ""]

        first = max(1, line - self.context_lines)
        last = min(cache.line_count, line + self.context_lines)

        for i in range(first, last + 1):
            gutter = f"{i:4} | "
            result_lines.append(gutter + lines[i - 1])
            if i == line:
                # Underline the span, stopping at the end of the failing line
                line_remaining = len(lines[i - 1]) - (col - 1)
                width = max(1, min(end - start, line_remaining))
                pointer = " " * (len(gutter) - 2) + "| " + " " * (col - 1)
                result_lines.append(pointer + "^" * width)

        return "\n".join(result_lines)

    def _format_json(self, failure: Failure, cache: LineOffsetCache) -> str:
        """Format failure as JSON.

        Example output:
            {"expected": "foo", "pos": 2, "start": 0, "end": 2, "line": 1, "column": 1}
        """
        line, col = cache.get_line_col(failure.span[0])
        data: dict[str, str | int] = {
            "expected": failure.expected,
            "pos": failure.pos,
            "start": failure.span[0],
            "end": failure.span[1],
            "line": line,
            "column": col,
        }
        return json.dumps(data, ensure_ascii=False)


def format_failure(
    failure: Failure,
    source: str,
    *,
    output_format: OutputFormat = OutputFormat.SIMPLE,
) -> str:
    """Format a failure with a default-configured FailureFormatter.

    Args:
        failure: Failure returned by a parser
        source: The source text that was parsed
        output_format: Output style

    Returns:
        Formatted failure string
    """
    return FailureFormatter(output_format=output_format).format(failure, source)
