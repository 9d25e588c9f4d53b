"""Core engine types shared by primitives, combinators and the grammar builder.

Exports:
    Parser: The single parser capability
    ParseFn: Type alias for wrapped parse functions
    Success, Failure, Result, Span: Parse result model
    LineOffsetCache, line_col: Offset to line/column conversion

Python 3.13+.
"""

from .parser import ParseFn, Parser
from .position import LineOffsetCache, line_col
from .result import Failure, Result, Span, Success

__all__ = [
    "Failure",
    "LineOffsetCache",
    "ParseFn",
    "Parser",
    "Result",
    "Span",
    "Success",
    "line_col",
]
