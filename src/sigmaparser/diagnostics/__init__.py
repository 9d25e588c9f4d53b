"""Diagnostics for sigmaparser.

Exception hierarchy for grammar contract violations, centralized message
templates, and formatting of parse failures for humans and tools.

Python 3.13+. Zero external dependencies.
"""

from .errors import (
    GrammarError,
    InvalidRuleError,
    SigmaParserError,
    UnknownRuleError,
    UnpatchedRuleError,
)
from .formatter import FailureFormatter, OutputFormat, format_failure
from .templates import ErrorTemplate

__all__ = [
    "ErrorTemplate",
    "FailureFormatter",
    "GrammarError",
    "InvalidRuleError",
    "OutputFormat",
    "SigmaParserError",
    "UnknownRuleError",
    "UnpatchedRuleError",
    "format_failure",
]
