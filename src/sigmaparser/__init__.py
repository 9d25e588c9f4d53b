"""sigmaparser - recursive-descent parser combinators.

A small set of composable parsers for context-free grammars over text, with
furthest-failure diagnostics and a grammar builder for mutually recursive
rules. Parse failures are values, not exceptions.

Public API:
    string, regexp, nothing, whitespace, integer, float_ - Leaf parsers
    map_, sequence, choice, many, optional, sep_by, take_mid - Combinators
    grammar, Grammar - Mutually recursive rule sets
    run, Runner - Run a parser from offset zero (lenient or strict)
    Parser, Success, Failure, Result, Span - Core types
    format_failure, FailureFormatter, OutputFormat - Failure diagnostics

Exceptions:
    SigmaParserError - Base exception class
    GrammarError - Grammar contract violations
    UnpatchedRuleError, UnknownRuleError, InvalidRuleError - GrammarError kinds

Submodules:
    sigmaparser.core - Parser, result model, line/column helpers
    sigmaparser.parsers - Primitive parsers
    sigmaparser.combinators - Combinators
    sigmaparser.diagnostics - Errors, templates, formatting
    sigmaparser.constants - Lexical patterns and labels
"""

from .combinators import choice, many, map_, optional, sep_by, sequence, take_mid
from .core import Failure, Parser, Result, Span, Success
from .diagnostics import (
    FailureFormatter,
    GrammarError,
    InvalidRuleError,
    OutputFormat,
    SigmaParserError,
    UnknownRuleError,
    UnpatchedRuleError,
    format_failure,
)
from .grammar import Grammar, grammar
from .parsers import float_, integer, nothing, regexp, string, whitespace
from .runner import Runner, run

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("sigmaparser")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Failure",
    "FailureFormatter",
    "Grammar",
    "GrammarError",
    "InvalidRuleError",
    "OutputFormat",
    "Parser",
    "Result",
    "Runner",
    "SigmaParserError",
    "Span",
    "Success",
    "UnknownRuleError",
    "UnpatchedRuleError",
    "__version__",
    "choice",
    "float_",
    "format_failure",
    "grammar",
    "integer",
    "many",
    "map_",
    "nothing",
    "optional",
    "regexp",
    "run",
    "sep_by",
    "sequence",
    "string",
    "take_mid",
    "whitespace",
]
