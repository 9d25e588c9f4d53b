"""Shared constants for sigmaparser.

Lexical patterns for the built-in leaf parsers and the labels they report
on failure. Kept in one module so primitives, the runner and the diagnostics
formatter agree on the same strings.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Lexical patterns
    "INTEGER_PATTERN",
    "FLOAT_PATTERN",
    "WHITESPACE_PATTERN",
    # Failure labels
    "INTEGER_LABEL",
    "FLOAT_LABEL",
    "WHITESPACE_LABEL",
    "END_OF_INPUT_LABEL",
    # Diagnostics
    "DEFAULT_CONTEXT_LINES",
]

# ============================================================================
# LEXICAL PATTERNS
# ============================================================================

# Optional minus, then either a lone zero or a digit run without a leading zero.
# "-042" therefore matches only "-0"; the caller decides what follows.
INTEGER_PATTERN: str = r"-?(0|[1-9][0-9]*)"

# Decimal point and digits on both sides are required ("1." and ".5" fail).
FLOAT_PATTERN: str = r"-?[0-9]+\.[0-9]+"

# One or more whitespace characters (Unicode-aware, as str patterns are).
WHITESPACE_PATTERN: str = r"\s+"

# ============================================================================
# FAILURE LABELS
# ============================================================================

INTEGER_LABEL: str = "integer number"
FLOAT_LABEL: str = "float number"
WHITESPACE_LABEL: str = "whitespace"

# Reported by Runner.strict() when a parse stops before the end of the source.
END_OF_INPUT_LABEL: str = "end of input"

# ============================================================================
# DIAGNOSTICS
# ============================================================================

# Source lines shown before and after the failing line in CONTEXT output.
DEFAULT_CONTEXT_LINES: int = 2
