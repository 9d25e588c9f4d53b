"""Primitive leaf parsers.

Exports:
    string: Exact literal match
    regexp: Anchored regular expression match
    nothing: Empty match (always succeeds)
    whitespace: One or more whitespace characters
    integer: Integer literal converted to int
    float_: Decimal literal converted to float
"""

from .numbers import float_, integer
from .primitives import nothing, regexp, string, whitespace

__all__ = ["float_", "integer", "nothing", "regexp", "string", "whitespace"]
