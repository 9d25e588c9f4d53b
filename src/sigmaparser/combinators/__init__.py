"""Higher-order parsers built from other parsers.

Exports:
    map_: Transform a successful value
    sequence: All parsers in order, values as a list
    choice: Ordered choice with furthest-failure reporting
    many: Zero or more repetitions (never fails)
    optional: Parser or nothing
    sep_by: Separated list (possibly empty)
    take_mid: Keep the middle of a three-part sequence
"""

from .basic import choice, map_, sequence
from .repetition import many, optional, sep_by, take_mid

__all__ = [
    "choice",
    "many",
    "map_",
    "optional",
    "sep_by",
    "sequence",
    "take_mid",
]
