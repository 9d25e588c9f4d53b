"""Hypothesis strategies for sigmaparser property-based testing.

Usage:
    from tests.strategies import parser_trees, sources_with_positions
"""

from .parsers import (
    SOURCE_ALPHABET,
    leaf_parsers,
    literal_texts,
    parser_trees,
    sources,
    sources_with_positions,
)

__all__ = [
    "SOURCE_ALPHABET",
    "leaf_parsers",
    "literal_texts",
    "parser_trees",
    "sources",
    "sources_with_positions",
]
