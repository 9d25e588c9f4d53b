"""Tests for parsers.primitives and parsers.numbers.

Covers literal, pattern, empty, whitespace and numeric leaf parsers,
including the exact spans and labels reported on failure.
"""

from __future__ import annotations

import re

import pytest

from sigmaparser import (
    Failure,
    Parser,
    Success,
    float_,
    integer,
    nothing,
    regexp,
    string,
    whitespace,
)

# ============================================================================
# LITERAL
# ============================================================================


class TestString:
    """Test literal string matching."""

    def test_matches_prefix(self) -> None:
        """string('foo') on 'foobar' consumes three characters."""
        result = string("foo").parse("foobar", 0)

        assert result == Success(pos=3, span=(0, 3), value="foo")

    def test_short_input_fails_with_clamped_span(self) -> None:
        """string('foo') on 'fo' fails over the two compared characters."""
        result = string("foo").parse("fo", 0)

        assert result == Failure(pos=2, span=(0, 2), expected="foo")

    def test_mismatch_span_covers_compared_text(self) -> None:
        """A full-length mismatch reports the whole compared span."""
        result = string("foo").parse("fox", 0)

        assert result == Failure(pos=3, span=(0, 3), expected="foo")

    def test_at_offset(self) -> None:
        """Matching starts at the given offset."""
        result = string("bar").parse("foobar", 3)

        assert result == Success(pos=6, span=(3, 6), value="bar")

    def test_at_eof(self) -> None:
        """At end of input the span is zero-width."""
        result = string("x").parse("abc", 3)

        assert result == Failure(pos=3, span=(3, 3), expected="x")

    def test_past_eof_span_not_reversed(self) -> None:
        """Offsets beyond the source give a zero-width span at the offset."""
        result = string("ab").parse("a", 3)

        assert result == Failure(pos=3, span=(3, 3), expected="ab")

    def test_empty_literal_always_matches(self) -> None:
        """The empty literal succeeds without consuming."""
        assert string("").parse("abc", 1) == Success(pos=1, span=(1, 1), value="")


# ============================================================================
# PATTERN
# ============================================================================


class TestRegexp:
    """Test anchored pattern matching."""

    def test_matches_at_pos(self) -> None:
        """Pattern match yields the matched text."""
        result = regexp(r"[a-z]+", "word").parse("abc123", 0)

        assert result == Success(pos=3, span=(0, 3), value="abc")

    def test_anchored_not_searched(self) -> None:
        """A match starting after pos is not accepted."""
        result = regexp(r"[0-9]+", "digits").parse("abc123", 0)

        assert result == Failure(pos=0, span=(0, 0), expected="digits")

    def test_matches_at_nonzero_offset(self) -> None:
        """Anchoring works at arbitrary offsets."""
        result = regexp(r"[0-9]+", "digits").parse("abc123", 3)

        assert result == Success(pos=6, span=(3, 6), value="123")

    def test_accepts_compiled_pattern(self) -> None:
        """Compiled patterns are used as-is, flags included."""
        parser = regexp(re.compile(r"abc", re.IGNORECASE), "abc")

        assert parser.parse("ABC", 0) == Success(pos=3, span=(0, 3), value="ABC")

    def test_reusable_across_sources(self) -> None:
        """One instance gives independent results across calls."""
        parser = regexp(r"a+", "a")

        assert parser.parse("aaab", 0).pos == 3
        assert parser.parse("ba", 1).pos == 2
        assert parser.parse("aaab", 0).pos == 3

    def test_reentrant(self) -> None:
        """A pattern parser can be invoked while another call is in flight."""
        inner = regexp(r"[0-9]+", "digits")
        seen: list[int] = []

        def outer(source: str, pos: int) -> Success[str] | Failure:
            nested = inner.parse(source, 4)
            seen.append(nested.pos)
            return inner.parse(source, pos)

        result = Parser(outer).parse("12a 345", 0)

        assert seen == [7]
        assert result == Success(pos=2, span=(0, 2), value="12")


# ============================================================================
# EMPTY AND WHITESPACE
# ============================================================================


class TestNothing:
    """Test the empty match."""

    @pytest.mark.parametrize(("source", "pos"), [("", 0), ("abc", 0), ("abc", 3)])
    def test_always_succeeds(self, source: str, pos: int) -> None:
        """nothing() succeeds with None and a zero-width span."""
        assert nothing().parse(source, pos) == Success(pos=pos, span=(pos, pos), value=None)


class TestWhitespace:
    """Test the whitespace parser."""

    def test_consumes_run(self) -> None:
        """All contiguous whitespace is consumed."""
        result = whitespace().parse(" \t\n x", 0)

        assert result == Success(pos=4, span=(0, 4), value=" \t\n ")

    def test_requires_one(self) -> None:
        """Zero whitespace is a failure."""
        assert whitespace().parse("x", 0) == Failure(pos=0, span=(0, 0), expected="whitespace")


# ============================================================================
# NUMBERS
# ============================================================================


class TestInteger:
    """Test integer literal parsing."""

    @pytest.mark.parametrize(
        ("source", "value", "end"),
        [
            ("0", 0, 1),
            ("42", 42, 2),
            ("-17", -17, 3),
            ("123abc", 123, 3),
            ("-042", 0, 2),
            ("007", 0, 1),
        ],
    )
    def test_values(self, source: str, value: int, end: int) -> None:
        """Integer pattern forbids leading zeros and converts to int."""
        result = integer().parse(source, 0)

        assert isinstance(result, Success)
        assert result.value == value
        assert isinstance(result.value, int)
        assert result.pos == end
        assert result.span == (0, end)

    @pytest.mark.parametrize("source", ["", "-", "abc", "+1"])
    def test_failures(self, source: str) -> None:
        """Non-integers fail with the integer label at pos."""
        assert integer().parse(source, 0) == Failure(
            pos=0, span=(0, 0), expected="integer number"
        )


class TestFloat:
    """Test float literal parsing."""

    @pytest.mark.parametrize(
        ("source", "value", "end"),
        [
            ("1.5", 1.5, 3),
            ("-0.25", -0.25, 5),
            ("007.5x", 7.5, 5),
        ],
    )
    def test_values(self, source: str, value: float, end: int) -> None:
        """Float pattern requires digits on both sides of the point."""
        result = float_().parse(source, 0)

        assert isinstance(result, Success)
        assert result.value == value
        assert isinstance(result.value, float)
        assert result.pos == end

    @pytest.mark.parametrize("source", ["1", "1.", ".5", "-.5", ""])
    def test_failures(self, source: str) -> None:
        """Incomplete decimals fail with the float label."""
        assert float_().parse(source, 0) == Failure(
            pos=0, span=(0, 0), expected="float number"
        )
