"""Offset to line/column conversion for diagnostics.

Parsers work on plain integer offsets. Line and column numbers are only
needed when a failure is shown to a human, so they are computed on demand.

Line Ending Support:
    - LF (Unix, \\n): Fully supported
    - CRLF (Windows, \\r\\n): Supported (\\n is the line delimiter)
    - CR-only (Classic Mac, \\r): NOT supported

Python 3.13+. Zero external dependencies.
"""

from bisect import bisect_right

__all__ = ["LineOffsetCache", "line_col"]


def line_col(source: str, pos: int) -> tuple[int, int]:
    """Compute line and column for a single offset.

    Args:
        source: Full input text
        pos: Offset into source (clamped to ``[0, len(source)]``)

    Returns:
        (line, column) tuple (1-indexed, like text editors)

    Performance:
        O(n) where n = pos. Use LineOffsetCache for many lookups.

    Example:
        >>> line_col("line1\\nline2", 0)
        (1, 1)
        >>> line_col("line1\\nline2", 8)
        (2, 3)
    """
    pos = max(0, min(pos, len(source)))
    line = source.count("\n", 0, pos) + 1
    last_newline = source.rfind("\n", 0, pos)
    col = pos - last_newline if last_newline >= 0 else pos + 1
    return (line, col)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in one O(n) pass, then answers lookups
    in O(log n).

    Example:
        >>> cache = LineOffsetCache("abc\\ndef\\nghi")
        >>> cache.get_line_col(0)
        (1, 1)
        >>> cache.get_line_col(4)  # 'd' in "def"
        (2, 1)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source.

        Args:
            source: Source text to index
        """
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    @property
    def line_count(self) -> int:
        """Number of lines in the indexed source."""
        return len(self._offsets)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Offset into source (clamped to valid range)

        Returns:
            (line, column) tuple (1-indexed)
        """
        pos = max(0, min(pos, self._source_len))
        index = bisect_right(self._offsets, pos) - 1
        return (index + 1, pos - self._offsets[index] + 1)
