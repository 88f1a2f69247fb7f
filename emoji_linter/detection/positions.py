"""Offset to line/column conversion."""

from __future__ import annotations

from bisect import bisect_left


def resolve_position(text: str, offset: int, base_line: int | None = None) -> tuple[int, int]:
    """Convert a string offset into a 1-based (line, column) pair.

    When ``base_line`` is given the whole buffer is treated as one logical
    line: every offset reports ``base_line`` and ``offset + 1``. Callers that
    split files into lines use this form. Otherwise the line is one plus the
    number of newlines before ``offset``.

    Args:
        text: The scanned buffer.
        offset: Index into ``text``.
        base_line: Optional fixed line number for per-line scanning.

    Returns:
        Tuple of (line, column_start).
    """
    if base_line is not None:
        return base_line, offset + 1

    line = 1 + text.count("\n", 0, offset)
    last_newline = text.rfind("\n", 0, offset)
    return line, offset - last_newline


class LineIndex:
    """Newline offsets of a buffer, for resolving many positions at once.

    Gives the same answers as :func:`resolve_position` without rescanning
    the prefix for every offset.
    """

    def __init__(self, text: str) -> None:
        self._newlines: list[int] = []
        pos = text.find("\n")
        while pos != -1:
            self._newlines.append(pos)
            pos = text.find("\n", pos + 1)

    def resolve(self, offset: int) -> tuple[int, int]:
        """Return the 1-based (line, column_start) of ``offset``."""
        before = bisect_left(self._newlines, offset)
        last_newline = self._newlines[before - 1] if before else -1
        return before + 1, offset - last_newline
