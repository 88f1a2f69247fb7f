"""Span scanning for Unicode emoji.

Every matcher runs over the parts of the text no earlier matcher claimed.
Claims are tracked in a per-call bytearray so a span is never reported twice
and never overlaps another span.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from emoji_linter.detection.models import Span
from emoji_linter.detection.patterns import MATCHERS, Matcher, is_actual_emoji

logger = logging.getLogger(__name__)


def unclaimed_gaps(claimed: bytearray) -> list[tuple[int, int]]:
    """Return the half-open ranges of ``claimed`` that are still zero."""
    gaps: list[tuple[int, int]] = []
    size = len(claimed)
    pos = 0
    while pos < size:
        start = claimed.find(0, pos)
        if start == -1:
            break
        end = claimed.find(1, start)
        if end == -1:
            end = size
        gaps.append((start, end))
        pos = end
    return gaps


def is_claimed(claimed: bytearray, start: int, end: int) -> bool:
    """Return True if any offset in ``[start, end)`` is already claimed."""
    return claimed.find(1, start, end) != -1


def claim(claimed: bytearray, start: int, end: int) -> None:
    """Mark ``[start, end)`` as claimed."""
    claimed[start:end] = b"\x01" * (end - start)


class SpanScanner:
    """Finds Unicode emoji spans in priority order.

    Example:
        >>> scanner = SpanScanner()
        >>> claimed = bytearray(len("hi 🚀"))
        >>> [(s.start, s.end) for s in scanner.iter_spans("hi 🚀", claimed)]
        [(3, 4)]
    """

    def __init__(self, matchers: Sequence[Matcher] = MATCHERS) -> None:
        self._matchers = tuple(matchers)

    def iter_spans(self, text: str, claimed: bytearray) -> Iterator[Span]:
        """Yield accepted spans, claiming each one as it is yielded.

        Spans come out grouped by matcher, not sorted by position.

        Args:
            text: Text to scan.
            claimed: Claim map with one byte per code point of ``text``.
                Updated in place.

        Yields:
            Span for each accepted emoji.
        """
        for matcher in self._matchers:
            # Gaps are fixed per matcher; a matcher never overlaps itself.
            for gap_start, gap_end in unclaimed_gaps(claimed):
                for match in matcher.pattern.finditer(text, gap_start, gap_end):
                    start, end = match.span()
                    if start == end or is_claimed(claimed, start, end):
                        continue
                    if not matcher.structural and not is_actual_emoji(match.group()):
                        continue
                    claim(claimed, start, end)
                    yield Span(start, end, matcher.category)
