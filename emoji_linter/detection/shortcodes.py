"""Shortcode scanning (``:name:`` forms such as ``:rocket:``)."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator

import regex

from emoji_linter.config import DEFAULT_MAX_SHORTCODE_LENGTH
from emoji_linter.detection.models import EmojiCategory, Span
from emoji_linter.detection.spans import claim, is_claimed

# Three or more colons chained by non-space runs, e.g. ":a:b:" or "::x:y:".
# Shortcodes touching such a run are rejected.
MALFORMED_RUN_PATTERN = regex.compile(r":(?:[^:\s]+:){2,}")

_LOWER_CHARSET = r"a-z0-9_+\-"
_MIXED_CHARSET = r"a-zA-Z0-9_+\-"


def shortcode_pattern(case_sensitive: bool = True) -> regex.Pattern[str]:
    """Build the candidate pattern for shortcodes.

    Args:
        case_sensitive: When True only lower-case names match.

    Returns:
        Compiled pattern with the name in group 1.
    """
    charset = _LOWER_CHARSET if case_sensitive else _MIXED_CHARSET
    return regex.compile(rf":([{charset}]+):")


class ShortcodeScanner:
    """Finds ``:name:`` shortcodes that do not collide with claimed spans.

    Candidates are collected with overlapping matching so that both
    ``:fire:`` and ``:rocket:`` are seen in ``":fire::rocket:"``. They are
    then taken leftmost first, longest first, skipping any that intersect a
    span already claimed.

    Example:
        >>> scanner = ShortcodeScanner()
        >>> text = "ship it :rocket:"
        >>> [text[s.start:s.end] for s in scanner.iter_spans(text, bytearray(len(text)))]
        [':rocket:']
    """

    def __init__(
        self,
        max_length: int = DEFAULT_MAX_SHORTCODE_LENGTH,
        case_sensitive: bool = True,
    ) -> None:
        self.max_length = max_length
        self.case_sensitive = case_sensitive
        self._pattern = shortcode_pattern(case_sensitive)

    def _is_valid_name(self, name: str) -> bool:
        return bool(name) and len(name) <= self.max_length and ":" not in name

    def iter_spans(self, text: str, claimed: bytearray) -> Iterator[Span]:
        """Yield accepted shortcode spans, claiming each one.

        Args:
            text: Text to scan.
            claimed: Claim map shared with the Unicode scan. Updated in place.

        Yields:
            Span with category SHORTCODE for each accepted shortcode.
        """
        if ":" not in text:
            return

        runs = [m.span() for m in MALFORMED_RUN_PATTERN.finditer(text)]
        run_starts = [start for start, _ in runs]

        candidates = sorted(
            ((m.start(), m.end(), m.group(1)) for m in self._pattern.finditer(text, overlapped=True)),
            key=lambda c: (c[0], -c[1]),
        )
        for start, end, name in candidates:
            if not self._is_valid_name(name):
                continue
            # Runs never overlap each other, so only the last run starting
            # before ``end`` can intersect the candidate.
            idx = bisect_left(run_starts, end) - 1
            if idx >= 0 and runs[idx][1] > start:
                continue
            if is_claimed(claimed, start, end):
                continue
            claim(claimed, start, end)
            yield Span(start, end, EmojiCategory.SHORTCODE)
