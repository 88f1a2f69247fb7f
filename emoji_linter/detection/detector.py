"""Emoji Detector - Find, test for and strip emoji in text.

Single entry point for the detection engine. ``find_emojis``, ``has_emojis``
and ``remove_emojis`` all run the same scan, so they always agree: text for
which ``has_emojis`` is False comes back from ``remove_emojis`` unchanged.

Usage:
    from emoji_linter.detection import EmojiDetector

    detector = EmojiDetector()
    detector.find_emojis("Ship it 🚀 :tada:")   # two EmojiMatch results
    detector.remove_emojis("Done ✅")          # "Done "
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from typing import Any

from emoji_linter.config import DetectionConfig
from emoji_linter.detection.models import EmojiMatch, Span
from emoji_linter.detection.positions import LineIndex
from emoji_linter.detection.remover import delete_spans
from emoji_linter.detection.shortcodes import ShortcodeScanner
from emoji_linter.detection.spans import SpanScanner
from emoji_linter.errors import invalid_input, text_too_long

logger = logging.getLogger(__name__)


class EmojiDetector:
    """Detects Unicode emoji and shortcodes in text.

    Detectors hold no per-call state and can be shared between threads.

    Attributes:
        config: Detection settings in effect.
    """

    def __init__(self, config: DetectionConfig | None = None) -> None:
        self.config = config or DetectionConfig()
        self._span_scanner = SpanScanner()
        self._shortcode_scanner = (
            ShortcodeScanner(
                max_length=self.config.max_shortcode_length,
                case_sensitive=self.config.case_sensitive,
            )
            if self.config.include_shortcodes
            else None
        )

    def _validate(self, text: Any) -> str:
        if not isinstance(text, str):
            raise invalid_input(text)
        if len(text) > self.config.max_text_length:
            raise text_too_long(len(text), self.config.max_text_length)
        return text

    def _iter_spans(
        self,
        text: str,
        *,
        unicode: bool = True,
        shortcodes: bool = True,
    ) -> Iterator[Span]:
        claimed = bytearray(len(text))
        if unicode:
            yield from self._span_scanner.iter_spans(text, claimed)
        if shortcodes and self._shortcode_scanner is not None:
            yield from self._shortcode_scanner.iter_spans(text, claimed)

    def _to_matches(
        self, text: str, spans: Iterator[Span], line_number: int | None
    ) -> list[EmojiMatch]:
        ordered = sorted(spans, key=lambda s: s.start)
        if not ordered:
            return []

        index = LineIndex(text) if line_number is None else None
        matches = []
        for span in ordered:
            if index is None:
                line, column = line_number, span.start + 1
            else:
                line, column = index.resolve(span.start)
            emoji_text = text[span.start : span.end]
            matches.append(
                EmojiMatch(
                    text=emoji_text,
                    category=span.category,
                    start=span.start,
                    end=span.end,
                    line=line,
                    column_start=column,
                    column_end=column + len(emoji_text),
                )
            )
        return matches

    def find_emojis(self, text: str, line_number: int | None = None) -> list[EmojiMatch]:
        """Find all emoji in text.

        Args:
            text: Text to scan.
            line_number: If given, every match reports this line and a column
                of ``start + 1``. Otherwise lines and columns are computed
                from newlines in ``text``.

        Returns:
            Non-overlapping matches sorted by start offset.

        Raises:
            InvalidInputError: If text is None or not a string.
            LengthExceededError: If text is longer than ``max_text_length``.
        """
        text = self._validate(text)
        if not text:
            return []
        return self._to_matches(text, self._iter_spans(text), line_number)

    def scan_unicode(self, text: str, line_number: int | None = None) -> list[EmojiMatch]:
        """Find Unicode emoji only, ignoring shortcodes.

        Raises:
            InvalidInputError: If text is None or not a string.
            LengthExceededError: If text is longer than ``max_text_length``.
        """
        text = self._validate(text)
        if not text:
            return []
        return self._to_matches(text, self._iter_spans(text, shortcodes=False), line_number)

    def scan_shortcodes(self, text: str, line_number: int | None = None) -> list[EmojiMatch]:
        """Find ``:name:`` shortcodes only.

        Returns an empty list when shortcode detection is disabled.

        Raises:
            InvalidInputError: If text is None or not a string.
            LengthExceededError: If text is longer than ``max_text_length``.
        """
        text = self._validate(text)
        if not text:
            return []
        return self._to_matches(text, self._iter_spans(text, unicode=False), line_number)

    def has_emojis(self, text: str) -> bool:
        """Return True if ``find_emojis`` would report at least one match.

        Stops at the first accepted span.

        Raises:
            InvalidInputError: If text is None or not a string.
            LengthExceededError: If text is longer than ``max_text_length``.
        """
        text = self._validate(text)
        if not text:
            return False
        return next(self._iter_spans(text), None) is not None

    def remove_emojis(self, text: str) -> str:
        """Delete every emoji ``find_emojis`` reports.

        Everything else, whitespace included, is left in place.

        Raises:
            InvalidInputError: If text is None or not a string.
            LengthExceededError: If text is longer than ``max_text_length``.
        """
        text = self._validate(text)
        if not text:
            return ""
        spans = list(self._iter_spans(text))
        if not spans:
            return text
        logger.debug(f"Removing {len(spans)} emoji span(s)")
        return delete_spans(text, spans)


# =============================================================================
# Module-level helpers
# =============================================================================

_detector: EmojiDetector | None = None
_detector_lock = threading.Lock()


def get_detector() -> EmojiDetector:
    """Get the shared detector with default settings.

    Uses double-check locking for thread safety.

    Returns:
        Shared EmojiDetector instance.
    """
    global _detector
    if _detector is None:
        with _detector_lock:
            if _detector is None:
                _detector = EmojiDetector()
    return _detector


def reset_detector() -> None:
    """Reset the shared detector for testing."""
    global _detector
    with _detector_lock:
        _detector = None


def find_emojis(text: str, line_number: int | None = None) -> list[EmojiMatch]:
    """Find emoji with default settings. See :meth:`EmojiDetector.find_emojis`."""
    return get_detector().find_emojis(text, line_number)


def has_emojis(text: str) -> bool:
    """Test for emoji with default settings. See :meth:`EmojiDetector.has_emojis`."""
    return get_detector().has_emojis(text)


def remove_emojis(text: str) -> str:
    """Strip emoji with default settings. See :meth:`EmojiDetector.remove_emojis`."""
    return get_detector().remove_emojis(text)
