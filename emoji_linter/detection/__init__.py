"""Emoji detection engine.

Finds Unicode emoji (single code points, skin-tone variants, ZWJ sequences,
flags, keycaps and tag sequences) and ``:shortcode:`` forms, and removes them.

Usage:
    from emoji_linter.detection import find_emojis, has_emojis, remove_emojis
"""

from emoji_linter.detection.detector import (
    EmojiDetector,
    find_emojis,
    get_detector,
    has_emojis,
    remove_emojis,
    reset_detector,
)
from emoji_linter.detection.models import EmojiCategory, EmojiMatch, Span
from emoji_linter.detection.patterns import classify_emoji, has_skin_tone, is_actual_emoji
from emoji_linter.detection.positions import LineIndex, resolve_position
from emoji_linter.detection.remover import delete_spans

__all__ = [
    "EmojiCategory",
    "EmojiDetector",
    "EmojiMatch",
    "LineIndex",
    "Span",
    "classify_emoji",
    "delete_spans",
    "find_emojis",
    "get_detector",
    "has_emojis",
    "has_skin_tone",
    "is_actual_emoji",
    "remove_emojis",
    "reset_detector",
    "resolve_position",
]
