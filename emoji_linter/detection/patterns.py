"""Emoji pattern classes and the ambiguity filter.

Matchers are listed most specific first. The order decides which category
wins when two matchers could claim overlapping text:

    tag sequence > keycap > flag > ZWJ sequence > general emoji

Patterns rely on the Unicode emoji properties supported by the ``regex``
package (``Emoji``, ``Emoji_Presentation``, ``Emoji_Modifier``,
``Extended_Pictographic``). The standard library ``re`` module has no
property escapes.
"""

from __future__ import annotations

from dataclasses import dataclass

import regex

from emoji_linter.detection.models import EmojiCategory

# One emoji component: a base code point, optionally followed by a skin-tone
# modifier or the emoji variation selector (VS16).
_COMPONENT = r"\p{Emoji}(?:\p{Emoji_Modifier}|\uFE0F)?"

TAG_SEQUENCE_PATTERN = regex.compile(r"\U0001F3F4[\U000E0060-\U000E007F]+\U000E007F")
KEYCAP_PATTERN = regex.compile(r"[0-9#*]\uFE0F?\u20E3")
FLAG_PATTERN = regex.compile(r"[\U0001F1E6-\U0001F1FF]{2}")
ZWJ_SEQUENCE_PATTERN = regex.compile(rf"{_COMPONENT}(?:\u200D{_COMPONENT})+")
GENERAL_PATTERN = regex.compile(rf"{_COMPONENT}(?:\u200D{_COMPONENT})*")

SKIN_TONE_PATTERN = regex.compile(r"[\U0001F3FB-\U0001F3FF]")

_EMOJI = regex.compile(r"\p{Emoji}")
_EMOJI_PRESENTATION = regex.compile(r"\p{Emoji_Presentation}")
_EXTENDED_PICTOGRAPHIC = regex.compile(r"\p{Extended_Pictographic}")

# Pictographs that carry the Emoji property but are text symbols in practice.
NON_EMOJI_SYMBOLS = frozenset({"\u00a9", "\u00ae", "\u2122"})

# Code points from here on are emoji-only blocks.
_PICTOGRAPH_BLOCK_START = 0x1F300


@dataclass(frozen=True)
class Matcher:
    """A compiled pattern with the category it assigns.

    Attributes:
        category: Category given to every span this matcher accepts.
        pattern: Compiled ``regex`` pattern.
        structural: True for forms the ambiguity filter can never reject
            (tag, keycap, flag and ZWJ sequences).
    """

    category: EmojiCategory
    pattern: regex.Pattern[str]
    structural: bool = True


MATCHERS: tuple[Matcher, ...] = (
    Matcher(EmojiCategory.TAG_SEQUENCE, TAG_SEQUENCE_PATTERN),
    Matcher(EmojiCategory.KEYCAP, KEYCAP_PATTERN),
    Matcher(EmojiCategory.FLAG, FLAG_PATTERN),
    Matcher(EmojiCategory.SEQUENCE, ZWJ_SEQUENCE_PATTERN),
    Matcher(EmojiCategory.UNICODE, GENERAL_PATTERN, structural=False),
)

_STRUCTURAL_PATTERNS = tuple(m.pattern for m in MATCHERS if m.structural)


def is_actual_emoji(text: str) -> bool:
    """Decide whether a general match is really an emoji.

    Rejects copyright, registered and trademark signs on their own, and bare
    digits, ``#`` and ``*`` (which carry the Emoji property for keycaps).

    Args:
        text: Matched text.

    Returns:
        True if the text should be reported as an emoji.
    """
    if not text or text in NON_EMOJI_SYMBOLS:
        return False

    if any(pattern.search(text) for pattern in _STRUCTURAL_PATTERNS):
        return True

    if _EMOJI_PRESENTATION.search(text) or _EXTENDED_PICTOGRAPHIC.search(text):
        return True

    return bool(_EMOJI.search(text)) and ord(text[0]) >= _PICTOGRAPH_BLOCK_START


def classify_emoji(text: str) -> EmojiCategory:
    """Return the most specific category whose pattern matches all of ``text``.

    The scanner assigns categories by matcher; for any accepted span this
    function returns the same category.
    """
    for matcher in MATCHERS:
        if matcher.structural and matcher.pattern.fullmatch(text):
            return matcher.category
    return EmojiCategory.UNICODE


def has_skin_tone(text: str) -> bool:
    """Return True if the text contains a Fitzpatrick skin-tone modifier."""
    return SKIN_TONE_PATTERN.search(text) is not None
