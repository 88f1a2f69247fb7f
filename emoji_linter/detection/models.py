"""Data types produced by the detection engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class EmojiCategory(Enum):
    """Kind of emoji occurrence, most specific first."""

    TAG_SEQUENCE = "tag_sequence"
    KEYCAP = "keycap"
    FLAG = "flag"
    SEQUENCE = "sequence"
    UNICODE = "unicode"
    SHORTCODE = "shortcode"


@dataclass(frozen=True)
class EmojiMatch:
    """One detected emoji occurrence.

    Attributes:
        text: The exact substring matched.
        category: Kind of emoji, decided by the matcher that accepted it.
        start: Start index in the scanned buffer (inclusive).
        end: End index in the scanned buffer (exclusive).
        line: 1-based line number.
        column_start: 1-based column of the first character.
        column_end: column_start plus the length of ``text``.
    """

    text: str
    category: EmojiCategory
    start: int
    end: int
    line: int
    column_start: int
    column_end: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data = asdict(self)
        data["category"] = self.category.value
        return data


@dataclass(frozen=True)
class Span:
    """A claimed half-open range of the buffer before position resolution."""

    start: int
    end: int
    category: EmojiCategory
