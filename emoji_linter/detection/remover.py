"""Span deletion."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol


class TextRange(Protocol):
    """Anything with half-open ``start``/``end`` offsets."""

    @property
    def start(self) -> int: ...

    @property
    def end(self) -> int: ...


def delete_spans(text: str, spans: Iterable[TextRange]) -> str:
    """Remove non-overlapping spans from ``text`` in a single pass.

    Characters outside the spans are kept in order, so the result length is
    ``len(text)`` minus the total span length.

    Args:
        text: Source text.
        spans: Non-overlapping ranges in any order.

    Returns:
        Text with every span removed.
    """
    pieces: list[str] = []
    cursor = 0
    for span in sorted(spans, key=lambda s: s.start):
        pieces.append(text[cursor : span.start])
        cursor = span.end
    pieces.append(text[cursor:])
    return "".join(pieces)
