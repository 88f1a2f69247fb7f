"""Property-based tests for the emoji detection engine."""

from hypothesis import given, strategies as st

from emoji_linter.detection import (
    EmojiCategory,
    EmojiDetector,
    LineIndex,
    classify_emoji,
    resolve_position,
)

detector = EmojiDetector()

# Characters that build every emoji form plus the symbols the filter rejects.
EMOJI_PARTS = [
    "a", " ", "\n", ":", "1", "#", "x", "_",
    "©", "™", "✨", "❤",
    "\U0001F680", "\U0001F44D", "\U0001F3FD", "\U0001F468",
    "\u200d", "\ufe0f", "\u20e3",
    "\U0001F1FA", "\U0001F1F8",
    "\U0001F3F4", "\U000E0067", "\U000E0062", "\U000E007F",
]  # fmt: skip

emoji_text = st.lists(st.sampled_from(EMOJI_PARTS), max_size=40).map("".join)

# Removal can leave a variation selector, a keycap mark, regional indicators,
# tag characters or colons that pair with what is left, so idempotence is
# checked on text built from the remaining parts.
IDEMPOTENT_PARTS = [
    "a", " ", "\n", "1", "©", "™", "✨",
    "\U0001F680", "\U0001F44D", "\U0001F3FD", "\u200d",
]  # fmt: skip

idempotent_text = st.lists(st.sampled_from(IDEMPOTENT_PARTS), max_size=40).map("".join)


@given(st.text())
def test_find_emojis_never_crashes(text):
    """find_emojis accepts any string."""
    detector.find_emojis(text)


@given(st.one_of(st.text(), emoji_text))
def test_has_emojis_agrees_with_find(text):
    """has_emojis is True exactly when find_emojis reports something."""
    assert detector.has_emojis(text) == (len(detector.find_emojis(text)) > 0)


@given(st.one_of(st.text(), emoji_text))
def test_removal_deletes_exactly_the_findings(text):
    """remove_emojis shortens the text by the total length of the findings."""
    matches = detector.find_emojis(text)
    removed = sum(len(m.text) for m in matches)
    assert len(detector.remove_emojis(text)) == len(text) - removed


@given(st.one_of(st.text(), emoji_text))
def test_removal_keeps_everything_else(text):
    """The text between findings is kept in order."""
    matches = detector.find_emojis(text)
    kept = []
    cursor = 0
    for match in matches:
        kept.append(text[cursor : match.start])
        cursor = match.end
    kept.append(text[cursor:])
    assert detector.remove_emojis(text) == "".join(kept)


@given(st.one_of(st.text(), emoji_text))
def test_findings_are_ordered_and_disjoint(text):
    """Findings are strictly increasing and never overlap."""
    matches = detector.find_emojis(text)
    for previous, current in zip(matches, matches[1:]):
        assert previous.start < current.start
        assert previous.end <= current.start


@given(emoji_text)
def test_findings_match_their_text(text):
    """Each finding's text is the slice its offsets describe."""
    for match in detector.find_emojis(text):
        assert text[match.start : match.end] == match.text
        assert match.column_end - match.column_start == len(match.text)


@given(emoji_text)
def test_category_depends_only_on_text(text):
    """The category of a Unicode finding is a function of its text."""
    for match in detector.scan_unicode(text):
        assert classify_emoji(match.text) == match.category
        assert match.category != EmojiCategory.SHORTCODE


@given(idempotent_text)
def test_remove_emojis_idempotent(text):
    """Removing twice gives the same result as removing once."""
    once = detector.remove_emojis(text)
    assert detector.remove_emojis(once) == once
    assert detector.has_emojis(once) is False


@given(st.text(), st.data())
def test_line_index_agrees_with_resolve_position(text, data):
    """Batch and single-offset position resolution agree."""
    offset = data.draw(st.integers(min_value=0, max_value=len(text)))
    assert LineIndex(text).resolve(offset) == resolve_position(text, offset)
