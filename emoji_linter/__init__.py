"""emoji-linter - Find and remove emoji in text and source files.

Usage:
    from emoji_linter import find_emojis, has_emojis, remove_emojis

    find_emojis("Deploy 🚀 done")      # [EmojiMatch(text='🚀', ...)]
    has_emojis("plain text")           # False
    remove_emojis("Done ✅")           # "Done "
"""

from emoji_linter.detection import (
    EmojiCategory,
    EmojiDetector,
    EmojiMatch,
    find_emojis,
    has_emojis,
    remove_emojis,
)

__version__ = "1.0.0"

__all__ = [
    "EmojiCategory",
    "EmojiDetector",
    "EmojiMatch",
    "__version__",
    "find_emojis",
    "has_emojis",
    "remove_emojis",
]
