"""Unified exception hierarchy for emoji-linter.

Exception Hierarchy:
    EmojiLinterError (base)
    +-- ConfigurationError - Configuration file and settings issues
    +-- ValidationError - Input validation failures
    |   +-- InvalidInputError - Engine received something that is not text
    |   +-- LengthExceededError - Buffer longer than max_text_length
    +-- FileError - File read/write/walk failures
    +-- GitError - Git hook and staged-file failures

Usage:
    from emoji_linter.errors import EmojiLinterError, LengthExceededError

    try:
        matches = detector.find_emojis(content)
    except LengthExceededError as e:
        logger.warning("Skipping %s: %s (code: %s)", path, e.message, e.code)
"""

# --- base ---
from emoji_linter.errors.base import (
    ConfigurationError,
    EmojiLinterError,
    ErrorCode,
)

# --- domain errors ---
from emoji_linter.errors.domain import (
    FileError,
    GitError,
    InvalidInputError,
    LengthExceededError,
    ValidationError,
)

# --- convenience factories ---
from emoji_linter.errors.factories import (
    file_error_from_os_error,
    invalid_input,
    not_a_git_repository,
    text_too_long,
)

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "EmojiLinterError",
    # Configuration errors
    "ConfigurationError",
    # Validation errors
    "ValidationError",
    "InvalidInputError",
    "LengthExceededError",
    # File errors
    "FileError",
    # Git errors
    "GitError",
    # Convenience functions
    "invalid_input",
    "text_too_long",
    "file_error_from_os_error",
    "not_a_git_repository",
]
