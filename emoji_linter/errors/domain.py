"""Domain error classes for emoji-linter.

Contains input validation errors raised by the detection engine, file
errors raised while walking and rewriting files, and git errors raised by
the hook helpers.
"""

from __future__ import annotations

from typing import Any

from emoji_linter.errors.base import EmojiLinterError, ErrorCode

# Validation Errors


class ValidationError(EmojiLinterError):
    """Raised when input validation fails."""

    default_message = "Validation error"
    default_code = ErrorCode.VAL_INVALID_ARGUMENT

    def __init__(
        self,
        message: str | None = None,
        *,
        field: str | None = None,
        value: Any = None,
        expected: str | None = None,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = repr(value)[:100]
        if expected:
            details["expected"] = expected
        super().__init__(message, code=code, details=details, cause=cause)


class InvalidInputError(ValidationError):
    """Raised when the detection engine receives something that is not text."""

    default_message = "Text must be a string"
    default_code = ErrorCode.VAL_INVALID_INPUT


class LengthExceededError(ValidationError):
    """Raised when a buffer is longer than the configured maximum."""

    default_message = "Text exceeds maximum length"
    default_code = ErrorCode.VAL_LENGTH_EXCEEDED

    def __init__(
        self,
        message: str | None = None,
        *,
        length: int | None = None,
        max_length: int | None = None,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        details = details or {}
        if length is not None:
            details["length"] = length
        if max_length is not None:
            details["max_length"] = max_length
        super().__init__(message, code=code, details=details, cause=cause)


# File Errors

_FRIENDLY_MESSAGES = {
    "ENOENT": "File or directory not found: {path}",
    "EACCES": "Permission denied: {path}",
    "EPERM": "Permission denied: {path}",
    "EISDIR": "Expected file but found directory: {path}",
    "ENOTDIR": "Expected directory but found file: {path}",
    "EMFILE": "Too many files open. Try processing fewer files at once.",
    "ENFILE": "Too many files open. Try processing fewer files at once.",
    "ENOSPC": "No space left on device when writing to: {path}",
    "EROFS": "Read-only file system: {path}",
}


class FileError(EmojiLinterError):
    """Raised when a file cannot be read, written, or walked."""

    default_message = "File error"
    default_code = ErrorCode.FIL_READ_FAILED

    def __init__(
        self,
        message: str | None = None,
        *,
        file_path: str | None = None,
        errno_name: str | None = None,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.file_path = file_path
        self.errno_name = errno_name
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        if errno_name:
            details["errno"] = errno_name
        super().__init__(message, code=code, details=details, cause=cause)

    def friendly_message(self) -> str:
        """Return a user-facing message keyed on the system error name."""
        template = _FRIENDLY_MESSAGES.get(self.errno_name or "")
        if template is None:
            return f"File error: {self.message} ({self.file_path})"
        return template.format(path=self.file_path)


# Git Errors


class GitError(EmojiLinterError):
    """Raised when a git operation needed by the hook helpers fails."""

    default_message = "Git operation failed"
    default_code = ErrorCode.GIT_COMMAND_FAILED

    def __init__(
        self,
        message: str | None = None,
        *,
        command: str | None = None,
        stderr: str | None = None,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        details = details or {}
        if command:
            details["command"] = command
        if stderr:
            details["stderr"] = stderr.strip()[:500]
        super().__init__(message, code=code, details=details, cause=cause)
