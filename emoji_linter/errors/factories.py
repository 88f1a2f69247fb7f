"""Convenience factory functions for common error scenarios.

Provides shorthand functions for creating commonly-used error instances
with appropriate error codes and details pre-filled.
"""

from __future__ import annotations

import errno
from typing import Any

from emoji_linter.errors.base import ErrorCode
from emoji_linter.errors.domain import (
    FileError,
    GitError,
    InvalidInputError,
    LengthExceededError,
)


def invalid_input(value: Any) -> InvalidInputError:
    """Create an InvalidInputError for a non-text argument."""
    if value is None:
        return InvalidInputError("Text cannot be None", field="text", expected="str")
    return InvalidInputError(
        f"Text must be a string, got {type(value).__name__}",
        field="text",
        value=value,
        expected="str",
    )


def text_too_long(length: int, max_length: int) -> LengthExceededError:
    """Create a LengthExceededError for an oversized buffer."""
    return LengthExceededError(
        f"Text exceeds maximum length ({length} > {max_length})",
        length=length,
        max_length=max_length,
    )


_ERRNO_CODES = {
    errno.ENOENT: ErrorCode.FIL_NOT_FOUND,
    errno.EACCES: ErrorCode.FIL_ACCESS_DENIED,
    errno.EPERM: ErrorCode.FIL_ACCESS_DENIED,
}


def file_error_from_os_error(
    error: OSError, file_path: str, *, writing: bool = False
) -> FileError:
    """Create a FileError from an OSError raised by a filesystem call."""
    errno_name = errno.errorcode.get(error.errno) if error.errno is not None else None
    default_code = ErrorCode.FIL_WRITE_FAILED if writing else ErrorCode.FIL_READ_FAILED
    code = _ERRNO_CODES.get(error.errno, default_code) if error.errno is not None else default_code
    return FileError(
        error.strerror or str(error),
        file_path=file_path,
        errno_name=errno_name,
        code=code,
        cause=error,
    )


def not_a_git_repository(path: str, stderr: str | None = None) -> GitError:
    """Create a GitError for commands run outside a git work tree."""
    return GitError(
        f"Not in a git repository: {path}",
        stderr=stderr,
        code=ErrorCode.GIT_NOT_A_REPOSITORY,
    )
