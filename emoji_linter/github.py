"""GitHub Actions helpers.

Validates action inputs, decides whether a run is on a pull request and
renders the markdown comment posted back to it. Posting is left to the
workflow; nothing here talks to the network.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import Any

from emoji_linter.errors import ValidationError
from emoji_linter.linter import LintReport

MAX_FILES_IN_COMMENT = 10

PULL_REQUEST_EVENTS = frozenset({"pull_request", "pull_request_target"})


class LintMode(Enum):
    """What a check run expects to find."""

    CLEAN = "clean"
    REQUIRE = "require"
    FORBID = "forbid"

    def passed(self, has_emojis: bool) -> bool:
        """Return True if a run with the given outcome satisfies this mode."""
        if self is LintMode.REQUIRE:
            return has_emojis
        return not has_emojis


def parse_mode(value: str) -> LintMode:
    """Parse a mode name.

    Raises:
        ValidationError: If the name is not a known mode.
    """
    try:
        return LintMode(value)
    except ValueError:
        valid = ", ".join(m.value for m in LintMode)
        raise ValidationError(
            f"Invalid mode: {value}. Valid modes: {valid}",
            field="mode",
            value=value,
            expected=valid,
        ) from None


def validate_action_inputs(inputs: Mapping[str, Any]) -> LintMode:
    """Check the inputs of the GitHub Action.

    Args:
        inputs: Mapping with ``mode``, ``path`` and ``config_file`` keys.

    Returns:
        The parsed mode.

    Raises:
        ValidationError: If any input is missing or invalid.
    """
    mode = parse_mode(str(inputs.get("mode", "")))
    for key, label in (("path", "Path"), ("config_file", "Config file")):
        value = inputs.get(key)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{label} cannot be empty", field=key, expected="non-empty string")
    return mode


def is_pull_request(
    event_name: str | None = None, payload: Mapping[str, Any] | None = None
) -> bool:
    """Return True if the workflow run was triggered by a pull request.

    Args:
        event_name: Event name. Defaults to ``$GITHUB_EVENT_NAME``.
        payload: Event payload. When given it must carry a numeric
            ``pull_request.number``.
    """
    if event_name is None:
        event_name = os.environ.get("GITHUB_EVENT_NAME")
    if event_name not in PULL_REQUEST_EVENTS:
        return False
    if payload is None:
        return True
    pull_request = payload.get("pull_request")
    return isinstance(pull_request, Mapping) and isinstance(pull_request.get("number"), int)


def get_pr_number(payload: Mapping[str, Any] | None) -> int | None:
    """Extract a positive pull request number from an event payload."""
    if not payload:
        return None
    pull_request = payload.get("pull_request")
    if not isinstance(pull_request, Mapping):
        return None
    number = pull_request.get("number")
    if isinstance(number, int) and not isinstance(number, bool) and number > 0:
        return number
    return None


_MODE_MESSAGES = {
    (LintMode.CLEAN, True): "Found emojis that should be cleaned up.",
    (LintMode.REQUIRE, True): "Found the required emojis.",
    (LintMode.REQUIRE, False): "Emojis are required but none were found.",
    (LintMode.FORBID, True): "Found emojis that are not allowed.",
}


def format_pr_comment(report: LintReport, mode: LintMode) -> str:
    """Render a markdown report for a pull request comment.

    At most ten files are listed; the rest are summarized in one line.
    """
    summary = report.summary
    has_emojis = summary.total_emojis > 0
    status = "PASS" if mode.passed(has_emojis) else "FAIL"
    found = "Emojis found" if has_emojis else "No emojis found"

    lines = [
        "## Emoji Linter Report",
        "",
        f"**Status:** {status} - {found}",
        f"**Mode:** {mode.value}",
        f"**Files scanned:** {summary.total_files}",
        f"**Files with emojis:** {summary.files_with_emojis}",
        f"**Total emojis:** {summary.total_emojis}",
        "",
    ]

    message = _MODE_MESSAGES.get((mode, has_emojis))
    if message:
        lines += [message, ""]

    flagged = report.files_with_emojis
    if flagged:
        lines += ["### Files with emojis:", ""]
        for result in flagged[:MAX_FILES_IN_COMMENT]:
            count = len(result.matches)
            noun = "emoji" if count == 1 else "emojis"
            lines.append(f"**{result.path}** ({count} {noun})")
            for match in result.matches:
                lines.append(
                    f"- Line {match.line}, Column {match.column_start}: "
                    f"{match.text} ({match.category.value})"
                )
            lines.append("")
        remaining = len(flagged) - MAX_FILES_IN_COMMENT
        if remaining > 0:
            lines += [f"... and {remaining} more files", ""]

    errored = [r for r in report.files if r.error is not None]
    if errored:
        lines += ["### Errors encountered:", ""]
        for result in errored:
            lines.append(f"- **{result.path}**: {result.error.message}")
        lines.append("")

    return "\n".join(lines)
