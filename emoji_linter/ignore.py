"""Ignore rules - inline markers, file globs and ignored emoji.

Inline markers work in any common comment style:

    // emoji-linter-disable-line
    /* emoji-linter-disable */
    # emoji-linter-disable
    <!-- emoji-linter-disable -->

A line carrying a marker is skipped. ``emoji-linter-disable-file`` in one of
the first ten lines skips the whole file.

Usage:
    from emoji_linter.ignore import IgnoreRules

    rules = IgnoreRules.from_config(config.ignore)
    if not rules.is_file_ignored("dist/app.min.js"):
        kept = rules.filter_matches(matches, lines)
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path, PurePath

from emoji_linter.config import IgnoreConfig
from emoji_linter.detection import EmojiMatch
from emoji_linter.errors import ConfigurationError

logger = logging.getLogger(__name__)

FILE_MARKER_SCAN_LINES = 10

LINE_MARKER_PATTERNS = (
    re.compile(r"//\s*emoji-linter-disable(?:-line)?", re.IGNORECASE),
    re.compile(r"/\*\s*emoji-linter-disable(?:-line)?\s*\*/", re.IGNORECASE),
    re.compile(r"#\s*emoji-linter-disable(?:-line)?", re.IGNORECASE),
    re.compile(r"<!--\s*emoji-linter-disable(?:-line)?\s*-->", re.IGNORECASE),
)

FILE_MARKER_PATTERNS = (
    re.compile(r"//\s*emoji-linter-disable-file", re.IGNORECASE),
    re.compile(r"/\*\s*emoji-linter-disable-file\s*\*/", re.IGNORECASE),
    re.compile(r"#\s*emoji-linter-disable-file", re.IGNORECASE),
    re.compile(r"<!--\s*emoji-linter-disable-file\s*-->", re.IGNORECASE),
)


def should_ignore_line(line: str) -> bool:
    """Return True if the line carries an inline disable marker."""
    return any(pattern.search(line) for pattern in LINE_MARKER_PATTERNS)


def should_ignore_file(content: str) -> bool:
    """Return True if a file-level marker appears in the first ten lines."""
    head = content.split("\n", FILE_MARKER_SCAN_LINES)[:FILE_MARKER_SCAN_LINES]
    return any(
        pattern.search(line) for line in head for pattern in FILE_MARKER_PATTERNS
    )


def parse_ignore_comments(content: str) -> set[int]:
    """Collect 1-based line numbers that carry an inline disable marker."""
    return {
        number
        for number, line in enumerate(content.split("\n"), start=1)
        if should_ignore_line(line)
    }


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Translate a glob into an anchored regular expression.

    ``**`` matches across directories, ``*`` and ``?`` stay within one path
    segment. A leading ``**/`` also matches paths at the top level.
    """
    parts: list[str] = []
    i = 0
    if pattern.startswith("**/"):
        parts.append("(?:.*/)?")
        i = 3
    while i < len(pattern):
        if pattern.startswith("**", i):
            parts.append(".*")
            i += 2
        elif pattern[i] == "*":
            parts.append("[^/]*")
            i += 1
        elif pattern[i] == "?":
            parts.append("[^/]")
            i += 1
        else:
            parts.append(re.escape(pattern[i]))
            i += 1
    return re.compile("^" + "".join(parts) + "$")


def normalize_path(file_path: str | PurePath, root: Path | None = None) -> str:
    """Express a path relative to ``root`` (default: cwd) with forward slashes."""
    path = Path(file_path)
    if path.is_absolute():
        base = (root or Path.cwd()).resolve()
        try:
            path = path.resolve().relative_to(base)
        except ValueError:
            pass
    return path.as_posix()


def match_glob(file_path: str | PurePath, pattern: str) -> bool:
    """Return True if the path matches the glob pattern."""
    normalized = normalize_path(file_path)
    if normalized == pattern:
        return True
    return glob_to_regex(pattern).match(normalized) is not None


@dataclass
class IgnoreRules:
    """Configured ignore lists plus inline marker handling.

    Attributes:
        file_globs: Glob patterns of paths to skip.
        emojis: Exact emoji texts never reported.
        line_patterns: Compiled regexes; findings on matching lines are dropped.
    """

    file_globs: list[str] = field(default_factory=list)
    emojis: frozenset[str] = frozenset()
    line_patterns: list[re.Pattern[str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._compiled_globs = [glob_to_regex(glob) for glob in self.file_globs]

    @classmethod
    def from_config(cls, config: IgnoreConfig) -> IgnoreRules:
        """Build rules from the ``ignore`` config section.

        Raises:
            ConfigurationError: If a line pattern is not a valid regex.
        """
        compiled = []
        for raw in config.patterns:
            try:
                compiled.append(re.compile(raw))
            except re.error as e:
                raise ConfigurationError(
                    f"Invalid ignore pattern {raw!r}: {e}",
                    config_key="ignore.patterns",
                    cause=e,
                ) from e
        return cls(
            file_globs=list(config.files),
            emojis=frozenset(config.emojis),
            line_patterns=compiled,
        )

    def is_path_ignored(self, file_path: str | PurePath) -> bool:
        """Return True if the path matches an ignore glob."""
        normalized = normalize_path(file_path)
        for glob, regex in zip(self.file_globs, self._compiled_globs, strict=True):
            if normalized == glob or regex.match(normalized):
                logger.debug(f"Ignoring {normalized} (matches {glob})")
                return True
        return False

    def is_file_ignored(self, file_path: str | PurePath, content: str | None = None) -> bool:
        """Return True if the path is globbed out or the content opts out."""
        if content and should_ignore_file(content):
            return True
        return self.is_path_ignored(file_path)

    def is_line_ignored(self, line: str) -> bool:
        """Return True if the line has a marker or matches a line pattern."""
        if should_ignore_line(line):
            return True
        return any(pattern.search(line) for pattern in self.line_patterns)

    def filter_matches(
        self, matches: Iterable[EmojiMatch], lines: Sequence[str]
    ) -> list[EmojiMatch]:
        """Drop matches on ignored lines and matches of ignored emoji.

        Args:
            matches: Findings with 1-based line numbers into ``lines``.
            lines: The scanned file split on newlines.

        Returns:
            Findings that should be reported.
        """
        line_cache: dict[int, bool] = {}
        kept = []
        for match in matches:
            if match.text in self.emojis:
                continue
            if match.line not in line_cache:
                index = match.line - 1
                line = lines[index] if 0 <= index < len(lines) else ""
                line_cache[match.line] = self.is_line_ignored(line)
            if line_cache[match.line]:
                continue
            kept.append(match)
        return kept
