"""Emoji Linter - Check and fix files.

Ties file discovery, the detection engine and ignore rules together.

Usage:
    from emoji_linter.linter import EmojiLinter

    linter = EmojiLinter(config)
    report = linter.check(["src", "README.md"])
    print(report.summary.total_emojis)

    fixed = linter.fix(["src"], dry_run=True)
"""

from __future__ import annotations

import logging
import shutil
import time
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from emoji_linter.config import LinterConfig
from emoji_linter.detection import EmojiDetector, EmojiMatch, delete_spans
from emoji_linter.errors import (
    EmojiLinterError,
    ErrorCode,
    FileError,
    file_error_from_os_error,
)
from emoji_linter.files import scan_files, walk_directory
from emoji_linter.ignore import IgnoreRules

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


# =============================================================================
# Result types
# =============================================================================


@dataclass
class FileResult:
    """Findings for one file.

    Attributes:
        path: File that was scanned.
        matches: Reported emoji, in line order.
        context: Source line (stripped) for each line with a finding.
        is_complete: False if the file was truncated by the size cap.
        error: Set if the file could not be scanned.
    """

    path: Path
    matches: list[EmojiMatch] = field(default_factory=list)
    context: dict[int, str] = field(default_factory=dict)
    is_complete: bool = True
    error: EmojiLinterError | None = None

    @property
    def has_emojis(self) -> bool:
        return bool(self.matches)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": str(self.path),
            "emojis": [m.to_dict() for m in self.matches],
            "isComplete": self.is_complete,
            "error": self.error.to_dict() if self.error else None,
        }


@dataclass
class LintSummary:
    """Totals for a check run."""

    total_files: int = 0
    files_with_emojis: int = 0
    total_emojis: int = 0
    by_category: dict[str, int] = field(default_factory=dict)
    errors: int = 0
    processing_time: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalFiles": self.total_files,
            "filesWithEmojis": self.files_with_emojis,
            "totalEmojis": self.total_emojis,
            "byCategory": dict(self.by_category),
            "errors": self.errors,
            "processingTime": round(self.processing_time, 3),
        }


@dataclass
class LintReport:
    """Outcome of :meth:`EmojiLinter.check`."""

    files: list[FileResult]
    summary: LintSummary

    @property
    def has_emojis(self) -> bool:
        return self.summary.total_emojis > 0

    @property
    def files_with_emojis(self) -> list[FileResult]:
        return [f for f in self.files if f.has_emojis]

    @property
    def errors(self) -> list[FileResult]:
        return [f for f in self.files if f.error is not None]

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "files": [f.to_dict() for f in self.files if f.has_emojis or f.error],
        }


@dataclass
class FixResult:
    """What :meth:`EmojiLinter.fix` did to one file."""

    path: Path
    removed: int = 0
    backup_path: Path | None = None
    error: EmojiLinterError | None = None

    @property
    def changed(self) -> bool:
        return self.removed > 0 and self.error is None


@dataclass
class FixReport:
    """Outcome of :meth:`EmojiLinter.fix`."""

    files: list[FixResult]
    dry_run: bool = False
    processing_time: float = 0.0

    @property
    def files_changed(self) -> int:
        return sum(1 for f in self.files if f.changed)

    @property
    def total_removed(self) -> int:
        return sum(f.removed for f in self.files if f.error is None)

    @property
    def errors(self) -> list[FixResult]:
        return [f for f in self.files if f.error is not None]


# =============================================================================
# Linter
# =============================================================================


def _may_contain_emoji(line: str, shortcodes: bool) -> bool:
    # Every emoji form needs a non-ASCII code point except shortcodes.
    if not line.isascii():
        return True
    return shortcodes and ":" in line


class EmojiLinter:
    """Scans files for emoji and optionally removes them.

    Attributes:
        config: Full linter configuration.
        detector: Detection engine built from ``config.detection``.
        rules: Ignore rules built from ``config.ignore``.
    """

    def __init__(self, config: LinterConfig | None = None) -> None:
        self.config = config or LinterConfig()
        self.detector = EmojiDetector(self.config.detection)
        self.rules = IgnoreRules.from_config(self.config.ignore)

    def collect_files(self, paths: Iterable[str | Path]) -> Iterator[Path | FileError]:
        """Expand paths into files, dropping ignored ones.

        Yields:
            A Path for each file to scan, or a FileError for a path that
            does not exist.
        """
        for raw in paths:
            path = Path(raw)
            if path.is_dir():
                for file_path in walk_directory(path):
                    if not self.rules.is_path_ignored(file_path):
                        yield file_path
            elif path.is_file():
                if not self.rules.is_path_ignored(path):
                    yield path
            else:
                yield FileError(
                    f"Path not found: {path}",
                    file_path=str(path),
                    errno_name="ENOENT",
                    code=ErrorCode.FIL_NOT_FOUND,
                )

    def scan_text(self, content: str, path: str | Path = "<text>") -> FileResult:
        """Find reportable emoji in one file's contents.

        Lines are scanned one at a time so line numbers and columns refer to
        the file.

        Raises:
            LengthExceededError: If a single line exceeds the length limit.
        """
        result = FileResult(path=Path(path))
        if self.rules.is_file_ignored(path, content):
            logger.debug(f"Skipping {path}: file-level ignore marker")
            return result

        lines = content.split("\n")
        shortcodes = self.config.detection.include_shortcodes
        found: list[EmojiMatch] = []
        for number, line in enumerate(lines, start=1):
            if _may_contain_emoji(line, shortcodes):
                found.extend(self.detector.find_emojis(line, line_number=number))

        result.matches = self.rules.filter_matches(found, lines)
        if self.config.output.show_context:
            result.context = {m.line: lines[m.line - 1].strip() for m in result.matches}
        return result

    def _iter_results(self, paths: Iterable[str | Path]) -> Iterator[FileResult]:
        targets = list(self.collect_files(paths))
        files = [t for t in targets if isinstance(t, Path)]
        for missing in (t for t in targets if isinstance(t, FileError)):
            yield FileResult(path=Path(missing.file_path or ""), error=missing)

        for scanned in scan_files(files):
            if scanned.error is not None:
                yield FileResult(path=scanned.path, is_complete=False, error=scanned.error)
                continue
            if scanned.content is None:
                continue
            try:
                result = self.scan_text(scanned.content, scanned.path)
            except EmojiLinterError as e:
                logger.warning(f"Could not scan {scanned.path}: {e.message}")
                yield FileResult(path=scanned.path, error=e)
                continue
            result.is_complete = scanned.is_complete
            yield result

    def check(self, paths: Iterable[str | Path]) -> LintReport:
        """Scan paths and report every emoji found.

        Args:
            paths: Files and directories to scan.

        Returns:
            LintReport with per-file results and a summary.
        """
        start = time.perf_counter()
        results = list(self._iter_results(paths))

        categories: Counter[str] = Counter(
            m.category.value for r in results for m in r.matches
        )
        summary = LintSummary(
            total_files=sum(1 for r in results if r.error is None),
            files_with_emojis=sum(1 for r in results if r.has_emojis),
            total_emojis=sum(len(r.matches) for r in results),
            by_category=dict(categories),
            errors=sum(1 for r in results if r.error is not None),
            processing_time=time.perf_counter() - start,
        )
        logger.debug(
            f"Checked {summary.total_files} files, {summary.total_emojis} emojis "
            f"in {summary.processing_time:.3f}s"
        )
        return LintReport(files=results, summary=summary)

    def fix_text(self, content: str, matches: Iterable[EmojiMatch]) -> str:
        """Remove the given per-line matches from ``content``."""
        by_line: dict[int, list[EmojiMatch]] = {}
        for match in matches:
            by_line.setdefault(match.line, []).append(match)
        if not by_line:
            return content

        lines = content.split("\n")
        for number, line_matches in by_line.items():
            lines[number - 1] = delete_spans(lines[number - 1], line_matches)
        return "\n".join(lines)

    def _fix_file(self, result: FileResult, dry_run: bool) -> FixResult:
        fix = FixResult(path=result.path, removed=len(result.matches))
        if dry_run:
            return fix

        path = result.path
        try:
            original = path.read_bytes().decode("utf-8")
        except OSError as e:
            fix.error = file_error_from_os_error(e, str(path))
            return fix

        cleaned = self.fix_text(original, result.matches)
        try:
            if self.config.cleanup.create_backup:
                fix.backup_path = path.with_name(path.name + BACKUP_SUFFIX)
                shutil.copy2(path, fix.backup_path)
            path.write_bytes(cleaned.encode("utf-8"))
        except OSError as e:
            fix.error = file_error_from_os_error(e, str(path), writing=True)
            return fix

        logger.debug(f"Removed {fix.removed} emoji(s) from {path}")
        return fix

    def fix(self, paths: Iterable[str | Path], dry_run: bool = False) -> FixReport:
        """Remove reported emoji from files in place.

        Ignored lines, ignored emoji and ignored files are left alone.
        Truncated files are never rewritten.

        Args:
            paths: Files and directories to fix.
            dry_run: Report what would change without writing.

        Returns:
            FixReport with one entry per file that had findings or errors.
        """
        start = time.perf_counter()
        fixes: list[FixResult] = []
        for result in self._iter_results(paths):
            if result.error is not None:
                fixes.append(FixResult(path=result.path, error=result.error))
            elif not result.has_emojis:
                continue
            elif not result.is_complete:
                fixes.append(
                    FixResult(
                        path=result.path,
                        error=FileError(
                            f"File too large to fix safely: {result.path}",
                            file_path=str(result.path),
                            code=ErrorCode.FIL_WRITE_FAILED,
                        ),
                    )
                )
            else:
                fixes.append(self._fix_file(result, dry_run))

        return FixReport(
            files=fixes, dry_run=dry_run, processing_time=time.perf_counter() - start
        )
