"""File discovery and reading.

Decides which files are worth scanning, walks directories and reads file
contents with a size cap. Per-file failures are reported on the yielded
records rather than raised, so one unreadable file never stops a run.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from emoji_linter.errors import EmojiLinterError, FileError, file_error_from_os_error

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 50 * 1024 * 1024

SKIPPED_DIRECTORIES = frozenset({".git", "node_modules"})

BINARY_EXTENSIONS = frozenset(
    {
        # Images
        ".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".tif", ".ico", ".webp",
        ".avif", ".heic", ".heif", ".raw", ".cr2", ".nef", ".orf", ".sr2",
        # Video
        ".mp4", ".avi", ".mov", ".wmv", ".flv", ".webm", ".mkv", ".m4v", ".3gp", ".ogv",
        # Audio
        ".mp3", ".wav", ".aac", ".ogg", ".wma", ".flac", ".m4a", ".opus",
        # Archives
        ".zip", ".tar", ".gz", ".bz2", ".7z", ".rar", ".xz", ".lz4", ".zst",
        # Executables
        ".exe", ".dll", ".so", ".dylib", ".bin", ".app", ".deb", ".rpm", ".msi",
        ".dmg", ".pkg", ".snap", ".appimage",
        # Documents
        ".pdf", ".doc", ".docx", ".xls", ".xlsx", ".ppt", ".pptx", ".odt", ".ods", ".odp",
        # Fonts
        ".ttf", ".otf", ".woff", ".woff2", ".eot",
        # Other
        ".db", ".sqlite", ".sqlite3", ".pyc", ".class", ".jar", ".war", ".ear",
        ".node", ".wasm", ".o", ".obj", ".lib", ".a",
    }
)  # fmt: skip

TEXT_EXTENSIONS = frozenset(
    {
        # Programming languages
        ".js", ".jsx", ".ts", ".tsx", ".py", ".java", ".cpp", ".c", ".h", ".hpp",
        ".cs", ".php", ".rb", ".go", ".rs", ".swift", ".kt", ".scala", ".clj", ".hs",
        ".elm", ".dart", ".lua", ".pl", ".pm", ".r", ".m", ".mm", ".f", ".f90", ".f95",
        ".pas", ".asm", ".s", ".sh", ".bash", ".zsh", ".fish", ".ps1", ".bat", ".cmd",
        # Web
        ".html", ".htm", ".css", ".scss", ".sass", ".less", ".xml", ".xsl", ".xslt",
        ".svg", ".vue", ".svelte", ".astro",
        # Data
        ".json", ".yml", ".yaml", ".toml", ".ini", ".cfg", ".conf", ".properties",
        ".env", ".csv", ".tsv", ".sql",
        # Documentation
        ".md", ".rst", ".txt", ".rtf", ".tex", ".adoc", ".org",
        # Tool config
        ".gitignore", ".gitattributes", ".editorconfig", ".prettierrc", ".eslintrc",
        ".babelrc", ".npmignore", ".dockerignore",
    }
)  # fmt: skip

SPECIAL_TEXT_FILES = frozenset(
    {
        "README", "LICENSE", "CHANGELOG", "CONTRIBUTING", "AUTHORS", "INSTALL",
        "NEWS", "TODO", "COPYING", "NOTICE", "MANIFEST", "VERSION",
        "Dockerfile", "Makefile", "Rakefile", "Gemfile", "Pipfile", "requirements.txt",
        ".gitignore", ".gitattributes", ".env", ".env.example", ".env.local",
        ".eslintrc", ".prettierrc", ".babelrc", ".editorconfig",
    }
)  # fmt: skip


@dataclass(frozen=True)
class FileContent:
    """Decoded file contents.

    Attributes:
        content: Decoded text (possibly truncated).
        is_complete: False if the file was larger than the size cap.
        size: File size on disk in bytes.
    """

    content: str
    is_complete: bool
    size: int


@dataclass(frozen=True)
class ScannedFile:
    """Result of reading one candidate file.

    Exactly one of ``content`` and ``error`` is set unless the file was
    skipped as binary, in which case both are None.
    """

    path: Path
    content: str | None = None
    size: int = 0
    is_text: bool = True
    is_complete: bool = True
    error: EmojiLinterError | None = None


def is_text_file(file_path: str | Path) -> bool:
    """Classify a path as text by its name and extension.

    Special names and text extensions win, known binary extensions lose and
    anything unknown is treated as text.
    """
    path = Path(file_path)
    if path.name in SPECIAL_TEXT_FILES:
        return True
    suffix = path.suffix.lower()
    if suffix in TEXT_EXTENSIONS:
        return True
    return suffix not in BINARY_EXTENSIONS


def read_file_content(
    file_path: str | Path, max_size: int = DEFAULT_MAX_FILE_SIZE
) -> FileContent:
    """Read and decode a UTF-8 file, keeping at most ``max_size`` bytes.

    A multi-byte character cut by the cap is dropped.

    Args:
        file_path: File to read.
        max_size: Byte cap.

    Returns:
        FileContent with the decoded text.

    Raises:
        FileError: If the file cannot be opened or read.
        UnicodeDecodeError: If the bytes are not valid UTF-8.
    """
    path = Path(file_path)
    try:
        size = path.stat().st_size
        with path.open("rb") as f:
            data = f.read(max_size)
    except OSError as e:
        raise file_error_from_os_error(e, str(path)) from e

    is_complete = size <= max_size
    if is_complete:
        return FileContent(data.decode("utf-8"), True, size)

    logger.warning(f"{path} is larger than {max_size} bytes, scanning the first part only")
    return FileContent(data.decode("utf-8", errors="ignore"), False, size)


def walk_directory(
    directory: str | Path, skip: Iterable[str] = SKIPPED_DIRECTORIES
) -> Iterator[Path]:
    """Yield every file under ``directory`` in a stable order.

    Directories named in ``skip`` are pruned. Unreadable directories are
    logged and skipped.
    """
    skipped = frozenset(skip)

    def on_error(error: OSError) -> None:
        logger.warning(f"Cannot read directory {error.filename}: {error.strerror}")

    for root, dirs, files in os.walk(directory, onerror=on_error):
        dirs[:] = sorted(d for d in dirs if d not in skipped)
        for name in sorted(files):
            yield Path(root) / name


def scan_files(
    paths: Iterable[str | Path], max_size: int = DEFAULT_MAX_FILE_SIZE
) -> Iterator[ScannedFile]:
    """Read each path, yielding one ScannedFile per path.

    Binary files (by name, or by failing UTF-8 decoding) are yielded with
    ``is_text=False`` and no content.
    """
    for raw_path in paths:
        path = Path(raw_path)
        if not is_text_file(path):
            yield ScannedFile(path=path, is_text=False)
            continue
        try:
            result = read_file_content(path, max_size=max_size)
        except FileError as e:
            logger.debug(f"Failed to read {path}: {e}")
            yield ScannedFile(path=path, is_complete=False, error=e)
            continue
        except UnicodeDecodeError:
            logger.debug(f"Skipping {path}: not valid UTF-8")
            yield ScannedFile(path=path, is_text=False)
            continue
        yield ScannedFile(
            path=path,
            content=result.content,
            size=result.size,
            is_complete=result.is_complete,
        )
