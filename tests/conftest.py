"""Pytest configuration for emoji-linter tests.

Resets the shared detector between tests and keeps config discovery away
from the developer's working directory.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from emoji_linter.config import DetectionConfig, LinterConfig
from emoji_linter.detection import EmojiDetector, reset_detector


@pytest.fixture(autouse=True)
def reset_shared_detector():
    """Reset the module-level detector before and after each test."""
    reset_detector()
    yield
    reset_detector()


@pytest.fixture
def detector() -> EmojiDetector:
    """Detector with default settings."""
    return EmojiDetector(DetectionConfig())


@pytest.fixture
def config() -> LinterConfig:
    """Linter config with defaults."""
    return LinterConfig()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty project directory that is also the cwd."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_file(project: Path) -> Callable[[str, str], Path]:
    """Write a UTF-8 file under the project directory."""

    def _write(relative: str, content: str) -> Path:
        path = project / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
