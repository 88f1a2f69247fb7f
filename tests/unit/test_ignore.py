"""Unit tests for ignore rules."""

import re

import pytest

from emoji_linter.config import IgnoreConfig
from emoji_linter.detection import find_emojis
from emoji_linter.errors import ConfigurationError
from emoji_linter.ignore import (
    IgnoreRules,
    glob_to_regex,
    match_glob,
    parse_ignore_comments,
    should_ignore_file,
    should_ignore_line,
)


class TestInlineMarkers:
    """Tests for line-level markers."""

    @pytest.mark.parametrize(
        "line",
        [
            "x = '🚀'  // emoji-linter-disable-line",
            "x = '🚀'  // emoji-linter-disable",
            "x = '🚀'  /* emoji-linter-disable */",
            "x = '🚀'  # emoji-linter-disable-line",
            "<p>🚀</p> <!-- emoji-linter-disable -->",
            "x = '🚀'  #EMOJI-LINTER-DISABLE",
        ],
    )
    def test_markers(self, line):
        """Every comment style is recognized, case-insensitively."""
        assert should_ignore_line(line) is True

    def test_plain_line(self):
        """Lines without markers are not ignored."""
        assert should_ignore_line("x = '🚀'") is False

    def test_parse_ignore_comments(self):
        """Marked lines are returned 1-based."""
        content = "a\nb # emoji-linter-disable\nc\nd // emoji-linter-disable-line"
        assert parse_ignore_comments(content) == {2, 4}


class TestFileMarker:
    """Tests for file-level markers."""

    def test_marker_at_top(self):
        """A marker in the first line skips the file."""
        assert should_ignore_file("# emoji-linter-disable-file\n🚀") is True

    def test_marker_on_tenth_line(self):
        """Markers up to line ten count."""
        content = "\n" * 9 + "<!-- emoji-linter-disable-file -->"
        assert should_ignore_file(content) is True

    def test_marker_too_late(self):
        """Markers after line ten are ignored."""
        content = "\n" * 10 + "// emoji-linter-disable-file"
        assert should_ignore_file(content) is False


class TestGlobs:
    """Tests for glob matching."""

    @pytest.mark.parametrize(
        "path,pattern,expected",
        [
            ("src/app.js", "src/app.js", True),
            ("src/app.js", "src/*.js", True),
            ("src/lib/app.js", "src/*.js", False),
            ("src/lib/app.js", "src/**/*.js", True),
            ("app.min.js", "**/*.min.js", True),
            ("dist/vendor/app.min.js", "**/*.min.js", True),
            ("dist/app.js", "dist/**", True),
            ("a.md", "?.md", True),
            ("ab.md", "?.md", False),
            ("fileXjs", "file.js", False),
        ],
    )
    def test_match_glob(self, path, pattern, expected):
        """Globs follow *, ** and ? semantics."""
        assert match_glob(path, pattern) is expected

    def test_regex_is_anchored(self):
        """Patterns match whole paths."""
        assert glob_to_regex("*.js").match("app.js.map") is None

    def test_absolute_paths_made_relative(self, project):
        """Absolute paths under the cwd match relative globs."""
        assert match_glob(project / "docs" / "a.md", "docs/*.md") is True


class TestIgnoreRules:
    """Tests for IgnoreRules."""

    def test_from_config(self):
        """Rules are built from the ignore section."""
        rules = IgnoreRules.from_config(
            IgnoreConfig(files=["dist/**"], emojis=["✅"], patterns=["^\\s*#"])
        )
        assert rules.is_path_ignored("dist/app.js") is True
        assert rules.is_path_ignored("src/app.js") is False
        assert rules.emojis == frozenset({"✅"})

    def test_invalid_pattern(self):
        """Invalid regexes are configuration errors."""
        with pytest.raises(ConfigurationError) as exc_info:
            IgnoreRules.from_config(IgnoreConfig(patterns=["("]))
        assert exc_info.value.details["config_key"] == "ignore.patterns"

    def test_file_marker_ignores_file(self):
        """File content can opt out."""
        rules = IgnoreRules()
        assert rules.is_file_ignored("a.py", "# emoji-linter-disable-file\n") is True
        assert rules.is_file_ignored("a.py", "print()\n") is False

    def test_filter_matches(self):
        """Ignored emoji, marked lines and pattern lines are dropped."""
        content = "ok ✅\nrocket 🚀 // emoji-linter-disable-line\n# note ✨\nkeep 🎉"
        lines = content.split("\n")
        matches = find_emojis(content)
        rules = IgnoreRules(emojis=frozenset({"✅"}), line_patterns=[re.compile("^#")])
        kept = rules.filter_matches(matches, lines)
        assert [m.text for m in kept] == ["🎉"]
