"""Integration tests for the emoji-linter CLI.

Commands run in-process through ``main`` against a temporary project.
"""

import json
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from emoji_linter.cli import create_parser, main, run_with_error_handling
from emoji_linter.errors import ConfigurationError, GitError


class TestParser:
    """Tests for argument parsing."""

    def test_check_defaults(self):
        args = create_parser().parse_args(["check"])
        assert args.command == "check"
        assert args.paths == []
        assert args.mode == "clean"
        assert args.format is None
        assert args.staged is False

    def test_check_options(self):
        args = create_parser().parse_args(
            ["check", "-f", "minimal", "--mode", "require", "src", "docs"]
        )
        assert args.format == "minimal"
        assert args.mode == "require"
        assert args.paths == ["src", "docs"]

    def test_invalid_format_rejected(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["check", "-f", "xml"])

    def test_fix_dry_run(self):
        args = create_parser().parse_args(["fix", "-n", "a.md"])
        assert args.dry_run is True
        assert args.paths == ["a.md"]

    def test_install_hook_force(self):
        assert create_parser().parse_args(["install-hook", "--force"]).force is True


class TestMain:
    """Tests for main and the command handlers."""

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert "emoji-linter v1.0.0" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: emoji-linter" in capsys.readouterr().out

    def test_check_clean_project(self, project, write_file, capsys):
        write_file("a.py", "print('hi')\n")
        assert main(["check", "-f", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["totalFiles"] == 1
        assert data["summary"]["totalEmojis"] == 0

    def test_check_finds_emoji(self, project, write_file, capsys):
        write_file("README.md", "Ship it 🚀\n")
        assert main(["check", "-f", "minimal", "README.md"]) == 1
        assert capsys.readouterr().out.strip() == "README.md:1:9 🚀"

    @pytest.mark.parametrize(
        "mode,content,expected",
        [
            ("clean", "plain\n", 0),
            ("clean", "🚀\n", 1),
            ("forbid", "🚀\n", 1),
            ("require", "🚀\n", 0),
            ("require", "plain\n", 1),
        ],
    )
    def test_check_modes(self, project, write_file, mode, content, expected):
        write_file("a.txt", content)
        assert main(["check", "-f", "minimal", "--mode", mode]) == expected

    def test_check_missing_path_fails(self, project, capsys):
        assert main(["check", "-f", "json", "missing"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["errors"] == 1

    def test_check_uses_config_file(self, project, write_file, capsys):
        write_file(".emoji-linter.config.json", json.dumps({"ignore": {"files": ["docs/**"]}}))
        write_file("docs/a.md", "🚀\n")
        assert main(["check", "-f", "minimal", "docs"]) == 0
        assert capsys.readouterr().out.strip() == "No emojis found."

    def test_check_writes_pr_comment(self, project, write_file):
        write_file("src/a.md", "🚀\n")
        comment = project / "comment.md"
        main(["check", "-f", "minimal", "--pr-comment", str(comment), "src"])
        text = comment.read_text(encoding="utf-8")
        assert "## Emoji Linter Report" in text
        assert "**Status:** FAIL - Emojis found" in text

    def test_check_staged_nothing_staged(self, project, capsys):
        with patch("emoji_linter._cli_main.get_staged_files", return_value=[]):
            assert main(["check", "--staged"]) == 0
        assert "No staged files to check." in capsys.readouterr().out

    def test_check_staged_files(self, project, write_file):
        staged = write_file("a.md", "🚀\n")
        write_file("b.md", "🚀\n")
        with patch("emoji_linter._cli_main.get_staged_files", return_value=[staged]):
            assert main(["check", "-f", "json", "--staged"]) == 1

    def test_fix_removes_emoji(self, project, write_file, capsys):
        path = write_file("a.md", "Ship it 🚀 :tada:\n")
        assert main(["fix"]) == 0
        assert path.read_text(encoding="utf-8") == "Ship it  \n"
        assert "Removed 2 emojis" in capsys.readouterr().out

    def test_fix_dry_run(self, project, write_file, capsys):
        path = write_file("a.md", "Ship it 🚀\n")
        assert main(["fix", "--dry-run"]) == 0
        assert path.read_text(encoding="utf-8") == "Ship it 🚀\n"
        assert "Would remove 1 emoji" in capsys.readouterr().out

    def test_missing_config_raises(self, project):
        with pytest.raises(ConfigurationError, match="Config file not found"):
            main(["--config", "missing.json", "check"])

    def test_install_hook(self, project, capsys):
        hook = project / ".git" / "hooks" / "pre-commit"
        with patch("emoji_linter._cli_main.install_pre_commit_hook", return_value=hook) as install:
            assert main(["install-hook", "--force"]) == 0
        install.assert_called_once_with(force=True)
        assert "Installed pre-commit hook" in capsys.readouterr().out


class TestRunWithErrorHandling:
    """Tests for the top-level error handler."""

    def test_success_exit_code(self, project):
        with pytest.raises(SystemExit) as exc_info:
            run_with_error_handling(main, ["--version"])
        assert exc_info.value.code == 0

    def test_linter_error_exits_one(self, project, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run_with_error_handling(main, ["--config", "missing.json", "check"])
        assert exc_info.value.code == 1
        err = capsys.readouterr().err
        assert "Config file not found" in err
        assert "Config file: missing.json" in err

    def test_hook_conflict_hint(self, project, capsys):
        error = GitError("A pre-commit hook already exists", details={"hook_path": "x"})
        with patch("emoji_linter._cli_main.install_pre_commit_hook", side_effect=error):
            with pytest.raises(SystemExit) as exc_info:
                run_with_error_handling(main, ["install-hook"])
        assert exc_info.value.code == 1
        assert "--force" in capsys.readouterr().err

    def test_unexpected_error(self, project, capsys):
        with patch("emoji_linter._cli_main.cmd_version", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as exc_info:
                run_with_error_handling(main, ["--version"])
        assert exc_info.value.code == 1
        assert "Unexpected error: boom" in capsys.readouterr().err


class TestImports:
    """Tests for module import order."""

    def test_cli_main_imports_first(self):
        """The command module imports on its own, before the cli package."""
        result = subprocess.run(
            [sys.executable, "-c", "import emoji_linter._cli_main"],
            capture_output=True,
            text=True,
            check=False,
        )
        assert result.returncode == 0, result.stderr

    def test_error_message_printed_literally(self, project, capsys):
        """Markup and emoji codes in error messages are not interpreted."""
        error = GitError("Hook at [/x]:rocket: is broken")
        with patch("emoji_linter._cli_main.install_pre_commit_hook", side_effect=error):
            with pytest.raises(SystemExit):
                run_with_error_handling(main, ["install-hook"])
        assert "Hook at [/x]:rocket: is broken" in capsys.readouterr().err

    def test_main_module_import_does_not_run(self):
        """Importing the __main__ module does not start the CLI."""
        result = subprocess.run(
            [sys.executable, "-c", "import emoji_linter.__main__"],
            capture_output=True,
            text=True,
            check=False,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout == ""
