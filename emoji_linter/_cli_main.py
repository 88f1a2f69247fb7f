#!/usr/bin/env python3
# PYTHON_ARGCOMPLETE_OK
"""emoji-linter CLI - Find and remove emoji in source files.

Usage:
    emoji-linter check src/                Report emoji under src/
    emoji-linter check --format json .     Machine-readable report
    emoji-linter check --staged            Check files staged for commit
    emoji-linter fix --dry-run docs/       Show what fix would remove
    emoji-linter fix src/                  Remove emoji in place
    emoji-linter install-hook              Install a git pre-commit hook

Shell Completion:
    To enable shell completion, install argcomplete and run:

    Bash:  eval "$(register-python-argcomplete emoji-linter)"
    Zsh:   eval "$(register-python-argcomplete emoji-linter)"
    Fish:  register-python-argcomplete --shell fish emoji-linter | source
"""

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import NoReturn

# Optional argcomplete support for shell completion
try:
    import argcomplete

    ARGCOMPLETE_AVAILABLE = True
except ImportError:
    ARGCOMPLETE_AVAILABLE = False

from rich.console import Console
from rich.markup import escape

from emoji_linter.config import LinterConfig, load_config
from emoji_linter.errors import (
    ConfigurationError,
    EmojiLinterError,
    FileError,
    GitError,
    LengthExceededError,
)
from emoji_linter.github import format_pr_comment, parse_mode
from emoji_linter.hooks import get_staged_files, install_pre_commit_hook
from emoji_linter.linter import EmojiLinter
from emoji_linter.output import OUTPUT_FORMATS, print_fix_report, print_report

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbose: If True, set DEBUG level; otherwise INFO.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def _format_error(error: EmojiLinterError) -> None:
    """Format and display an emoji-linter error with helpful suggestions.

    Messages carry file paths, so they are escaped and printed without
    emoji code substitution.

    Args:
        error: The error to display.
    """
    message = error.friendly_message() if isinstance(error, FileError) else error.message
    err_console.print(f"[red]Error: {escape(message)}[/red]", emoji=False)

    if isinstance(error, ConfigurationError):
        if error.details.get("config_path"):
            err_console.print(
                f"[yellow]Config file: {escape(error.details['config_path'])}[/yellow]",
                emoji=False,
            )
        if error.details.get("config_key"):
            err_console.print(
                f"[yellow]Setting: {escape(error.details['config_key'])}[/yellow]", emoji=False
            )
    elif isinstance(error, GitError):
        if error.details.get("hook_path"):
            err_console.print("[yellow]Re-run with --force to replace the existing hook.[/yellow]")
        elif error.details.get("stderr"):
            err_console.print(f"[dim]{escape(error.details['stderr'])}[/dim]", emoji=False)
    elif isinstance(error, LengthExceededError):
        err_console.print(
            "[yellow]Raise detection.maxTextLength in the config file to scan longer text.[/yellow]"
        )

    # Log with details for debugging
    logger.debug(
        "EmojiLinterError details - code=%s, details=%s, cause=%s",
        error.code.value,
        error.details,
        error.cause,
    )


def cleanup() -> None:
    """Reset shared state held by the detection engine."""
    from emoji_linter.detection import reset_detector

    reset_detector()


def run_with_error_handling(
    main_func: Callable[[list[str] | None], int], argv: list[str] | None = None
) -> NoReturn:
    """Run main function with error handling and cleanup.

    Args:
        main_func: The main function to run (should return exit code)
        argv: Command-line arguments. Uses sys.argv if None.

    Returns:
        NoReturn - always calls sys.exit()
    """
    try:
        exit_code = main_func(argv)
    except KeyboardInterrupt:
        err_console.print("\n[dim]Interrupted.[/dim]")
        exit_code = 130
    except EmojiLinterError as e:
        _format_error(e)
        logger.debug("emoji-linter error", exc_info=True)
        exit_code = 1
    except Exception as e:
        err_console.print(f"[red]Unexpected error: {escape(str(e))}[/red]", emoji=False)
        logger.exception("Unexpected error")
        exit_code = 1
    finally:
        cleanup()

    sys.exit(exit_code)


def _load_config(args: argparse.Namespace) -> LinterConfig:
    """Load the config named by ``--config``, or discover one in the cwd."""
    return load_config(args.config)


def _resolve_paths(args: argparse.Namespace) -> list[Path] | None:
    """Return the paths a command should work on.

    Returns:
        Paths to scan, or None when ``--staged`` found nothing staged.
    """
    if args.staged:
        staged = get_staged_files()
        return staged or None
    return [Path(p) for p in args.paths] or [Path(".")]


def cmd_check(args: argparse.Namespace) -> int:
    """Report emoji in files.

    Args:
        args: Parsed arguments.

    Returns:
        Exit code: 0 when the mode is satisfied and every file was read,
        1 otherwise.
    """
    config = _load_config(args)
    mode = parse_mode(args.mode)

    paths = _resolve_paths(args)
    if paths is None:
        console.print("[dim]No staged files to check.[/dim]")
        return 0

    linter = EmojiLinter(config)
    report = linter.check(paths)

    output_format = args.format or config.output.format
    print_report(report, output_format, console=console, show_context=config.output.show_context)

    if args.pr_comment:
        comment_path = Path(args.pr_comment)
        comment_path.write_text(format_pr_comment(report, mode), encoding="utf-8")
        logger.debug(f"Wrote PR comment to {comment_path}")

    if report.errors:
        return 1
    return 0 if mode.passed(report.has_emojis) else 1


def cmd_fix(args: argparse.Namespace) -> int:
    """Remove emoji from files in place.

    Args:
        args: Parsed arguments.

    Returns:
        Exit code: 1 if any file could not be fixed.
    """
    config = _load_config(args)

    paths = _resolve_paths(args)
    if paths is None:
        console.print("[dim]No staged files to fix.[/dim]")
        return 0

    linter = EmojiLinter(config)
    report = linter.fix(paths, dry_run=args.dry_run)
    print_fix_report(report, console=console)
    return 1 if report.errors else 0


def cmd_install_hook(args: argparse.Namespace) -> int:
    """Install the git pre-commit hook.

    Args:
        args: Parsed arguments.

    Returns:
        Exit code.
    """
    hook_path = install_pre_commit_hook(force=args.force)
    console.print(
        f"[green]Installed pre-commit hook:[/green] {escape(str(hook_path))}", emoji=False
    )
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Display version information.

    Args:
        args: Parsed arguments.

    Returns:
        Exit code.
    """
    from emoji_linter import __version__

    console.print(f"emoji-linter v{__version__}")
    return 0


class HelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom help formatter with improved argument formatting."""

    def __init__(self, prog: str) -> None:
        """Initialize formatter with wider help text."""
        super().__init__(prog, max_help_position=30, width=100)


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="<path>",
        help="files or directories to process (default: current directory)",
    )
    parser.add_argument(
        "--staged",
        action="store_true",
        help="process files staged for commit instead of <path>",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="emoji-linter",
        description=(
            "emoji-linter - Find and remove emoji in source files\n\n"
            "Detects Unicode emoji (including skin tones, ZWJ sequences, flags,\n"
            "keycaps and tag sequences) and :shortcode: forms."
        ),
        formatter_class=HelpFormatter,
        epilog="""
Quick Start:
  emoji-linter check .             Report emoji in the current directory
  emoji-linter fix --dry-run .     Preview removals
  emoji-linter fix .               Remove emoji in place

Ignoring:
  // emoji-linter-disable-line     Skip a single line (also #, /* */, <!-- -->)
  // emoji-linter-disable-file     Skip a file (within its first 10 lines)

Exit Codes:
  0  Check passed
  1  Check failed or an error occurred
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging for troubleshooting",
    )

    parser.add_argument(
        "--version",
        action="store_true",
        help="show version information and exit",
    )

    parser.add_argument(
        "--config",
        metavar="<file>",
        help="path to a config file (default: .emoji-linter.config.json in the cwd)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Use 'emoji-linter <command> --help' for more information on a specific command.",
        metavar="<command>",
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="report emoji in files",
        description=(
            "Scan files and report every emoji found.\n\n"
            "The exit code depends on --mode:\n"
            "  clean, forbid  fail when any emoji is found\n"
            "  require        fail when no emoji is found"
        ),
        formatter_class=HelpFormatter,
        epilog="""
Examples:
  emoji-linter check src/ docs/           Check two directories
  emoji-linter check -f minimal .         One line per finding
  emoji-linter check --staged             Check staged files (pre-commit)
  emoji-linter check --pr-comment out.md  Also write a markdown report
        """,
    )
    _add_path_arguments(check_parser)
    check_parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="output format (default: from config, else table)",
    )
    check_parser.add_argument(
        "--mode",
        choices=["clean", "forbid", "require"],
        default="clean",
        help="what the check expects (default: clean)",
    )
    check_parser.add_argument(
        "--pr-comment",
        metavar="<file>",
        help="write a markdown pull request comment to <file>",
    )
    check_parser.set_defaults(func=cmd_check)

    # Fix command
    fix_parser = subparsers.add_parser(
        "fix",
        help="remove emoji from files in place",
        description=(
            "Remove every reported emoji from files.\n\n"
            "Ignored lines, ignored emoji and ignored files are left untouched.\n"
            "Set cleanup.createBackup in the config to keep .bak copies."
        ),
        formatter_class=HelpFormatter,
        epilog="""
Examples:
  emoji-linter fix --dry-run .     Show what would be removed
  emoji-linter fix README.md       Clean one file
        """,
    )
    _add_path_arguments(fix_parser)
    fix_parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="report what would be removed without writing",
    )
    fix_parser.set_defaults(func=cmd_fix)

    # Install-hook command
    hook_parser = subparsers.add_parser(
        "install-hook",
        help="install a git pre-commit hook",
        description="Install a pre-commit hook that runs 'emoji-linter check --staged'.",
        formatter_class=HelpFormatter,
    )
    hook_parser.add_argument(
        "--force",
        action="store_true",
        help="overwrite an existing pre-commit hook",
    )
    hook_parser.set_defaults(func=cmd_install_hook)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. Uses sys.argv if None.

    Returns:
        Exit code.
    """
    parser = create_parser()

    # Enable shell completion if argcomplete is available
    if ARGCOMPLETE_AVAILABLE:
        argcomplete.autocomplete(parser)

    args = parser.parse_args(argv)

    # Handle --version flag
    if args.version:
        return cmd_version(args)

    # Setup logging
    setup_logging(args.verbose)

    # Run command or show help
    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        err_console.print(f"[dim]Running '{args.command}'[/dim]")

    result: int = args.func(args)
    return result


def run() -> NoReturn:
    """Entry point that handles cleanup and exit."""
    run_with_error_handling(main)


if __name__ == "__main__":
    run()
