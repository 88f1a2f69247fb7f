"""emoji-linter CLI package.

The command implementations and shared CLI helpers live in
emoji_linter/_cli_main.py; this package re-exports them.
"""

from emoji_linter._cli_main import (
    ARGCOMPLETE_AVAILABLE,
    _format_error,
    cleanup,
    cmd_check,
    cmd_fix,
    cmd_install_hook,
    cmd_version,
    console,
    create_parser,
    err_console,
    logger,
    main,
    run,
    run_with_error_handling,
    setup_logging,
)

__all__ = [
    # Commands
    "cmd_check",
    "cmd_fix",
    "cmd_install_hook",
    "cmd_version",
    # Entry points
    "create_parser",
    "main",
    "run",
    # Utilities
    "ARGCOMPLETE_AVAILABLE",
    "_format_error",
    "cleanup",
    "console",
    "err_console",
    "logger",
    "run_with_error_handling",
    "setup_logging",
]
