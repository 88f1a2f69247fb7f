"""Entry point for python -m emoji_linter execution.

This module allows running emoji-linter as a module:
    python -m emoji_linter check .
    python -m emoji_linter fix --dry-run .
    python -m emoji_linter --help
"""

from emoji_linter.cli import run

if __name__ == "__main__":
    run()
