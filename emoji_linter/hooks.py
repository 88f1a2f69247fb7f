"""Git integration - staged files and the pre-commit hook."""

from __future__ import annotations

import logging
import stat
import subprocess
from pathlib import Path

from emoji_linter.errors import ErrorCode, GitError, file_error_from_os_error, not_a_git_repository

logger = logging.getLogger(__name__)

HOOK_MARKER = "# emoji-linter pre-commit hook"

PRE_COMMIT_HOOK = f"""#!/bin/sh
{HOOK_MARKER}
# Blocks commits that add emoji to staged files.
exec emoji-linter check --staged
"""

GIT_TIMEOUT_SECONDS = 30


def _run_git(args: list[str], cwd: Path | None = None) -> str:
    command = ["git", *args]
    try:
        completed = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
            timeout=GIT_TIMEOUT_SECONDS,
        )
    except FileNotFoundError as e:
        raise GitError("git executable not found", command=" ".join(command), cause=e) from e
    except subprocess.TimeoutExpired as e:
        raise GitError("git command timed out", command=" ".join(command), cause=e) from e

    if completed.returncode != 0:
        if "not a git repository" in completed.stderr.lower():
            raise not_a_git_repository(str(cwd or Path.cwd()), completed.stderr)
        raise GitError(
            f"git {args[0]} failed with exit code {completed.returncode}",
            command=" ".join(command),
            stderr=completed.stderr,
        )
    return completed.stdout


def find_git_dir(cwd: Path | None = None) -> Path:
    """Return the absolute path of the repository's git directory.

    Raises:
        GitError: If ``cwd`` is not inside a git work tree.
    """
    output = _run_git(["rev-parse", "--absolute-git-dir"], cwd=cwd).strip()
    return Path(output)


def find_repo_root(cwd: Path | None = None) -> Path:
    """Return the top-level directory of the work tree."""
    return Path(_run_git(["rev-parse", "--show-toplevel"], cwd=cwd).strip())


def get_staged_files(cwd: Path | None = None) -> list[Path]:
    """List files staged for commit that were added, copied, modified or renamed.

    Paths are returned relative to the repository root joined onto it, so
    they work from any subdirectory.

    Raises:
        GitError: If git fails or ``cwd`` is not in a repository.
    """
    root = find_repo_root(cwd)
    output = _run_git(["diff", "--cached", "--name-only", "--diff-filter=ACMR"], cwd=cwd)
    files = [root / line for line in output.splitlines() if line.strip()]
    logger.debug(f"Found {len(files)} staged file(s)")
    return files


def install_pre_commit_hook(cwd: Path | None = None, force: bool = False) -> Path:
    """Write an executable pre-commit hook that runs ``check --staged``.

    An existing hook written by this tool is replaced. Any other hook is kept
    unless ``force`` is True.

    Args:
        cwd: Directory inside the repository.
        force: Overwrite a hook that was not written by this tool.

    Returns:
        Path to the installed hook.

    Raises:
        GitError: If not in a repository, or a foreign hook exists.
        FileError: If the hook cannot be written.
    """
    hooks_dir = find_git_dir(cwd) / "hooks"
    hook_path = hooks_dir / "pre-commit"

    if hook_path.exists() and not force:
        try:
            existing = hook_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise file_error_from_os_error(e, str(hook_path)) from e
        if HOOK_MARKER not in existing:
            raise GitError(
                f"A pre-commit hook already exists: {hook_path}. Use --force to overwrite it.",
                code=ErrorCode.GIT_HOOK_EXISTS,
                details={"hook_path": str(hook_path)},
            )

    try:
        hooks_dir.mkdir(parents=True, exist_ok=True)
        hook_path.write_text(PRE_COMMIT_HOOK, encoding="utf-8")
        mode = hook_path.stat().st_mode
        hook_path.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    except OSError as e:
        raise file_error_from_os_error(e, str(hook_path), writing=True) from e

    logger.debug(f"Installed pre-commit hook at {hook_path}")
    return hook_path
