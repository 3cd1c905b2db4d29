"""Minimal utilities for invoking git commands."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path
from typing import Sequence

from .exceptions import GitCommandError, GitNotFoundError, RepositoryOpenError

PRIMARY_REMOTE = "origin"


def run_git(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    command = ["git", *args]
    env = dict(os.environ, GIT_TERMINAL_PROMPT="0")
    result = subprocess.run(
        command,
        cwd=str(cwd) if cwd else None,
        env=env,
        text=True,
        errors="surrogateescape",
        capture_output=True,
    )
    if check and result.returncode != 0:
        raise GitCommandError(command, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result


def require_git() -> None:
    if shutil.which("git") is None:
        raise GitNotFoundError("Required binary not found in PATH: git")


def open_repository(path: Path) -> Path:
    """Return the top level of the repository rooted at ``path``.

    Fails when git does not recognise ``path`` as the root of a working tree,
    including when a broken ``.git`` makes git fall back to an enclosing
    repository.
    """

    try:
        result = run_git(["rev-parse", "--show-toplevel"], cwd=path)
    except (GitCommandError, OSError) as exc:
        stderr = getattr(exc, "stderr", "") or str(exc)
        raise RepositoryOpenError(path, stderr.strip() or "not a git repository") from exc
    toplevel = Path(result.stdout.strip())
    if not toplevel.is_absolute() or toplevel.resolve() != path.resolve():
        raise RepositoryOpenError(path, f"git resolved the working tree to {toplevel}")
    return toplevel


def primary_remote_url(path: Path, remote: str = PRIMARY_REMOTE) -> str | None:
    """Return the URL of ``remote`` for the repository at ``path``.

    ``None`` means the repository has no such remote, which is not an error.
    Raises :class:`RepositoryOpenError` when ``path`` cannot be opened.
    """

    open_repository(path)
    result = run_git(["config", "--get", f"remote.{remote}.url"], cwd=path, check=False)
    # Exit 1 means the key is unset.
    if result.returncode == 1:
        return None
    if result.returncode != 0:
        raise RepositoryOpenError(path, result.stderr.strip() or f"git config exited with {result.returncode}")
    return result.stdout.strip() or None


__all__ = [
    "PRIMARY_REMOTE",
    "run_git",
    "require_git",
    "open_repository",
    "primary_remote_url",
]
