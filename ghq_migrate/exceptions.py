"""Custom error hierarchy for ghq-migrate."""

from __future__ import annotations

from pathlib import Path


class GhqMigrateError(RuntimeError):
    """Base error for the CLI."""


class MissingEnvError(GhqMigrateError):
    """Raised when the workspace root cannot be resolved from the environment."""


class ValidationError(GhqMigrateError):
    """Raised when a configured or user supplied path is unusable."""


class GitNotFoundError(GhqMigrateError):
    """Raised when the git binary is not available."""


class GitCommandError(GhqMigrateError):
    """Raised when an underlying git command fails."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        details = "\n".join(
            section
            for section in (self.stdout.strip(), self.stderr.strip())
            if section
        )
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


class RepositoryOpenError(GhqMigrateError):
    """Raised when a discovered directory cannot be opened as a repository."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot open repository at {path}: {reason}")


class RemoteParseError(GhqMigrateError, ValueError):
    """Raised when a remote URL does not match a supported syntax."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Unsupported remote URL {url!r}: {reason}")


class UserAbort(GhqMigrateError):
    """Raised when the user cancels an interactive flow."""


__all__ = [
    "GhqMigrateError",
    "MissingEnvError",
    "ValidationError",
    "GitNotFoundError",
    "GitCommandError",
    "RepositoryOpenError",
    "RemoteParseError",
    "UserAbort",
]
