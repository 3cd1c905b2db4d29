"""Resolve the workspace root and the scan root before any work starts."""

from __future__ import annotations

import os
from pathlib import Path

from .exceptions import MissingEnvError, ValidationError

WORKSPACE_ROOT_ENV = "GHQ_ROOT"
DEFAULT_WORKSPACE_DIRNAME = "ghq"


def resolve_workspace_root(override: Path | None = None) -> Path:
    """Return the directory repositories are moved under.

    Precedence: ``override``, then ``$GHQ_ROOT``, then ``~/ghq``. The directory
    does not have to exist yet; it is created on the first move.
    """

    if override is not None and str(override).strip():
        candidate = Path(override).expanduser()
    else:
        raw = os.environ.get(WORKSPACE_ROOT_ENV, "").strip()
        if raw:
            candidate = Path(raw).expanduser()
        else:
            candidate = _home() / DEFAULT_WORKSPACE_DIRNAME
    path = candidate.resolve()
    if path.exists() and not path.is_dir():
        raise ValidationError(f"Workspace root is not a directory: {path}")
    return path


def _home() -> Path:
    try:
        return Path.home()
    except (KeyError, RuntimeError) as exc:
        raise MissingEnvError(
            f"Unable to determine the home directory. Set {WORKSPACE_ROOT_ENV} to choose a workspace root."
        ) from exc


def resolve_scan_root(path: Path) -> Path:
    candidate = Path(path).expanduser()
    try:
        resolved = candidate.resolve(strict=True)
    except FileNotFoundError as exc:
        raise ValidationError(f"Directory does not exist: {candidate}") from exc
    except OSError as exc:
        raise ValidationError(f"Cannot resolve {candidate}: {exc}") from exc
    if not resolved.is_dir():
        raise ValidationError(f"Not a directory: {resolved}")
    return resolved


__all__ = [
    "WORKSPACE_ROOT_ENV",
    "DEFAULT_WORKSPACE_DIRNAME",
    "resolve_workspace_root",
    "resolve_scan_root",
]
