"""Find repository roots below a directory without descending into them."""

from __future__ import annotations

import enum
import logging
import os
from pathlib import Path
from typing import Callable, Iterator

logger = logging.getLogger(__name__)

GIT_DIR_NAME = ".git"


class Traversal(enum.Enum):
    """Directive a visitor returns for every directory it is shown."""

    DESCEND = "descend"
    PRUNE = "prune"


def walk_directories(
    root: Path,
    visit: Callable[[Path], Traversal],
) -> Iterator[tuple[Path, Traversal]]:
    """Lazily walk the directories below ``root`` depth first.

    ``visit`` decides for ``root`` and every directory underneath it whether
    the walk enters it. Each visited directory is yielded together with that
    directive. Symlinked directories are never followed and entries that
    cannot be read are skipped.
    """

    stack = [root]
    while stack:
        current = stack.pop()
        directive = visit(current)
        yield current, directive
        if directive is Traversal.PRUNE:
            continue
        # Reversed so siblings come off the stack in name order.
        stack.extend(reversed(_child_directories(current)))


def _child_directories(path: Path) -> list[Path]:
    try:
        with os.scandir(path) as it:
            entries = list(it)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", path, exc)
        return []
    children: list[Path] = []
    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                children.append(Path(entry.path))
        except OSError as exc:
            logger.debug("Skipping %s: %s", entry.path, exc)
    children.sort(key=lambda child: child.name)
    return children


def is_repository_root(path: Path) -> bool:
    try:
        return (path / GIT_DIR_NAME).is_dir()
    except OSError as exc:
        logger.debug("Cannot inspect %s: %s", path, exc)
        return False


def _visit(path: Path) -> Traversal:
    if is_repository_root(path):
        return Traversal.PRUNE
    return Traversal.DESCEND


def scan(root: Path) -> Iterator[Path]:
    """Yield every repository root at or below ``root`` exactly once.

    A directory whose immediate child is a ``.git`` directory is reported and
    its subtree is skipped, so nested repositories such as submodules are
    never reported on their own.
    """

    for path, directive in walk_directories(root, _visit):
        if directive is Traversal.PRUNE:
            logger.debug("Found repository at %s", path)
            yield path


__all__ = ["Traversal", "walk_directories", "is_repository_root", "scan", "GIT_DIR_NAME"]
