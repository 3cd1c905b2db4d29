"""Turn discovered repositories into relocation plans."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Iterable, Union

from .exceptions import RemoteParseError, RepositoryOpenError
from .git import primary_remote_url
from .models import Discovery, ParsedLocation, RelocationPlan, SkippedRepository
from .urls import parse_remote_url

logger = logging.getLogger(__name__)

RemoteLookup = Callable[[Path], Union[str, None]]
PlanItem = Union[RelocationPlan, SkippedRepository, None]


def plan_destination(workspace_root: Path, location: ParsedLocation) -> Path:
    return workspace_root / location.host / location.owner / location.name


def plan_repository(
    root: Path,
    workspace_root: Path,
    *,
    remote_lookup: RemoteLookup = primary_remote_url,
) -> PlanItem:
    """Plan the move of one repository.

    Returns ``None`` for a repository without a primary remote and a
    :class:`SkippedRepository` when it cannot be opened or its URL does not
    parse.
    """

    try:
        url = remote_lookup(root)
    except RepositoryOpenError as exc:
        logger.debug("Skipping %s: %s", root, exc.reason)
        return SkippedRepository(path=root, reason=f"cannot open repository: {exc.reason}")
    if url is None:
        logger.debug("Skipping %s: no origin remote", root)
        return None
    try:
        location = parse_remote_url(url)
    except RemoteParseError as exc:
        logger.debug("Skipping %s: %s", root, exc)
        return SkippedRepository(path=root, reason=f"unsupported remote URL {url!r}: {exc.reason}")
    return RelocationPlan(
        source=root,
        destination=plan_destination(workspace_root, location),
        location=location,
        remote_url=url,
    )


def build_plan(
    roots: Iterable[Path],
    workspace_root: Path,
    *,
    jobs: int = 1,
    remote_lookup: RemoteLookup = primary_remote_url,
) -> Discovery:
    """Plan every repository in ``roots``.

    With ``jobs`` above one the remote lookups run on a bounded thread pool.
    The result is sorted by source path either way.
    """

    def plan_one(root: Path) -> PlanItem:
        return plan_repository(root, workspace_root, remote_lookup=remote_lookup)

    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            items = list(executor.map(plan_one, roots))
    else:
        items = [plan_one(root) for root in roots]

    discovery = Discovery()
    for item in items:
        if isinstance(item, RelocationPlan):
            discovery.plans.append(item)
        elif isinstance(item, SkippedRepository):
            discovery.skipped.append(item)
    discovery.plans.sort(key=lambda plan: str(plan.source))
    discovery.skipped.sort(key=lambda skipped: str(skipped.path))
    return discovery


__all__ = ["plan_destination", "plan_repository", "build_plan"]
