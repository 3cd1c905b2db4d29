"""Move planned repositories into the workspace layout."""

from __future__ import annotations

import errno
import logging
import os
from typing import Callable, Iterable

from .models import Outcome, RelocationPlan, RelocationResult

logger = logging.getLogger(__name__)


def relocate(plan: RelocationPlan) -> RelocationResult:
    """Move ``plan.source`` to ``plan.destination``.

    An existing destination is never overwritten or merged. The move is a
    single rename, so a source on another filesystem fails instead of being
    copied.
    """

    destination = plan.destination
    if os.path.lexists(destination):
        logger.debug("Destination %s already exists", destination)
        return RelocationResult(plan, Outcome.SKIPPED_EXISTS)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return RelocationResult(
            plan,
            Outcome.FAILED,
            f"cannot create parent directory {destination.parent}: {_describe(exc)}",
        )
    try:
        os.rename(plan.source, destination)
    except OSError as exc:
        if exc.errno == errno.EXDEV:
            reason = "source and destination are on different filesystems"
        else:
            reason = f"cannot move directory: {_describe(exc)}"
        return RelocationResult(plan, Outcome.FAILED, reason)
    logger.debug("Moved %s to %s", plan.source, destination)
    return RelocationResult(plan, Outcome.MOVED)


def _describe(exc: OSError) -> str:
    return exc.strerror or str(exc)


def execute_plan(
    plans: Iterable[RelocationPlan],
    *,
    on_result: Callable[[RelocationResult], None] | None = None,
) -> list[RelocationResult]:
    """Relocate each plan in turn, collecting one result per plan.

    Plans that share a destination are settled by order: the first one moves
    and the rest see ``SKIPPED_EXISTS``.
    """

    results: list[RelocationResult] = []
    for plan in plans:
        result = relocate(plan)
        results.append(result)
        if on_result is not None:
            on_result(result)
    return results


__all__ = ["relocate", "execute_plan"]
