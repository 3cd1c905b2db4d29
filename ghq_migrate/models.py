"""Shared dataclasses used throughout the CLI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ParsedLocation:
    """Host, owner and name extracted from a remote URL."""

    host: str
    owner: str
    name: str

    @property
    def slug(self) -> str:
        return f"{self.host}/{self.owner}/{self.name}"


@dataclass(frozen=True, slots=True)
class RelocationPlan:
    """A planned, not yet executed move of one repository."""

    source: Path
    destination: Path
    location: ParsedLocation
    remote_url: str


@dataclass(frozen=True, slots=True)
class SkippedRepository:
    """A discovered repository that was left out of the plan."""

    path: Path
    reason: str


@dataclass(slots=True)
class Discovery:
    plans: list[RelocationPlan] = field(default_factory=list)
    skipped: list[SkippedRepository] = field(default_factory=list)

    @property
    def collisions(self) -> dict[Path, list[RelocationPlan]]:
        """Destinations claimed by more than one plan."""

        by_destination: dict[Path, list[RelocationPlan]] = {}
        for plan in self.plans:
            by_destination.setdefault(plan.destination, []).append(plan)
        return {dest: plans for dest, plans in by_destination.items() if len(plans) > 1}


class Outcome(str, Enum):
    MOVED = "moved"
    SKIPPED_EXISTS = "skipped-exists"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RelocationResult:
    plan: RelocationPlan
    outcome: Outcome
    reason: str | None = None


__all__ = [
    "ParsedLocation",
    "RelocationPlan",
    "SkippedRepository",
    "Discovery",
    "Outcome",
    "RelocationResult",
]
