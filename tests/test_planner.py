"""Tests for destination planning."""

from __future__ import annotations

import itertools
import unittest
from pathlib import Path

from ghq_migrate.exceptions import RepositoryOpenError
from ghq_migrate.models import ParsedLocation, RelocationPlan, SkippedRepository
from ghq_migrate.planner import build_plan, plan_destination, plan_repository

WORKSPACE = Path("/home/u/ghq")


def _lookup(mapping: dict[Path, object]):
    def lookup(root: Path) -> str | None:
        value = mapping[root]
        if isinstance(value, Exception):
            raise value
        return value  # type: ignore[return-value]

    return lookup


class PlanDestinationTests(unittest.TestCase):
    def test_builds_host_owner_name_path(self) -> None:
        location = ParsedLocation("example.com", "alice", "proj")

        self.assertEqual(plan_destination(WORKSPACE, location), Path("/home/u/ghq/example.com/alice/proj"))

    def test_is_deterministic_and_injective(self) -> None:
        hosts = ["example.com", "Example.com", "git.example.com"]
        owners = ["alice", "bob"]
        names = ["proj", "proj.js", "other"]
        locations = [ParsedLocation(*triple) for triple in itertools.product(hosts, owners, names)]

        destinations = [plan_destination(WORKSPACE, location) for location in locations]

        self.assertEqual(len(set(destinations)), len(locations))
        for location, destination in zip(locations, destinations):
            self.assertEqual(plan_destination(WORKSPACE, location), destination)


class PlanRepositoryTests(unittest.TestCase):
    def test_plans_repository_with_remote(self) -> None:
        root = Path("/work/a")
        lookup = _lookup({root: "https://example.com/alice/proj.git"})

        plan = plan_repository(root, WORKSPACE, remote_lookup=lookup)

        self.assertIsInstance(plan, RelocationPlan)
        self.assertEqual(plan.source, root)
        self.assertEqual(plan.destination, Path("/home/u/ghq/example.com/alice/proj"))
        self.assertEqual(plan.location, ParsedLocation("example.com", "alice", "proj"))
        self.assertEqual(plan.remote_url, "https://example.com/alice/proj.git")

    def test_repository_without_remote_is_silently_dropped(self) -> None:
        root = Path("/work/no-remote")

        self.assertIsNone(plan_repository(root, WORKSPACE, remote_lookup=_lookup({root: None})))

    def test_open_failure_is_reported_as_skip(self) -> None:
        root = Path("/work/broken")
        lookup = _lookup({root: RepositoryOpenError(root, "corrupt HEAD")})

        item = plan_repository(root, WORKSPACE, remote_lookup=lookup)

        self.assertIsInstance(item, SkippedRepository)
        self.assertEqual(item.path, root)
        self.assertIn("corrupt HEAD", item.reason)

    def test_unparseable_url_is_reported_as_skip(self) -> None:
        root = Path("/work/local")
        lookup = _lookup({root: "/srv/git/local.git"})

        item = plan_repository(root, WORKSPACE, remote_lookup=lookup)

        self.assertIsInstance(item, SkippedRepository)
        self.assertIn("/srv/git/local.git", item.reason)


class BuildPlanTests(unittest.TestCase):
    def setUp(self) -> None:
        self.mapping: dict[Path, object] = {
            Path("/work/c"): "git@example.com:carol/tool.git",
            Path("/work/a"): "https://example.com/alice/proj.git",
            Path("/work/none"): None,
            Path("/work/bad"): "not a url",
            Path("/work/broken"): RepositoryOpenError(Path("/work/broken"), "boom"),
            Path("/work/dup"): "ssh://git@example.com/alice/proj",
        }

    def test_collects_plans_and_skips(self) -> None:
        discovery = build_plan(list(self.mapping), WORKSPACE, remote_lookup=_lookup(self.mapping))

        self.assertEqual(
            [plan.source for plan in discovery.plans],
            [Path("/work/a"), Path("/work/c"), Path("/work/dup")],
        )
        self.assertEqual([item.path for item in discovery.skipped], [Path("/work/bad"), Path("/work/broken")])

    def test_reports_destination_collisions(self) -> None:
        discovery = build_plan(list(self.mapping), WORKSPACE, remote_lookup=_lookup(self.mapping))

        collisions = discovery.collisions

        destination = Path("/home/u/ghq/example.com/alice/proj")
        self.assertEqual(list(collisions), [destination])
        self.assertEqual([plan.source for plan in collisions[destination]], [Path("/work/a"), Path("/work/dup")])

    def test_parallel_inspection_matches_sequential(self) -> None:
        lookup = _lookup(self.mapping)

        sequential = build_plan(list(self.mapping), WORKSPACE, remote_lookup=lookup)
        parallel = build_plan(iter(list(self.mapping)), WORKSPACE, jobs=4, remote_lookup=lookup)

        self.assertEqual(sequential.plans, parallel.plans)
        self.assertEqual(sequential.skipped, parallel.skipped)


if __name__ == "__main__":
    unittest.main()
