"""Tests for reading remotes through the git CLI."""

from __future__ import annotations

import os
import shutil
import subprocess
import tempfile
import unittest
from pathlib import Path

from ghq_migrate.exceptions import RepositoryOpenError
from ghq_migrate.git import open_repository, primary_remote_url
from ghq_migrate.planner import plan_repository


def git_init(path: Path, **remotes: str) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    subprocess.run(["git", "init", "-q", str(path)], check=True, capture_output=True)
    for name, url in remotes.items():
        subprocess.run(["git", "remote", "add", name, url], cwd=path, check=True, capture_output=True)
    return path


@unittest.skipUnless(shutil.which("git"), "git is not installed")
class PrimaryRemoteUrlTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name).resolve()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_reads_origin_url(self) -> None:
        repo = git_init(self.tmp / "a", origin="https://example.com/alice/proj.git")

        self.assertEqual(primary_remote_url(repo), "https://example.com/alice/proj.git")

    def test_repository_without_remote(self) -> None:
        repo = git_init(self.tmp / "a")

        self.assertIsNone(primary_remote_url(repo))

    def test_only_origin_counts(self) -> None:
        repo = git_init(self.tmp / "a", upstream="https://example.com/alice/proj.git")

        self.assertIsNone(primary_remote_url(repo))

    def test_origin_without_url_is_treated_as_missing(self) -> None:
        repo = git_init(self.tmp / "a")
        subprocess.run(
            ["git", "config", "remote.origin.fetch", "+refs/heads/*:refs/remotes/origin/*"],
            cwd=repo,
            check=True,
            capture_output=True,
        )

        self.assertIsNone(primary_remote_url(repo))
        self.assertIsNone(plan_repository(repo, self.tmp / "ghq"))

    @unittest.skipIf(os.name == "nt", "byte paths are POSIX only")
    def test_directory_name_that_is_not_utf8(self) -> None:
        raw = os.fsencode(self.tmp) + b"/caf\xe9"
        try:
            os.mkdir(raw)
        except OSError:
            self.skipTest("filesystem rejects non UTF-8 names")
        repo = git_init(Path(os.fsdecode(raw)), origin="https://example.com/alice/cafe.git")

        self.assertEqual(open_repository(repo), repo)
        self.assertEqual(primary_remote_url(repo), "https://example.com/alice/cafe.git")

    def test_broken_metadata_cannot_be_opened(self) -> None:
        broken = self.tmp / "broken"
        (broken / ".git").mkdir(parents=True)

        with self.assertRaises(RepositoryOpenError):
            primary_remote_url(broken)

    def test_broken_metadata_does_not_fall_back_to_enclosing_repository(self) -> None:
        outer = git_init(self.tmp / "outer", origin="https://example.com/outer/outer.git")
        inner = outer / "inner"
        (inner / ".git").mkdir(parents=True)

        with self.assertRaises(RepositoryOpenError):
            open_repository(inner)
        self.assertEqual(open_repository(outer), outer)


if __name__ == "__main__":
    unittest.main()
