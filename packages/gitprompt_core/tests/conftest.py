"""Shared test configuration and fixtures for gitprompt tests.

Provides:
- git helpers that build real repositories in ``tmp_path`` with the
  ``git`` binary.
- Environment isolation so a ``GIT_DIR`` or color setting from the
  developer's shell does not leak into tests.
"""
from __future__ import annotations

import subprocess
from pathlib import Path

import pytest


# ---- Git Helpers --------------------------------------------------------------------------------------------


def run_git(
        repo: Path,
        *args: str,
        check: bool = True,
) -> subprocess.CompletedProcess[str]:
    """Run a git command inside ``repo``."""
    return subprocess.run(
        ["git", *args],
        cwd=repo,
        check=check,
        text=True,
        capture_output=True,
    )


def init_repo(
        path: Path,
        bare: bool = False,
) -> Path:
    """Create an empty repository on branch ``main``."""
    path.mkdir(parents=True, exist_ok=True)
    run_git(path, "init", *(["--bare"] if bare else []))
    run_git(path, "symbolic-ref", "HEAD", "refs/heads/main")
    run_git(path, "config", "user.email", "test@example.com")
    run_git(path, "config", "user.name", "Tester")
    run_git(path, "config", "commit.gpgsign", "false")
    return path


def commit_file(
        repo: Path,
        name: str,
        content: str,
        message: str = "update",
) -> str:
    """Write, stage and commit a file; return the new commit id."""
    (repo / name).write_text(content, encoding="utf-8")
    run_git(repo, "add", name)
    run_git(repo, "commit", "-m", message)
    return head_sha(repo)


def head_sha(
        repo: Path,
) -> str:
    """Return the full commit id of HEAD."""
    return run_git(repo, "rev-parse", "HEAD").stdout.strip()


# ---- Fixtures -----------------------------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_git_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop environment variables that change discovery or output."""
    for name in ("GIT_DIR", "GIT_WORK_TREE", "GITPROMPT_COLOR", "GITPROMPT_LOG_FILE", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def empty_repo(tmp_path: Path) -> Path:
    """Repository with no commits (unborn HEAD)."""
    return init_repo(tmp_path / "repo")


@pytest.fixture
def git_repo(empty_repo: Path) -> Path:
    """Repository on ``main`` with one committed file and a clean tree."""
    commit_file(empty_repo, "tracked.txt", "initial\n", message="init")
    return empty_repo
