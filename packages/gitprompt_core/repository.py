"""Read-only repository access for gitprompt.

Wraps a GitPython ``Repo`` and exposes the three views the summarizer
needs: the resolved HEAD, the in-progress operation state, and the change
kinds of the index-to-workdir diff.

Execution Context:
    Library module - imported by the summarizer and the CLI

Dependencies:
    - GitPython: Repository discovery, refs and the git command wrapper
    - gitprompt_core.models: Data models

Metadata:
    Version: 0.1.0
    Author: gitprompt Team
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from git import Repo
from git.exc import GitCommandError
from git.exc import InvalidGitRepositoryError
from git.exc import NoSuchPathError

from gitprompt_core.errors import NotARepository
from gitprompt_core.errors import StatusUnavailable
from gitprompt_core.errors import UnresolvableHead
from gitprompt_core.models import ChangeKind
from gitprompt_core.models import HeadReference
from gitprompt_core.models import RepositoryState

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


REBASE_MERGE_DIR = "rebase-merge"
REBASE_APPLY_DIR = "rebase-apply"
INTERACTIVE_FILE = "interactive"
REBASING_FILE = "rebasing"
APPLYING_FILE = "applying"
MERGE_HEAD_FILE = "MERGE_HEAD"
REVERT_HEAD_FILE = "REVERT_HEAD"
CHERRY_PICK_HEAD_FILE = "CHERRY_PICK_HEAD"
BISECT_LOG_FILE = "BISECT_LOG"
SEQUENCER_TODO_FILE = "sequencer/todo"

# Status must not take the index lock
STATUS_ENV = {"GIT_OPTIONAL_LOCKS": "0"}

# Porcelain v1 status codes for unmerged paths
CONFLICT_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})

# Second porcelain column: index compared with the working tree
WORKTREE_CHANGES: dict[str, ChangeKind | None] = {
    " ": None,
    "M": ChangeKind.MODIFIED,
    "T": ChangeKind.TYPE_CHANGED,
    "D": ChangeKind.DELETED,
    "A": ChangeKind.ADDED,
    "R": ChangeKind.RENAMED,
    "C": ChangeKind.COPIED,
}


# ---- Repository Snapshot ------------------------------------------------------------------------------------


class RepositorySnapshot:
    """Read-only view over one opened git repository.

    Attributes:
        repo: Underlying GitPython repository.
    """

    def __init__(
            self,
            repo: Repo,
    ) -> None:
        """Wrap an opened repository.

        Args:
            repo: GitPython repository to read from.
        """
        self.repo = repo

    def __enter__(self) -> RepositorySnapshot:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(
            self,
    ) -> None:
        """Release git subprocesses held by the repository."""
        self.repo.close()

    @property
    def git_dir(
            self,
    ) -> Path:
        """Path to the repository's git directory."""
        return Path(self.repo.git_dir)

    # ---- HEAD -----------------------------------------------------------------------------------------------

    def head(
            self,
    ) -> HeadReference:
        """Resolve HEAD to a branch shorthand and commit id.

        Returns:
            HeadReference for the current HEAD.

        Raises:
            UnresolvableHead: If HEAD is unborn or cannot be read.
        """
        head = self.repo.head
        try:
            target = head.commit.hexsha
            if head.is_detached:
                shorthand = "HEAD"
            else:
                shorthand = head.reference.name or None
        except (ValueError, TypeError, OSError) as head_error:
            msg = f"Cannot resolve HEAD in {self.git_dir}: {head_error}"
            raise UnresolvableHead(msg) from head_error

        return HeadReference(shorthand=shorthand, target=target)

    # ---- Operation State ------------------------------------------------------------------------------------

    def state(
            self,
    ) -> RepositoryState:
        """Detect the multi-step operation in progress, if any.

        Returns:
            RepositoryState derived from marker files in the git directory.
        """
        git_dir = self.git_dir

        def has_file(name: str) -> bool:
            return (git_dir / name).is_file()

        if has_file(f"{REBASE_MERGE_DIR}/{INTERACTIVE_FILE}"):
            return RepositoryState.REBASE_INTERACTIVE
        if (git_dir / REBASE_MERGE_DIR).is_dir():
            return RepositoryState.REBASE_MERGE
        if has_file(f"{REBASE_APPLY_DIR}/{REBASING_FILE}"):
            return RepositoryState.REBASE
        if has_file(f"{REBASE_APPLY_DIR}/{APPLYING_FILE}"):
            return RepositoryState.APPLY_MAILBOX
        if (git_dir / REBASE_APPLY_DIR).is_dir():
            return RepositoryState.APPLY_MAILBOX_OR_REBASE
        if has_file(MERGE_HEAD_FILE):
            return RepositoryState.MERGE
        if has_file(REVERT_HEAD_FILE):
            if has_file(SEQUENCER_TODO_FILE):
                return RepositoryState.REVERT_SEQUENCE
            return RepositoryState.REVERT
        if has_file(CHERRY_PICK_HEAD_FILE):
            if has_file(SEQUENCER_TODO_FILE):
                return RepositoryState.CHERRY_PICK_SEQUENCE
            return RepositoryState.CHERRY_PICK
        if has_file(BISECT_LOG_FILE):
            return RepositoryState.BISECT
        return RepositoryState.CLEAN

    # ---- Working Tree ---------------------------------------------------------------------------------------

    def changes(
            self,
    ) -> Iterator[ChangeKind]:
        """Yield the change kind of each path differing from the index.

        Paths whose working tree matches the index are skipped.

        Yields:
            ChangeKind per changed path, in git's path order.

        Raises:
            StatusUnavailable: If the repository is bare or git fails.
        """
        if self.repo.bare:
            msg = f"Bare repository has no working tree: {self.git_dir}"
            raise StatusUnavailable(msg)

        try:
            output = self.repo.git.status(
                porcelain=True,
                z=True,
                env=STATUS_ENV,
                strip_newline_in_stdout=False,
            )
        except (GitCommandError, OSError) as status_error:
            msg = f"Failed to get status: {status_error}"
            raise StatusUnavailable(msg) from status_error

        entries = iter(output.split("\0"))
        for entry in entries:
            if len(entry) < 4:
                continue
            code = entry[:2]

            # Renames and copies carry the original path as an extra entry
            if code[0] in "RC" or code[1] in "RC":
                next(entries, None)

            kind = parse_status_code(code)
            if kind is not None:
                yield kind


# ---- Module Functions ---------------------------------------------------------------------------------------


def parse_status_code(
        code: str,
) -> ChangeKind | None:
    """Map a two-letter porcelain status code to its working-tree change kind.

    Args:
        code: ``XY`` status code from ``git status --porcelain``.

    Returns:
        ChangeKind for the index-to-workdir side, or None when the working
        tree matches the index.
    """
    if code in CONFLICT_CODES:
        return ChangeKind.CONFLICTED
    if code == "??":
        return ChangeKind.UNTRACKED
    if code == "!!":
        return ChangeKind.IGNORED
    return WORKTREE_CHANGES.get(code[1], ChangeKind.UNREADABLE)


def open_repository(
        start_path: Path | str | None = None,
) -> RepositorySnapshot:
    """Open the git repository containing a directory.

    Discovery follows GitPython: ``GIT_DIR`` when set, otherwise the
    directory and its parents.

    Args:
        start_path: Directory to start searching from (defaults to cwd).

    Returns:
        RepositorySnapshot over the discovered repository.

    Raises:
        NotARepository: If no repository is found, or the working directory
            no longer exists.
    """
    try:
        repo = Repo(start_path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError, OSError) as open_error:
        msg = f"Not a git repository: {start_path or 'working directory'}: {open_error}"
        raise NotARepository(msg) from open_error

    logger.debug("Opened repository at %s", repo.git_dir)
    return RepositorySnapshot(repo)
