"""Data models for gitprompt.

Defines the read-only views a prompt summary is derived from: the change
kinds of the working-tree diff, the repository operation state, the HEAD
reference, and the summary handed to the renderer.

Execution Context:
    Library module - imported by other gitprompt_core modules

Dependencies:
    - dataclasses: Data class decorators
    - enum: Enumerations

Metadata:
    Version: 0.1.0
    Author: gitprompt Team
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---- Enumerations -------------------------------------------------------------------------------------------


class ChangeKind(Enum):
    """Classification of how a path differs between index and working tree."""

    UNMODIFIED = "unmodified"
    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"
    TYPE_CHANGED = "type-changed"
    COPIED = "copied"
    IGNORED = "ignored"
    UNTRACKED = "untracked"
    UNREADABLE = "unreadable"
    CONFLICTED = "conflicted"


class RepositoryState(Enum):
    """Multi-step operation left in progress in a repository."""

    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revert-sequence"
    CHERRY_PICK = "cherry-pick"
    CHERRY_PICK_SEQUENCE = "cherry-pick-sequence"
    BISECT = "bisect"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebase-interactive"
    REBASE_MERGE = "rebase-merge"
    APPLY_MAILBOX = "apply-mailbox"
    APPLY_MAILBOX_OR_REBASE = "apply-mailbox-or-rebase"


# ---- Data Model Classes -------------------------------------------------------------------------------------


@dataclass(frozen=True)
class HeadReference:
    """Resolved HEAD of a repository.

    Attributes:
        shorthand: Short branch name, "HEAD" when detached, or None when
            no short name can be derived.
        target: Full commit id HEAD points to, or None.
    """

    shorthand: str | None
    target: str | None


@dataclass(frozen=True)
class PromptSummary:
    """Fields of one prompt line.

    Attributes:
        branch: Branch label, always present.
        revision: Abbreviated commit id.
        status: Working-tree status glyphs, None when clean.
        state: Operation state label, None when no operation is in progress.
    """

    branch: str
    revision: str | None = None
    status: str | None = None
    state: str | None = None
