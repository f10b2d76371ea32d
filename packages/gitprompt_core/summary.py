"""Prompt summary derivation.

Turns a repository snapshot into the four fields of a prompt line: branch
label, short revision, status glyphs and operation label. Everything here is
pure over the snapshot; fallbacks are raised, never printed.

Execution Context:
    Library module - called by the CLI once per prompt render

Dependencies:
    - gitprompt_core.models: Data models
    - gitprompt_core.repository: Repository snapshot

Metadata:
    Version: 0.1.0
    Author: gitprompt Team
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from gitprompt_core.errors import HeadTargetMissing
from gitprompt_core.errors import MalformedBranchName
from gitprompt_core.errors import StatusUnavailable
from gitprompt_core.models import ChangeKind
from gitprompt_core.models import HeadReference
from gitprompt_core.models import PromptSummary
from gitprompt_core.models import RepositoryState
from gitprompt_core.repository import RepositorySnapshot

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


REVISION_LENGTH = 13

STATUS_GLYPHS: dict[ChangeKind, str | None] = {
    ChangeKind.UNMODIFIED: None,
    ChangeKind.ADDED: "+",
    ChangeKind.DELETED: "-",
    ChangeKind.MODIFIED: "*",
    ChangeKind.RENAMED: "*",
    ChangeKind.TYPE_CHANGED: "*",
    ChangeKind.COPIED: None,
    ChangeKind.IGNORED: None,
    ChangeKind.UNTRACKED: "?",
    ChangeKind.UNREADABLE: None,
    ChangeKind.CONFLICTED: "#",
}

STATE_LABELS: dict[RepositoryState, str | None] = {
    RepositoryState.CLEAN: None,
    RepositoryState.MERGE: "merge",
    RepositoryState.REVERT: "revert",
    RepositoryState.REVERT_SEQUENCE: "revert",
    RepositoryState.CHERRY_PICK: "cherry-pick",
    RepositoryState.CHERRY_PICK_SEQUENCE: "cherry-pick",
    RepositoryState.BISECT: "bisect",
    RepositoryState.REBASE: "rebase",
    RepositoryState.REBASE_INTERACTIVE: "rebase",
    RepositoryState.REBASE_MERGE: "rebase-merge",
    RepositoryState.APPLY_MAILBOX: "apply-mailbox",
    RepositoryState.APPLY_MAILBOX_OR_REBASE: "apply-mailbox",
}


# ---- Field Derivation ---------------------------------------------------------------------------------------


def branch_label(
        head: HeadReference,
) -> str:
    """Return the short name of HEAD.

    Raises:
        MalformedBranchName: If HEAD has no short name.
    """
    if not head.shorthand:
        raise MalformedBranchName("HEAD has no short name")
    return head.shorthand


def short_revision(
        head: HeadReference,
) -> str:
    """Return the commit id HEAD points to, cut to REVISION_LENGTH characters.

    Raises:
        HeadTargetMissing: If HEAD resolved without a target commit.
    """
    if head.target is None:
        raise HeadTargetMissing("HEAD resolved without a target commit")
    return head.target[:REVISION_LENGTH]


def status_glyphs(
        kinds: Iterable[ChangeKind],
) -> str | None:
    """Collapse change kinds into one glyph per kind, in first-seen order.

    Kinds without a glyph are skipped. Kinds sharing a glyph each add it
    once.

    Args:
        kinds: Change kind of each changed path.

    Returns:
        Glyph string, or None when no glyph applies.
    """
    seen: set[ChangeKind] = set()
    glyphs: list[str] = []

    for kind in kinds:
        if kind in seen:
            continue
        seen.add(kind)

        glyph = STATUS_GLYPHS[kind]
        if glyph:
            glyphs.append(glyph)

    return "".join(glyphs) or None


def state_label(
        state: RepositoryState,
) -> str | None:
    """Return the label of an in-progress operation, or None when clean."""
    return STATE_LABELS[state]


# ---- Summarizer ---------------------------------------------------------------------------------------------


def snapshot_status(
        snapshot: RepositorySnapshot,
) -> str | None:
    """Compute status glyphs, treating an unavailable diff as no status."""
    try:
        return status_glyphs(snapshot.changes())
    except StatusUnavailable as status_error:
        logger.debug("Status unavailable: %s", status_error)
        return None


def summarize(
        snapshot: RepositorySnapshot,
) -> PromptSummary:
    """Derive every field of the prompt line from a repository snapshot.

    Args:
        snapshot: Opened repository to summarize.

    Returns:
        PromptSummary with branch, revision, status and state.

    Raises:
        UnresolvableHead: If HEAD cannot be read.
        MalformedBranchName: If HEAD has no short name.
        HeadTargetMissing: If HEAD has no target commit.
    """
    head = snapshot.head()
    branch = branch_label(head)

    return PromptSummary(
        branch=branch,
        revision=short_revision(head),
        status=snapshot_status(snapshot),
        state=state_label(snapshot.state()),
    )
