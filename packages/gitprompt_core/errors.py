"""Exceptions raised while deriving a prompt summary.

Each prompt fallback carries the text printed in place of the summary, so a
single top-level handler can finish the prompt without knowing which check
failed.

Execution Context:
    Library module - raised by repository and summary modules

Metadata:
    Version: 0.1.0
    Author: gitprompt Team
"""
from __future__ import annotations


class GitPromptError(Exception):
    """Base exception for gitprompt errors."""


# ---- Prompt Fallbacks ---------------------------------------------------------------------------------------


class PromptFallback(GitPromptError):
    """A condition that replaces the whole prompt line with fixed text.

    Attributes:
        output: Text to print instead of the summary.
    """

    output = ""

    def __init__(self, message: str, output: str | None = None):
        super().__init__(message)
        if output is not None:
            self.output = output


class NotARepository(PromptFallback):
    """No repository is discoverable from the current directory."""

    output = ""


class UnresolvableHead(PromptFallback):
    """A repository exists but its HEAD cannot be read."""

    output = "[no head] "


class MalformedBranchName(PromptFallback):
    """HEAD resolves but has no short name."""

    output = "???"


# ---- Degraded Results ---------------------------------------------------------------------------------------


class StatusUnavailable(GitPromptError):
    """The working-tree diff cannot be computed."""


# ---- Contract Violations ------------------------------------------------------------------------------------


class HeadTargetMissing(GitPromptError):
    """HEAD resolved without a commit to point at."""
