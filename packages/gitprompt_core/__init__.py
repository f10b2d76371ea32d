"""gitprompt Core Library.

Derives a one-line shell prompt summary of a git repository: branch,
abbreviated revision, working-tree status glyphs and in-progress operation.

Execution Context:
    Library package - imported by the CLI

Dependencies:
    - GitPython: Repository access

Metadata:
    Version: 0.1.0
    Author: gitprompt Team
"""
from __future__ import annotations

import logging

from gitprompt_core.models import ChangeKind
from gitprompt_core.models import HeadReference
from gitprompt_core.models import PromptSummary
from gitprompt_core.models import RepositoryState

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ChangeKind",
    "HeadReference",
    "PromptSummary",
    "RepositoryState",
    "__version__",
]
