"""gitprompt CLI Application.

Command-line entry point printing a git summary for shell prompts.

Execution Context:
    CLI application - invoked from a shell prompt

Dependencies:
    - click: CLI framework
    - rich: Terminal formatting
    - gitprompt_core: Core library

Metadata:
    Version: 0.1.0
    Author: gitprompt Team
"""
from __future__ import annotations

__version__ = "0.1.0"
