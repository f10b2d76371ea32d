"""Terminal rendering of the prompt line.

Execution Context:
    CLI utilities - imported by main.py

Dependencies:
    - rich: Styled text and console output
    - gitprompt_core: Prompt summary and fallbacks

Metadata:
    Version: 0.1.0
    Author: gitprompt Team
"""
from __future__ import annotations

from rich.console import Console
from rich.text import Text

from gitprompt_cli.config import COLOR_ALWAYS
from gitprompt_cli.config import COLOR_NEVER
from gitprompt_core.errors import PromptFallback
from gitprompt_core.errors import UnresolvableHead
from gitprompt_core.models import PromptSummary


# ---- Styles -------------------------------------------------------------------------------------------------


BRANCH_STYLE = "blue"
REVISION_STYLE = "yellow"
STATUS_STYLE = "red"
STATE_STYLE = "green"
NO_HEAD_STYLE = "red"


# ---- Rendering ----------------------------------------------------------------------------------------------


def render_prompt(
        summary: PromptSummary,
) -> Text:
    """Build ``[<branch> @ <revision> <status> <state>] `` with styles.

    Absent fields are dropped along with their separator.

    Args:
        summary: Fields to render.

    Returns:
        Styled text, ending in a single space.
    """
    styled_parts = [
        (summary.revision, REVISION_STYLE),
        (summary.status, STATUS_STYLE),
        (summary.state, STATE_STYLE),
    ]
    rest = Text(" ").join(Text(part, style=style) for part, style in styled_parts if part)

    return Text.assemble(
        "[",
        (summary.branch, BRANCH_STYLE),
        " @ ",
        rest,
        "] ",
    )


def render_fallback(
        fallback: PromptFallback,
) -> Text:
    """Render the fixed text that replaces a prompt line."""
    style = NO_HEAD_STYLE if isinstance(fallback, UnresolvableHead) else ""
    return Text(fallback.output, style=style)


def make_console(
        color: str,
) -> Console:
    """Create a console for the given color mode.

    ``always`` forces ANSI styles even when stdout is captured by the
    shell, ``never`` drops them, and anything else lets rich decide.
    """
    if color == COLOR_ALWAYS:
        return Console(force_terminal=True, color_system="standard", highlight=False)
    if color == COLOR_NEVER:
        return Console(color_system=None, highlight=False)
    return Console(highlight=False)


def print_prompt(
        console: Console,
        text: Text,
) -> None:
    """Write the prompt text without wrapping or a trailing newline."""
    console.print(text, end="", soft_wrap=True)
