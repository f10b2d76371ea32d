"""gitprompt CLI entry point.

Prints a one-line summary of the git repository containing the current
directory, for use inside a shell prompt. Every handled path exits 0 so the
prompt never reports a failure.

Execution Context:
    CLI application - run via `gitprompt` or `python -m gitprompt_cli`

Dependencies:
    - click: CLI framework
    - rich: Terminal output
    - gitprompt_core: Repository access and summary derivation

Metadata:
    Version: 0.1.0
    Author: gitprompt Team
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.text import Text

from gitprompt_cli.config import load_config
from gitprompt_cli.config import setup_logging
from gitprompt_cli.render import make_console
from gitprompt_cli.render import print_prompt
from gitprompt_cli.render import render_fallback
from gitprompt_cli.render import render_prompt
from gitprompt_core.errors import PromptFallback
from gitprompt_core.repository import open_repository
from gitprompt_core.summary import summarize

logger = logging.getLogger(__name__)

# No option is read, --help included; arguments are accepted and ignored
CONTEXT_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}


# ---- Prompt Assembly ----------------------------------------------------------------------------------------


def build_prompt(
        start_path: Path | str | None = None,
) -> Text:
    """Summarize the repository around a directory as prompt text.

    This is the single place where prompt fallbacks become output.

    Args:
        start_path: Directory to start repository discovery from.

    Returns:
        Styled prompt text, possibly empty.
    """
    try:
        with open_repository(start_path) as snapshot:
            summary = summarize(snapshot)
    except PromptFallback as fallback:
        logger.debug("Prompt fallback %s: %s", type(fallback).__name__, fallback)
        return render_fallback(fallback)

    logger.debug("Prompt summary: %s", summary)
    return render_prompt(summary)


# ---- Prompt Command -----------------------------------------------------------------------------------------


@click.command(context_settings=CONTEXT_SETTINGS, add_help_option=False)
def prompt() -> None:
    """Print the git summary for a shell prompt.

    Example:
        PS1='$(gitprompt)\\$ '
    """
    config = load_config()
    setup_logging(config)

    console = make_console(config.color)
    print_prompt(console, build_prompt())


# ---- Main Function ------------------------------------------------------------------------------------------


def main() -> int:
    """Main entry point for the gitprompt CLI.

    Returns:
        Exit code, always 0.
    """
    prompt(standalone_mode=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
