"""Environment configuration for the gitprompt CLI.

Execution Context:
    CLI utilities - imported by main.py

Dependencies:
    - os: Environment variable access
    - logging: Optional diagnostics file

Metadata:
    Version: 0.1.0
    Author: gitprompt Team
"""
from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


# ---- Constants ----------------------------------------------------------------------------------------------


COLOR_ENV = "GITPROMPT_COLOR"
LOG_FILE_ENV = "GITPROMPT_LOG_FILE"
LOG_LEVEL_ENV = "GITPROMPT_LOG_LEVEL"

COLOR_ALWAYS = "always"
COLOR_NEVER = "never"
COLOR_AUTO = "auto"
COLOR_MODES = (COLOR_ALWAYS, COLOR_NEVER, COLOR_AUTO)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOGGER_NAMES = ("gitprompt_core", "gitprompt_cli")


# ---- Configuration ------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class PromptConfig:
    """Settings for one prompt render.

    Attributes:
        color: One of COLOR_MODES.
        log_file: File receiving diagnostics, or None to log nothing.
        log_level: Level for the diagnostics file.
    """

    color: str = COLOR_ALWAYS
    log_file: Path | None = None
    log_level: int = logging.DEBUG


def load_config(
        environ: Mapping[str, str] | None = None,
) -> PromptConfig:
    """Read settings from environment variables.

    Unknown values fall back to the defaults; a prompt must render even
    with a broken environment.

    Args:
        environ: Mapping to read from (defaults to os.environ).

    Returns:
        PromptConfig for this render.
    """
    env = os.environ if environ is None else environ

    color = env.get(COLOR_ENV, COLOR_ALWAYS).strip().lower()
    if color not in COLOR_MODES:
        color = COLOR_ALWAYS

    log_file = env.get(LOG_FILE_ENV, "").strip()

    level_name = env.get(LOG_LEVEL_ENV, "DEBUG").strip().upper()
    log_level = logging.getLevelName(level_name)
    if not isinstance(log_level, int):
        log_level = logging.DEBUG

    return PromptConfig(
        color=color,
        log_file=Path(log_file).expanduser() if log_file else None,
        log_level=log_level,
    )


def setup_logging(
        config: PromptConfig,
) -> bool:
    """Send diagnostics to the configured log file.

    Nothing is ever written to stderr. An unwritable log file disables
    logging for this render.

    Args:
        config: Settings naming the log file and level.

    Returns:
        True if a file handler was installed.
    """
    if config.log_file is None:
        return False

    try:
        handler = logging.FileHandler(config.log_file, encoding="utf-8")
    except OSError:
        return False

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    for name in LOGGER_NAMES:
        package_logger = logging.getLogger(name)
        package_logger.addHandler(handler)
        package_logger.setLevel(config.log_level)
    return True
