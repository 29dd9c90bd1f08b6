"""Configuration management for fluent-common.

This module centralizes file-system paths, environment switches, and the
logger factory shared by every helper in the package.

Environment variables
---------------------
``OUTPUT_DIR`` and ``LOGS_DIR`` override the default directories under the
project root. ``LOG_LEVEL`` sets the console log level and ``LOG_TO_FILE``
(``1``/``true``/``yes``) attaches a dated file handler under ``LOGS_DIR``.
Values may also come from a ``.env`` file in the working directory.
"""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", PROJECT_ROOT / "output"))
LOGS_DIR = Path(os.getenv("LOGS_DIR", PROJECT_ROOT / "logs"))

# Text and indentation defaults
TEXT_ENCODING = "utf-8"
DEFAULT_INDENT_SPACES = 4
DEFAULT_INDENT_TABS = 1

_TRUTHY = {"1", "true", "yes", "on"}


def env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean switch from the environment.

    Parameters
    ----------
    name : str
        Environment variable name.
    default : bool, optional
        Value used when the variable is unset or blank.

    Returns
    -------
    bool
        ``True`` for ``1``, ``true``, ``yes`` or ``on`` (case-insensitive).
    """
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


def get_log_level() -> int:
    """Return the console log level configured via ``LOG_LEVEL``.

    Unknown level names fall back to ``INFO``.
    """
    level_name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def setup_logging(name: str = "fluent_common") -> logging.Logger:
    """Configure a console (and optional file) logger if not already present.

    Parameters
    ----------
    name : str, optional
        Logger namespace; reused to avoid duplicate handlers.

    Returns
    -------
    logging.Logger
        Logger with a console handler at ``LOG_LEVEL`` and, when ``LOG_TO_FILE``
        is set, a DEBUG-level file handler under ``LOGS_DIR``.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(logging.DEBUG)

        # Console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(get_log_level())
        console_format = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        console_handler.setFormatter(console_format)
        logger.addHandler(console_handler)

        # File handler
        if env_flag("LOG_TO_FILE"):
            LOGS_DIR.mkdir(parents=True, exist_ok=True)
            log_filename = f"{datetime.now(UTC).strftime('%Y-%m-%d')}_run.log"
            file_handler = logging.FileHandler(LOGS_DIR / log_filename, encoding=TEXT_ENCODING)
            file_handler.setLevel(logging.DEBUG)
            file_format = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
            file_handler.setFormatter(file_format)
            logger.addHandler(file_handler)

    return logger
