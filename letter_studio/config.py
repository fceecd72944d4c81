"""
Configuration — environment-driven settings.

Values come from the process environment, with a `.env` file in the
working directory loaded first.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

load_dotenv()


def outputs_dir() -> str:
    """Directory that exported letters are written to."""
    return os.getenv("OUTPUTS_DIR", "outputs")


def default_template() -> str:
    """Template id used when a session or command does not name one."""
    return os.getenv("LETTER_TEMPLATE", "formal")


def details_path() -> str | None:
    """Fallback details file for commands that take one."""
    return os.getenv("LETTER_DETAILS_PATH") or None


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "WARNING").upper()


def configure_logging(level: str | None = None) -> None:
    """Route logging through Rich on stderr, keeping stdout for output."""
    logging.basicConfig(
        level=level or log_level(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
