"""Logging bootstrap for applications embedding rasterkit."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from rasterkit.config import settings


def configure_logging(level: str | None = None) -> None:
    """Install a root handler using the configured level.

    The library itself only creates module loggers; call this from an
    application entry point (or a REPL) to see their output.
    """
    load_dotenv()
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
