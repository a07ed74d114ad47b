"""Logging setup for the API process."""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a single stream handler to the package logger."""

    logger = logging.getLogger("transcriptinator")
    logger.setLevel(level.upper())
    if any(getattr(handler, "_transcriptinator", False) for handler in logger.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._transcriptinator = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
