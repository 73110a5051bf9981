"""Logging configuration."""

from __future__ import annotations

import logging


def configure_logging(level_name: str = "WARNING") -> None:
    """Configure stderr logging at the given level."""

    level = getattr(logging, str(level_name).upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
