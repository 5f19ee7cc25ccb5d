"""Process-wide logging setup (called once by the CLI)."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # Client libraries are chatty at DEBUG.
    for name in ("aio_pika", "aiormq", "redis"):
        logging.getLogger(name).setLevel(max(logging.getLevelName(level), logging.INFO))
