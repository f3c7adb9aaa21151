from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str | int = logging.WARNING, log_file: Path | None = None) -> None:
    """Route log records away from the terminal, which Textual owns while running.

    Records go to ``log_file`` when one is given and are dropped otherwise.
    """
    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.NullHandler()
    logging.basicConfig(format=LOG_FORMAT, level=level, handlers=[handler], force=True)
