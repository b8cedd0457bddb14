"""Logging setup utilities."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def configure_logging(*, level: str = "INFO", log_path: Path | None = None) -> logging.Logger:
    """Configure the `pathalg` logger handlers.

    Output goes to stderr so command results on stdout stay machine-readable.
    """

    logger = logging.getLogger("pathalg")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    existing_files = {
        str(Path(h.baseFilename).resolve()) for h in logger.handlers if isinstance(h, logging.FileHandler)
    }

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if not has_stream:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path and str(log_path.resolve()) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging"]
