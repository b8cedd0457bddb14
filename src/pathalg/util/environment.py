"""Process environment lookups, kept out of the pure algebra."""

from __future__ import annotations

import os
from pathlib import Path


def home_from_environment() -> str:
    """Return the current user's home directory."""
    return str(Path("~").expanduser())


def working_directory_from_environment() -> str:
    """Return the process working directory."""
    return os.getcwd()


__all__ = ["home_from_environment", "working_directory_from_environment"]
