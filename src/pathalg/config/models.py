"""Pydantic models describing pathalg configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pathalg.algebra.prefix import classify

SeparatorChoice = Optional[Literal["/", "\\"]]


def _require_rooted(value: str, field: str) -> str:
    if not classify(value).has_root:
        raise ValueError(f"{field} must be a rooted path, got {value!r}.")
    return value


class PathContext(BaseModel):
    """Process-wide values the algebra needs, captured once and passed in."""

    model_config = ConfigDict(frozen=True)

    home: str
    working_directory: str
    separator: SeparatorChoice = None

    @field_validator("home")
    @classmethod
    def _validate_home(cls, value: str) -> str:
        return _require_rooted(value, "home")

    @field_validator("working_directory")
    @classmethod
    def _validate_working_directory(cls, value: str) -> str:
        return _require_rooted(value, "working_directory")


class ContextConfig(BaseModel):
    """Optional overrides for the values normally read from the process."""

    model_config = ConfigDict(extra="allow")

    home: Optional[str] = None
    working_directory: Optional[str] = None
    separator: SeparatorChoice = None


class LoggingConfig(BaseModel):
    """Logger level and optional log file."""

    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_path: Optional[Path] = None


class PathAlgConfig(BaseModel):
    """Root configuration object for pathalg."""

    model_config = ConfigDict(extra="allow")

    context: ContextConfig = Field(default_factory=ContextConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "ContextConfig",
    "LoggingConfig",
    "PathAlgConfig",
    "PathContext",
    "SeparatorChoice",
]
