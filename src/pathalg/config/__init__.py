"""Configuration models and loaders for pathalg."""

from .loader import ConfigError, DEFAULT_CONFIG_PATH, build_context, dump_example_config, load_config
from .models import ContextConfig, LoggingConfig, PathAlgConfig, PathContext

__all__ = [
    "ConfigError",
    "ContextConfig",
    "DEFAULT_CONFIG_PATH",
    "LoggingConfig",
    "PathAlgConfig",
    "PathContext",
    "build_context",
    "dump_example_config",
    "load_config",
]
