"""Configuration management for doubleseq."""

from doubleseq.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_script,
)
from doubleseq.core.config.models import AppConfig, DisplayConfig, LoggingConfig

__all__ = [
    # Loaders
    "detect_format",
    "load_config",
    "load_app_config",
    "load_script",
    "configure_logging",
    # Models
    "AppConfig",
    "DisplayConfig",
    "LoggingConfig",
]
