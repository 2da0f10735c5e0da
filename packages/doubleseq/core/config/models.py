"""Configuration models for doubleseq."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from doubleseq.core.utils.logging import DEFAULT_FORMAT


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = DEFAULT_FORMAT
    structured: bool = Field(default=False, description="Emit JSON lines instead of text")


class DisplayConfig(BaseModel):
    """How sequences are rendered by the CLI."""

    debug_markers: bool = Field(
        default=False,
        description="Also mark precursor (x) and tail {x} while a current element is set",
    )


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
