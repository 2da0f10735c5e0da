"""Shared utilities for doubleseq."""

from doubleseq.core.utils.formatting import format_value, join_elements
from doubleseq.core.utils.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "format_value",
    "get_logger",
    "join_elements",
]
