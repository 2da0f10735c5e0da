"""Text formatting helpers for sequence rendering."""

from __future__ import annotations

from collections.abc import Iterable


def format_value(value: float) -> str:
    """Render a float using the shortest repr that round-trips (1.1, 2.0)."""
    return repr(float(value))


def join_elements(elements: Iterable[str], separator: str = ", ") -> str:
    """Wrap rendered elements in angle brackets: <a, b, c>."""
    return "<" + separator.join(elements) + ">"
