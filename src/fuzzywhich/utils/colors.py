"""Resolve user supplied color names to rich styles."""

from __future__ import annotations

from typing import Optional

from rich.color import Color, ColorParseError
from rich.style import Style

from fuzzywhich.errors import InvalidColorError

DISABLED = frozenset({"off", "none", "no"})


def resolve_style(name: str) -> Optional[Style]:
    """Return a bold style in ``name``'s color, or ``None`` when color is off.

    Accepts anything rich understands: standard names (``red``), 256-color
    numbers (``color(208)``) and hex codes (``#ff8800``).
    """
    normalized = name.strip().lower()
    if normalized in DISABLED:
        return None
    try:
        color = Color.parse(normalized)
    except ColorParseError as exc:
        raise InvalidColorError(f"Unknown color: {name!r}") from exc
    return Style(color=color, bold=True)
