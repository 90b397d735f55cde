"""Highlight the matched part of an executable's file name."""

from __future__ import annotations

import os
from io import StringIO
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Optional, Union

from rich.console import Console
from rich.style import Style
from rich.text import Text

from fuzzywhich.models import HighlightSpan

_FLAVOURS: dict[str, type[PurePath]] = {
    "/": PurePosixPath,
    "\\": PureWindowsPath,
}


def _lower_offsets(name: str) -> list[int]:
    """Map each offset of ``name.lower()`` back to an offset in ``name``."""
    offsets: list[int] = []
    for index, char in enumerate(name):
        offsets.extend([index] * len(char.lower()))
    offsets.append(len(name))
    return offsets


def locate(name: str, pattern: str) -> Optional[HighlightSpan]:
    """Find ``pattern`` in ``name`` ignoring case.

    The span indexes the original ``name``, even when lower-casing changes the
    length of some characters.
    """
    if not pattern:
        return None
    name_lower = name.lower()
    pattern_lower = pattern.lower()
    index = name_lower.find(pattern_lower)
    if index < 0:
        return None
    end = index + len(pattern_lower)
    if len(name_lower) == len(name):
        return HighlightSpan(index, end)
    offsets = _lower_offsets(name)
    return HighlightSpan(offsets[index], offsets[end - 1] + 1)


def _split(path: str, separator: str) -> tuple[str, str, str]:
    """Return the display form, parent and file name of ``path``."""
    flavour = _FLAVOURS.get(separator)
    if flavour is not None:
        pure = flavour(path)
        parent = str(pure.parent)
        if parent == ".":
            parent = ""
        return str(pure), parent, pure.name
    head, sep, tail = path.rpartition(separator)
    return path, (head or sep), tail


def highlight_text(
    path: Union[str, os.PathLike],
    pattern: str,
    style: Optional[Union[Style, str]] = None,
    separator: Optional[str] = None,
) -> Text:
    """Return ``path`` as rich text with the first match of ``pattern`` styled.

    ``separator`` selects how the path is split and joined, and defaults to
    ``os.sep``. When the file name does not contain the pattern, or the path
    has no file name, the plain display form is returned without styling.
    Passing ``style=None`` disables emphasis while keeping the same layout.
    """
    sep = separator or os.sep
    display, parent, name = _split(os.fspath(path), sep)
    if not name:
        return Text(display)

    span = locate(name, pattern)
    if span is None:
        return Text(display)

    text = Text(parent)
    if parent and not parent.endswith(sep):
        text.append(sep)
    text.append(name[: span.start])
    text.append(name[span.start : span.end], style=style)
    text.append(name[span.end :])
    return text


def render_ansi(text: Text, color_system: Optional[str] = "standard") -> str:
    """Render ``text`` to a string with embedded terminal escape codes.

    ``color_system=None`` produces the plain text without any escapes.
    """
    buffer = StringIO()
    console = Console(
        file=buffer,
        force_terminal=color_system is not None,
        color_system=color_system,
        no_color=color_system is None,
        legacy_windows=False,
        soft_wrap=True,
        highlight=False,
    )
    console.print(text, end="")
    return buffer.getvalue()
