"""Fuzzy ``which``: locate executables on the search path by approximate name."""

from __future__ import annotations

from fuzzywhich.display.highlight import highlight_text, locate, render_ansi
from fuzzywhich.search.engine import find_executables, merge_matches, scan_directory

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "find_executables",
    "highlight_text",
    "locate",
    "merge_matches",
    "render_ansi",
    "scan_directory",
]
