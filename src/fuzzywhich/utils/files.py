"""Executability checks for directory entries."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Collection

ExecutablePredicate = Callable[[Path], bool]

WINDOWS_EXTENSIONS: frozenset[str] = frozenset(
    {"exe", "sh", "bat", "cmd", "com", "ps1", "vbs", "py"}
)


def is_executable_posix(path: Path) -> bool:
    """True for regular files the current user may execute."""
    try:
        return path.is_file() and os.access(path, os.X_OK)
    except OSError:
        return False


def has_executable_extension(
    path: Path, extensions: Collection[str] = WINDOWS_EXTENSIONS
) -> bool:
    """True for regular files whose extension is in ``extensions``."""
    suffix = path.suffix.lower().lstrip(".")
    if not suffix or suffix not in extensions:
        return False
    try:
        return path.is_file()
    except OSError:
        return False


def default_predicate() -> ExecutablePredicate:
    """Pick the executability check for the running platform."""
    if os.name == "nt":
        return has_executable_extension
    return is_executable_posix
