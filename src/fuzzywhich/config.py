"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from fuzzywhich.errors import MissingSearchPathError

DEFAULT_THRESHOLD = 0.7
DEFAULT_COLOR = "blue"
SEARCH_PATH_VARIABLE = "PATH"


def split_search_path(value: str, separator: str = os.pathsep) -> list[Path]:
    """Split a ``PATH``-style string into directories, dropping empty entries."""
    return [Path(part) for part in value.split(separator) if part.strip()]


@dataclass(slots=True)
class AppConfig:
    threshold: float = DEFAULT_THRESHOLD
    color: str = DEFAULT_COLOR
    print_time: bool = False
    search_path: Optional[str] = None

    def resolve_directories(self, environ: Optional[Mapping[str, str]] = None) -> list[Path]:
        """Directories to scan: the explicit search path, else ``PATH``."""
        if self.search_path is not None:
            return split_search_path(self.search_path)
        env = os.environ if environ is None else environ
        value = env.get(SEARCH_PATH_VARIABLE)
        if value is None:
            raise MissingSearchPathError(SEARCH_PATH_VARIABLE)
        return split_search_path(value)
