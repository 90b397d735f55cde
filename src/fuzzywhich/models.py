"""Core fuzzywhich data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class Candidate:
    """Directory entry under evaluation during a scan."""

    path: Path
    name: str
    parent: Path


@dataclass(slots=True, frozen=True)
class HighlightSpan:
    """Half-open range ``[start, end)`` of the pattern inside a file name."""

    start: int
    end: int


@dataclass(slots=True, frozen=True)
class MatchScore:
    """Both match signals for one name, used for diagnostics."""

    contains: bool
    similarity: float
