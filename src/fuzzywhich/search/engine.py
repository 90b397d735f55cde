"""Parallel scan of search directories for executables matching a pattern."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from fuzzywhich.models import Candidate
from fuzzywhich.search.similarity import is_match
from fuzzywhich.utils.files import ExecutablePredicate

LOGGER = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _is_text(name: str) -> bool:
    # Undecodable bytes come back from the OS as lone surrogates.
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _iter_candidates(directory: Path, entries: Iterable[os.DirEntry]) -> Iterator[Candidate]:
    iterator = iter(entries)
    while True:
        try:
            entry = next(iterator)
        except StopIteration:
            return
        except OSError as exc:
            LOGGER.debug("Skipping unreadable entry in %s: %s", directory, exc)
            continue
        yield Candidate(path=directory / entry.name, name=entry.name, parent=directory)


def scan_directory(
    directory: PathLike,
    pattern_lower: str,
    threshold: float,
    is_executable: ExecutablePredicate,
) -> set[Path]:
    """Return the matching executables of a single directory.

    ``pattern_lower`` must already be lower-cased. Missing paths and paths that
    are not directories yield an empty set, and so does an empty string
    rather than the current directory. A directory that exists but cannot
    be listed is logged as a warning and also yields an empty set.
    """
    if not os.fspath(directory):
        return set()
    path = Path(directory)
    try:
        if not path.is_dir():
            return set()
    except OSError:
        return set()
    path = path.absolute()

    try:
        entries = os.scandir(path)
    except OSError as exc:
        LOGGER.warning("could not read directory `%s`: %s", path, exc)
        return set()

    found: set[Path] = set()
    with entries:
        for candidate in _iter_candidates(path, entries):
            if not _is_text(candidate.name):
                continue
            try:
                if not is_executable(candidate.path):
                    continue
            except OSError as exc:
                LOGGER.debug("Skipping %s: %s", candidate.path, exc)
                continue
            if is_match(candidate.name.lower(), pattern_lower, threshold):
                found.add(candidate.path)
    return found


def merge_matches(results: Iterable[Iterable[Path]]) -> list[Path]:
    """Union per-directory results and order them by path string."""
    merged: set[Path] = set()
    for result in results:
        merged.update(result)
    return sorted(merged, key=str)


def find_executables(
    directories: Iterable[PathLike],
    pattern: str,
    threshold: float,
    is_executable: ExecutablePredicate,
    *,
    max_workers: Optional[int] = None,
) -> list[Path]:
    """Find executables in ``directories`` whose name matches ``pattern``.

    A name matches when it contains the pattern (case-insensitively) or when
    its Jaro-Winkler similarity to the pattern is at least ``threshold``.
    Each directory is scanned on its own worker thread, so ``is_executable``
    must be safe to call concurrently.

    Returns a new, duplicate-free list of absolute paths sorted by their
    string form. The order does not depend on which directory finished first.
    """
    dirs = list(directories)
    if not dirs:
        return []

    pattern_lower = pattern.lower()
    workers = max_workers or min(len(dirs), os.cpu_count() or 1)
    LOGGER.debug("Scanning %d directories with %d workers", len(dirs), workers)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(
            executor.map(
                lambda directory: scan_directory(
                    directory, pattern_lower, threshold, is_executable
                ),
                dirs,
            )
        )

    matches = merge_matches(results)
    LOGGER.debug("Found %d matches for %r", len(matches), pattern)
    return matches
