"""Command line interface for fuzzywhich."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from fuzzywhich import __version__
from fuzzywhich.config import DEFAULT_COLOR, DEFAULT_THRESHOLD, AppConfig
from fuzzywhich.display.highlight import highlight_text
from fuzzywhich.errors import InvalidColorError, MissingSearchPathError
from fuzzywhich.search.engine import find_executables
from fuzzywhich.search.similarity import score
from fuzzywhich.utils.colors import resolve_style
from fuzzywhich.utils.files import default_predicate

LOGGER = logging.getLogger(__name__)

console = Console(highlight=False, soft_wrap=True)
app = typer.Typer(help="fuzzywhich - find executables on PATH by approximate name")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"fuzzywhich {__version__}")
        raise typer.Exit()


def _log_scores(matches: list[Path], pattern: str) -> None:
    for match in matches:
        result = score(match.name, pattern)
        LOGGER.debug(
            "%s: contains=%s similarity=%.3f", match, result.contains, result.similarity
        )


@app.command()
def main(
    pattern: str = typer.Argument(..., help="The search pattern"),
    color: str = typer.Option(
        DEFAULT_COLOR, "--color", "-c", help="Color of the highlighted text (off for no color)"
    ),
    threshold: float = typer.Option(
        DEFAULT_THRESHOLD,
        "--threshold",
        "-T",
        min=0.0,
        max=1.0,
        help="Jaro-Winkler similarity threshold",
    ),
    print_time: bool = typer.Option(False, "--print-time", "-t", help="Print time elapsed"),
    search_path: Optional[str] = typer.Option(
        None, "--path", "-p", help="Search path to use instead of PATH"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Find executables whose name contains or resembles PATTERN."""
    _setup_logging(verbose)

    if not pattern:
        console.print("Search pattern cannot be empty")
        raise typer.Exit(code=1)

    config = AppConfig(
        threshold=threshold,
        color=color,
        print_time=print_time,
        search_path=search_path,
    )

    try:
        style = resolve_style(config.color)
    except InvalidColorError as exc:
        raise typer.BadParameter(str(exc), param_hint="--color") from exc

    try:
        directories = config.resolve_directories()
    except MissingSearchPathError as exc:
        console.print(str(exc))
        raise typer.Exit(code=1) from exc

    started = time.perf_counter()
    matches = find_executables(directories, pattern, config.threshold, default_predicate())
    if verbose:
        _log_scores(matches, pattern)

    if not matches:
        LOGGER.info("No matches found for %r", pattern)
    for match in matches:
        console.print(highlight_text(match, pattern, style))

    if config.print_time:
        elapsed = time.perf_counter() - started
        console.print()
        console.print("Elapsed: ", end="")
        console.print(f"{elapsed:.2f}s", style=style)
