"""Exceptions raised by fuzzywhich."""

from __future__ import annotations


class FuzzyWhichError(Exception):
    """Base class for fuzzywhich errors."""


class MissingSearchPathError(FuzzyWhichError):
    """No search path was given and ``PATH`` is not set."""

    def __init__(self, variable: str = "PATH") -> None:
        super().__init__(f"{variable} is not defined in the environment.")
        self.variable = variable


class InvalidColorError(FuzzyWhichError, ValueError):
    """A color name that rich cannot parse."""
