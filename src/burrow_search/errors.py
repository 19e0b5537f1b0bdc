"""Exceptions raised by burrow-search."""

from __future__ import annotations


class BurrowError(Exception):
    """Base exception class for burrow errors."""


class BurrowParseError(BurrowError, ValueError):
    """Raised when a burrow diagram or token code cannot be understood."""


class InvalidMove(BurrowError, RuntimeError):
    """Raised when a move does not start where the moving token stands."""


class SearchBudgetExceeded(BurrowError, RuntimeError):
    """Raised when the search expands more states than it was allowed to."""


__all__ = ["BurrowError", "BurrowParseError", "InvalidMove", "SearchBudgetExceeded"]
