"""Exceptions raised by minspan."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class MinspanError(Exception):
    """Base class for all minspan errors."""


class NoMatchError(MinspanError, LookupError):
    """Raised when a match is required but the needle is not a subsequence."""

    def __init__(self, needle: Sequence[Any] | None = None):
        self.needle = needle
        if needle is None:
            super().__init__("No span of the haystack contains the needle as a subsequence")
        else:
            super().__init__(f"No span of the haystack contains {needle!r} as a subsequence")


class InvalidSpanError(MinspanError, ValueError):
    """Raised when span positions are negative or reversed."""


class UnsupportedSequenceError(MinspanError, TypeError):
    """Raised when an input is not a fully materialized sequence."""
