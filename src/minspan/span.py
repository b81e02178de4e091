"""Minimal-span subsequence matching.

This module finds the shortest contiguous region of a haystack that contains
a needle as an in-order subsequence. Other elements may be interleaved
between the needle's elements, so "crl" matches inside "curl".

Conventions:
- Spans are half-open: ``Span(start, end)`` covers ``haystack[start:end]``
- An empty needle matches at ``Span(0, 0)`` for every haystack
- When several spans share the minimal length, the leftmost one wins
- "No match" is the falsy ``NOT_FOUND`` value, never a sentinel span
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias, TypeVar

from minspan.errors import InvalidSpanError, UnsupportedSequenceError


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Span:
    """A half-open region ``[start, end)`` of a haystack."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise InvalidSpanError(f"Invalid span positions: start={self.start}, end={self.end}")

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def last(self) -> int | None:
        """Inclusive index of the final element, or None for an empty span."""
        if self.end == self.start:
            return None
        return self.end - 1

    def as_slice(self) -> slice:
        return slice(self.start, self.end)


@dataclass(frozen=True, slots=True)
class NotFound:
    """The needle is not a subsequence of any region of the haystack."""

    def __bool__(self) -> bool:
        return False


NOT_FOUND = NotFound()

MatchResult: TypeAlias = Span | NotFound


def _require_sequence(value: Any, name: str) -> None:
    # str and bytes are Sequences; iterators and sets are not
    if not isinstance(value, Sequence):
        raise UnsupportedSequenceError(f"{name} must be a sequence, got {type(value).__name__}")


def is_subsequence(needle: Sequence[T], haystack: Sequence[T]) -> bool:
    """Return True if every needle element appears in haystack in order.

    Examples:
        >>> is_subsequence("crl", "curl")
        True
        >>> is_subsequence("xyz", "zyx")
        False
    """
    _require_sequence(needle, "needle")
    _require_sequence(haystack, "haystack")

    m = len(needle)
    if m == 0:
        return True

    j = 0
    for element in haystack:
        if element == needle[j]:
            j += 1
            if j == m:
                return True
    return False


def find_minimal_span(needle: Sequence[T], haystack: Sequence[T]) -> MatchResult:
    """Find the shortest span of haystack containing needle as a subsequence.

    Each round scans forward from the current position until the whole needle
    has been matched, which fixes a candidate ``end``. It then scans backward
    from ``end`` matching the needle right to left; the position where the
    first needle element is matched is the tightest ``start`` for that
    ``end``. The next round resumes one position after ``start``.

    Runs in O(n*m) time with constant extra space. Neither input is copied
    or mutated.

    Args:
        needle: Elements to find, in order. Only ``==`` is required.
        haystack: Elements to search, fully materialized.

    Returns:
        The minimal ``Span`` (leftmost on ties), or ``NOT_FOUND``.

    Raises:
        UnsupportedSequenceError: If either input is not a ``Sequence``.

    Examples:
        >>> find_minimal_span("curl", "curl https://rust-lang.org")
        Span(start=0, end=4)
        >>> find_minimal_span("aa", "a_a_a")
        Span(start=0, end=3)
        >>> find_minimal_span("abc", "ab")
        NotFound()
    """
    _require_sequence(needle, "needle")
    _require_sequence(haystack, "haystack")

    m = len(needle)
    n = len(haystack)
    if m == 0:
        return Span(0, 0)
    if n < m:
        return NOT_FOUND

    best_start = best_end = -1
    i = 0
    while i < n:
        # Forward: consume the haystack until the whole needle is matched
        j = 0
        while i < n:
            if haystack[i] == needle[j]:
                j += 1
                if j == m:
                    break
            i += 1
        if j < m:
            break
        end = i

        # Backward: pull the start as far right as this end allows
        j = m - 1
        while True:
            if haystack[i] == needle[j]:
                j -= 1
                if j < 0:
                    break
            i -= 1
        start = i

        # Strict comparison keeps the leftmost span on ties
        if best_end < 0 or end - start < best_end - best_start:
            best_start, best_end = start, end
            if best_end - best_start + 1 == m:
                break

        i = start + 1

    if best_end < 0:
        return NOT_FOUND
    return Span(best_start, best_end + 1)
