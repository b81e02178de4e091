"""Helpers that turn a match result into data a caller can use.

The span finder only returns positions. These helpers derive the matched
region, force a match, or produce a sort key for ranking.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from minspan.errors import NoMatchError
from minspan.span import MatchResult, NotFound, Span


T = TypeVar("T")


def matched_slice(
    haystack: Sequence[T],
    result: MatchResult,
    *,
    borrow: bool = False,
) -> Sequence[T] | memoryview | None:
    """Return the region of haystack covered by result.

    Args:
        haystack: The sequence the result was computed against.
        result: Output of ``find_minimal_span`` for this haystack.
        borrow: For ``bytes``/``bytearray`` haystacks, return a
            ``memoryview`` over the region instead of a copy.

    Returns:
        The slice for a ``Span``, or None for ``NOT_FOUND``.
    """
    if isinstance(result, NotFound):
        return None
    if result.end > len(haystack):
        raise IndexError(f"Span end {result.end} exceeds haystack length {len(haystack)}")
    if borrow and isinstance(haystack, (bytes, bytearray)):
        return memoryview(haystack)[result.as_slice()]
    return haystack[result.as_slice()]


def unwrap_span(result: MatchResult, needle: Sequence[T] | None = None) -> Span:
    """Return the span, raising NoMatchError when there is none."""
    if isinstance(result, Span):
        return result
    raise NoMatchError(needle)


def span_sort_key(result: MatchResult, haystack_length: int) -> int:
    """Orderable key where smaller means a tighter match.

    A miss maps to one more than the longest span the haystack could hold,
    so unmatched candidates sort after every match against the same haystack.
    """
    if isinstance(result, Span):
        return result.length
    return haystack_length + 1
