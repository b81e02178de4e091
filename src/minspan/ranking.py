"""Rank candidate haystacks for a single needle by span tightness.

A candidate whose span is shorter clusters the needle's elements more
closely and ranks first. Ties fall back to the shorter candidate, then to
input order, so results are stable.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
import logging
from typing import Generic, TypeVar

from minspan.span import Span, find_minimal_span


logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C", bound=Sequence)


@dataclass(frozen=True, slots=True)
class RankedCandidate(Generic[C]):
    """A candidate that matched, with its position in the input."""

    index: int
    candidate: C
    span: Span

    def sort_key(self) -> tuple[int, int, int]:
        return (self.span.length, len(self.candidate), self.index)


def rank_candidates(
    needle: Sequence[T],
    candidates: Iterable[C],
    *,
    limit: int | None = None,
    unique: bool = False,
) -> list[RankedCandidate[C]]:
    """Return the candidates containing needle, best match first.

    Args:
        needle: Sequence to look for in each candidate.
        candidates: Haystacks to search. Each must be a ``Sequence``.
        limit: Maximum number of results. None returns every match.
        unique: Skip candidates equal to one already seen. Candidates must
            be hashable when this is set.

    Returns:
        Matching candidates ordered by span length, candidate length,
        then input index.

    Raises:
        ValueError: If limit is less than 1.
    """
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    seen: set = set()
    matches: list[RankedCandidate[C]] = []
    scanned = 0

    for index, candidate in enumerate(candidates):
        scanned += 1
        if unique:
            if candidate in seen:
                continue
            seen.add(candidate)

        result = find_minimal_span(needle, candidate)
        if isinstance(result, Span):
            matches.append(RankedCandidate(index=index, candidate=candidate, span=result))

    matches.sort(key=RankedCandidate.sort_key)

    logger.debug(
        "Ranked candidates",
        extra={"needle_length": len(needle), "scanned": scanned, "matched": len(matches)},
    )

    if limit is not None:
        return matches[:limit]
    return matches
