"""Minimal-span subsequence matching for ranking fuzzy completions."""

from minspan.errors import InvalidSpanError, MinspanError, NoMatchError, UnsupportedSequenceError
from minspan.ranking import RankedCandidate, rank_candidates
from minspan.slicing import matched_slice, span_sort_key, unwrap_span
from minspan.span import NOT_FOUND, MatchResult, NotFound, Span, find_minimal_span, is_subsequence


__all__ = [
    "NOT_FOUND",
    "InvalidSpanError",
    "MatchResult",
    "MinspanError",
    "NoMatchError",
    "NotFound",
    "RankedCandidate",
    "Span",
    "UnsupportedSequenceError",
    "find_minimal_span",
    "is_subsequence",
    "matched_slice",
    "rank_candidates",
    "span_sort_key",
    "unwrap_span",
]

__version__ = "0.1.0"
