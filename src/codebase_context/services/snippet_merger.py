"""Snippet merger — coalesce line-adjacent hits from one file into text blocks."""

from __future__ import annotations

from typing import Sequence

from codebase_context.domain.entities import SearchHit
from codebase_context.domain.exceptions import InvalidInputError


def merge_consecutive_results(results: Sequence[SearchHit]) -> list[str]:
    """Merge hits of a single file whose line ranges touch.

    Hits are ordered by ``start_line`` (stable on ties).  A hit is appended to
    the current block only when it starts exactly where the previous hit in
    that order ends; overlap with earlier blocks is not considered.
    """
    if not results:
        raise InvalidInputError("Cannot merge an empty list of search results.")

    sorted_results = sorted(results, key=lambda r: r.start_line)
    merged: list[str] = [sorted_results[0].content]

    for previous, current in zip(sorted_results, sorted_results[1:]):
        if current.start_line == previous.end_line:
            merged[-1] += current.content
        else:
            merged.append(current.content)

    return merged
