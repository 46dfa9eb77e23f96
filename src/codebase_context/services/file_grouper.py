"""File grouper — partition flat search hits into per-file merged groups."""

from __future__ import annotations

from typing import Sequence

from codebase_context.domain.entities import FileGroup, SearchHit
from codebase_context.services.snippet_merger import merge_consecutive_results


def group_results_by_file(results: Sequence[SearchHit]) -> list[FileGroup]:
    """Group *results* by file, keeping the order files were first seen in."""
    # dicts preserve insertion order, which is the first-appearance order
    hits_by_file: dict[str, list[SearchHit]] = {}
    for result in results:
        hits_by_file.setdefault(result.file_name, []).append(result)

    return [
        FileGroup(file_name=file_name, results=merge_consecutive_results(hits))
        for file_name, hits in hits_by_file.items()
    ]
