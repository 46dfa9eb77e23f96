"""Port: keyword context fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from codebase_context.domain.entities import KeywordHit


class KeywordContextFetcher(Protocol):
    """Abstract contract for keyword search returning whole-file excerpts."""

    async def get_context(self, query: str, num_results: int) -> list[KeywordHit]:
        """Return up to *num_results* matching files in relevance order."""
        ...
