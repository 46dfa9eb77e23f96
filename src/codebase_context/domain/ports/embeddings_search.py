"""Port: embeddings search — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from codebase_context.domain.entities import EmbeddingsSearchResults


class EmbeddingsSearch(Protocol):
    """Abstract contract for similarity search over an indexed repository."""

    async def search(
        self, query: str, code_results_count: int, text_results_count: int
    ) -> EmbeddingsSearchResults:
        """Return scored code and text snippets, most relevant first.

        Raises :class:`~codebase_context.domain.exceptions.EmbeddingsSearchError`
        when the backend cannot answer.
        """
        ...
