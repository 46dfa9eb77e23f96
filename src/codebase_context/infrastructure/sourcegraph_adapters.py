"""Sourcegraph adapters — implement the EmbeddingsSearch and KeywordContextFetcher ports."""

from __future__ import annotations

import logging
import re

from codebase_context.domain.entities import EmbeddingsSearchResults, KeywordHit
from codebase_context.domain.exceptions import (
    CodebaseContextError,
    EmbeddingsSearchError,
    KeywordSearchError,
)
from codebase_context.infrastructure.sourcegraph_graphql_client import SourcegraphGraphQLClient

logger = logging.getLogger(__name__)


class SourcegraphEmbeddingsSearch:
    """Concrete ``EmbeddingsSearch`` backed by Sourcegraph's embeddings index."""

    def __init__(self, client: SourcegraphGraphQLClient, repo_id: str) -> None:
        self._client = client
        self._repo_id = repo_id

    async def search(
        self, query: str, code_results_count: int, text_results_count: int
    ) -> EmbeddingsSearchResults:
        try:
            return await self._client.search_embeddings(
                self._repo_id, query, code_results_count, text_results_count
            )
        except CodebaseContextError as exc:
            raise EmbeddingsSearchError(f"Embeddings search failed: {exc}") from exc


class SourcegraphKeywordContextFetcher:
    """Concrete ``KeywordContextFetcher`` backed by Sourcegraph literal search."""

    def __init__(self, client: SourcegraphGraphQLClient, repo_name: str) -> None:
        self._client = client
        self._repo_name = repo_name

    async def get_context(self, query: str, num_results: int) -> list[KeywordHit]:
        if num_results <= 0:
            return []

        search_query = (
            f"repo:^{re.escape(self._repo_name)}$ type:file count:{num_results} {query}"
        )
        try:
            hits = await self._client.search_files(search_query)
        except CodebaseContextError as exc:
            raise KeywordSearchError(f"Keyword search failed: {exc}") from exc

        logger.debug("Keyword search returned %d file(s) for %r", len(hits), query)
        return hits[:num_results]
