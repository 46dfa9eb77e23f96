"""FastAPI dependency injection wiring."""

from __future__ import annotations

import logging

import httpx

from codebase_context.domain.entities import ContextType
from codebase_context.domain.exceptions import CodebaseContextError
from codebase_context.infrastructure.config import Settings, get_settings
from codebase_context.infrastructure.sourcegraph_adapters import (
    SourcegraphEmbeddingsSearch,
    SourcegraphKeywordContextFetcher,
)
from codebase_context.infrastructure.sourcegraph_graphql_client import SourcegraphGraphQLClient
from codebase_context.services.codebase_context import CodebaseContext

logger = logging.getLogger(__name__)

_http_client: httpx.AsyncClient | None = None
_graphql_client: SourcegraphGraphQLClient | None = None
_repo_id: str | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client, _graphql_client, _repo_id  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_seconds))
    token = (
        settings.sourcegraph_access_token.get_secret_value()
        if settings.sourcegraph_access_token
        else None
    )
    _graphql_client = SourcegraphGraphQLClient(
        client=_http_client,
        endpoint=settings.sourcegraph_endpoint,
        access_token=token,
    )

    _repo_id = None
    if settings.context_type in (ContextType.EMBEDDINGS, ContextType.BLENDED):
        try:
            _repo_id = await _graphql_client.get_repository_id(settings.repository)
        except CodebaseContextError as exc:
            logger.warning(
                "Embeddings unavailable for %s, continuing without them: %s",
                settings.repository,
                exc,
            )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _graphql_client, _repo_id  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _graphql_client = None
    _repo_id = None


def get_app_settings() -> Settings:
    return get_settings()


def get_codebase_context() -> CodebaseContext:
    """Build the use case with injected adapters."""
    settings = get_settings()

    assert _graphql_client is not None, "startup() was not called"

    embeddings = (
        SourcegraphEmbeddingsSearch(client=_graphql_client, repo_id=_repo_id)
        if _repo_id is not None
        else None
    )
    keywords = SourcegraphKeywordContextFetcher(
        client=_graphql_client, repo_name=settings.repository
    )
    return CodebaseContext(
        context_type=settings.context_type,
        embeddings=embeddings,
        keywords=keywords,
    )
