"""Domain exception hierarchy.

Inner layers raise these; the context assembler recovers from embeddings
failures and the outermost error-handler translates the rest to HTTP.
"""

from __future__ import annotations


class CodebaseContextError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidInputError(CodebaseContextError):
    """A caller broke an input contract (empty group, negative count, ...)."""


# ── Search backend errors ───────────────────────────────────────────────────


class EmbeddingsSearchError(CodebaseContextError):
    """The embeddings search backend failed to answer a query."""


class KeywordSearchError(CodebaseContextError):
    """The keyword search backend failed to answer a query."""


# ── Sourcegraph API errors ──────────────────────────────────────────────────


class SourcegraphApiError(CodebaseContextError):
    """Transport, HTTP or GraphQL-level failure talking to Sourcegraph."""


class RepositoryNotFoundError(CodebaseContextError):
    """The configured repository is unknown to the Sourcegraph instance."""
