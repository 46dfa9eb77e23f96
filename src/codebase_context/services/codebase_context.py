"""Codebase context use case — turns a query into ordered context messages.

This is the single entry point for the business logic.  It depends only on
the two search ports (:class:`EmbeddingsSearch` and
:class:`KeywordContextFetcher`) and the pure service modules.  The interface
layer injects concrete adapters at runtime.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from codebase_context.domain.entities import ContextMessage, ContextType
from codebase_context.domain.exceptions import EmbeddingsSearchError
from codebase_context.domain.ports.embeddings_search import EmbeddingsSearch
from codebase_context.domain.ports.keyword_context_fetcher import KeywordContextFetcher
from codebase_context.domain.value_objects import ContextSearchOptions
from codebase_context.services.file_grouper import group_results_by_file
from codebase_context.services.messages import (
    MessageFormatter,
    get_context_message_with_response,
)
from codebase_context.services.templates import (
    populate_code_context_template,
    select_context_template,
)

logger = logging.getLogger(__name__)

_Handler = Callable[[str, ContextSearchOptions], Awaitable[list[ContextMessage]]]


class CodebaseContext:
    """Fetches search results for a query and renders them as context messages.

    Parameters
    ----------
    context_type:
        Retrieval strategy, fixed for the lifetime of the instance.
    embeddings:
        Embeddings search backend, or ``None`` when the repository has no
        embeddings.  ``BLENDED`` falls back to keyword search in that case.
    keywords:
        Keyword search backend.
    formatter:
        Turns one rendered snippet into prompt units.
    """

    def __init__(
        self,
        context_type: ContextType,
        embeddings: EmbeddingsSearch | None,
        keywords: KeywordContextFetcher,
        formatter: MessageFormatter = get_context_message_with_response,
    ) -> None:
        self._context_type = ContextType(context_type)
        self._embeddings = embeddings
        self._keywords = keywords
        self._formatter = formatter
        self._handlers: dict[ContextType, _Handler] = {
            ContextType.EMBEDDINGS: self._get_embeddings_context_messages,
            ContextType.KEYWORD: self._get_keyword_context_messages,
            ContextType.NONE: self._get_no_context_messages,
            ContextType.BLENDED: self._get_blended_context_messages,
        }

    @property
    def context_type(self) -> ContextType:
        return self._context_type

    # ── Public entry point ──────────────────────────────────────────────

    async def get_context_messages(
        self, query: str, options: ContextSearchOptions
    ) -> list[ContextMessage]:
        """Return context messages for *query*, least relevant first."""
        handler = self._handlers[self._context_type]
        messages = await handler(query, options)
        logger.debug(
            "Built %d context message(s) using %s context",
            len(messages),
            self._context_type.value,
        )
        return messages

    # ── Strategy handlers ───────────────────────────────────────────────

    async def _get_blended_context_messages(
        self, query: str, options: ContextSearchOptions
    ) -> list[ContextMessage]:
        if self._embeddings is not None:
            return await self._get_embeddings_context_messages(query, options)
        return await self._get_keyword_context_messages(query, options)

    async def _get_no_context_messages(
        self, query: str, options: ContextSearchOptions
    ) -> list[ContextMessage]:
        return []

    # Context is split into one message per snippet rather than a single large
    # message so the generation side can drop it gradually when out of tokens.
    async def _get_embeddings_context_messages(
        self, query: str, options: ContextSearchOptions
    ) -> list[ContextMessage]:
        if self._embeddings is None:
            return []

        try:
            search_results = await self._embeddings.search(
                query, options.num_code_results, options.num_text_results
            )
        except EmbeddingsSearchError as exc:
            logger.error("Error retrieving embeddings: %s", exc)
            return []

        combined_results = search_results.code_results + search_results.text_results

        messages: list[ContextMessage] = []
        # Reversed so files appear in ascending order of importance (least -> most).
        for group in reversed(group_results_by_file(combined_results)):
            template = select_context_template(group.file_name)
            for text in group.results:
                messages.extend(
                    self._formatter(template(text, group.file_name), group.file_name)
                )
        return messages

    async def _get_keyword_context_messages(
        self, query: str, options: ContextSearchOptions
    ) -> list[ContextMessage]:
        results = await self._keywords.get_context(query, options.total_results)

        messages: list[ContextMessage] = []
        for result in results:
            message_text = populate_code_context_template(result.content, result.file_name)
            messages.extend(self._formatter(message_text, result.file_name))
        return messages
