"""In-memory doubles for the search ports."""

from __future__ import annotations

from typing import Awaitable, Callable

from codebase_context.domain.entities import EmbeddingsSearchResults, KeywordHit, SearchHit


class FakeEmbeddingsSearch:
    """Embeddings backend that records calls and delegates to an optional callable."""

    def __init__(
        self,
        search: Callable[[str, int, int], Awaitable[EmbeddingsSearchResults]] | None = None,
    ) -> None:
        self._search = search
        self.calls: list[tuple[str, int, int]] = []

    async def search(
        self, query: str, code_results_count: int, text_results_count: int
    ) -> EmbeddingsSearchResults:
        self.calls.append((query, code_results_count, text_results_count))
        if self._search is None:
            return EmbeddingsSearchResults()
        return await self._search(query, code_results_count, text_results_count)


class FakeKeywordContextFetcher:
    """Keyword backend that records calls and delegates to an optional callable."""

    def __init__(
        self,
        get_context: Callable[[str, int], Awaitable[list[KeywordHit]]] | None = None,
    ) -> None:
        self._get_context = get_context
        self.calls: list[tuple[str, int]] = []

    async def get_context(self, query: str, num_results: int) -> list[KeywordHit]:
        self.calls.append((query, num_results))
        if self._get_context is None:
            return []
        return await self._get_context(query, num_results)


def returning(value):
    """Wrap *value* in a coroutine function ignoring its arguments."""

    async def _call(*args, **kwargs):
        return value

    return _call


def raising(exc: BaseException):
    async def _call(*args, **kwargs):
        raise exc

    return _call


def hit(file_name: str, start: int, end: int, content: str) -> SearchHit:
    return SearchHit(file_name=file_name, content=content, start_line=start, end_line=end)
