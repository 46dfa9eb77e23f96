"""Sourcegraph GraphQL client — thin transport shared by the search adapters."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from codebase_context.domain.entities import EmbeddingsSearchResults, KeywordHit, SearchHit
from codebase_context.domain.exceptions import RepositoryNotFoundError, SourcegraphApiError

logger = logging.getLogger(__name__)

_GRAPHQL_PATH = "/.api/graphql"

REPOSITORY_ID_QUERY = """
query Repository($name: String!) {
    repository(name: $name) {
        id
    }
}
"""

EMBEDDINGS_SEARCH_QUERY = """
query EmbeddingsSearch($repo: ID!, $query: String!, $codeResultsCount: Int!, $textResultsCount: Int!) {
    embeddingsSearch(repo: $repo, query: $query, codeResultsCount: $codeResultsCount, textResultsCount: $textResultsCount) {
        codeResults {
            fileName
            startLine
            endLine
            content
        }
        textResults {
            fileName
            startLine
            endLine
            content
        }
    }
}
"""

FILE_SEARCH_QUERY = """
query KeywordSearch($query: String!) {
    search(query: $query, version: V3, patternType: literal) {
        results {
            results {
                __typename
                ... on FileMatch {
                    file {
                        path
                        content
                    }
                }
            }
        }
    }
}
"""


class SourcegraphGraphQLClient:
    """Issues GraphQL requests against a Sourcegraph instance."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        access_token: str | None = None,
    ) -> None:
        self._client = client
        self._url = endpoint.rstrip("/") + _GRAPHQL_PATH
        self._headers: dict[str, str] = {
            "Content-Type": "application/json",
            "User-Agent": "codebase-context/1.0",
        }
        if access_token:
            self._headers["Authorization"] = f"token {access_token}"

    async def get_repository_id(self, name: str) -> str:
        """Resolve a repository name such as ``github.com/org/repo`` to its GraphQL ID."""
        data = await self._post(REPOSITORY_ID_QUERY, {"name": name})
        repository = data.get("repository")
        if not repository:
            raise RepositoryNotFoundError(f"Repository {name!r} not found on Sourcegraph.")
        return str(repository["id"])

    async def search_embeddings(
        self,
        repo_id: str,
        query: str,
        code_results_count: int,
        text_results_count: int,
    ) -> EmbeddingsSearchResults:
        data = await self._post(
            EMBEDDINGS_SEARCH_QUERY,
            {
                "repo": repo_id,
                "query": query,
                "codeResultsCount": code_results_count,
                "textResultsCount": text_results_count,
            },
        )
        payload = data.get("embeddingsSearch") or {}
        if not isinstance(payload, dict):
            raise SourcegraphApiError(
                f"Malformed embeddings search response: expected an object, got {payload!r}"
            )
        try:
            return EmbeddingsSearchResults(
                code_results=[_to_search_hit(r) for r in payload.get("codeResults") or []],
                text_results=[_to_search_hit(r) for r in payload.get("textResults") or []],
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise SourcegraphApiError(f"Malformed embeddings search response: {exc}") from exc

    async def search_files(self, query: str) -> list[KeywordHit]:
        """Run a Sourcegraph search and return the matching files in result order."""
        data = await self._post(FILE_SEARCH_QUERY, {"query": query})
        try:
            results = ((data.get("search") or {}).get("results") or {}).get("results") or []
            hits: list[KeywordHit] = []
            for result in results:
                if result.get("__typename") != "FileMatch":
                    continue
                file = result.get("file") or {}
                if not isinstance(file.get("path"), str):
                    continue
                hits.append(
                    KeywordHit(file_name=file["path"], content=str(file.get("content") or ""))
                )
        except AttributeError as exc:
            raise SourcegraphApiError(f"Malformed search response: {exc}") from exc
        return hits

    # ── Transport ───────────────────────────────────────────────────────

    async def _post(self, document: str, variables: dict[str, Any]) -> dict[str, Any]:
        """POST a GraphQL document and return its ``data`` member."""
        try:
            resp = await self._client.post(
                self._url,
                headers=self._headers,
                json={"query": document, "variables": variables},
            )
        except httpx.HTTPError as exc:
            raise SourcegraphApiError(f"Network error calling {self._url}: {exc}") from exc

        if resp.status_code in (401, 403):
            raise SourcegraphApiError(
                "Sourcegraph rejected the request. "
                "Check the SOURCEGRAPH_ACCESS_TOKEN environment variable."
            )
        if resp.status_code != 200:
            raise SourcegraphApiError(
                f"Sourcegraph API returned HTTP {resp.status_code} for {self._url}"
            )

        try:
            body = resp.json()
        except ValueError as exc:
            raise SourcegraphApiError(f"Sourcegraph returned invalid JSON: {exc}") from exc
        if not isinstance(body, dict):
            raise SourcegraphApiError(f"Expected a GraphQL response object, got {body!r}")

        errors = body.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            messages = "; ".join(
                str(e.get("message", e)) if isinstance(e, dict) else str(e) for e in errors
            )
            logger.debug("GraphQL errors from %s: %s", self._url, messages)
            raise SourcegraphApiError(f"GraphQL error: {messages}")

        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise SourcegraphApiError(f"Expected GraphQL data to be an object, got {data!r}")
        return data


def _to_search_hit(raw: dict[str, Any]) -> SearchHit:
    file_name = raw["fileName"]
    content = raw["content"]
    if not isinstance(file_name, str) or not isinstance(content, str):
        raise SourcegraphApiError(
            f"Search hit needs string fileName and content, got {file_name!r} / {content!r}"
        )
    return SearchHit(
        file_name=file_name,
        content=content,
        start_line=int(raw["startLine"]),
        end_line=int(raw["endLine"]),
    )
