"""Shared fixtures."""

from __future__ import annotations

import pytest

from codebase_context.domain.entities import EmbeddingsSearchResults, KeywordHit
from tests.fixtures.fake_backends import hit


@pytest.fixture
def embeddings_results() -> EmbeddingsSearchResults:
    """Two code files (x.py most relevant) and one markdown doc."""
    return EmbeddingsSearchResults(
        code_results=[
            hit("src/x.py", 10, 20, "x-second\n"),
            hit("src/y.ts", 0, 5, "y-only\n"),
            hit("src/x.py", 0, 10, "x-first\n"),
        ],
        text_results=[hit("docs/guide.md", 3, 7, "guide\n")],
    )


@pytest.fixture
def keyword_hits() -> list[KeywordHit]:
    return [
        KeywordHit(file_name="README.md", content="# Readme"),
        KeywordHit(file_name="src/main.go", content="package main"),
    ]
