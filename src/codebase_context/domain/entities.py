"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ContextType(str, Enum):
    """Retrieval strategy used to build codebase context."""

    EMBEDDINGS = "embeddings"
    KEYWORD = "keyword"
    NONE = "none"
    BLENDED = "blended"


class Speaker(str, Enum):
    """Author of a single context message."""

    HUMAN = "human"
    ASSISTANT = "assistant"


@dataclass(frozen=True, slots=True)
class SearchHit:
    """A snippet returned by the embeddings search backend.

    Lines form the half-open range ``[start_line, end_line)``.
    """

    file_name: str
    content: str
    start_line: int
    end_line: int


@dataclass(frozen=True, slots=True)
class EmbeddingsSearchResults:
    """Code and text hits for one embeddings query, most relevant first."""

    code_results: list[SearchHit] = field(default_factory=list)
    text_results: list[SearchHit] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class KeywordHit:
    """A whole-file excerpt returned by keyword search."""

    file_name: str
    content: str


@dataclass(slots=True)
class FileGroup:
    """All merged snippet blocks belonging to one file."""

    file_name: str
    results: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ContextMessage:
    """One prompt unit handed to the generation system."""

    speaker: Speaker
    text: str
    file_name: str | None = None
