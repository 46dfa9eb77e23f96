"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from codebase_context.domain.entities import ContextMessage, Speaker


class ContextRequest(BaseModel):
    """Request body for ``POST /context``.

    Omitted counts fall back to the configured defaults.
    """

    query: str
    num_code_results: int | None = Field(default=None, ge=0)
    num_text_results: int | None = Field(default=None, ge=0)

    @field_validator("query")
    @classmethod
    def _must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            msg = "query must not be empty."
            raise ValueError(msg)
        return v


class ContextMessageSchema(BaseModel):
    speaker: Speaker
    text: str
    file_name: str | None = None

    @classmethod
    def from_entity(cls, message: ContextMessage) -> ContextMessageSchema:
        return cls(speaker=message.speaker, text=message.text, file_name=message.file_name)


class ContextResponse(BaseModel):
    """Successful response from ``POST /context``, least relevant message first."""

    messages: list[ContextMessageSchema]


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
