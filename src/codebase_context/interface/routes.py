"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from codebase_context.domain.value_objects import ContextSearchOptions
from codebase_context.infrastructure.config import Settings
from codebase_context.interface.dependencies import get_app_settings, get_codebase_context
from codebase_context.interface.schemas import (
    ContextMessageSchema,
    ContextRequest,
    ContextResponse,
    ErrorResponse,
)
from codebase_context.services.codebase_context import CodebaseContext

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/context",
    response_model=ContextResponse,
    responses={
        422: {"model": ErrorResponse, "description": "Invalid query or result counts"},
        404: {"model": ErrorResponse, "description": "Configured repository not found"},
        502: {"model": ErrorResponse, "description": "Search backend error"},
    },
)
async def get_context(
    body: ContextRequest,
    codebase_context: CodebaseContext = Depends(get_codebase_context),
    settings: Settings = Depends(get_app_settings),
) -> ContextResponse:
    """Return codebase context messages for a query."""
    options = ContextSearchOptions(
        num_code_results=(
            body.num_code_results
            if body.num_code_results is not None
            else settings.num_code_results
        ),
        num_text_results=(
            body.num_text_results
            if body.num_text_results is not None
            else settings.num_text_results
        ),
    )
    messages = await codebase_context.get_context_messages(body.query, options)
    logger.info(
        "Returning %d context message(s) (%s)",
        len(messages),
        codebase_context.context_type.value,
    )
    return ContextResponse(messages=[ContextMessageSchema.from_entity(m) for m in messages])
