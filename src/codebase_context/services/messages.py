"""Context messages — wrap rendered snippets into prompt units."""

from __future__ import annotations

from typing import Callable

from codebase_context.domain.entities import ContextMessage, Speaker

MessageFormatter = Callable[[str, str], list[ContextMessage]]

DEFAULT_RESPONSE = "Ok."


def get_context_message_with_response(
    text: str, file_name: str, response: str = DEFAULT_RESPONSE
) -> list[ContextMessage]:
    """Return the human context message followed by a canned acknowledgement."""
    return [
        ContextMessage(speaker=Speaker.HUMAN, text=text, file_name=file_name),
        ContextMessage(speaker=Speaker.ASSISTANT, text=response),
    ]
