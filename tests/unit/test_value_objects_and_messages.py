"""Tests for search options validation and the context message formatter."""

import pytest

from codebase_context.domain.entities import ContextMessage, Speaker
from codebase_context.domain.exceptions import InvalidInputError
from codebase_context.domain.value_objects import ContextSearchOptions
from codebase_context.services.messages import get_context_message_with_response


class TestContextSearchOptions:
    def test_total_results(self):
        assert ContextSearchOptions(num_code_results=8, num_text_results=2).total_results == 10

    def test_zero_counts_allowed(self):
        assert ContextSearchOptions(num_code_results=0, num_text_results=0).total_results == 0

    @pytest.mark.parametrize(
        ("code", "text"),
        [(-1, 0), (0, -3), (1.5, 0), (True, 0), ("2", 1)],
    )
    def test_rejects_invalid_counts(self, code, text):
        with pytest.raises(InvalidInputError):
            ContextSearchOptions(num_code_results=code, num_text_results=text)


def test_context_message_with_response():
    assert get_context_message_with_response("snippet", "a.py") == [
        ContextMessage(speaker=Speaker.HUMAN, text="snippet", file_name="a.py"),
        ContextMessage(speaker=Speaker.ASSISTANT, text="Ok."),
    ]


def test_context_message_with_custom_response():
    messages = get_context_message_with_response("snippet", "a.py", response="Got it.")
    assert messages[1] == ContextMessage(speaker=Speaker.ASSISTANT, text="Got it.")
