"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass

from codebase_context.domain.exceptions import InvalidInputError


@dataclass(frozen=True, slots=True)
class ContextSearchOptions:
    """How many code and text results to request for one query.

    Keyword search is not category-aware and receives the combined
    :attr:`total_results` count instead.
    """

    num_code_results: int
    num_text_results: int

    def __post_init__(self) -> None:
        for name in ("num_code_results", "num_text_results"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidInputError(f"{name} must be an integer, got {value!r}.")
            if value < 0:
                raise InvalidInputError(f"{name} must be non-negative, got {value}.")

    @property
    def total_results(self) -> int:
        return self.num_code_results + self.num_text_results
