"""Calculation errors.

All subclass ValueError so callers that already guard bad input with
``except ValueError`` keep working.
"""

from __future__ import annotations

from collections.abc import Iterable


class CarbonError(ValueError):
    """Base class for every error raised by ai_carbon."""


class UnknownProviderError(CarbonError):
    def __init__(self, provider: str, available: Iterable[str] = ()) -> None:
        self.provider = provider
        self.available = list(available)
        super().__init__(f"Unsupported provider: {provider}. Available: {self.available}")


class UnknownModelError(CarbonError):
    def __init__(self, provider: str, model: str, available: Iterable[str] = ()) -> None:
        self.provider = provider
        self.model = model
        self.available = list(available)
        super().__init__(
            f"Unsupported model: {model} for provider {provider}. Available: {self.available}"
        )


class InvalidTokenCountError(CarbonError):
    """Token count is negative, non-integer, or non-finite."""

    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(
            f"Invalid {field}: {value!r}. Expected a non-negative integer."
        )
