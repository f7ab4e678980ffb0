from __future__ import annotations

from typing import Any


class ResultError(RuntimeError):
    """Base exception for result ingestion failures."""


class MappingFailed(ResultError):
    """A provider batch could not be mapped; the whole batch is discarded."""


class DateParseError(MappingFailed):
    """A provider record carried a start time that does not match the provider format."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"


class InvalidScoreError(ValueError):
    """Goal counts that are not non-negative integers. Indicates corrupt upstream data."""


class StoreUnavailable(ResultError):
    """The result store failed mid-cycle; the cycle is abandoned until the next tick."""
