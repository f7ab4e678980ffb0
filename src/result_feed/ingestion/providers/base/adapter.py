from __future__ import annotations

from typing import Any, Protocol


class ResultsProvider(Protocol):
    """
    Orchestration depends on this, not on any HTTP client.

    Implementations return the raw provider records for one competition and raise
    ProviderError on any transport or response failure.
    """

    provider_key: str

    def fetch_results(self, comp_type: str) -> list[Any]: ...

    def close(self) -> None: ...
