from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ResultEvent:
    """Normalized provider result for one event (read model, never persisted)."""

    api_event_id: str | None
    home_team: str
    away_team: str
    event_desc: str
    start_time: datetime
    competition: str
    completed: bool = False
    score: str | None = None
    home_score: str | None = None
    away_score: str | None = None
    event_id: int | None = None

