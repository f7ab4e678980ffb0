from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest


def score_item(
    api_event_id: str,
    home: str,
    away: str,
    *,
    home_score: str | None = None,
    away_score: str | None = None,
    completed: bool = True,
    commence_time: Any = "2023-05-20T14:00:00Z",
) -> dict[str, Any]:
    scores = None
    if home_score is not None and away_score is not None:
        # odds-api does not guarantee home-first ordering
        scores = [{"name": away, "score": away_score}, {"name": home, "score": home_score}]
    return {
        "id": api_event_id,
        "sport_key": "soccer_epl",
        "sport_title": "EPL",
        "commence_time": commence_time,
        "completed": completed,
        "home_team": home,
        "away_team": away,
        "scores": scores,
        "last_update": "2023-05-20T16:05:12Z" if completed else None,
    }


@pytest.fixture
def make_score_item():
    return score_item


@pytest.fixture
def epl_scores() -> list[dict[str, Any]]:
    return [
        score_item(
            "a085aa8beb661722ad957e5d8c15f798",
            "Tottenham Hotspur",
            "Brentford",
            home_score="1",
            away_score="3",
            commence_time="2023-05-20T11:30:00Z",
        ),
        score_item(
            "4b1de0f3d8d1a7bc2f2c0bfd6a3b7e11",
            "Newcastle United",
            "Leicester City",
            home_score="3",
            away_score="2",
        ),
        score_item(
            "9f2c1a7e5b3d4c6a8e0f1b2c3d4e5f60",
            "Chelsea",
            "Nottingham Forest",
            home_score="2",
            away_score="2",
        ),
        score_item(
            "0c7a4b9e2d1f3a5c6b8d0e2f4a6c8e01",
            "Arsenal",
            "Wolverhampton Wanderers",
            completed=False,
            commence_time="2023-05-28T15:30:00Z",
        ),
    ]


@dataclass
class FakeResultsProvider:
    items: list[dict[str, Any]] = field(default_factory=list)
    error: Exception | None = None
    provider_key: str = "fake"
    calls: list[str] = field(default_factory=list)
    closed: bool = False

    def fetch_results(self, comp_type: str) -> list[dict[str, Any]]:
        self.calls.append(comp_type)
        if self.error is not None:
            raise self.error
        return list(self.items)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_provider(epl_scores: list[dict[str, Any]]) -> FakeResultsProvider:
    return FakeResultsProvider(items=epl_scores)
