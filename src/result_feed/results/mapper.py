"""Map raw odds-api score items into `ResultEvent`s.

Batches are all-or-nothing: the first record whose start time cannot be parsed
turns the whole batch into a `DateParseError` and later records are not examined.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from typing import Any

from result_feed.ingestion.dates import PROVIDER_START_TIME_FORMAT, parse_provider_start_time
from result_feed.results.errors import DateParseError
from result_feed.results.types import ResultEvent

ApiItem = dict[str, Any]


@dataclass(frozen=True)
class _Failed:
    error: DateParseError


_Acc = list[ResultEvent] | _Failed


def _team_score(scores: Any, team: str) -> str | None:
    if not isinstance(scores, list):
        return None
    for entry in scores:
        if isinstance(entry, dict) and entry.get("name") == team:
            value = entry.get("score")
            return None if value is None else str(value)
    return None


def map_result(record: Any, *, index: int = 0) -> ResultEvent | DateParseError:
    """Map one provider record. Returns the error instead of raising it."""

    if not isinstance(record, dict):
        return DateParseError(
            "Provider record is not an object", context={"index": index, "record": record}
        )

    start_time = parse_provider_start_time(record.get("commence_time"))
    if start_time is None:
        return DateParseError(
            f"Unparsable commence_time, expected {PROVIDER_START_TIME_FORMAT}",
            context={
                "index": index,
                "api_event_id": record.get("id"),
                "commence_time": record.get("commence_time"),
            },
        )

    home_team = str(record.get("home_team") or "")
    away_team = str(record.get("away_team") or "")
    home_score = _team_score(record.get("scores"), home_team)
    away_score = _team_score(record.get("scores"), away_team)
    score: str | None = None
    if home_score is not None and away_score is not None:
        score = f"{home_score}-{away_score}"

    api_event_id = record.get("id")
    return ResultEvent(
        api_event_id=str(api_event_id) if api_event_id is not None else None,
        home_team=home_team,
        away_team=away_team,
        event_desc=f"{home_team} vs {away_team}",
        start_time=start_time,
        competition=str(record.get("sport_title") or record.get("sport_key") or ""),
        completed=bool(record.get("completed")),
        score=score,
        home_score=home_score,
        away_score=away_score,
    )


def _step(acc: _Acc, indexed: tuple[int, Any]) -> _Acc:
    if isinstance(acc, _Failed):
        return acc
    index, record = indexed
    mapped = map_result(record, index=index)
    if isinstance(mapped, DateParseError):
        return _Failed(mapped)
    acc.append(mapped)
    return acc


def map_results(records: Iterable[Any]) -> list[ResultEvent]:
    """Map a provider batch 1:1, preserving order. Raises DateParseError for any bad record."""

    folded: _Acc = reduce(_step, enumerate(records), [])
    if isinstance(folded, _Failed):
        raise folded.error
    return folded
