from __future__ import annotations

from result_feed.db.enums import OutcomeEnum
from result_feed.results.errors import InvalidScoreError


def _parse_goals(value: object, *, side: str) -> int:
    if isinstance(value, bool) or not isinstance(value, str | int):
        raise InvalidScoreError(f"{side} goals must be a numeric string, got {value!r}")
    try:
        goals = int(value)
    except ValueError as e:
        raise InvalidScoreError(f"{side} goals is not an integer: {value!r}") from e
    if goals < 0:
        raise InvalidScoreError(f"{side} goals cannot be negative: {value!r}")
    return goals


def classify(home_goals: str, away_goals: str) -> OutcomeEnum:
    """Outcome code for a finished match: 01 home win, 02 draw, 03 away win."""

    home = _parse_goals(home_goals, side="home")
    away = _parse_goals(away_goals, side="away")

    if home > away:
        return OutcomeEnum.HOME_WIN
    if home == away:
        return OutcomeEnum.DRAW
    return OutcomeEnum.AWAY_WIN


def parse_score(score: str) -> tuple[str, str]:
    """Split a stored "H-A" score into its home and away parts."""

    home, sep, away = score.partition("-")
    if not sep or not home.strip() or not away.strip():
        raise InvalidScoreError(f"Score must look like 'H-A', got {score!r}")
    return home.strip(), away.strip()
