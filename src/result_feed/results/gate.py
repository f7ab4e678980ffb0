from __future__ import annotations

from sqlalchemy import and_, false
from sqlalchemy.sql.elements import ColumnElement

from result_feed.db.models.result_event_mapping import ResultEventMapping


def can_apply_update(existing: ResultEventMapping) -> bool:
    """True only for an untouched row: not completed, no score, no outcome.

    Any result data at all (even with completed still False) protects the row.
    `last_updated_dt` is not consulted.
    """
    return not existing.completed and existing.score is None and existing.outcome is None


def open_for_update() -> ColumnElement[bool]:
    """The same guard as `can_apply_update`, for use in a conditional UPDATE."""
    return and_(
        ResultEventMapping.completed == false(),
        ResultEventMapping.score.is_(None),
        ResultEventMapping.outcome.is_(None),
    )
