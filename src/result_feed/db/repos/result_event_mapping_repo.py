from __future__ import annotations

from datetime import datetime

from sqlalchemy import true, update
from sqlalchemy.orm import Session

from result_feed.db.models.result_event_mapping import ResultEventMapping
from result_feed.db.repos.base import BaseRepository
from result_feed.results.gate import open_for_update


class ResultEventMappingRepository(BaseRepository[ResultEventMapping]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=ResultEventMapping)

    def get_by_api_event_id(self, api_event_id: str) -> ResultEventMapping | None:
        return self.first_where(ResultEventMapping.api_event_id == api_event_id)

    def list_completed(self) -> list[ResultEventMapping]:
        return self.all_where(ResultEventMapping.completed == true())

    def apply_result_if_open(
        self,
        mapping: ResultEventMapping,
        *,
        score: str,
        outcome: str,
        updated_at: datetime,
    ) -> bool:
        """Write the final result only if the row is still open.

        The guard and the write are one UPDATE statement, so two concurrent cycles
        cannot both apply a result. Returns False when another writer got there first.
        """
        stmt = (
            update(ResultEventMapping)
            .where(ResultEventMapping.event_id == mapping.event_id, open_for_update())
            .values(score=score, outcome=outcome, completed=True, last_updated_dt=updated_at)
        )
        result = self.session.execute(stmt, execution_options={"synchronize_session": False})
        self.session.refresh(mapping)
        return result.rowcount == 1  # type: ignore[attr-defined]

    def reset(self, mapping: ResultEventMapping) -> None:
        """Return a row to the open state so a corrected result can be applied."""
        stmt = (
            update(ResultEventMapping)
            .where(ResultEventMapping.event_id == mapping.event_id)
            .values(score=None, outcome=None, completed=False, last_updated_dt=None)
        )
        self.session.execute(stmt, execution_options={"synchronize_session": False})
        self.session.refresh(mapping)
