from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.orm import Session

from result_feed.db.models.event_id_map import EventIdMap
from result_feed.db.repos.base import BaseRepository


class EventIdMapRepository(BaseRepository[EventIdMap]):
    def __init__(self, session: Session) -> None:
        super().__init__(session=session, model=EventIdMap)

    def event_ids_by_api_event_id(self, api_event_ids: Iterable[str]) -> dict[str, int]:
        keys = sorted(set(api_event_ids))
        if not keys:
            return {}
        rows = self.all_where(EventIdMap.api_event_id.in_(keys))
        return {row.api_event_id: row.event_id for row in rows}
