from result_feed.db.repos.event_id_map_repo import EventIdMapRepository
from result_feed.db.repos.result_event_mapping_repo import ResultEventMappingRepository

__all__ = [
    "EventIdMapRepository",
    "ResultEventMappingRepository",
]
