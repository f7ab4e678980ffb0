from result_feed.db.models.event_id_map import EventIdMap
from result_feed.db.models.result_event_mapping import ResultEventMapping

__all__ = [
    "EventIdMap",
    "ResultEventMapping",
]
