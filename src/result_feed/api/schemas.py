from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ResultEvent(CamelModel):
    event_id: int | None = None
    api_event_id: str | None = None
    home_team: str
    away_team: str
    event_desc: str
    start_time: datetime
    score: str | None = None
    competition: str
    completed: bool = False


class ResultRestResponse(CamelModel):
    result_event: list[ResultEvent] = Field(default_factory=list)
    status_code: int = 0
    result_message: str | None = None


class ResultEventMapping(CamelModel):
    event_id: int
    api_event_id: str
    comp_type: str
    completed: bool
    outcome: str | None = None
    score: str | None = None
    last_updated_dt: datetime | None = None
