from __future__ import annotations

from enum import IntEnum, StrEnum


class ProviderEnum(StrEnum):
    ODDS_API = "odds_api"


class OutcomeEnum(StrEnum):
    HOME_WIN = "01"
    DRAW = "02"
    AWAY_WIN = "03"


class ResultStatusEnum(IntEnum):
    OK = 0
    PROVIDER_UNAVAILABLE = 1
    MAPPING_FAILED = 2
