from __future__ import annotations

from typing import Any

from loguru import logger

from result_feed.core.config import Settings, settings
from result_feed.db.enums import ProviderEnum
from result_feed.ingestion.providers.base.client import BaseHttpClient


class OddsApiClient:
    provider_key = ProviderEnum.ODDS_API.value

    def __init__(
        self, *, http: BaseHttpClient, api_key: str | None = None, days_from: int = 3
    ) -> None:
        self.http = http
        self.api_key = api_key or settings.require_odds_api_key()
        self.days_from = days_from

    def close(self) -> None:
        self.http.close()

    def get_scores(self, *, sport_key: str, days_from: int | None = None) -> list[Any]:
        """Live, upcoming and recently completed games with scores.

        Endpoint: GET /v4/sports/{sport}/scores?daysFrom=...
        Response: list of events; `scores` is null until the game starts and
        `completed` flips to true once the result is final.
        """

        params: dict[str, str] = {
            "apiKey": self.api_key,
            "dateFormat": "iso",
            "daysFrom": str(self.days_from if days_from is None else days_from),
        }
        items = self.http.get_json_list(f"/sports/{sport_key}/scores", params=params)
        logger.debug("odds-api returned {} score items for {}", len(items), sport_key)
        return items

    def fetch_results(self, comp_type: str) -> list[Any]:
        return self.get_scores(sport_key=comp_type)


def create_odds_api_client(cfg: Settings | None = None) -> OddsApiClient:
    cfg = cfg or settings
    http = BaseHttpClient(
        base_url=cfg.odds_api_base_url,
        timeout_s=cfg.http_timeout_s,
        connect_timeout_s=cfg.http_connect_timeout_s,
    )
    return OddsApiClient(
        http=http, api_key=cfg.require_odds_api_key(), days_from=cfg.results_days_from
    )
