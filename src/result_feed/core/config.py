from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # DB
    database_url: str = Field(
        default="sqlite+pysqlite:///./result_feed.db",
        validation_alias="DATABASE_URL",
    )
    db_echo: bool = False

    # odds-api (scores endpoint)
    odds_api_key: str | None = Field(default=None, repr=False)
    odds_api_base_url: str = "https://api.the-odds-api.com/v4"
    results_days_from: int = Field(default=3, ge=1, le=3)
    http_timeout_s: float = 30.0
    http_connect_timeout_s: float = 10.0

    # ingestion loop
    poll_interval_seconds: float = 300.0

    log_level: str = "INFO"

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_odds_api_key(self) -> str:
        if not self.odds_api_key:
            raise RuntimeError("ODDS_API_KEY is not set. Set it in the environment or .env file.")
        return self.odds_api_key


settings = Settings()
