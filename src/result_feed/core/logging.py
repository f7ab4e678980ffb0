from __future__ import annotations

import logging
import sys
from typing import Any

from loguru import logger

from result_feed.core.config import Settings, settings as default_settings

_MASK = "********"


def _make_secret_filter(secrets: list[str]):
    def _filter(record: dict[str, Any]) -> bool:
        for secret in secrets:
            if secret in record["message"]:
                record["message"] = record["message"].replace(secret, _MASK)
        return True

    return _filter


class InterceptHandler(logging.Handler):
    """Route stdlib logging (httpx, sqlalchemy, uvicorn) through loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(cfg: Settings | None = None) -> None:
    """Configure the loguru stderr sink and intercept standard logging."""

    cfg = cfg or default_settings
    secrets = [s for s in (cfg.odds_api_key,) if s]

    logger.remove()
    logger.add(
        sys.stderr,
        level=cfg.log_level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        backtrace=True,
        diagnose=False,
        filter=_make_secret_filter(secrets),
    )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.debug("Logging initialized with level: {}", cfg.log_level)
