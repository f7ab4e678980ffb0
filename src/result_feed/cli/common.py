from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy.orm import Session, sessionmaker

from result_feed.core.config import settings
from result_feed.db import DatabaseConfig, create_db_engine, create_session_factory
from result_feed.ingestion.providers.base.adapter import ResultsProvider
from result_feed.ingestion.providers.odds_api.client import create_odds_api_client


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    """Process-wide session factory; the engine is built on first use and reused."""
    engine = create_db_engine(
        DatabaseConfig(database_url=settings.database_url, echo=settings.db_echo)
    )
    return create_session_factory(engine)


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Context-managed DB session for CLI commands.
    Ensures proper close and rolls back on exception.
    """
    session = get_session_factory()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def build_results_provider() -> ResultsProvider:
    return create_odds_api_client(settings)
