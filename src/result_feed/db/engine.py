from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker


@dataclass(frozen=True)
class DatabaseConfig:
    database_url: str
    echo: bool = False


def create_db_engine(cfg: DatabaseConfig) -> Engine:
    connect_args: dict[str, object] = {}
    if make_url(cfg.database_url).get_backend_name() == "sqlite":
        # API handlers run in a threadpool; the engine is shared across threads.
        connect_args["check_same_thread"] = False
    return create_engine(
        cfg.database_url,
        echo=cfg.echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
