from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from loguru import logger
from sqlalchemy.orm import Session, sessionmaker

from result_feed.api import schemas
from result_feed.core.config import settings
from result_feed.core.logging import setup_logging
from result_feed.db import DatabaseConfig, create_db_engine, create_session_factory
from result_feed.ingestion.providers.base.adapter import ResultsProvider
from result_feed.ingestion.providers.odds_api.client import create_odds_api_client
from result_feed.results.errors import StoreUnavailable
from result_feed.results.service import ResultService

router = APIRouter(prefix="/result", tags=["result"])


def get_session(request: Request) -> Iterator[Session]:
    session = request.app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def get_result_service(
    request: Request, session: Annotated[Session, Depends(get_session)]
) -> ResultService:
    """Provide the result service wired with the process-wide provider."""

    return ResultService(session, request.app.state.provider)


@router.get("/retrieveResults", response_model=schemas.ResultRestResponse)
def retrieve_results(
    service: Annotated[ResultService, Depends(get_result_service)],
    comp_type: Annotated[str, Query(alias="compType", min_length=1)],
) -> schemas.ResultRestResponse:
    outcome = service.retrieve_results(comp_type)
    return schemas.ResultRestResponse(
        result_event=[schemas.ResultEvent.model_validate(e) for e in outcome.events],
        status_code=int(outcome.status_code),
        result_message=outcome.result_message,
    )


@router.get("/retrieveCompletedResults", response_model=list[schemas.ResultEventMapping])
def retrieve_completed_results(
    service: Annotated[ResultService, Depends(get_result_service)],
) -> list[schemas.ResultEventMapping]:
    return [
        schemas.ResultEventMapping.model_validate(row)
        for row in service.retrieve_completed_results()
    ]


def _store_unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Store unavailable serving {}: {}", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Result store unavailable"})


def create_app(
    *,
    session_factory: sessionmaker[Session] | None = None,
    provider_factory: Callable[[], ResultsProvider] | None = None,
) -> FastAPI:
    """Build the API. Run with `uvicorn result_feed.api.app:create_app --factory`."""

    if session_factory is None:
        engine = create_db_engine(
            DatabaseConfig(database_url=settings.database_url, echo=settings.db_echo)
        )
        session_factory = create_session_factory(engine)
    make_provider = provider_factory or (lambda: create_odds_api_client(settings))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        app.state.provider = make_provider()
        try:
            yield
        finally:
            app.state.provider.close()

    app = FastAPI(title="result-feed", version="0.1.0", lifespan=lifespan)
    app.state.session_factory = session_factory
    app.include_router(router)
    app.add_exception_handler(StoreUnavailable, _store_unavailable_handler)

    @app.get("/healthz", tags=["system"])
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return app
