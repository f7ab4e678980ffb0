from __future__ import annotations

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
import sqlalchemy as sa
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

import result_feed.db.models  # noqa: F401
from result_feed.api.app import create_app
from result_feed.db.base import Base
from result_feed.db.models.event_id_map import EventIdMap
from result_feed.db.models.result_event_mapping import ResultEventMapping
from result_feed.ingestion.providers.base.errors import ProviderRequestError


@pytest.fixture
def session_factory() -> sessionmaker[Session]:
    engine = sa.create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
def client(session_factory, fake_provider) -> Iterator[TestClient]:
    app = create_app(session_factory=session_factory, provider_factory=lambda: fake_provider)
    with TestClient(app) as test_client:
        yield test_client
    assert fake_provider.closed is True


def test_healthcheck(client) -> None:
    response = client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_retrieve_results_success(client, session_factory, epl_scores) -> None:
    with session_factory() as session:
        session.add(EventIdMap(event_id=1000001, api_event_id=epl_scores[0]["id"]))
        session.commit()

    response = client.get("/result/retrieveResults", params={"compType": "soccer_epl"})

    assert response.status_code == 200
    body = response.json()
    assert body["statusCode"] == 0
    assert body["resultMessage"] is None
    assert len(body["resultEvent"]) == 4

    first = body["resultEvent"][0]
    assert first["homeTeam"] == "Tottenham Hotspur"
    assert first["awayTeam"] == "Brentford"
    assert first["eventDesc"] == "Tottenham Hotspur vs Brentford"
    assert first["score"] == "1-3"
    assert first["competition"] == "EPL"
    assert first["eventId"] == 1000001
    assert datetime.fromisoformat(first["startTime"].replace("Z", "+00:00")) == datetime(
        2023, 5, 20, 11, 30, tzinfo=UTC
    )


def test_retrieve_results_provider_failure(client, fake_provider) -> None:
    fake_provider.error = ProviderRequestError("HTTP 502 for GET /sports/soccer_epl/scores")

    response = client.get("/result/retrieveResults", params={"compType": "soccer_epl"})

    assert response.status_code == 200
    body = response.json()
    assert body["statusCode"] == 1
    assert body["resultEvent"] == []
    assert "HTTP 502" in body["resultMessage"]


def test_retrieve_results_date_parse_failure(client, fake_provider) -> None:
    fake_provider.items[0] = {**fake_provider.items[0], "commence_time": "yesterday"}

    response = client.get("/result/retrieveResults", params={"compType": "soccer_epl"})

    assert response.status_code == 200
    body = response.json()
    assert body["statusCode"] == 2
    assert body["resultEvent"] == []
    assert body["resultMessage"]


def test_retrieve_results_requires_comp_type(client) -> None:
    response = client.get("/result/retrieveResults")
    assert response.status_code == 422


def test_retrieve_completed_results(client, session_factory) -> None:
    with session_factory() as session:
        session.add_all(
            [
                ResultEventMapping(
                    event_id=1000001,
                    api_event_id="evt-1",
                    comp_type="soccer_epl",
                    completed=True,
                    score="2-1",
                    outcome="01",
                    last_updated_dt=datetime(2023, 5, 20, 16, 30, tzinfo=UTC),
                ),
                ResultEventMapping(event_id=1000002, api_event_id="evt-2", comp_type="soccer_epl"),
            ]
        )
        session.commit()

    response = client.get("/result/retrieveCompletedResults")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == 1
    row = body[0]
    assert row["eventId"] == 1000001
    assert row["apiEventId"] == "evt-1"
    assert row["compType"] == "soccer_epl"
    assert row["completed"] is True
    assert row["score"] == "2-1"
    assert row["outcome"] == "01"
    assert row["lastUpdatedDt"] is not None


def test_retrieve_completed_results_empty(client) -> None:
    response = client.get("/result/retrieveCompletedResults")
    assert response.status_code == 200
    assert response.json() == []
