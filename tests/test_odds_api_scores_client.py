from __future__ import annotations

import httpx
import pytest

from result_feed.ingestion.providers.base.client import BaseHttpClient
from result_feed.ingestion.providers.base.errors import (
    ProviderError,
    ProviderRateLimited,
    ProviderRequestError,
    ProviderResponseError,
)
from result_feed.ingestion.providers.odds_api.client import OddsApiClient


def _client(handler) -> OddsApiClient:
    transport = httpx.MockTransport(handler)
    http = BaseHttpClient(base_url="https://api.the-odds-api.com/v4", transport=transport)
    return OddsApiClient(http=http, api_key="test", days_from=2)


def test_odds_api_client_returns_scores_unfiltered() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.method == "GET"
        assert request.url.path == "/v4/sports/soccer_epl/scores"
        assert request.url.params["apiKey"] == "test"
        assert request.url.params["daysFrom"] == "2"
        assert request.url.params["dateFormat"] == "iso"
        return httpx.Response(
            200,
            json=[
                {
                    "id": "a085aa8beb661722ad957e5d8c15f798",
                    "sport_key": "soccer_epl",
                    "sport_title": "EPL",
                    "commence_time": "2023-05-20T11:30:00Z",
                    "completed": True,
                    "home_team": "Tottenham Hotspur",
                    "away_team": "Brentford",
                    "scores": [
                        {"name": "Tottenham Hotspur", "score": "1"},
                        {"name": "Brentford", "score": "3"},
                    ],
                    "last_update": "2023-05-20T13:25:44Z",
                },
                "junk",
            ],
        )

    client = _client(handler)
    items = client.fetch_results("soccer_epl")
    client.close()

    assert len(items) == 2
    assert items[0]["id"] == "a085aa8beb661722ad957e5d8c15f798"
    assert items[1] == "junk"


@pytest.mark.parametrize(
    "response,expected",
    [
        (httpx.Response(500, text="boom"), ProviderRequestError),
        (httpx.Response(401, json={"message": "bad key"}), ProviderRequestError),
        (httpx.Response(429), ProviderRateLimited),
        (httpx.Response(200, text="<html>"), ProviderRequestError),
        (httpx.Response(200, json={"message": "unknown sport"}), ProviderResponseError),
    ],
)
def test_odds_api_client_raises_provider_errors(
    response: httpx.Response, expected: type[ProviderError]
) -> None:
    client = _client(lambda request: response)

    with pytest.raises(expected):
        client.get_scores(sport_key="soccer_epl")


def test_odds_api_client_wraps_network_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProviderRequestError, match="connection refused"):
        _client(handler).get_scores(sport_key="soccer_epl")


@pytest.mark.parametrize(
    "error",
    [
        httpx.RemoteProtocolError("Server disconnected without sending a response."),
        httpx.ProxyError("proxy refused"),
        httpx.UnsupportedProtocol("Request URL has an unsupported protocol"),
        httpx.DecodingError("gzip stream corrupt"),
        httpx.ReadTimeout("read timed out"),
    ],
)
def test_odds_api_client_wraps_transport_errors(error: httpx.RequestError) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise error

    with pytest.raises(ProviderRequestError):
        _client(handler).get_scores(sport_key="soccer_epl")


def test_odds_api_client_sends_explicit_zero_days_from() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.params["daysFrom"])
        return httpx.Response(200, json=[])

    client = _client(handler)
    client.get_scores(sport_key="soccer_epl", days_from=0)
    client.get_scores(sport_key="soccer_epl")

    assert seen == ["0", "2"]


def test_provider_error_message_does_not_leak_api_key() -> None:
    client = _client(lambda request: httpx.Response(503))

    with pytest.raises(ProviderRequestError) as excinfo:
        client.get_scores(sport_key="soccer_epl")

    assert "apiKey" not in str(excinfo.value)
    assert "503" in str(excinfo.value)
