"""
Tests for the aggregation gateway endpoint.

The aggregation client is replaced through dependency overrides with
one whose downstream services are simulated by httpx.MockTransport.
"""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.application.aggregation.aggregate import AggregationClient
from app.core.config import Settings
from app.infrastructure.aggregation.downstream_client import (
    DownstreamClient,
    RetryPolicy,
)
from app.interfaces.aggregation.dependencies import (
    build_aggregation_client,
    get_aggregation_client,
)
from app.main import create_aggregator_app

BOATS = {"1": {"id": 1, "color": "green", "brand": "Veloretti"}}
BRANDS = {"Veloretti": {"id": "Veloretti", "name": "Veloretti"}}


def _settings() -> Settings:
    return Settings(
        rate_limit_default="1000/minute",
        boat_service_url="http://boats.test",
        brand_service_url="http://brands.test",
        downstream_max_attempts=2,
    )


def _route(request: httpx.Request) -> httpx.Response:
    key = request.url.path.lstrip("/")
    if key == "bad":
        return httpx.Response(400)
    table = BOATS if request.url.host == "boats.test" else BRANDS
    if key not in table:
        return httpx.Response(404)
    return httpx.Response(200, json=table[key])


@pytest.fixture
def calls() -> list[str]:
    return []


@pytest.fixture
def client(calls) -> TestClient:
    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return _route(request)

    app = create_aggregator_app(_settings())
    aggregation = AggregationClient(
        DownstreamClient(
            timeout=0.05,
            retry_policy=RetryPolicy(max_attempts=2),
            transport=httpx.MockTransport(handler),
        ),
        primary_base_url="http://boats.test",
        secondary_base_url="http://brands.test",
    )
    app.dependency_overrides[get_aggregation_client] = lambda: aggregation
    return TestClient(app)


class TestAggregateEndpoint:
    """Tests for GET /{id} on the aggregator."""

    def test_merged_response(self, client, calls):
        response = client.get("/1")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "color": "green", "brand": "Veloretti"}
        assert calls == ["http://boats.test/1", "http://brands.test/Veloretti"]

    def test_missing_boat_returns_404_without_brand_call(self, client, calls):
        response = client.get("/99")
        assert response.status_code == 404
        assert response.json() == {"error": "Not found"}
        assert calls == ["http://boats.test/99"]

    def test_invalid_id_returns_400_without_downstream_call(self, client, calls):
        response = client.get("/not-a-number")
        assert response.status_code == 400
        assert calls == []

    def test_health_is_not_shadowed(self, client, calls):
        response = client.get("/health")
        assert response.status_code == 200
        assert calls == []


class TestDownstreamFailures:
    """Downstream failures reach the caller through the translation table."""

    def test_unreachable_boat_service_returns_502(self, calls):
        def timeout(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            raise httpx.ConnectTimeout("slow", request=request)

        app = create_aggregator_app(_settings())
        aggregation = AggregationClient(
            DownstreamClient(
                timeout=0.05,
                retry_policy=RetryPolicy(max_attempts=2),
                transport=httpx.MockTransport(timeout),
            ),
            primary_base_url="http://boats.test",
            secondary_base_url="http://brands.test",
        )
        app.dependency_overrides[get_aggregation_client] = lambda: aggregation
        response = TestClient(app).get("/1")
        assert response.status_code == 502
        assert response.json() == {"error": "Bad gateway"}
        assert len(calls) == 2

    def test_brand_bad_request_returns_400(self, client):
        BOATS["2"] = {"id": 2, "color": "red", "brand": "bad"}
        try:
            response = client.get("/2")
        finally:
            del BOATS["2"]
        assert response.status_code == 400


class TestWiring:
    """The client built from settings points at the configured services."""

    def test_build_from_settings(self):
        aggregation = build_aggregation_client(_settings())
        assert isinstance(aggregation, AggregationClient)
        assert aggregation._primary_base_url == "http://boats.test"
        assert aggregation._secondary_base_url == "http://brands.test"
        assert aggregation._downstream.retry_policy.max_attempts == 2
