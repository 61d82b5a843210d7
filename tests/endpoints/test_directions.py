"""
Unit tests for directions endpoints.
"""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from directions.core.config import settings
from directions.core.exceptions import (
    DirectionsAPIError,
    DirectionsDecodeError,
    DirectionsServiceError,
    DirectionsTransportError,
)
from directions.services.response_factory import DirectionsResponseFactory

SEARCH_BODY = {
    "origin": [13.4, 52.5],
    "destination": [13.5, 52.6],
    "access_token": "pk.test-token",
}


@pytest.fixture
def sample_response(builder, sample_directions_payload):
    """A reconciled directions response."""
    return DirectionsResponseFactory(builder.build()).reconcile(sample_directions_payload)


def test_preview_get_request(client: TestClient):
    """Test previewing a short request."""
    response = client.post("/api/v1/directions/preview", json={**SEARCH_BODY, "steps": True})

    assert response.status_code == 200
    data = response.json()
    assert data["method"] == "GET"
    assert "/directions/v5/mapbox/driving/13.4,52.5;13.5,52.6" in data["url"]
    assert "steps=true" in data["url"]
    assert "pk.test-token" not in data["url"]
    assert data["url_length"] >= len(data["url"])
    assert data["body"] is None


def test_preview_pinned_post_request(client: TestClient):
    """Test previewing a request pinned to POST."""
    response = client.post(
        "/api/v1/directions/preview",
        json={**SEARCH_BODY, "use_post": True, "radiuses": [50, None]},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["method"] == "POST"
    assert "/directions/v5/mapbox/driving?access_token=" in data["url"]
    assert "pk.test-token" not in data["url"]
    assert data["body"]["coordinates"] == "13.4,52.5;13.5,52.6"
    assert data["body"]["radiuses"] == "50;"


def test_preview_long_request_uses_post(client: TestClient):
    """Test that long requests fall back to POST."""
    coordinates = [[13.123456 + i * 0.000001, 52.654321 + i * 0.000001] for i in range(500)]

    response = client.post(
        "/api/v1/directions/preview",
        json={"coordinates": coordinates, "access_token": "pk.test-token"},
    )

    assert response.status_code == 200
    assert response.json()["method"] == "POST"


def test_preview_with_waypoints_and_names(client: TestClient):
    """Test that waypoints sit between origin and destination."""
    response = client.post(
        "/api/v1/directions/preview",
        json={
            **SEARCH_BODY,
            "coordinates": [[13.45, 52.55]],
            "waypoint_indices": [0, 2],
            "waypoint_names": ["Home", "Work"],
            "use_post": True,
        },
    )

    assert response.status_code == 200
    body = response.json()["body"]
    assert body["coordinates"] == "13.4,52.5;13.45,52.55;13.5,52.6"
    assert body["waypoints"] == "0;2"
    assert body["waypoint_names"] == "Home;Work"


def test_preview_missing_destination(client: TestClient):
    """Test that a single coordinate is rejected."""
    response = client.post(
        "/api/v1/directions/preview",
        json={"origin": [13.4, 52.5], "access_token": "pk.test-token"},
    )

    assert response.status_code == 422
    assert "origin and destination are required" in response.json()["detail"]


def test_preview_invalid_access_token(client: TestClient):
    """Test that requests without a usable token are rejected."""
    response = client.post(
        "/api/v1/directions/preview",
        json={**SEARCH_BODY, "access_token": "not-a-token"},
    )

    assert response.status_code == 422
    assert "valid access token" in response.json()["detail"]


@pytest.mark.parametrize(
    "options",
    [
        {"approaches": ["curb", "sideways"]},
        {"approaches": ["curb"]},
        {"bearings": [[400, 10], None]},
        {"waypoint_indices": [1, 0]},
        {"origin_trace": [[13.39, 52.49], [13.4, 52.5]]},
        {"exclude": "highway"},
        {"overview": "detailed"},
        {"radiuses": [-1, 50]},
    ],
)
def test_preview_rejects_invalid_options(client: TestClient, options):
    """Test that option constraints are reported as validation errors."""
    response = client.post("/api/v1/directions/preview", json={**SEARCH_BODY, **options})

    assert response.status_code == 422


@pytest.mark.parametrize(
    "body",
    [
        {**SEARCH_BODY, "origin": [200.0, 52.5]},
        {**SEARCH_BODY, "profile": "flying"},
    ],
)
def test_preview_rejects_invalid_schema_values(client: TestClient, body):
    """Test that malformed request bodies fail schema validation."""
    response = client.post("/api/v1/directions/preview", json=body)

    assert response.status_code == 422


def test_search_success(client: TestClient, sample_response):
    """Test successful directions search."""
    with patch("directions.api.v1.endpoints.directions.directions_service") as mock_service:
        mock_service.execute_async = AsyncMock(return_value=sample_response)

        response = client.post("/api/v1/directions/search", json=SEARCH_BODY)

        assert response.status_code == 200
        data = response.json()
        assert data["code"] == "Ok"
        assert len(data["routes"]) == 2

        route = data["routes"][1]
        assert route["route_index"] == "1"
        assert route["route_options"]["request_uuid"] == "cjd0n2x9z00011ap4l4xh9e3k"
        assert route["route_options"]["coordinates"] == [[13.4, 52.5], [13.5, 52.6]]
        assert "access_token" not in route["route_options"]

        request = mock_service.execute_async.call_args.args[0]
        assert request.access_token == "pk.test-token"
        assert len(request.coordinates) == 2


def test_search_invalid_request_is_not_sent(client: TestClient):
    """Test that invalid requests never reach the directions API."""
    with patch("directions.api.v1.endpoints.directions.directions_service") as mock_service:
        mock_service.execute_async = AsyncMock()

        response = client.post(
            "/api/v1/directions/search",
            json={**SEARCH_BODY, "waypoint_indices": [0]},
        )

        assert response.status_code == 422
        mock_service.execute_async.assert_not_called()


@pytest.mark.parametrize(
    "error, status_code, detail",
    [
        (DirectionsAPIError("Invalid Token", status_code=401), 502, "Directions API error"),
        (DirectionsTransportError("Connection refused"), 503, "Network error"),
        (DirectionsDecodeError("missing uuid"), 502, "Failed to parse"),
        (DirectionsServiceError("unexpected"), 500, "Directions service error"),
    ],
)
def test_search_service_errors(client: TestClient, error, status_code, detail):
    """Test mapping of service errors to HTTP errors."""
    with patch("directions.api.v1.endpoints.directions.directions_service") as mock_service:
        mock_service.execute_async = AsyncMock(side_effect=error)

        response = client.post("/api/v1/directions/search", json=SEARCH_BODY)

        assert response.status_code == status_code
        assert detail in response.json()["detail"]


SERVER_TOKEN = "sk.server-secret-token"
CONFIGURED_TOKEN_BODY = {"coordinates": [[13.4, 52.5], [13.5, 52.6]]}


def test_preview_masks_configured_access_token(client: TestClient):
    """Test that the server's own token is never shown in a preview."""
    with patch.object(settings, "DIRECTIONS_ACCESS_TOKEN", SERVER_TOKEN):
        get_response = client.post("/api/v1/directions/preview", json=CONFIGURED_TOKEN_BODY)
        post_response = client.post(
            "/api/v1/directions/preview", json={**CONFIGURED_TOKEN_BODY, "use_post": True}
        )

    for response in (get_response, post_response):
        assert response.status_code == 200
        assert SERVER_TOKEN not in response.text
        assert "access_token=sk." in response.json()["url"]


def test_search_does_not_return_access_token(client: TestClient, sample_directions_payload):
    """Test that route options in search results leave out the server's token."""

    async def reconcile(request):
        return DirectionsResponseFactory(request).reconcile(sample_directions_payload)

    with patch.object(settings, "DIRECTIONS_ACCESS_TOKEN", SERVER_TOKEN):
        with patch("directions.api.v1.endpoints.directions.directions_service") as mock_service:
            mock_service.execute_async = AsyncMock(side_effect=reconcile)

            response = client.post("/api/v1/directions/search", json=CONFIGURED_TOKEN_BODY)

    assert response.status_code == 200
    assert SERVER_TOKEN not in response.text
    route_options = response.json()["routes"][0]["route_options"]
    assert "access_token" not in route_options
    assert route_options["request_uuid"] == "cjd0n2x9z00011ap4l4xh9e3k"

    request = mock_service.execute_async.call_args.args[0]
    assert request.access_token == SERVER_TOKEN
