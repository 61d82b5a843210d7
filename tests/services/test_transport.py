"""
Unit tests for the GET/POST transport policy.
"""

from urllib.parse import parse_qsl

import pytest

from directions.schemas.geo import Point
from directions.services.directions_builder import DirectionsBuilder
from directions.services.transport import (
    GET,
    MAX_URL_SIZE,
    POST,
    build_http_request,
    select_method,
)


@pytest.fixture
def long_request():
    """A request whose GET URL is far beyond the URL size limit."""
    points = [
        Point.from_lng_lat(13.123456 + i * 0.000001, 52.654321 + i * 0.000001)
        for i in range(500)
    ]
    return DirectionsBuilder().waypoints(points).access_token("pk.test-token").build()


def form_body(http_request) -> dict:
    return dict(parse_qsl(http_request.content.decode()))


class TestSelectMethod:
    @pytest.mark.parametrize(
        "url_length, expected",
        [
            (500, GET),
            (MAX_URL_SIZE - 1, GET),
            (MAX_URL_SIZE, POST),
            (8200, POST),
        ],
    )
    def test_decides_by_url_length(self, url_length, expected):
        assert select_method(url_length) == expected

    def test_pinned_method_wins(self):
        assert select_method(10, use_post=True) == POST
        assert select_method(100000, use_post=False) == GET

    def test_custom_limit(self):
        assert select_method(150, max_url_size=100) == POST


class TestGetRequest:
    def test_short_request_uses_get(self, builder):
        http_request = build_http_request(builder.alternatives(True).build())

        assert http_request.method == GET
        assert http_request.url.path == "/directions/v5/mapbox/driving/13.4,52.5;13.5,52.6"
        assert http_request.url.params["access_token"] == "pk.test-token"
        assert http_request.url.params["alternatives"] == "true"
        assert http_request.url.params["geometries"] == "polyline6"

    def test_list_parameters_in_query(self, builder):
        request = builder.radiuses([100, None]).waypoint_names(["Home", "Work"]).build()

        http_request = build_http_request(request)

        assert http_request.url.params["radiuses"] == "100;"
        assert http_request.url.params["waypoint_names"] == "Home;Work"

    def test_user_and_profile_in_path(self, builder):
        request = builder.user("acme").profile("cycling").base_url("https://example.com/").build()

        http_request = build_http_request(request)

        assert http_request.url.host == "example.com"
        assert http_request.url.path.startswith("/directions/v5/acme/cycling/")

    def test_user_agent(self, builder):
        http_request = build_http_request(builder.client_app_name("tracker").build())

        assert http_request.headers["User-Agent"].startswith("tracker directions-gateway/")

    def test_pinned_get_ignores_url_length(self, long_request):
        http_request = build_http_request(long_request.to_builder().get().build())

        assert http_request.method == GET
        assert len(str(http_request.url)) > MAX_URL_SIZE


class TestPostRequest:
    def test_long_request_falls_back_to_post(self, long_request):
        http_request = build_http_request(long_request)

        assert http_request.method == POST
        assert http_request.url.path == "/directions/v5/mapbox/driving"
        assert http_request.url.params["access_token"] == "pk.test-token"
        assert http_request.headers["Content-Type"] == "application/x-www-form-urlencoded"

        body = form_body(http_request)
        assert body["coordinates"] == long_request.coordinates_param()
        assert body["geometries"] == "polyline6"
        assert "access_token" not in body

    def test_pinned_post_for_short_request(self, builder):
        request = builder.post().steps(True).bearings([[45, 90], None]).build()

        http_request = build_http_request(request)

        assert http_request.method == POST
        assert "steps" not in http_request.url.params
        assert form_body(http_request) == {
            "coordinates": "13.4,52.5;13.5,52.6",
            "geometries": "polyline6",
            "steps": "true",
            "bearings": "45,90;",
        }

    def test_post_carries_same_parameters_as_get(self, builder):
        request = builder.waypoint_indices([0, 1]).approaches(["curb", None]).build()

        get_request = build_http_request(request)
        post_request = build_http_request(request.to_builder().post().build())

        get_params = dict(get_request.url.params)
        get_params.pop("access_token")
        body = form_body(post_request)
        assert body.pop("coordinates") == request.coordinates_param()
        assert body == get_params

    def test_limit_override(self, builder):
        http_request = build_http_request(builder.build(), max_url_size=50)

        assert http_request.method == POST
