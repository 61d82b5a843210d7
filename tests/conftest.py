import pytest
from fastapi.testclient import TestClient

from directions.main import app
from directions.schemas.geo import Point
from directions.services.directions_builder import DirectionsBuilder

VALID_TOKEN = "pk.test-token"


@pytest.fixture(scope="function")
def client():
    """Provides a FastAPI test client."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sample_points():
    """Origin and destination in Berlin."""
    return {
        "origin": Point(longitude=13.4, latitude=52.5),
        "destination": Point(longitude=13.5, latitude=52.6),
    }


@pytest.fixture
def builder(sample_points):
    """A builder that is valid as soon as it is built."""
    return (
        DirectionsBuilder()
        .origin(sample_points["origin"])
        .destination(sample_points["destination"])
        .access_token(VALID_TOKEN)
    )


@pytest.fixture
def sample_directions_payload():
    """Sample directions API response body."""
    return {
        "code": "Ok",
        "uuid": "cjd0n2x9z00011ap4l4xh9e3k",
        "routes": [
            {
                "distance": 15230.4,
                "duration": 1203.7,
                "weight": 1350.2,
                "weight_name": "routability",
                "geometry": "_c`|@gvaqXwBhE",
                "legs": [{"summary": "Karl-Marx-Allee", "steps": []}],
                "voiceLocale": "en-US",
            },
            {
                "distance": 16020.0,
                "duration": 1290.1,
                "weight": 1402.9,
                "weight_name": "routability",
                "geometry": "_c`|@gvaqXaDnF",
                "legs": [{"summary": "Frankfurter Allee", "steps": []}],
            },
        ],
        "waypoints": [
            {"name": "Alexanderplatz", "location": [13.4, 52.5]},
            {"name": "Lichtenberg", "location": [13.5, 52.6]},
        ],
    }
