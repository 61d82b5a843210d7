"""Build, send and reconcile turn-by-turn directions requests."""

from directions.schemas.geo import Point
from directions.schemas.route_options import RouteOptions
from directions.schemas.walking import WalkingOptions
from directions.services.directions_builder import DirectionsBuilder, DirectionsRequest

__all__ = [
    "DirectionsBuilder",
    "DirectionsRequest",
    "Point",
    "RouteOptions",
    "WalkingOptions",
]
