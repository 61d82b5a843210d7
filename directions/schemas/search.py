"""
Directions Search Request/Response Schemas

Pydantic models for the directions API endpoints.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from directions.schemas.criteria import Profile
from directions.schemas.directions_response import DirectionsResponse, DirectionsRoute
from directions.schemas.geo import Point
from directions.schemas.route_options import RouteOptions
from directions.schemas.walking import WalkingOptions


class DirectionsSearchRequest(BaseModel):
    """Request schema for the directions preview and search endpoints."""

    coordinates: List[Point] = Field(
        default_factory=list,
        description="Coordinates in travel order; origin and destination are added around them",
    )
    origin: Optional[Point] = Field(None, description="Starting point of the route")
    destination: Optional[Point] = Field(None, description="End point of the route")
    profile: Optional[Profile] = Field(None, description="Routing profile, defaults to settings")
    access_token: Optional[str] = Field(
        None, description="Access token, defaults to the configured token"
    )
    use_post: Optional[bool] = Field(
        None, description="Pin the HTTP method; leave empty to choose by URL length"
    )

    alternatives: Optional[bool] = None
    language: Optional[str] = None
    geometries: Optional[str] = None
    overview: Optional[str] = None
    steps: Optional[bool] = None
    continue_straight: Optional[bool] = None
    roundabout_exits: Optional[bool] = None
    voice_instructions: Optional[bool] = None
    banner_instructions: Optional[bool] = None
    voice_units: Optional[str] = None
    exclude: Optional[str] = None
    annotations: Optional[List[str]] = None

    radiuses: Optional[List[Optional[float]]] = Field(
        None, description="Snapping radius per coordinate in meters, null for the default"
    )
    bearings: Optional[List[Optional[List[float]]]] = Field(
        None, description="[angle, tolerance] per coordinate, null to leave unconstrained"
    )
    approaches: Optional[List[Optional[str]]] = None
    waypoint_indices: Optional[List[int]] = None
    waypoint_names: Optional[List[Optional[str]]] = None
    waypoint_targets: Optional[List[Optional[Point]]] = None

    walking_options: Optional[WalkingOptions] = None

    origin_trace: Optional[List[Point]] = None
    origin_trace_radiuses: Optional[List[int]] = None
    origin_trace_timestamps: Optional[List[int]] = None


class PublicRouteOptions(RouteOptions):
    """Route options as returned by the API; the access token is never serialized."""

    access_token: Optional[str] = Field(default=None, exclude=True)


class PublicDirectionsRoute(DirectionsRoute):
    route_options: Optional[PublicRouteOptions] = Field(default=None, alias="routeOptions")


class DirectionsSearchResponse(DirectionsResponse):
    """Response schema for the directions search endpoint."""

    routes: List[PublicDirectionsRoute] = Field(default_factory=list)


class DirectionsPreviewResponse(BaseModel):
    """The HTTP request that would be sent for a directions search."""

    method: str
    url: str = Field(..., description="Request URL with the access token masked")
    url_length: int = Field(..., description="Length of the URL actually sent")
    body: Optional[Dict[str, str]] = Field(
        None, description="Form fields sent in the body of POST requests"
    )
