"""
Directions Response Schema

Pydantic models for the parts of a directions API response this package
works with. Route geometry and legs are kept opaque.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from directions.schemas.route_options import RouteOptions


class DirectionsWaypoint(BaseModel):
    """A snapped input coordinate."""

    name: Optional[str] = None
    location: List[float] = Field(..., min_length=2, max_length=2)
    distance: Optional[float] = None


class DirectionsRoute(BaseModel):
    """A single route alternative."""

    distance: float = Field(..., description="Distance in meters")
    duration: float = Field(..., description="Duration in seconds")
    weight: Optional[float] = None
    weight_name: Optional[str] = None
    geometry: Optional[Any] = None
    legs: List[Dict[str, Any]] = Field(default_factory=list)
    voice_locale: Optional[str] = Field(default=None, alias="voiceLocale")

    route_index: Optional[str] = Field(default=None, alias="routeIndex")
    route_options: Optional[RouteOptions] = Field(default=None, alias="routeOptions")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class DirectionsResponse(BaseModel):
    """Top level directions API response."""

    code: str
    message: Optional[str] = None
    uuid: Optional[str] = None
    routes: List[DirectionsRoute] = Field(default_factory=list)
    waypoints: List[DirectionsWaypoint] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)
