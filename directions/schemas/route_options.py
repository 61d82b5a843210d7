"""
Route Options Schema

The options a route was requested with, as known after the directions API
answered. Unlike the pre-flight ``DirectionsRequest`` these always carry the
request UUID issued by the service, so a route can be reproduced, inspected
or reissued with changes later.
"""

import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from directions.schemas.criteria import Profile
from directions.schemas.geo import Point
from directions.schemas.walking import WalkingOptions

UNLIMITED = "unlimited"


class RouteOptions(BaseModel):
    """Immutable record of every parameter used to request a route."""

    base_url: str = Field(..., min_length=1, alias="baseUrl")
    user: str = Field(..., min_length=1)
    profile: Profile
    coordinates: List[Point] = Field(..., min_length=2)
    access_token: str = Field(..., min_length=1)
    request_uuid: str = Field(..., min_length=1, alias="uuid")

    alternatives: Optional[bool] = None
    language: Optional[str] = None
    radiuses: Optional[List[Optional[float]]] = None
    bearings: Optional[List[Optional[List[float]]]] = None
    continue_straight: Optional[bool] = None
    roundabout_exits: Optional[bool] = None
    geometries: Optional[str] = None
    overview: Optional[str] = None
    steps: Optional[bool] = None
    annotations: Optional[str] = None
    exclude: Optional[str] = None
    voice_instructions: Optional[bool] = None
    banner_instructions: Optional[bool] = None
    voice_units: Optional[str] = None
    enable_refresh: Optional[bool] = None

    approaches: Optional[List[Optional[str]]] = None
    waypoint_indices: Optional[List[int]] = Field(default=None, alias="waypoints")
    waypoint_names: Optional[List[Optional[str]]] = None
    waypoint_targets: Optional[List[Optional[Point]]] = None

    walking_options: Optional[WalkingOptions] = None

    origin_trace: Optional[List[Point]] = None
    origin_trace_radiuses: Optional[List[int]] = None
    origin_trace_timestamps: Optional[List[int]] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator(
        "radiuses",
        "bearings",
        "approaches",
        "waypoint_indices",
        "waypoint_names",
        "waypoint_targets",
        "origin_trace",
        "origin_trace_radiuses",
        "origin_trace_timestamps",
    )
    @classmethod
    def empty_list_is_absent(cls, v):
        """An empty list and a missing list mean the same on the wire."""
        return v or None

    @field_validator("radiuses", mode="before")
    @classmethod
    def parse_unlimited_radius(cls, v):
        if isinstance(v, list):
            return [math.inf if radius == UNLIMITED else radius for radius in v]
        return v

    @field_serializer("radiuses")
    def serialize_radiuses(self, radiuses: Optional[List[Optional[float]]]):
        """Unlimited radiuses are written as ``"unlimited"`` so the JSON stays standard."""
        if radiuses is None:
            return None
        return [UNLIMITED if radius == math.inf else radius for radius in radiuses]

    @field_serializer("coordinates", "origin_trace")
    def serialize_points(self, points: Optional[List[Point]]):
        if points is None:
            return None
        return [point.to_pair() for point in points]

    @field_serializer("waypoint_targets")
    def serialize_targets(self, targets: Optional[List[Optional[Point]]]):
        if targets is None:
            return None
        return [target.to_pair() if target is not None else None for target in targets]

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, json_data: str) -> "RouteOptions":
        return cls.model_validate_json(json_data)

    def to_builder(self):
        """
        Create a DirectionsBuilder pre-populated with these options.

        The builder can be changed and built again to reissue the request;
        the request UUID is not carried over since the service issues a new
        one for every call.
        """
        from directions.services.directions_builder import DirectionsBuilder

        return DirectionsBuilder.from_route_options(self)
