"""
Location and Coordinate Type Definitions

Pydantic models for representing geographic points used in directions
requests. Points follow the GeoJSON (longitude, latitude) order.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Point(BaseModel):
    """
    Geographic point (longitude and latitude).
    """

    longitude: float = Field(..., ge=-180.0, le=180.0, description="Longitude in decimal degrees")
    latitude: float = Field(..., ge=-90.0, le=90.0, description="Latitude in decimal degrees")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def accept_coordinate_pair(cls, data: Any) -> Any:
        """Allow a point to be given as a [lon, lat] pair."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("A coordinate pair must contain exactly longitude and latitude")
            return {"longitude": data[0], "latitude": data[1]}
        return data

    @classmethod
    def from_lng_lat(cls, longitude: float, latitude: float) -> "Point":
        return cls(longitude=longitude, latitude=latitude)

    def to_pair(self) -> list:
        return [self.longitude, self.latitude]

    def __str__(self) -> str:
        return f"({self.longitude}, {self.latitude})"
