"""
Directions Criteria

Fixed vocabularies accepted by the directions API.
"""

from enum import Enum


class Profile(str, Enum):
    """Routing profiles."""

    DRIVING_TRAFFIC = "driving-traffic"
    DRIVING = "driving"
    WALKING = "walking"
    CYCLING = "cycling"


class Geometries(str, Enum):
    """Route geometry formats."""

    GEOJSON = "geojson"
    POLYLINE = "polyline"
    POLYLINE6 = "polyline6"


class Overview(str, Enum):
    """Detail level of the route overview geometry."""

    FULL = "full"
    SIMPLIFIED = "simplified"
    FALSE = "false"


class Annotation(str, Enum):
    """Per-segment metadata returned along the route."""

    DURATION = "duration"
    DISTANCE = "distance"
    SPEED = "speed"
    CONGESTION = "congestion"
    MAXSPEED = "maxspeed"


class Exclude(str, Enum):
    """Road classes that may be excluded from routing."""

    TOLL = "toll"
    MOTORWAY = "motorway"
    FERRY = "ferry"


class VoiceUnits(str, Enum):
    """Unit system for voice instructions."""

    IMPERIAL = "imperial"
    METRIC = "metric"


class Approach(str, Enum):
    """Side of the road from which a waypoint may be approached."""

    UNRESTRICTED = "unrestricted"
    CURB = "curb"
