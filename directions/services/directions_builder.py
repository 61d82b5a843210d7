"""
Directions Request Builder

Collects routing options, checks the constraints the directions API
enforces across fields, and freezes the result into a ``DirectionsRequest``
whose list parameters are already in their wire form.

A ``DirectionsRequest`` is the pre-flight half of a request: it has no
request UUID. Once the service answers, ``to_route_options`` turns it into
the post-response ``RouteOptions`` record attached to every route.
"""

import logging
import math
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from directions.core.config import settings
from directions.core.exceptions import (
    DirectionsDecodeError,
    DirectionsEncodingError,
    DirectionsValidationError,
)
from directions.core.security import is_access_token_valid, mask_access_token
from directions.schemas.criteria import (
    Annotation,
    Approach,
    Exclude,
    Geometries,
    Overview,
    Profile,
    VoiceUnits,
)
from directions.schemas.geo import Point
from directions.schemas.route_options import RouteOptions
from directions.schemas.walking import WalkingOptions
from directions.services import codec

logger = logging.getLogger(__name__)

MIN_ORIGIN_TRACE_SIZE = 2
MAX_ORIGIN_TRACE_SIZE = 20
MAX_WAYPOINT_NAMES_LENGTH = 500
MAX_BEARING_VALUE = 360.0

TokenValidator = Callable[[Optional[str]], bool]


def _wire_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return codec.format_number(value)
    return codec.to_text(value)


class DirectionsRequest(BaseModel):
    """
    A validated directions request, ready to be sent.

    List parameters are stored in their encoded wire form.
    """

    base_url: str = Field(..., min_length=1)
    user: str = Field(..., min_length=1)
    profile: Profile
    coordinates: List[Point] = Field(..., min_length=2)
    access_token: str = Field(..., min_length=1)
    client_app_name: Optional[str] = None
    use_post: Optional[bool] = None

    alternatives: Optional[bool] = None
    geometries: Optional[str] = None
    overview: Optional[str] = None
    steps: Optional[bool] = None
    continue_straight: Optional[bool] = None
    language: Optional[str] = None
    roundabout_exits: Optional[bool] = None
    voice_instructions: Optional[bool] = None
    banner_instructions: Optional[bool] = None
    voice_units: Optional[str] = None
    exclude: Optional[str] = None
    enable_refresh: Optional[bool] = None
    walking_options: Optional[WalkingOptions] = None

    radiuses: Optional[str] = None
    bearings: Optional[str] = None
    annotations: Optional[str] = None
    approaches: Optional[str] = None
    waypoint_indices: Optional[str] = None
    waypoint_names: Optional[str] = None
    waypoint_targets: Optional[str] = None
    origin_trace: Optional[str] = None
    origin_trace_radiuses: Optional[str] = None
    origin_trace_timestamps: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def coordinates_param(self) -> str:
        return codec.encode_points(self.coordinates)

    def query_params(self) -> Dict[str, str]:
        """
        Wire parameters other than the coordinates, in request order.
        Absent values are left out.
        """
        walking = self.walking_options
        params = {
            "access_token": self.access_token,
            "alternatives": self.alternatives,
            "geometries": self.geometries,
            "overview": self.overview,
            "radiuses": self.radiuses,
            "steps": self.steps,
            "bearings": self.bearings,
            "continue_straight": self.continue_straight,
            "annotations": self.annotations,
            "language": self.language,
            "roundabout_exits": self.roundabout_exits,
            "voice_instructions": self.voice_instructions,
            "banner_instructions": self.banner_instructions,
            "voice_units": self.voice_units,
            "exclude": self.exclude,
            "approaches": self.approaches,
            "waypoints": self.waypoint_indices,
            "waypoint_names": self.waypoint_names,
            "waypoint_targets": self.waypoint_targets,
            "enable_refresh": self.enable_refresh,
            "walking_speed": walking.walking_speed if walking else None,
            "walkway_bias": walking.walkway_bias if walking else None,
            "alley_bias": walking.alley_bias if walking else None,
            "origin_trace": self.origin_trace,
            "origin_trace_radiuses": self.origin_trace_radiuses,
            "origin_trace_timestamps": self.origin_trace_timestamps,
        }
        return {name: _wire_value(value) for name, value in params.items() if value is not None}

    def to_route_options(self, request_uuid: Optional[str]) -> RouteOptions:
        """
        Create the post-response options record for this request.

        Args:
            request_uuid: Identifier the directions API issued for the call

        Raises:
            DirectionsDecodeError: If no request UUID is available
        """
        if not request_uuid:
            raise DirectionsDecodeError("Directions response does not carry a request uuid")

        return RouteOptions(
            base_url=self.base_url,
            user=self.user,
            profile=self.profile,
            coordinates=self.coordinates,
            access_token=self.access_token,
            request_uuid=request_uuid,
            alternatives=self.alternatives,
            language=self.language,
            radiuses=codec.decode_numeric_list(self.radiuses, keep_empty=True),
            bearings=codec.decode_bearing_pairs(self.bearings),
            continue_straight=self.continue_straight,
            roundabout_exits=self.roundabout_exits,
            geometries=self.geometries,
            overview=self.overview,
            steps=self.steps,
            annotations=self.annotations,
            exclude=self.exclude,
            voice_instructions=self.voice_instructions,
            banner_instructions=self.banner_instructions,
            voice_units=self.voice_units,
            enable_refresh=self.enable_refresh,
            approaches=codec.decode_names(self.approaches),
            waypoint_indices=codec.decode_indices(self.waypoint_indices),
            waypoint_names=codec.decode_names(self.waypoint_names),
            waypoint_targets=codec.decode_points(self.waypoint_targets, keep_empty=True),
            walking_options=self.walking_options,
            origin_trace=codec.decode_points(self.origin_trace),
            origin_trace_radiuses=codec.decode_indices(self.origin_trace_radiuses),
            origin_trace_timestamps=codec.decode_timestamps(self.origin_trace_timestamps),
        )

    def to_builder(self) -> "DirectionsBuilder":
        return DirectionsBuilder.from_request(self)


def _to_point(value: Any, field: str) -> Point:
    if isinstance(value, Point):
        return value
    try:
        return Point.model_validate(value)
    except PydanticValidationError as e:
        raise DirectionsEncodingError(f"{field}: {value!r} is not a valid point") from e


def _to_choice(value: Any, choices: type, field: str) -> str:
    try:
        return choices(value).value
    except ValueError as e:
        allowed = ", ".join(choice.value for choice in choices)
        raise DirectionsEncodingError(f"{field} must be one of {allowed}, got {value!r}") from e


def _to_int(value: Any, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise DirectionsEncodingError(f"{field} must contain integers, got {value!r}")
    return value


class DirectionsBuilder:
    """
    Mutable accumulator for directions request options.

    Setters can be called in any order and return the builder so calls can
    be chained. ``build`` validates and freezes the options; the builder
    itself is left untouched, so it can be changed and built again.

    Example:
        request = (
            DirectionsBuilder()
            .origin(Point.from_lng_lat(13.4, 52.5))
            .destination(Point.from_lng_lat(13.5, 52.6))
            .access_token("pk.token")
            .build()
        )
    """

    def __init__(self):
        self._base_url: Optional[str] = settings.DIRECTIONS_BASE_URL
        self._user: Optional[str] = settings.DIRECTIONS_USER
        self._profile: str = Profile(settings.DIRECTIONS_PROFILE).value
        self._geometries: Optional[str] = settings.DIRECTIONS_GEOMETRIES
        self._access_token: Optional[str] = settings.DIRECTIONS_ACCESS_TOKEN or None
        self._client_app_name: Optional[str] = settings.DIRECTIONS_CLIENT_APP_NAME or None
        self._use_post: Optional[bool] = None

        self._origin: Optional[Point] = None
        self._destination: Optional[Point] = None
        self._coordinates: List[Point] = []

        self._alternatives: Optional[bool] = None
        self._overview: Optional[str] = None
        self._steps: Optional[bool] = None
        self._continue_straight: Optional[bool] = None
        self._language: Optional[str] = None
        self._roundabout_exits: Optional[bool] = None
        self._voice_instructions: Optional[bool] = None
        self._banner_instructions: Optional[bool] = None
        self._voice_units: Optional[str] = None
        self._exclude: Optional[str] = None
        self._enable_refresh: Optional[bool] = None
        self._walking_options: Optional[WalkingOptions] = None

        self._annotations: List[str] = []
        self._bearings: List[Optional[List[float]]] = []
        self._radiuses: List[Optional[float]] = []
        self._approaches: List[Optional[str]] = []
        self._waypoint_indices: List[int] = []
        self._waypoint_names: List[Optional[str]] = []
        self._waypoint_targets: List[Optional[Point]] = []
        self._origin_trace: List[Point] = []
        self._origin_trace_radiuses: List[int] = []
        self._origin_trace_timestamps: List[int] = []

    # ----------------------------
    # Copy constructors
    # ----------------------------

    @classmethod
    def from_route_options(cls, options: RouteOptions) -> "DirectionsBuilder":
        """Create a builder holding the values of an answered request."""
        builder = cls()
        builder._copy_common(options)
        return (
            builder.radiuses(options.radiuses)
            .bearings(options.bearings)
            .annotations(codec.decode_annotations(options.annotations))
            .approaches(options.approaches)
            .waypoint_indices(options.waypoint_indices)
            .waypoint_names(options.waypoint_names)
            .waypoint_targets(options.waypoint_targets)
            .origin_trace(options.origin_trace)
            .origin_trace_radiuses(options.origin_trace_radiuses)
            .origin_trace_timestamps(options.origin_trace_timestamps)
        )

    @classmethod
    def from_request(cls, request: DirectionsRequest) -> "DirectionsBuilder":
        """Create a builder holding the values of a built request."""
        builder = cls()
        builder._copy_common(request)
        builder._client_app_name = request.client_app_name
        builder._use_post = request.use_post
        return (
            builder.radiuses(codec.decode_numeric_list(request.radiuses, keep_empty=True))
            .bearings(codec.decode_bearing_pairs(request.bearings))
            .annotations(codec.decode_annotations(request.annotations))
            .approaches(codec.decode_names(request.approaches))
            .waypoint_indices(codec.decode_indices(request.waypoint_indices))
            .waypoint_names(codec.decode_names(request.waypoint_names))
            .waypoint_targets(codec.decode_points(request.waypoint_targets, keep_empty=True))
            .origin_trace(codec.decode_points(request.origin_trace))
            .origin_trace_radiuses(codec.decode_indices(request.origin_trace_radiuses))
            .origin_trace_timestamps(codec.decode_timestamps(request.origin_trace_timestamps))
        )

    def _copy_common(self, source) -> None:
        self.base_url(source.base_url).user(source.user).profile(source.profile)
        self.waypoints(source.coordinates).access_token(source.access_token)
        self.alternatives(source.alternatives).geometries(source.geometries)
        self.overview(source.overview).steps(source.steps)
        self.continue_straight(source.continue_straight).language(source.language)
        self.roundabout_exits(source.roundabout_exits)
        self.voice_instructions(source.voice_instructions)
        self.banner_instructions(source.banner_instructions)
        self.voice_units(source.voice_units).exclude(source.exclude)
        self.enable_refresh(source.enable_refresh)
        self.walking_options(source.walking_options)

    # ----------------------------
    # Identity
    # ----------------------------

    def base_url(self, base_url: str) -> "DirectionsBuilder":
        self._base_url = base_url
        return self

    def user(self, user: str) -> "DirectionsBuilder":
        self._user = user
        return self

    def profile(self, profile) -> "DirectionsBuilder":
        self._profile = _to_choice(profile, Profile, "profile")
        return self

    def access_token(self, access_token: Optional[str]) -> "DirectionsBuilder":
        self._access_token = access_token
        return self

    def client_app_name(self, client_app_name: Optional[str]) -> "DirectionsBuilder":
        self._client_app_name = client_app_name
        return self

    def post(self) -> "DirectionsBuilder":
        """Always send the request as a form-encoded POST."""
        self._use_post = True
        return self

    def get(self) -> "DirectionsBuilder":
        """Always send the request as a GET, regardless of URL length."""
        self._use_post = False
        return self

    # ----------------------------
    # Coordinates
    # ----------------------------

    def origin(self, origin) -> "DirectionsBuilder":
        self._origin = _to_point(origin, "origin")
        return self

    def destination(self, destination) -> "DirectionsBuilder":
        self._destination = _to_point(destination, "destination")
        return self

    def add_waypoint(self, waypoint) -> "DirectionsBuilder":
        self._coordinates.append(_to_point(waypoint, "waypoint"))
        return self

    def waypoints(self, waypoints: Optional[Sequence[Any]]) -> "DirectionsBuilder":
        self._coordinates = [_to_point(point, "waypoint") for point in waypoints or []]
        return self

    # ----------------------------
    # Scalar options
    # ----------------------------

    def alternatives(self, alternatives: Optional[bool]) -> "DirectionsBuilder":
        self._alternatives = alternatives
        return self

    def geometries(self, geometries) -> "DirectionsBuilder":
        if geometries is not None:
            geometries = _to_choice(geometries, Geometries, "geometries")
        self._geometries = geometries
        return self

    def overview(self, overview) -> "DirectionsBuilder":
        self._overview = None if overview is None else _to_choice(overview, Overview, "overview")
        return self

    def steps(self, steps: Optional[bool]) -> "DirectionsBuilder":
        self._steps = steps
        return self

    def continue_straight(self, continue_straight: Optional[bool]) -> "DirectionsBuilder":
        self._continue_straight = continue_straight
        return self

    def language(self, language: Optional[str]) -> "DirectionsBuilder":
        self._language = language
        return self

    def roundabout_exits(self, roundabout_exits: Optional[bool]) -> "DirectionsBuilder":
        self._roundabout_exits = roundabout_exits
        return self

    def voice_instructions(self, voice_instructions: Optional[bool]) -> "DirectionsBuilder":
        self._voice_instructions = voice_instructions
        return self

    def banner_instructions(self, banner_instructions: Optional[bool]) -> "DirectionsBuilder":
        self._banner_instructions = banner_instructions
        return self

    def voice_units(self, voice_units) -> "DirectionsBuilder":
        if voice_units is not None:
            voice_units = _to_choice(voice_units, VoiceUnits, "voice_units")
        self._voice_units = voice_units
        return self

    def exclude(self, exclude) -> "DirectionsBuilder":
        """Set excluded road classes, e.g. ``"toll"`` or ``"toll,ferry"``."""
        if exclude is None:
            self._exclude = None
            return self
        if isinstance(exclude, Exclude):
            classes = [exclude]
        else:
            classes = str(exclude).split(codec.COMMA)
        self._exclude = codec.COMMA.join(_to_choice(value, Exclude, "exclude") for value in classes)
        return self

    def enable_refresh(self, enable_refresh: Optional[bool]) -> "DirectionsBuilder":
        self._enable_refresh = enable_refresh
        return self

    def walking_options(self, walking_options: Optional[WalkingOptions]) -> "DirectionsBuilder":
        self._walking_options = walking_options
        return self

    # ----------------------------
    # Per-coordinate options
    # ----------------------------

    def annotations(self, annotations: Optional[Sequence[Any]]) -> "DirectionsBuilder":
        self._annotations = []
        return self.add_annotations(*(annotations or []))

    def add_annotations(self, *annotations) -> "DirectionsBuilder":
        self._annotations.extend(
            _to_choice(value, Annotation, "annotations") for value in annotations
        )
        return self

    def add_bearing(
        self, angle: Optional[float], tolerance: Optional[float]
    ) -> "DirectionsBuilder":
        """Append a bearing; a missing angle or tolerance leaves the position empty."""
        self._bearings.append(self._coerce_bearing([angle, tolerance]))
        return self

    def bearings(
        self, bearings: Optional[Sequence[Optional[Sequence[float]]]]
    ) -> "DirectionsBuilder":
        self._bearings = [self._coerce_bearing(bearing) for bearing in bearings or []]
        return self

    def radiuses(self, radiuses: Optional[Sequence[Any]]) -> "DirectionsBuilder":
        """Set snapping radiuses in meters; ``"unlimited"`` or ``math.inf`` lifts the limit."""
        self._radiuses = [self._coerce_radius(radius) for radius in radiuses or []]
        return self

    def add_radiuses(self, *radiuses) -> "DirectionsBuilder":
        self._radiuses.extend(self._coerce_radius(radius) for radius in radiuses)
        return self

    def approaches(self, approaches: Optional[Sequence[Any]]) -> "DirectionsBuilder":
        self._approaches = list(approaches or [])
        return self

    def add_approaches(self, *approaches) -> "DirectionsBuilder":
        self._approaches.extend(approaches)
        return self

    def waypoint_indices(self, waypoint_indices: Optional[Sequence[int]]) -> "DirectionsBuilder":
        self._waypoint_indices = []
        return self.add_waypoint_indices(*(waypoint_indices or []))

    def add_waypoint_indices(self, *waypoint_indices) -> "DirectionsBuilder":
        self._waypoint_indices.extend(
            _to_int(index, "waypoint_indices") for index in waypoint_indices
        )
        return self

    def waypoint_names(
        self, waypoint_names: Optional[Sequence[Optional[str]]]
    ) -> "DirectionsBuilder":
        self._waypoint_names = [self._coerce_name(name) for name in waypoint_names or []]
        return self

    def add_waypoint_names(self, *waypoint_names) -> "DirectionsBuilder":
        self._waypoint_names.extend(self._coerce_name(name) for name in waypoint_names)
        return self

    def waypoint_targets(self, waypoint_targets: Optional[Sequence[Any]]) -> "DirectionsBuilder":
        """Set drop-off points per coordinate; ``None`` keeps a coordinate without a target."""
        self._waypoint_targets = [
            None if target is None else _to_point(target, "waypoint_targets")
            for target in waypoint_targets or []
        ]
        return self

    def add_waypoint_targets(self, *waypoint_targets) -> "DirectionsBuilder":
        self._waypoint_targets.extend(
            None if target is None else _to_point(target, "waypoint_targets")
            for target in waypoint_targets
        )
        return self

    # ----------------------------
    # Map-matching trace
    # ----------------------------

    def origin_trace(self, origin_trace: Optional[Sequence[Any]]) -> "DirectionsBuilder":
        self._origin_trace = [_to_point(point, "origin_trace") for point in origin_trace or []]
        return self

    def add_origin_trace(self, *points) -> "DirectionsBuilder":
        self._origin_trace.extend(_to_point(point, "origin_trace") for point in points)
        return self

    def origin_trace_radiuses(self, radiuses: Optional[Sequence[int]]) -> "DirectionsBuilder":
        self._origin_trace_radiuses = []
        return self.add_origin_trace_radiuses(*(radiuses or []))

    def add_origin_trace_radiuses(self, *radiuses) -> "DirectionsBuilder":
        self._origin_trace_radiuses.extend(
            _to_int(radius, "origin_trace_radiuses") for radius in radiuses
        )
        return self

    def origin_trace_timestamps(self, timestamps: Optional[Sequence[Any]]) -> "DirectionsBuilder":
        self._origin_trace_timestamps = [
            self._coerce_timestamp(value) for value in timestamps or []
        ]
        return self

    def add_origin_trace_timestamps(self, *timestamps) -> "DirectionsBuilder":
        self._origin_trace_timestamps.extend(self._coerce_timestamp(value) for value in timestamps)
        return self

    # ----------------------------
    # Coercion
    # ----------------------------

    @staticmethod
    def _coerce_bearing(bearing: Optional[Sequence[Any]]) -> Optional[List[float]]:
        if bearing is None or len(bearing) == 0:
            return None
        if len(bearing) == 2 and (bearing[0] is None or bearing[1] is None):
            return None
        values = []
        for value in bearing:
            if isinstance(value, bool):
                raise DirectionsEncodingError(f"bearings must contain numbers, got {value!r}")
            try:
                values.append(float(value))
            except (TypeError, ValueError) as e:
                raise DirectionsEncodingError(
                    f"bearings must contain numbers, got {value!r}"
                ) from e
        return values

    @staticmethod
    def _coerce_radius(radius: Any) -> Optional[float]:
        if radius is None:
            return None
        if radius == codec.UNLIMITED:
            return math.inf
        value = codec.parse_number(codec.format_number(radius))
        if value < 0:
            raise DirectionsEncodingError(f"radiuses must not be negative, got {radius!r}")
        return value

    @staticmethod
    def _coerce_name(name: Optional[str]) -> Optional[str]:
        if name is not None and codec.SEMICOLON in name:
            raise DirectionsEncodingError(f"waypoint_names: '{name}' must not contain ';'")
        return name

    @staticmethod
    def _coerce_timestamp(value: Any) -> int:
        if isinstance(value, datetime):
            return codec.epoch_seconds(value)
        return _to_int(value, "origin_trace_timestamps")

    # ----------------------------
    # Validation
    # ----------------------------

    def _merged_coordinates(self) -> List[Point]:
        coordinates = list(self._coordinates)
        if self._origin is not None:
            coordinates.insert(0, self._origin)
        if self._destination is not None:
            coordinates.append(self._destination)
        return coordinates

    def _check_waypoint_indices(self, coordinate_count: int) -> None:
        indices = self._waypoint_indices
        if not indices:
            return
        if len(indices) < 2:
            raise DirectionsValidationError(
                "waypoint_indices must be a list of at least two indexes separated by ';'"
            )
        if indices[0] != 0 or indices[-1] != coordinate_count - 1:
            raise DirectionsValidationError(
                "waypoint_indices must contain indices of the first and last coordinates "
                f"(0 and {coordinate_count - 1}), got {indices[0]} and {indices[-1]}"
            )
        for index in indices[1:-1]:
            if index < 0 or index >= coordinate_count:
                raise DirectionsValidationError(
                    f"waypoint_indices entry {index} has no corresponding coordinate "
                    f"(expected 0 to {coordinate_count - 1})"
                )

    def _check_waypoint_targets(self, coordinate_count: int) -> None:
        if self._waypoint_targets and len(self._waypoint_targets) != coordinate_count:
            raise DirectionsValidationError(
                f"Number of waypoint_targets ({len(self._waypoint_targets)}) must match "
                f"the number of coordinates ({coordinate_count})"
            )

    def _check_approaches(self, coordinate_count: int) -> None:
        if not self._approaches:
            return
        if len(self._approaches) != coordinate_count:
            raise DirectionsValidationError(
                f"Number of approaches ({len(self._approaches)}) must match "
                f"the number of coordinates ({coordinate_count})"
            )
        allowed = {approach.value for approach in Approach}
        for approach in self._approaches:
            if approach is not None and codec.to_text(approach) not in allowed:
                raise DirectionsValidationError(
                    f"All approaches values must be one of {', '.join(sorted(allowed))}, "
                    f"got {approach!r}"
                )

    def _check_origin_trace(self) -> None:
        sizes = (
            len(self._origin_trace),
            len(self._origin_trace_radiuses),
            len(self._origin_trace_timestamps),
        )
        if not any(sizes):
            return
        if not all(sizes):
            raise DirectionsValidationError(
                "origin_trace, origin_trace_radiuses and origin_trace_timestamps "
                "must be used at the same time"
            )
        if len(set(sizes)) != 1:
            raise DirectionsValidationError(
                "origin_trace, origin_trace_radiuses and origin_trace_timestamps "
                f"must have the same size, got {sizes[0]}, {sizes[1]} and {sizes[2]}"
            )
        if not MIN_ORIGIN_TRACE_SIZE <= sizes[0] <= MAX_ORIGIN_TRACE_SIZE:
            raise DirectionsValidationError(
                "origin_trace, origin_trace_radiuses and origin_trace_timestamps "
                f"must be from {MIN_ORIGIN_TRACE_SIZE} to {MAX_ORIGIN_TRACE_SIZE} items, "
                f"got {sizes[0]}"
            )

    def _check_bearings(self) -> None:
        for bearing in self._bearings:
            if bearing is None:
                continue
            if len(bearing) != 2:
                raise DirectionsValidationError(
                    f"Each bearing must be empty or an (angle, tolerance) pair, got {bearing!r}"
                )
            angle, tolerance = bearing
            if not (0 <= angle <= MAX_BEARING_VALUE and 0 <= tolerance <= MAX_BEARING_VALUE):
                raise DirectionsValidationError(
                    f"Bearing angle and tolerance have to be from 0 to 360, got {bearing!r}"
                )

    # ----------------------------
    # Build
    # ----------------------------

    def build(self, token_validator: Optional[TokenValidator] = None) -> DirectionsRequest:
        """
        Validate the collected options and freeze them into a request.

        Args:
            token_validator: Predicate for the access token, defaults to
                ``is_access_token_valid``

        Returns:
            DirectionsRequest with every list parameter encoded

        Raises:
            DirectionsValidationError: If any cross-field constraint is violated
            DirectionsEncodingError: If a value cannot be encoded
        """
        coordinates = self._merged_coordinates()
        if len(coordinates) < 2:
            raise DirectionsValidationError(
                "An origin and destination are required before making the directions API "
                f"request, got {len(coordinates)} coordinate(s)"
            )
        if not self._base_url:
            raise DirectionsValidationError("base_url must not be empty")
        if not self._user:
            raise DirectionsValidationError("user must not be empty")

        self._check_waypoint_indices(len(coordinates))
        self._check_waypoint_targets(len(coordinates))
        self._check_approaches(len(coordinates))
        self._check_origin_trace()
        self._check_bearings()

        waypoint_names = codec.encode_strings(self._waypoint_names)
        if waypoint_names and len(waypoint_names) > MAX_WAYPOINT_NAMES_LENGTH:
            raise DirectionsValidationError(
                f"waypoint_names must not exceed {MAX_WAYPOINT_NAMES_LENGTH} characters "
                f"combined, got {len(waypoint_names)}"
            )

        encoded = {
            "radiuses": codec.encode_numeric_list(self._radiuses),
            "bearings": codec.encode_bearings(self._bearings),
            "annotations": codec.encode_annotations(self._annotations),
            "approaches": codec.encode_strings(self._approaches),
            "waypoint_indices": codec.encode_index_list(self._waypoint_indices),
            "waypoint_names": waypoint_names,
            "waypoint_targets": codec.encode_points(self._waypoint_targets),
            "origin_trace": codec.encode_points(self._origin_trace),
            "origin_trace_radiuses": codec.encode_index_list(self._origin_trace_radiuses),
            "origin_trace_timestamps": codec.encode_timestamps(self._origin_trace_timestamps),
        }

        validator = token_validator or is_access_token_valid
        if not validator(self._access_token):
            raise DirectionsValidationError(
                "Using the directions API requires setting a valid access token"
            )

        if self._walking_options is not None and self._profile != Profile.WALKING.value:
            logger.warning(
                "Walking options are set for profile '%s' and will only apply to walking routes",
                self._profile,
            )

        request = DirectionsRequest(
            base_url=self._base_url,
            user=self._user,
            profile=self._profile,
            coordinates=coordinates,
            access_token=self._access_token,
            client_app_name=self._client_app_name,
            use_post=self._use_post,
            alternatives=self._alternatives,
            geometries=self._geometries,
            overview=self._overview,
            steps=self._steps,
            continue_straight=self._continue_straight,
            language=self._language,
            roundabout_exits=self._roundabout_exits,
            voice_instructions=self._voice_instructions,
            banner_instructions=self._banner_instructions,
            voice_units=self._voice_units,
            exclude=self._exclude,
            enable_refresh=self._enable_refresh,
            walking_options=self._walking_options,
            **encoded,
        )

        logger.debug(
            "Built directions request: profile=%s, coordinates=%d, token=%s",
            request.profile.value,
            len(request.coordinates),
            mask_access_token(request.access_token),
        )
        return request
