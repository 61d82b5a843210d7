"""
Directions Parameter Codec

Converts typed values to and from the directions API wire grammar::

    segment(;segment)*      segment = value(,value)*

Encoders return ``None`` for empty input so the parameter is left out of the
request entirely. A ``None`` entry inside a per-coordinate list is written as
an empty segment, which keeps the positions of the entries that follow.

Numbers are written with at most six decimal places and no trailing zeros,
independent of the host locale, so that encode -> decode -> encode always
yields the same string.
"""

import math
from datetime import datetime
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from directions.core.exceptions import DirectionsDecodeError, DirectionsEncodingError
from directions.schemas.geo import Point
from directions.schemas.route_options import UNLIMITED

SEMICOLON = ";"
COMMA = ","

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def format_number(value: Any) -> str:
    """
    Format a number for the wire.

    Positive infinity is written as ``unlimited``.

    Raises:
        DirectionsEncodingError: If the value is not a finite number or +inf
    """
    if isinstance(value, bool):
        raise DirectionsEncodingError(f"Expected a number, got boolean {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise DirectionsEncodingError(f"Expected a number, got {value!r}") from e

    if math.isnan(number):
        raise DirectionsEncodingError("NaN cannot be encoded")
    if math.isinf(number):
        if number > 0:
            return UNLIMITED
        raise DirectionsEncodingError("Negative infinity cannot be encoded")

    text = f"{number:.6f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def parse_number(text: str) -> float:
    """Inverse of format_number."""
    if text == UNLIMITED:
        return math.inf
    try:
        return float(text)
    except ValueError as e:
        raise DirectionsDecodeError(f"'{text}' is not a number") from e


def to_text(value: Any) -> str:
    """Return the wire text of a plain or enum value."""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


# ---------------------------------------------------------------------------
# Encoders
# ---------------------------------------------------------------------------


def _join_segments(segments) -> Optional[str]:
    """Join positioned segments; a lone empty segment means the parameter is absent."""
    return SEMICOLON.join(segments) or None


def epoch_seconds(value: datetime) -> int:
    """
    Convert an aware datetime to epoch seconds.

    Raises:
        DirectionsEncodingError: If the datetime has no timezone
    """
    if value.tzinfo is None or value.utcoffset() is None:
        raise DirectionsEncodingError(
            f"Timestamps must be timezone-aware datetimes, got naive {value.isoformat()}"
        )
    return int(value.timestamp())


def encode_point(point: Point) -> str:
    return f"{format_number(point.longitude)}{COMMA}{format_number(point.latitude)}"


def encode_points(points: Optional[Sequence[Optional[Point]]]) -> Optional[str]:
    """Encode points as ``lon,lat;lon,lat``; ``None`` entries stay as empty segments."""
    if not points:
        return None
    return _join_segments("" if point is None else encode_point(point) for point in points)


def encode_bearings(bearings: Optional[Sequence[Optional[Sequence[float]]]]) -> Optional[str]:
    """Encode bearings as ``angle,tolerance`` pairs; empty entries stay positioned."""
    if not bearings:
        return None

    segments = []
    for bearing in bearings:
        if not bearing:
            segments.append("")
            continue
        if len(bearing) != 2:
            raise DirectionsEncodingError(
                f"A bearing must be an (angle, tolerance) pair, got {list(bearing)!r}"
            )
        segments.append(f"{format_number(bearing[0])}{COMMA}{format_number(bearing[1])}")
    return _join_segments(segments)


def encode_numeric_list(values: Optional[Sequence[Optional[float]]]) -> Optional[str]:
    if not values:
        return None
    return _join_segments("" if value is None else format_number(value) for value in values)


def encode_index_list(values: Optional[Sequence[int]]) -> Optional[str]:
    if not values:
        return None
    return SEMICOLON.join(str(index) for index in values)


def encode_timestamps(values: Optional[Sequence[Any]]) -> Optional[str]:
    """Encode timestamps as epoch seconds. Accepts ints or aware datetimes."""
    if not values:
        return None

    encoded = []
    for value in values:
        if isinstance(value, datetime):
            encoded.append(str(epoch_seconds(value)))
        elif isinstance(value, int) and not isinstance(value, bool):
            encoded.append(str(value))
        else:
            raise DirectionsEncodingError(f"Expected an epoch timestamp, got {value!r}")
    return SEMICOLON.join(encoded)


def encode_strings(values: Optional[Sequence[Optional[Any]]]) -> Optional[str]:
    """Encode free text entries (waypoint names, approaches)."""
    if not values:
        return None

    segments = []
    for value in values:
        if value is None:
            segments.append("")
            continue
        text = to_text(value)
        if SEMICOLON in text:
            raise DirectionsEncodingError(f"'{text}' must not contain '{SEMICOLON}'")
        segments.append(text)
    return _join_segments(segments)


def encode_annotations(values: Optional[Sequence[Any]]) -> Optional[str]:
    if not values:
        return None
    return COMMA.join(to_text(value) for value in values)


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------


def _split(original: Optional[str], keep_empty: bool) -> Optional[List[Optional[str]]]:
    if original is None:
        return None
    segments = original.split(SEMICOLON)
    if keep_empty:
        return [segment or None for segment in segments]
    return [segment for segment in segments if segment]


def _decode_each(
    segments: Optional[List[Optional[str]]], parse: Callable[[str], T]
) -> Optional[List[Optional[T]]]:
    if segments is None:
        return None
    return [None if segment is None else parse(segment) for segment in segments]


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        raise DirectionsDecodeError(f"'{text}' is not an integer") from e


def _parse_point(text: str) -> Point:
    values = text.split(COMMA)
    if len(values) != 2:
        raise DirectionsDecodeError(f"'{text}' is not a lon,lat pair")
    longitude, latitude = parse_number(values[0]), parse_number(values[1])
    try:
        return Point(longitude=longitude, latitude=latitude)
    except ValueError as e:
        raise DirectionsDecodeError(f"'{text}' is not a valid coordinate") from e


def _parse_bearing(text: str) -> List[float]:
    values = text.split(COMMA)
    if len(values) != 2:
        raise DirectionsDecodeError(f"'{text}' is not an angle,tolerance pair")
    return [parse_number(values[0]), parse_number(values[1])]


def decode_indices(original: Optional[str]) -> Optional[List[int]]:
    return _decode_each(_split(original, keep_empty=False), _parse_int)


def decode_timestamps(original: Optional[str]) -> Optional[List[int]]:
    return _decode_each(_split(original, keep_empty=False), _parse_int)


def decode_names(original: Optional[str], keep_empty: bool = True) -> Optional[List[Optional[str]]]:
    return _split(original, keep_empty)


def decode_points(
    original: Optional[str], keep_empty: bool = False
) -> Optional[List[Optional[Point]]]:
    return _decode_each(_split(original, keep_empty), _parse_point)


def decode_numeric_list(
    original: Optional[str], keep_empty: bool = False
) -> Optional[List[Optional[float]]]:
    return _decode_each(_split(original, keep_empty), parse_number)


def decode_bearing_pairs(
    original: Optional[str], keep_empty: bool = True
) -> Optional[List[Optional[List[float]]]]:
    return _decode_each(_split(original, keep_empty), _parse_bearing)


def decode_annotations(original: Optional[str]) -> Optional[List[str]]:
    if original is None:
        return None
    return [value for value in original.split(COMMA) if value]
