"""
Encoded polyline codec.

Implements Google's Encoded Polyline Algorithm Format, which is also the
wire format of the route API's ``points`` field. Coordinates are
[lat, lng] pairs unless a function says otherwise.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

from vietmap.constants import DEFAULT_POLYLINE_PRECISION
from vietmap.exceptions import PolylineDecodeError, ValidationError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

_CHAR_OFFSET = 63
_MIN_CHAR = 63
_MAX_CHAR = 126


def _factor(precision: Any) -> int:
    """Scaling factor for a precision, falling back to the default."""
    if (
        isinstance(precision, bool)
        or not isinstance(precision, int)
        or precision < 0
    ):
        logger.debug(
            "Invalid polyline precision %r, using %d",
            precision,
            DEFAULT_POLYLINE_PRECISION,
        )
        precision = DEFAULT_POLYLINE_PRECISION
    return 10**precision


def _round_half_away(value: float) -> int:
    # Half away from zero; round() rounds half to even.
    rounded = int(math.floor(abs(value) + 0.5))
    return rounded if value >= 0 else -rounded


def _encode_value(current: float, previous: float, factor: int) -> str:
    delta = _round_half_away(current * factor) - _round_half_away(
        previous * factor,
    )
    value = -delta * 2 - 1 if delta < 0 else delta * 2

    chunks: list[str] = []
    while value >= 0x20:
        chunks.append(chr((0x20 | (value & 0x1F)) + _CHAR_OFFSET))
        value >>= 5
    chunks.append(chr(value + _CHAR_OFFSET))
    return "".join(chunks)


def encode(
    coordinates: Sequence[Sequence[float]],
    precision: int = DEFAULT_POLYLINE_PRECISION,
) -> str:
    """Encode [lat, lng] coordinates into a polyline string."""
    if not coordinates:
        return ""

    factor = _factor(precision)
    output: list[str] = []
    prev_lat = 0.0
    prev_lng = 0.0
    for coord in coordinates:
        lat, lng = float(coord[0]), float(coord[1])
        output.append(_encode_value(lat, prev_lat, factor))
        output.append(_encode_value(lng, prev_lng, factor))
        prev_lat, prev_lng = lat, lng
    return "".join(output)


def _decode_pairs(encoded: str, precision: Any) -> list[tuple[float, float]]:
    if not encoded:
        return []

    factor = float(_factor(precision))
    length = len(encoded)
    index = 0
    lat = 0
    lng = 0
    pairs: list[tuple[float, float]] = []

    def next_value() -> int:
        nonlocal index
        result = 0
        shift = 0
        while True:
            if index >= length:
                msg = "Invalid polyline encoding: unexpected end of input"
                raise PolylineDecodeError(msg, {"position": index})
            char_code = ord(encoded[index])
            if not _MIN_CHAR <= char_code <= _MAX_CHAR:
                msg = "Invalid polyline encoding: unexpected character"
                raise PolylineDecodeError(
                    msg,
                    {"position": index, "character": encoded[index]},
                )
            chunk = char_code - _CHAR_OFFSET
            index += 1
            result |= (chunk & 0x1F) << shift
            shift += 5
            if chunk < 0x20:
                break
        if result & 1:
            return ~(result >> 1)
        return result >> 1

    while index < length:
        lat += next_value()
        lng += next_value()
        pairs.append((lat / factor, lng / factor))

    return pairs


def decode(
    encoded: str,
    precision: int = DEFAULT_POLYLINE_PRECISION,
) -> list[list[float]]:
    """
    Decode a polyline string into [lat, lng] coordinates.

    Raises:
        PolylineDecodeError: the string is truncated or holds characters
            outside the polyline alphabet.
    """
    return [[lat, lng] for lat, lng in _decode_pairs(encoded, precision)]


def decode_lng_lat(
    encoded: str,
    precision: int = DEFAULT_POLYLINE_PRECISION,
) -> list[list[float]]:
    """Decode a polyline string into [lng, lat] coordinates."""
    return [[lng, lat] for lat, lng in _decode_pairs(encoded, precision)]


def to_geojson(
    encoded: str,
    precision: int = DEFAULT_POLYLINE_PRECISION,
) -> dict[str, Any]:
    """Decode a polyline string into a GeoJSON LineString geometry."""
    return {
        "type": "LineString",
        "coordinates": decode_lng_lat(encoded, precision),
    }


def from_geojson(
    geojson: dict[str, Any],
    precision: int = DEFAULT_POLYLINE_PRECISION,
) -> str:
    """Encode a GeoJSON LineString geometry or Feature."""
    if isinstance(geojson, dict) and geojson.get("type") == "Feature":
        geojson = geojson.get("geometry")
    if not isinstance(geojson, dict) or geojson.get("type") != "LineString":
        msg = "Input must be a GeoJSON LineString"
        raise ValidationError(msg, field="geojson")
    coordinates = geojson.get("coordinates") or []
    return encode([[coord[1], coord[0]] for coord in coordinates], precision)
