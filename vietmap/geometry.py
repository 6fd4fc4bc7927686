"""
Route geometry utilities.

Great-circle helpers (distance, bearing, destination) and the
nearest-point search used to split a route polyline into the traveled and
remaining parts during navigation. Coordinates are [lat, lng] pairs.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from vietmap.constants import EARTH_RADIUS_M
from vietmap.exceptions import InvalidUnitError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class Unit(str, Enum):
    METERS = "meters"
    MILLIMETERS = "millimeters"
    CENTIMETERS = "centimeters"
    KILOMETERS = "kilometers"
    ACRES = "acres"
    MILES = "miles"
    NAUTICAL_MILES = "nauticalmiles"
    INCHES = "inches"
    YARDS = "yards"
    FEET = "feet"
    RADIANS = "radians"
    DEGREES = "degrees"


# Earth radius expressed in each unit. ACRES is an area figure, not a length.
FACTORS: dict[Unit, float] = {
    Unit.CENTIMETERS: EARTH_RADIUS_M * 100,
    Unit.DEGREES: EARTH_RADIUS_M / 111325,
    Unit.FEET: EARTH_RADIUS_M * 3.28084,
    Unit.INCHES: EARTH_RADIUS_M * 39.37,
    Unit.KILOMETERS: EARTH_RADIUS_M / 1000,
    Unit.METERS: EARTH_RADIUS_M,
    Unit.MILES: EARTH_RADIUS_M / 1609.344,
    Unit.MILLIMETERS: EARTH_RADIUS_M * 1000,
    Unit.NAUTICAL_MILES: EARTH_RADIUS_M / 1852,
    Unit.RADIANS: 1.0,
    Unit.YARDS: EARTH_RADIUS_M / 1.0936,
    Unit.ACRES: 40468564.224,
}


@dataclass(frozen=True)
class NearestPointResult:
    """A point on a polyline together with where it was found."""

    point: tuple[float, float]
    distance: float
    index: int
    location: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "point": list(self.point),
            "distance": self.distance,
            "index": self.index,
            "location": self.location,
        }


def resolve_unit(unit: Unit | str) -> Unit:
    """Return the Unit for a Unit member or its name, e.g. ``"miles"``."""
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(str(unit).strip().lower())
    except ValueError as exc:
        msg = f"{unit} units is invalid"
        raise InvalidUnitError(msg, {"unit": unit}) from exc


def _factor(unit: Unit | str) -> float:
    return FACTORS[resolve_unit(unit)]


def degrees_to_radians(degrees: float) -> float:
    return math.radians(math.fmod(degrees, 360))


def radians_to_degrees(radians: float) -> float:
    return math.degrees(math.fmod(radians, 2 * math.pi))


def radians_to_length(radians: float, unit: Unit | str = Unit.KILOMETERS) -> float:
    return radians * _factor(unit)


def length_to_radians(distance: float, unit: Unit | str = Unit.KILOMETERS) -> float:
    return distance / _factor(unit)


def distance(
    start: Sequence[float],
    end: Sequence[float],
    unit: Unit | str = Unit.KILOMETERS,
) -> float:
    """Great-circle distance between two [lat, lng] points (haversine)."""
    factor = _factor(unit)
    d_lat = degrees_to_radians(end[0] - start[0])
    d_lng = degrees_to_radians(end[1] - start[1])
    lat1 = degrees_to_radians(start[0])
    lat2 = degrees_to_radians(end[0])

    a = (
        math.sin(d_lat / 2) ** 2
        + math.sin(d_lng / 2) ** 2 * math.cos(lat1) * math.cos(lat2)
    )
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a)) * factor


def bearing(
    start: Sequence[float],
    end: Sequence[float],
    *,
    final: bool = False,
) -> float:
    """Initial bearing in degrees from start to end, or the final bearing."""
    if final:
        return math.fmod(bearing(end, start) + 180, 360)

    lng1 = degrees_to_radians(start[1])
    lng2 = degrees_to_radians(end[1])
    lat1 = degrees_to_radians(start[0])
    lat2 = degrees_to_radians(end[0])
    a = math.sin(lng2 - lng1) * math.cos(lat2)
    b = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(
        lat2,
    ) * math.cos(lng2 - lng1)
    return radians_to_degrees(math.atan2(a, b))


def destination(
    origin: Sequence[float],
    distance: float,
    bearing: float,
    unit: Unit | str = Unit.KILOMETERS,
) -> tuple[float, float]:
    """Point reached from origin after travelling distance along bearing."""
    lng1 = degrees_to_radians(origin[1])
    lat1 = degrees_to_radians(origin[0])
    bearing_rad = degrees_to_radians(bearing)
    radians = length_to_radians(distance, unit)

    lat2 = math.asin(
        math.sin(lat1) * math.cos(radians)
        + math.cos(lat1) * math.sin(radians) * math.cos(bearing_rad),
    )
    lng2 = lng1 + math.atan2(
        math.sin(bearing_rad) * math.sin(radians) * math.cos(lat1),
        math.cos(radians) - math.sin(lat1) * math.sin(lat2),
    )
    return (radians_to_degrees(lat2), radians_to_degrees(lng2))


def intersects(
    line1: Sequence[Sequence[float]],
    line2: Sequence[Sequence[float]],
) -> tuple[float, float] | None:
    """
    Intersection point of two 2-point segments, or None.

    Longitude and latitude are treated as planar x/y, which is adequate
    for the short probe segments built by nearest_point_on_line.
    """
    if len(line1) != 2:
        msg = "line1 must only contain 2 coordinates"
        raise ValueError(msg)
    if len(line2) != 2:
        msg = "line2 must only contain 2 coordinates"
        raise ValueError(msg)

    y1, x1 = line1[0][0], line1[0][1]
    y2, x2 = line1[1][0], line1[1][1]
    y3, x3 = line2[0][0], line2[0][1]
    y4, x4 = line2[1][0], line2[1][1]

    denom = (y4 - y3) * (x2 - x1) - (x4 - x3) * (y2 - y1)
    if denom == 0:
        return None

    u_a = ((x4 - x3) * (y1 - y3) - (y4 - y3) * (x1 - x3)) / denom
    u_b = ((x2 - x1) * (y1 - y3) - (y2 - y1) * (x1 - x3)) / denom
    if not (0 <= u_a <= 1 and 0 <= u_b <= 1):
        return None

    return (y1 + u_a * (y2 - y1), x1 + u_a * (x2 - x1))


def _scan_line(
    line: Sequence[Sequence[float]],
    point: Sequence[float],
    unit: Unit | str,
) -> tuple[NearestPointResult | None, NearestPointResult | None]:
    """Return (nearest point overall, nearest vertex) along the line."""
    unit = resolve_unit(unit)
    nearest: NearestPointResult | None = None
    nearest_vertex: NearestPointResult | None = None
    length = 0.0

    for i in range(len(line) - 1):
        start_coord = (float(line[i][0]), float(line[i][1]))
        stop_coord = (float(line[i + 1][0]), float(line[i + 1][1]))
        section_length = distance(start_coord, stop_coord, unit)

        start = NearestPointResult(
            start_coord,
            distance(point, start_coord, unit),
            i,
            length,
        )
        stop = NearestPointResult(
            stop_coord,
            distance(point, stop_coord, unit),
            i + 1,
            length + section_length,
        )

        # Probe perpendicular to the segment, long enough to cross it.
        height = max(start.distance, stop.distance)
        direction = bearing(start_coord, stop_coord)
        perpendicular1 = destination(point, height, direction + 90, unit)
        perpendicular2 = destination(point, height, direction - 90, unit)
        crossing = intersects(
            [perpendicular1, perpendicular2],
            [start_coord, stop_coord],
        )

        intersection: NearestPointResult | None = None
        if crossing is not None:
            intersection = NearestPointResult(
                crossing,
                distance(point, crossing, unit),
                i,
                length + distance(start_coord, crossing, unit),
            )

        for candidate in (start, stop):
            if nearest is None or candidate.distance < nearest.distance:
                nearest = candidate
            if (
                nearest_vertex is None
                or candidate.distance < nearest_vertex.distance
            ):
                nearest_vertex = candidate

        if intersection is not None and intersection.distance < nearest.distance:
            nearest = intersection

        length += section_length

    return nearest, nearest_vertex


def nearest_point_on_line(
    line: Sequence[Sequence[float]],
    point: Sequence[float],
    unit: Unit | str = Unit.KILOMETERS,
    *,
    snap_to_vertex: bool = False,
) -> NearestPointResult | None:
    """
    Find the point on a polyline closest to the given point.

    Each segment contributes its two vertices and, when the perpendicular
    from the point falls inside it, the foot of that perpendicular. Ties
    keep the earlier candidate.

    Args:
        line: [lat, lng] vertices of the polyline.
        point: [lat, lng] query point.
        unit: Unit for the returned distance and location.
        snap_to_vertex: Only consider the line's own vertices.

    Returns:
        The nearest candidate, or None when the line has fewer than two
        points.

    Raises:
        InvalidUnitError: the unit is not recognized.
    """
    nearest, nearest_vertex = _scan_line(line, point, unit)
    return nearest_vertex if snap_to_vertex else nearest


def split_route_by_point(
    line: Sequence[Sequence[float]],
    point: Sequence[float],
    *,
    unit: Unit | str = Unit.KILOMETERS,
    snap_input_point_to_result: bool = True,
) -> tuple[list[Any], list[Any]]:
    """
    Split a route at the vertex nearest to point.

    The split vertex ends the first half and starts the second one. With
    snap_input_point_to_result the query point itself is appended to the
    first half and prepended to the second, so the visual split runs
    through the caller's position.
    """
    result = nearest_point_on_line(line, point, unit, snap_to_vertex=True)
    if result is None:
        logger.debug(
            "Route with %d point(s) has no segments, splitting at index 0",
            len(line),
        )
        index = 0
    else:
        index = result.index

    before = list(line[: index + 1])
    after = list(line[index:])
    if snap_input_point_to_result:
        before.append(list(point))
        after.insert(0, list(point))
    return before, after


__all__ = [
    "FACTORS",
    "NearestPointResult",
    "Unit",
    "bearing",
    "degrees_to_radians",
    "destination",
    "distance",
    "intersects",
    "length_to_radians",
    "nearest_point_on_line",
    "radians_to_degrees",
    "radians_to_length",
    "resolve_unit",
    "split_route_by_point",
]
