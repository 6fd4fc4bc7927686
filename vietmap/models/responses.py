"""
Response models for the Vietmap endpoints.

Unknown fields are ignored so additions on the server side do not break
parsing; missing required fields raise ParseError from ``from_json``.
"""

from __future__ import annotations

import logging
from typing import Any, Self

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from vietmap import polyline
from vietmap.constants import DEFAULT_POLYLINE_PRECISION
from vietmap.exceptions import ParseError

logger = logging.getLogger(__name__)


class ResponseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def from_json(cls, data: Any) -> Self:
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            logger.debug("Failed to parse %s: %s", cls.__name__, exc)
            msg = f"Failed to parse {cls.__name__}: {exc.error_count()} error(s)"
            raise ParseError(
                msg,
                {"errors": exc.errors(include_url=False)},
                response_data=data,
            ) from exc


class Boundary(ResponseModel):
    type: int
    id: int
    name: str
    prefix: str
    full_name: str


class EntryPoint(ResponseModel):
    ref_id: str = Field(validation_alias=AliasChoices("refId", "ref_id"))
    name: str


class SearchResponse(ResponseModel):
    ref_id: str
    address: str
    name: str
    display: str
    boundaries: list[Boundary] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)


class SearchResponseV4(SearchResponse):
    distance: float | None = None
    entry_points: list[EntryPoint] | None = None
    data_old: SearchResponseV4 | None = None
    data_new: SearchResponseV4 | None = None


class ReverseResponse(ResponseModel):
    lat: float
    lng: float
    ref_id: str
    distance: float
    address: str
    name: str
    display: str
    boundaries: list[Boundary] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)


class ReverseResponseV4(ResponseModel):
    lat: float | None = None
    lng: float | None = None
    ref_id: str | None = None
    distance: float | None = None
    address: str | None = None
    name: str | None = None
    display: str | None = None
    boundaries: list[Boundary] | None = None
    categories: list[str] | None = None
    entry_points: list[EntryPoint] | None = None
    data_old: ReverseResponseV4 | None = None
    data_new: ReverseResponseV4 | None = None


class PlaceResponse(ResponseModel):
    display: str
    name: str
    hs_num: str | None = None
    street: str | None = None
    address: str | None = None
    city_id: int | None = None
    city: str | None = None
    district_id: int | None = None
    district: str | None = None
    ward_id: int | None = None
    ward: str | None = None
    lat: float
    lng: float


class MigrateAddressResponse(ResponseModel):
    address: str | None = None
    name: str | None = None
    display: str | None = None
    boundaries: list[Boundary] | None = None


class Instruction(ResponseModel):
    distance: float
    heading: float | None = None
    sign: int
    interval: list[int]
    text: str
    time: float
    street_name: str = ""
    last_heading: float | None = None


class RoutePath(ResponseModel):
    distance: float
    weight: float
    time: float
    transfers: int
    points_encoded: bool
    bbox: list[float] = Field(default_factory=list)
    points: Any = None
    instructions: list[Instruction] = Field(default_factory=list)
    snapped_waypoints: Any = None

    def coordinates(
        self,
        precision: int = DEFAULT_POLYLINE_PRECISION,
    ) -> list[list[float]]:
        """Return the path geometry as [lat, lng] pairs.

        Encoded paths are decoded; GeoJSON paths (``points_encoded=false``)
        carry [lng, lat] pairs that are swapped.
        """
        points = self.points
        if isinstance(points, str):
            return polyline.decode(points, precision)
        if isinstance(points, dict):
            points = points.get("coordinates")
        if not points:
            return []
        return [[float(coord[1]), float(coord[0])] for coord in points]


class RouteResponse(ResponseModel):
    license: str
    code: str
    messages: str | None = None
    paths: list[RoutePath] = Field(default_factory=list)
