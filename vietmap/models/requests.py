"""
Request models for the Vietmap endpoints.

Each request validates on construction and knows how to render itself as
query parameters. ``apikey`` is optional everywhere: VietmapClient fills it
in from its own configuration when a request leaves it unset.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from vietmap.models.enums import (
    Layer,
    MigrateType,
    ReverseDisplayType,
    SearchDisplayType,
    Vehicle,
)

LatLng = tuple[float, float]


def format_lat_lng(coordinate: LatLng | None) -> str | None:
    if coordinate is None:
        return None
    return f"{coordinate[0]},{coordinate[1]}"


class ApiRequest(BaseModel):
    apikey: str | None = None

    def with_api_key(self, api_key: str | None) -> ApiRequest:
        """Return a copy carrying api_key unless one is already set."""
        if self.apikey or not api_key:
            return self
        return self.model_copy(update={"apikey": api_key})

    def to_params(self) -> list[tuple[str, Any]]:
        return [("apikey", self.apikey)]


class SearchRequest(ApiRequest):
    text: str
    focus: LatLng | None = None

    def to_params(self) -> list[tuple[str, Any]]:
        return [
            *super().to_params(),
            ("text", self.text),
            ("focus", format_lat_lng(self.focus)),
        ]


class SearchRequestV4(SearchRequest):
    display_type: SearchDisplayType | None = None
    layers: Layer | None = None
    circle_center: LatLng | None = None
    circle_radius: float | None = Field(default=None, gt=0)
    cats: str | None = None
    city_id: int | None = None
    ward_id: int | None = None
    dist_id: int | None = None

    def to_params(self) -> list[tuple[str, Any]]:
        return [
            *super().to_params(),
            ("display_type", self.display_type),
            ("layers", self.layers),
            ("circle_center", format_lat_lng(self.circle_center)),
            ("circle_radius", self.circle_radius),
            ("cats", self.cats),
            ("city_id", self.city_id),
            ("ward_id", self.ward_id),
            ("dist_id", self.dist_id),
        ]


class ReverseRequest(ApiRequest):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    def to_params(self) -> list[tuple[str, Any]]:
        return [
            ("lat", self.latitude),
            ("lng", self.longitude),
            *super().to_params(),
        ]


class ReverseRequestV4(ReverseRequest):
    display_type: ReverseDisplayType | None = None

    def to_params(self) -> list[tuple[str, Any]]:
        return [*super().to_params(), ("display_type", self.display_type)]


class PlaceRequest(ApiRequest):
    ref_id: str = Field(min_length=1)

    def to_params(self) -> list[tuple[str, Any]]:
        return [*super().to_params(), ("refid", self.ref_id)]


class RouteRequest(ApiRequest):
    points_encoded: bool = True
    vehicle: Vehicle = Vehicle.CAR
    optimize: bool = False

    def to_params(self) -> list[tuple[str, Any]]:
        return [
            *super().to_params(),
            ("points_encoded", self.points_encoded),
            ("vehicle", self.vehicle),
            ("optimize", self.optimize),
        ]


class TSPRequest(RouteRequest):
    round_trip: bool = True

    def to_params(self) -> list[tuple[str, Any]]:
        return [*super().to_params(), ("roundtrip", self.round_trip)]


class MigrateAddressRequest(ApiRequest):
    text: str
    migrate_type: MigrateType | None = None
    focus: LatLng | None = None

    @model_validator(mode="after")
    def _require_focus_for_new_to_old(self) -> MigrateAddressRequest:
        if self.migrate_type == MigrateType.NEW_TO_OLD and self.focus is None:
            msg = "focus is required when migrate_type is NEW_TO_OLD"
            raise ValueError(msg)
        return self

    def to_params(self) -> list[tuple[str, Any]]:
        return [
            *super().to_params(),
            ("text", self.text),
            ("migrate_type", self.migrate_type),
            ("focus", format_lat_lng(self.focus)),
        ]
