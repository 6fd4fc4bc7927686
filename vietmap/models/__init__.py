"""Request and response models."""

from vietmap.models.enums import (
    Layer,
    MigrateType,
    ReverseDisplayType,
    SearchDisplayType,
    Vehicle,
)
from vietmap.models.requests import (
    ApiRequest,
    MigrateAddressRequest,
    PlaceRequest,
    ReverseRequest,
    ReverseRequestV4,
    RouteRequest,
    SearchRequest,
    SearchRequestV4,
    TSPRequest,
)
from vietmap.models.responses import (
    Boundary,
    EntryPoint,
    Instruction,
    MigrateAddressResponse,
    PlaceResponse,
    ResponseModel,
    ReverseResponse,
    ReverseResponseV4,
    RouteResponse,
    RoutePath,
    SearchResponse,
    SearchResponseV4,
)

__all__ = [
    "ApiRequest",
    "Boundary",
    "EntryPoint",
    "Instruction",
    "Layer",
    "MigrateAddressRequest",
    "MigrateAddressResponse",
    "MigrateType",
    "PlaceRequest",
    "PlaceResponse",
    "ResponseModel",
    "ReverseDisplayType",
    "ReverseRequest",
    "ReverseRequestV4",
    "ReverseResponse",
    "ReverseResponseV4",
    "RoutePath",
    "RouteRequest",
    "RouteResponse",
    "SearchDisplayType",
    "SearchRequest",
    "SearchRequestV4",
    "SearchResponse",
    "SearchResponseV4",
    "TSPRequest",
    "Vehicle",
]
