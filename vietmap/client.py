"""
Vietmap HTTP client.

Wraps the geocoding, place, address migration and routing endpoints of
the Vietmap Maps API, plus helpers that turn a route response into
coordinates and split it around the traveller's current position.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Literal

from vietmap import geometry
from vietmap.config import API_KEY_ENV, get_api_key, get_base_url
from vietmap.constants import DEFAULT_POLYLINE_PRECISION, ROUTE_API_VERSION
from vietmap.exceptions import AuthenticationError, ParseError, ValidationError
from vietmap.http.request import request_json
from vietmap.http.retry import retry_async
from vietmap.http.session import get_session
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
    MigrateAddressResponse,
    PlaceResponse,
    ReverseResponse,
    ReverseResponseV4,
    RouteResponse,
    SearchResponse,
    SearchResponseV4,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

TileMode = Literal["default", "light", "dark"]

_TILE_PATHS: dict[str, str] = {
    "dark": "dm",
    "light": "lm",
    "default": "tm",
}


class VietmapClient:
    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else get_api_key()
        self._base_url = (base_url or get_base_url()).rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _resolve_key(self, api_key: str | None) -> str:
        key = api_key or self._api_key
        if not key:
            msg = f"No API key: pass api_key or set {API_KEY_ENV}"
            raise AuthenticationError(msg)
        return key

    def _prepare(self, request: ApiRequest) -> ApiRequest:
        return request.with_api_key(self._resolve_key(request.apikey))

    async def _get(
        self,
        path: str,
        params: list[tuple[str, Any]],
        *,
        service_name: str,
    ) -> Any:
        logger.debug("%s request to %s", service_name, path)
        session = await get_session()
        return await request_json(
            "GET",
            self._url(path),
            session=session,
            params=params,
            service_name=service_name,
        )

    @staticmethod
    def _expect_list(data: Any, service_name: str) -> list[Any]:
        if not isinstance(data, list):
            msg = f"{service_name} error: expected a list response"
            raise ParseError(msg, response_data=data)
        return data

    @staticmethod
    def _first_item(data: Any, service_name: str) -> Any:
        items = VietmapClient._expect_list(data, service_name)
        if not items:
            msg = f"{service_name} error: no result for this location"
            raise ParseError(msg, response_data=data)
        return items[0]

    @staticmethod
    def _point_params(
        points: Sequence[Sequence[float]],
        service_name: str,
    ) -> list[tuple[str, str]]:
        if len(points) < 2:
            msg = f"{service_name} requires at least two points."
            raise ValidationError(msg, field="points", value=list(points))
        return [("point", f"{point[0]},{point[1]}") for point in points]

    # Geocoding v3

    @retry_async()
    async def search(self, request: SearchRequest) -> list[SearchResponse]:
        prepared = self._prepare(request)
        data = await self._get(
            "/api/search/v3",
            prepared.to_params(),
            service_name="Vietmap search",
        )
        items = self._expect_list(data, "Vietmap search")
        return [SearchResponse.from_json(item) for item in items]

    @retry_async()
    async def autocomplete(self, request: SearchRequest) -> list[SearchResponse]:
        prepared = self._prepare(request)
        data = await self._get(
            "/api/autocomplete/v3",
            prepared.to_params(),
            service_name="Vietmap autocomplete",
        )
        items = self._expect_list(data, "Vietmap autocomplete")
        return [SearchResponse.from_json(item) for item in items]

    @retry_async()
    async def reverse(self, request: ReverseRequest) -> ReverseResponse:
        prepared = self._prepare(request)
        data = await self._get(
            "/api/reverse/v3",
            prepared.to_params(),
            service_name="Vietmap reverse",
        )
        return ReverseResponse.from_json(self._first_item(data, "Vietmap reverse"))

    # Routing

    @retry_async()
    async def route(
        self,
        points: Sequence[Sequence[float]],
        request: RouteRequest | None = None,
    ) -> RouteResponse:
        """Route through [lat, lng] points in order."""
        point_params = self._point_params(points, "Vietmap route")
        prepared = self._prepare(request or RouteRequest())
        data = await self._get(
            "/api/route",
            [("api-version", ROUTE_API_VERSION), *point_params, *prepared.to_params()],
            service_name="Vietmap route",
        )
        return RouteResponse.from_json(data)

    @retry_async()
    async def tsp(
        self,
        points: Sequence[Sequence[float]],
        request: TSPRequest | None = None,
    ) -> RouteResponse:
        """Route visiting all points in the order that minimizes travel."""
        point_params = self._point_params(points, "Vietmap tsp")
        prepared = self._prepare(request or TSPRequest())
        data = await self._get(
            "/api/tsp",
            [("api-version", ROUTE_API_VERSION), *point_params, *prepared.to_params()],
            service_name="Vietmap tsp",
        )
        return RouteResponse.from_json(data)

    # Geocoding v4

    @retry_async()
    async def search_v4(self, request: SearchRequestV4) -> list[SearchResponseV4]:
        prepared = self._prepare(request)
        data = await self._get(
            "/api/search/v4",
            prepared.to_params(),
            service_name="Vietmap search v4",
        )
        items = self._expect_list(data, "Vietmap search v4")
        return [SearchResponseV4.from_json(item) for item in items]

    @retry_async()
    async def autocomplete_v4(
        self,
        request: SearchRequestV4,
    ) -> list[SearchResponseV4]:
        prepared = self._prepare(request)
        data = await self._get(
            "/api/autocomplete/v4",
            prepared.to_params(),
            service_name="Vietmap autocomplete v4",
        )
        items = self._expect_list(data, "Vietmap autocomplete v4")
        return [SearchResponseV4.from_json(item) for item in items]

    @retry_async()
    async def reverse_v4(self, request: ReverseRequestV4) -> ReverseResponseV4:
        prepared = self._prepare(request)
        data = await self._get(
            "/api/reverse/v4",
            prepared.to_params(),
            service_name="Vietmap reverse v4",
        )
        return ReverseResponseV4.from_json(
            self._first_item(data, "Vietmap reverse v4"),
        )

    @retry_async()
    async def place_v4(self, request: PlaceRequest) -> PlaceResponse:
        prepared = self._prepare(request)
        data = await self._get(
            "/api/place/v4",
            prepared.to_params(),
            service_name="Vietmap place v4",
        )
        return PlaceResponse.from_json(data)

    @retry_async()
    async def migrate_address(
        self,
        request: MigrateAddressRequest,
    ) -> MigrateAddressResponse:
        prepared = self._prepare(request)
        data = await self._get(
            "/api/migrate-address/v3",
            prepared.to_params(),
            service_name="Vietmap migrate address",
        )
        return MigrateAddressResponse.from_json(data)

    # Map styles and tiles

    def style_url(self, api_key: str | None = None) -> str:
        """Vector style URL for map renderers."""
        key = self._resolve_key(api_key)
        return f"{self._base_url}/api/maps/light/styles.json?apikey={key}"

    def raster_tile_url(
        self,
        api_key: str | None = None,
        mode: TileMode = "default",
    ) -> str:
        """Raster tile URL template with {z}/{x}/{y} placeholders."""
        key = self._resolve_key(api_key)
        tile_path = _TILE_PATHS.get(mode, _TILE_PATHS["default"])
        return f"{self._base_url}/api/{tile_path}/{{z}}/{{x}}/{{y}}@2x.png?apikey={key}"

    # Route geometry helpers

    @staticmethod
    def route_coordinates(
        response: RouteResponse,
        path_index: int = 0,
        *,
        precision: int = DEFAULT_POLYLINE_PRECISION,
    ) -> list[list[float]]:
        """[lat, lng] coordinates of one path of a route response."""
        if not 0 <= path_index < len(response.paths):
            msg = f"Route response has no path at index {path_index}"
            raise ValidationError(msg, field="path_index", value=path_index)
        return response.paths[path_index].coordinates(precision)

    @staticmethod
    def split_route(
        response: RouteResponse,
        current_position: Sequence[float],
        *,
        path_index: int = 0,
        precision: int = DEFAULT_POLYLINE_PRECISION,
        unit: geometry.Unit | str = geometry.Unit.KILOMETERS,
        snap_input_point_to_result: bool = True,
    ) -> tuple[list[Any], list[Any]]:
        """
        Split a route path into the part already travelled and the rest.

        Returns (before, after) lists of [lat, lng] coordinates, split at
        the route vertex nearest to current_position.
        """
        coordinates = VietmapClient.route_coordinates(
            response,
            path_index,
            precision=precision,
        )
        return geometry.split_route_by_point(
            coordinates,
            list(current_position),
            unit=unit,
            snap_input_point_to_result=snap_input_point_to_result,
        )
