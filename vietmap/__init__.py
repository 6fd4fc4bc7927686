"""Python client for the Vietmap Maps API."""

from vietmap import geometry, polyline
from vietmap.client import VietmapClient
from vietmap.exceptions import (
    AuthenticationError,
    InvalidUnitError,
    NetworkError,
    ParseError,
    PolylineDecodeError,
    RateLimitError,
    ServerError,
    ValidationError,
    VietmapApiError,
)
from vietmap.geometry import (
    NearestPointResult,
    Unit,
    nearest_point_on_line,
    split_route_by_point,
)
from vietmap.polyline import decode, decode_lng_lat, encode

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "InvalidUnitError",
    "NearestPointResult",
    "NetworkError",
    "ParseError",
    "PolylineDecodeError",
    "RateLimitError",
    "ServerError",
    "Unit",
    "ValidationError",
    "VietmapApiError",
    "VietmapClient",
    "decode",
    "decode_lng_lat",
    "encode",
    "geometry",
    "nearest_point_on_line",
    "polyline",
    "split_route_by_point",
]
