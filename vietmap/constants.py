"""Global constants for the vietmap package."""

from typing import Final

# HTTP Client Constants
HTTP_CONNECTION_LIMIT: Final[int] = 10
HTTP_TIMEOUT_CONNECT: Final[float] = 10.0
HTTP_TIMEOUT_SOCK_READ: Final[float] = 30.0
HTTP_TIMEOUT_TOTAL: Final[float] = 60.0

# Vietmap API
DEFAULT_BASE_URL: Final[str] = "https://maps.vietmap.vn"
ROUTE_API_VERSION: Final[str] = "1.1"

# Polyline / geodesy
DEFAULT_POLYLINE_PRECISION: Final[int] = 5
EARTH_RADIUS_M: Final[float] = 6371008.8

# Retries
RETRY_MAX_RETRIES: Final[int] = 3
RETRY_INITIAL_DELAY: Final[float] = 1.0
RETRY_BACKOFF_FACTOR: Final[float] = 2.0
