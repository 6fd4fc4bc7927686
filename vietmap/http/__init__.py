"""HTTP client utilities and session management."""

from vietmap.http.request import build_params, request_json
from vietmap.http.retry import retry_async
from vietmap.http.session import cleanup_session, get_session

__all__ = [
    "build_params",
    "cleanup_session",
    "get_session",
    "request_json",
    "retry_async",
]
