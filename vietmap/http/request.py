"""
Shared HTTP request helper for the Vietmap endpoints.

Keeps JSON request/response handling and the mapping from HTTP status
codes to package exceptions in one place.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

import aiohttp

from vietmap.exceptions import (
    AuthenticationError,
    NetworkError,
    ParseError,
    RateLimitError,
    ServerError,
    ValidationError,
    VietmapApiError,
)

logger = logging.getLogger(__name__)

SERVER_ERROR_STATUSES = frozenset({500, 502, 503, 504})

Params = Mapping[str, Any] | Iterable[tuple[str, Any]]


def _serialize_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    return value


def build_params(params: Params | None) -> list[tuple[str, Any]]:
    """Flatten query params into pairs, dropping None values.

    Sequences of pairs are kept in order so keys like ``point`` may repeat.
    """
    if not params:
        return []
    items = params.items() if isinstance(params, Mapping) else params
    return [
        (str(key), _serialize_value(value))
        for key, value in items
        if value is not None
    ]


def _error_message(body: str) -> str | None:
    try:
        data = json.loads(body)
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def _raise_for_status(
    status: int,
    body: str,
    *,
    headers: Mapping[str, str],
    service_name: str,
    url: str,
) -> None:
    details = {"status": status, "body": body, "url": url}
    message = _error_message(body)

    if status == 400:
        raise ValidationError(
            message or f"{service_name} error: bad request - invalid parameters",
            details,
        )
    if status in (401, 403):
        default = (
            "unauthorized - invalid or missing API key"
            if status == 401
            else "forbidden - access denied"
        )
        raise AuthenticationError(
            message or f"{service_name} error: {default}",
            details,
            status_code=status,
        )
    if status == 429:
        try:
            retry_after = int(headers.get("Retry-After", ""))
        except ValueError:
            retry_after = None
        details["retry_after"] = retry_after
        raise RateLimitError(
            message or f"{service_name} error: 429 rate limit exceeded",
            details,
            retry_after=retry_after,
        )
    if status in SERVER_ERROR_STATUSES:
        raise ServerError(
            message or f"{service_name} error: server error ({status})",
            details,
            status_code=status,
        )
    raise VietmapApiError(
        message or f"{service_name} error: {status}",
        details,
        code="HTTP_ERROR",
        status_code=status,
    )


async def request_json(
    method: str,
    url: str,
    *,
    session: Any,
    params: Params | None = None,
    headers: dict[str, str] | None = None,
    expected_status: int | Iterable[int] = 200,
    none_on: Iterable[int] | None = None,
    service_name: str = "Vietmap",
    timeout: Any | None = None,
) -> Any | None:
    method_upper = method.upper()
    if isinstance(expected_status, int):
        expected = {expected_status}
    else:
        expected = set(expected_status)
    none_on_set = set(none_on or [])

    if method_upper == "GET":
        request_fn = session.get
    elif method_upper == "POST":
        request_fn = session.post
    else:
        msg = f"{service_name} request error: unsupported method {method_upper}"
        raise VietmapApiError(msg, {"url": url})

    request_kwargs: dict[str, Any] = {
        "params": build_params(params),
        "headers": headers,
    }
    if timeout is not None:
        request_kwargs["timeout"] = timeout

    try:
        async with request_fn(url, **request_kwargs) as response:
            response_url = str(getattr(response, "url", url))
            if response.status in none_on_set:
                logger.debug(
                    "%s returned %s for %s",
                    service_name,
                    response.status,
                    response_url,
                )
                return None
            if response.status not in expected:
                body = await response.text()
                _raise_for_status(
                    response.status,
                    body,
                    headers=response.headers,
                    service_name=service_name,
                    url=response_url,
                )
            try:
                return await response.json(content_type=None)
            except ValueError as exc:
                msg = f"{service_name} error: response is not valid JSON"
                raise ParseError(msg, {"url": response_url}) from exc
    except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
        msg = f"{service_name} network error: {exc}"
        raise NetworkError(msg, {"url": url}) from exc
