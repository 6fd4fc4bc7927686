from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple, Self

if TYPE_CHECKING:
    from types import TracebackType


class RecordedRequest(NamedTuple):
    method: str
    url: str
    kwargs: dict[str, Any]


@dataclass
class FakeResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    status: int = 200
    json_data: Any = None
    text_data: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    url: str = "http://test"

    @property
    def body(self) -> str:
        if self.text_data is not None:
            return self.text_data
        if self.json_data is not None:
            return json.dumps(self.json_data)
        return ""

    async def json(self, **_kwargs: Any) -> Any:
        if self.json_data is None and self.text_data is not None:
            return json.loads(self.text_data)
        return self.json_data

    async def text(self) -> str:
        return self.body

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        return False


class FakeSession:
    """Replays queued responses (or raises queued exceptions) per method."""

    def __init__(
        self,
        *,
        get_responses: list[FakeResponse | Exception] | None = None,
        post_responses: list[FakeResponse | Exception] | None = None,
    ) -> None:
        self._queues = {
            "GET": deque(get_responses or []),
            "POST": deque(post_responses or []),
        }
        self.requests: list[RecordedRequest] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._respond("GET", url, kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._respond("POST", url, kwargs)

    def _respond(self, method: str, url: str, kwargs: dict[str, Any]) -> FakeResponse:
        self.requests.append(RecordedRequest(method, url, kwargs))
        queue = self._queues[method]
        if not queue:
            msg = f"No fake {method} responses left for {url}"
            raise AssertionError(msg)
        response = queue.popleft()
        if isinstance(response, Exception):
            raise response
        return response

    def params(self, index: int = 0) -> list[tuple[str, Any]]:
        """Query params sent with the index-th request."""
        return list(self.requests[index].kwargs["params"])
