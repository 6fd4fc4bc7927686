import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from tenacity import wait_none

from network_blocker import install_network_blocker
from vietmap.client import VietmapClient

_RETRYING_METHODS = (
    "search",
    "autocomplete",
    "reverse",
    "route",
    "tsp",
    "search_v4",
    "autocomplete_v4",
    "reverse_v4",
    "place_v4",
    "migrate_address",
)


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIETMAP_API_KEY", "test-api-key")
    monkeypatch.delenv("VIETMAP_BASE_URL", raising=False)
    monkeypatch.delenv("VIETMAP_USER_AGENT", raising=False)
    install_network_blocker(monkeypatch)


@pytest.fixture
def no_retry_wait(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _RETRYING_METHODS:
        monkeypatch.setattr(getattr(VietmapClient, name).retry, "wait", wait_none())
