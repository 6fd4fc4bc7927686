"""Centralized configuration for environment variables.

This module is the single source of truth for configuration used by the
client. Read values through the getters rather than calling os.getenv in
multiple places, so an updated environment is picked up at call time.
"""

from __future__ import annotations

import os
from typing import Final

from dotenv import load_dotenv

from vietmap.constants import DEFAULT_BASE_URL
from vietmap.exceptions import AuthenticationError

# Load environment variables from .env if present
load_dotenv()

API_KEY_ENV: Final[str] = "VIETMAP_API_KEY"
BASE_URL_ENV: Final[str] = "VIETMAP_BASE_URL"
USER_AGENT_ENV: Final[str] = "VIETMAP_USER_AGENT"

DEFAULT_USER_AGENT: Final[str] = "vietmap-python/0.1"


def get_api_key() -> str:
    """Return the configured API key, or an empty string."""
    return os.getenv(API_KEY_ENV, "").strip()


def require_api_key() -> str:
    api_key = get_api_key()
    if not api_key:
        msg = f"{API_KEY_ENV} is not configured"
        raise AuthenticationError(msg)
    return api_key


def get_base_url() -> str:
    base_url = os.getenv(BASE_URL_ENV, "").strip() or DEFAULT_BASE_URL
    return base_url.rstrip("/")


def get_user_agent() -> str:
    return os.getenv(USER_AGENT_ENV, "").strip() or DEFAULT_USER_AGENT


__all__ = [
    "API_KEY_ENV",
    "BASE_URL_ENV",
    "DEFAULT_USER_AGENT",
    "USER_AGENT_ENV",
    "get_api_key",
    "get_base_url",
    "get_user_agent",
    "require_api_key",
]
