"""Shared aiohttp session for the Vietmap client.

One ClientSession is kept per process and per event loop. A session that
was inherited through fork, or that belongs to a loop other than the
running one, is dropped and a fresh one is built on the next call.
"""

from __future__ import annotations

import asyncio
import logging
import os

import aiohttp

from vietmap.config import get_user_agent
from vietmap.constants import (
    HTTP_CONNECTION_LIMIT,
    HTTP_TIMEOUT_CONNECT,
    HTTP_TIMEOUT_SOCK_READ,
    HTTP_TIMEOUT_TOTAL,
)

logger = logging.getLogger(__name__)


class SessionState:
    """Holder for the process-wide session and the pid that created it."""

    session: aiohttp.ClientSession | None = None
    session_owner_pid: int | None = None


def _forget_session() -> None:
    SessionState.session = None
    SessionState.session_owner_pid = None


def _build_session() -> aiohttp.ClientSession:
    return aiohttp.ClientSession(
        timeout=aiohttp.ClientTimeout(
            total=HTTP_TIMEOUT_TOTAL,
            connect=HTTP_TIMEOUT_CONNECT,
            sock_read=HTTP_TIMEOUT_SOCK_READ,
        ),
        headers={
            "User-Agent": get_user_agent(),
            "Accept": "application/json",
        },
        connector=aiohttp.TCPConnector(
            limit=HTTP_CONNECTION_LIMIT,
            enable_cleanup_closed=True,
        ),
    )


async def _drop_if_loop_changed(session: aiohttp.ClientSession) -> None:
    session_loop = session.loop
    if session_loop is asyncio.get_running_loop() and not session_loop.is_closed():
        return

    logger.info("Vietmap session belongs to another event loop, replacing it")
    if not session.closed and not session_loop.is_closed():
        try:
            await session.close()
        except aiohttp.ClientError as e:
            logger.warning("Error closing stale Vietmap session: %s", e)
    _forget_session()


async def get_session() -> aiohttp.ClientSession:
    """Return the shared session, creating it when needed."""
    pid = os.getpid()

    if SessionState.session is not None and SessionState.session_owner_pid != pid:
        logger.debug(
            "Process %s inherited a session from process %s, discarding it",
            pid,
            SessionState.session_owner_pid,
        )
        _forget_session()

    if SessionState.session is not None:
        await _drop_if_loop_changed(SessionState.session)

    if SessionState.session is None or SessionState.session.closed:
        SessionState.session = _build_session()
        SessionState.session_owner_pid = pid
        logger.debug("Opened Vietmap session in process %s", pid)

    return SessionState.session


async def cleanup_session() -> None:
    """Close the shared session, if any, and forget it."""
    session = SessionState.session
    if session is not None and not session.closed:
        try:
            await session.close()
        except aiohttp.ClientError as e:
            logger.warning("Error closing Vietmap session: %s", e)
        else:
            logger.info("Closed Vietmap session in process %s", os.getpid())
    _forget_session()
