import pytest

from vietmap.http.session import SessionState, cleanup_session, get_session


@pytest.mark.asyncio
async def test_get_session_is_shared_until_cleanup() -> None:
    first = await get_session()

    assert await get_session() is first
    assert SessionState.session_owner_pid is not None

    await cleanup_session()

    assert first.closed
    assert SessionState.session is None
    replacement = await get_session()
    assert replacement is not first
    await cleanup_session()


@pytest.mark.asyncio
async def test_session_inherited_from_other_process_is_replaced() -> None:
    inherited = await get_session()
    SessionState.session_owner_pid = -1

    fresh = await get_session()

    assert fresh is not inherited
    await inherited.close()
    await cleanup_session()


@pytest.mark.asyncio
async def test_session_sends_configured_user_agent(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("VIETMAP_USER_AGENT", "route-tests/2.0")
    await cleanup_session()

    session = await get_session()

    assert session.headers["User-Agent"] == "route-tests/2.0"
    assert session.headers["Accept"] == "application/json"
    await cleanup_session()
