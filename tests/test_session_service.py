"""SessionService: вход, продление, завершение и истечение сессий."""
import asyncio
from datetime import timedelta

import pytest

from collab_editor.domains.sessions.reaper import SessionReaper
from collab_editor.domains.sessions.services import SessionService


@pytest.fixture
def service(session_repository, clock):
    return SessionService(session_repository, ttl=timedelta(hours=24), clock=clock)


async def test_start_creates_new_session(service, clock):
    session, created = await service.start_session("alice")

    assert created is True
    assert session.username == "alice"
    assert session.is_active is True
    assert session.last_activity == clock()
    assert session.current_document is None


async def test_start_resumes_active_session(service, clock):
    first, _ = await service.start_session("alice")
    clock.advance(hours=1)

    resumed, created = await service.start_session("alice")

    assert created is False
    assert resumed.session_id == first.session_id
    assert resumed.last_activity == clock()


async def test_different_users_get_different_sessions(service):
    alice, _ = await service.start_session("alice")
    bob, _ = await service.start_session("bob")
    assert alice.session_id != bob.session_id


async def test_expired_session_is_not_returned(service, session_repository, clock):
    session, _ = await service.start_session("alice")
    clock.advance(hours=24, seconds=1)

    assert await service.get_session(session.session_id) is None
    stored = await session_repository.get_by_session_id(session.session_id)
    assert stored.is_active is False


async def test_session_at_exact_ttl_still_valid(service, clock):
    session, _ = await service.start_session("alice")
    clock.advance(hours=24)
    assert await service.get_session(session.session_id) is not None


async def test_login_after_expiry_creates_new_session(service, clock):
    old, _ = await service.start_session("alice")
    clock.advance(days=2)

    new, created = await service.start_session("alice")

    assert created is True
    assert new.session_id != old.session_id


async def test_activity_refreshes_and_tracks_document(service, clock):
    session, _ = await service.start_session("alice")
    clock.advance(hours=23)

    touched = await service.record_activity(session.session_id, current_document="doc-1")
    assert touched.last_activity == clock()
    assert touched.current_document == "doc-1"

    clock.advance(hours=23)
    assert await service.get_session(session.session_id) is not None

    touched = await service.record_activity(session.session_id)
    assert touched.current_document == "doc-1"


async def test_activity_on_unknown_or_ended_session(service):
    assert await service.record_activity("nope") is None

    session, _ = await service.start_session("alice")
    await service.end_session(session.session_id)
    assert await service.record_activity(session.session_id) is None


async def test_end_session_twice(service):
    session, _ = await service.start_session("alice")

    assert await service.end_session(session.session_id) is True
    assert await service.end_session(session.session_id) is True
    assert await service.get_session(session.session_id) is None
    assert await service.end_session("unknown") is False


async def test_ended_session_is_not_resumed(service):
    session, _ = await service.start_session("alice")
    await service.end_session(session.session_id)

    new, created = await service.start_session("alice")
    assert created is True
    assert new.session_id != session.session_id


async def test_reap_expired(service, session_repository, clock):
    stale, _ = await service.start_session("alice")
    clock.advance(hours=20)
    fresh, _ = await service.start_session("bob")
    clock.advance(hours=5)

    assert await service.reap_expired() == 1
    assert (await session_repository.get_by_session_id(stale.session_id)).is_active is False
    assert (await session_repository.get_by_session_id(fresh.session_id)).is_active is True
    assert await service.reap_expired() == 0


async def test_reaper_run_once(service, clock):
    await service.start_session("alice")
    clock.advance(days=1, seconds=1)

    reaper = SessionReaper(service, interval_seconds=60)
    assert await reaper.run_once() == 1


async def test_reaper_background_task(service, session_repository, clock):
    session, _ = await service.start_session("alice")
    clock.advance(days=3)

    reaper = SessionReaper(service, interval_seconds=0.01)
    reaper.start()
    assert reaper.running
    await asyncio.sleep(0.1)
    await reaper.stop()

    assert not reaper.running
    assert (await session_repository.get_by_session_id(session.session_id)).is_active is False


async def test_reaper_logs_failed_pass_with_traceback(service, session_repository, caplog, monkeypatch):
    async def unavailable(cutoff, now):
        raise RuntimeError("storage unavailable")

    monkeypatch.setattr(session_repository, "deactivate_expired", unavailable)
    reaper = SessionReaper(service, interval_seconds=0.01)

    with caplog.at_level("ERROR", logger="collab_editor.domains.sessions.reaper"):
        reaper.start()
        await asyncio.sleep(0.05)
        assert reaper.running
        await reaper.stop()

    failures = [r for r in caplog.records if "reaper pass failed" in r.getMessage()]
    assert failures
    assert failures[0].exc_info is not None
    assert failures[0].exc_info[0] is RuntimeError
