"""Tests for the session store."""

import asyncio

import pytest

from blogspace.shared.core import events
from blogspace.shared.core.errors import AuthenticationError, FieldValidationError
from blogspace.shared.domain.session.service import SessionService
from blogspace.shared.infrastructure.persistence.memory_service import InMemoryUserDirectory
from tests.conftest import Recorder


@pytest.mark.asyncio
async def test_starts_loading_and_resolves_anonymous(session_service, bus):
    recorder = Recorder()
    await bus.subscribe(events.TOPIC_SESSION_CHANGED, recorder)
    assert session_service.is_loading

    await session_service.initialize()
    await bus.wait_until_idle()

    assert not session_service.is_loading
    assert not session_service.is_authenticated
    assert session_service.user is None
    assert recorder.payloads[-1]["session"] == session_service.state


@pytest.mark.asyncio
async def test_initialize_runs_once(session_service, bus):
    recorder = Recorder()
    await bus.subscribe(events.TOPIC_SESSION_CHANGED, recorder)
    await session_service.initialize()
    await session_service.login("demo@example.com", "password")
    await session_service.initialize()
    await bus.wait_until_idle()

    assert session_service.is_authenticated
    assert len(recorder.payloads) == 2


@pytest.mark.asyncio
async def test_login_during_init_delay_is_kept(bus):
    service = SessionService(bus, InMemoryUserDirectory(), init_delay=0.05)
    pending = asyncio.create_task(service.initialize())
    await asyncio.sleep(0)

    await service.login("johndoe", "password")
    await pending

    assert service.is_authenticated
    assert service.user.username == "johndoe"


@pytest.mark.asyncio
async def test_login_by_email_or_username(session_service):
    await session_service.initialize()
    user = await session_service.login("  JOHN@example.com ", "password")
    assert user.username == "johndoe"
    assert session_service.state.user == user

    await session_service.logout()
    user = await session_service.login("sarah.tech", "password")
    assert user.email == "sarah@example.com"


@pytest.mark.asyncio
async def test_wrong_password_fails_without_state_change(session_service):
    await session_service.initialize()
    before = session_service.state

    with pytest.raises(AuthenticationError) as exc_info:
        await session_service.login("demo@example.com", "nope")

    assert exc_info.value.reason == "invalid credentials"
    assert session_service.state == before


@pytest.mark.asyncio
async def test_blank_credentials_are_validation_errors(session_service):
    await session_service.initialize()
    with pytest.raises(FieldValidationError) as exc_info:
        await session_service.login("  ", "")
    assert set(exc_info.value.fields) == {"identifier", "secret"}
    assert not session_service.is_authenticated


@pytest.mark.asyncio
async def test_register_signs_in_new_user(session_service):
    await session_service.initialize()
    user = await session_service.register("alice")

    assert session_service.is_authenticated
    assert session_service.user == user
    assert user.username == "alice"
    assert user.id


@pytest.mark.asyncio
async def test_register_ignores_existing_names(session_service):
    await session_service.initialize()
    first = await session_service.register("demo")
    await session_service.logout()
    second = await session_service.register("demo")
    assert first.id != second.id


@pytest.mark.asyncio
async def test_registered_user_can_log_back_in(session_service):
    await session_service.initialize()
    user = await session_service.register("bob", email="bob@example.com", password="hunter22")
    await session_service.logout()

    again = await session_service.login("bob@example.com", "hunter22")
    assert again == user


@pytest.mark.asyncio
async def test_logout_is_idempotent(session_service, bus):
    await session_service.initialize()
    await session_service.login("demo", "password")

    recorder = Recorder()
    await bus.subscribe(events.TOPIC_SESSION_CHANGED, recorder)
    await session_service.logout()
    assert session_service.user is None
    assert not session_service.is_authenticated

    await session_service.logout()
    await bus.wait_until_idle()
    assert len(recorder.payloads) == 1
