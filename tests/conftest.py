"""Shared fixtures: zero simulated delays so tests run instantly."""

from typing import List

import pytest
import pytest_asyncio

from blogspace.app.state import Store
from blogspace.shared.core.configuration import ContentConfig, SessionConfig, SystemConfig
from blogspace.shared.core.event_bus import EventBus, EventPayload
from blogspace.shared.domain.content.service import ContentService
from blogspace.shared.domain.models import User
from blogspace.shared.domain.session.service import SessionService
from blogspace.shared.infrastructure.persistence.memory_service import (
    InMemoryContentRepository,
    InMemoryUserDirectory,
)

LONG_CONTENT = (
    "Python's asyncio gives a single-threaded event loop where every coroutine "
    "runs to completion between awaits, which keeps client state simple."
)


class Recorder:
    """Collects payloads published on a topic."""

    def __init__(self) -> None:
        self.payloads: List[EventPayload] = []

    async def __call__(self, payload: EventPayload) -> None:
        self.payloads.append(payload)


@pytest.fixture
def config():
    return SystemConfig(
        content=ContentConfig(load_delay=0.0),
        session=SessionConfig(init_delay=0.0),
    )


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def author():
    return User(id="42", username="alice", email="alice@example.com")


@pytest.fixture
def content_service(bus, config):
    return ContentService(bus, InMemoryContentRepository(delay=0.0), config=config.content)


@pytest_asyncio.fixture
async def loaded_content(content_service):
    await content_service.load_initial()
    return content_service


@pytest.fixture
def session_service(bus):
    return SessionService(bus, InMemoryUserDirectory(), init_delay=0.0)


@pytest_asyncio.fixture
async def store(bus, config):
    store = Store(bus, config)
    await store.start()
    return store
