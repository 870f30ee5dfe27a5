"""Application Store - composition root.

Builds the stores, the view coordinator and AppState once at startup.
The instance is owned by whoever created it and passed to consumers
explicitly; there is no module-level singleton.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from blogspace.app.state.app_state import AppState
from blogspace.shared.core.configuration import SystemConfig
from blogspace.shared.core.event_bus import EventBus
from blogspace.shared.domain.content.service import ContentService
from blogspace.shared.domain.navigation.coordinator import ViewCoordinator
from blogspace.shared.domain.session.service import SessionService
from blogspace.shared.infrastructure.persistence.base import ContentRepository, UserDirectory
from blogspace.shared.infrastructure.persistence.memory_service import (
    InMemoryContentRepository,
    InMemoryUserDirectory,
)

logger = logging.getLogger(__name__)


class Store:
    """Owns every piece of client-side state for one application run.

    Usage:
        store = Store(EventBus(), config)
        await store.start()
        await store.app.login("demo@example.com", "password")
    """

    def __init__(
        self,
        event_bus: Optional[EventBus] = None,
        config: Optional[SystemConfig] = None,
        repository: Optional[ContentRepository] = None,
        directory: Optional[UserDirectory] = None,
    ) -> None:
        """Wire services together.

        Args:
            event_bus: Shared bus (a new one is created when omitted)
            config: System configuration (built-in defaults when omitted)
            repository: Content persistence port (in-memory mock by default)
            directory: Credential directory (seeded mock accounts by default)
        """
        self.bus = event_bus or EventBus()
        self.config = config or SystemConfig()

        self.repository = repository or InMemoryContentRepository(delay=self.config.content.load_delay)
        self.directory = directory or InMemoryUserDirectory()

        self.session = SessionService(self.bus, self.directory, init_delay=self.config.session.init_delay)
        self.content = ContentService(self.bus, self.repository, config=self.config.content)
        self.navigation = ViewCoordinator(self.bus)
        self.app = AppState(self.bus, self.session, self.content, self.navigation)

        self._started = False

    async def start(self) -> None:
        """Subscribe AppState, run both simulated loads concurrently, then
        leave the loading screen.

        Raises:
            RuntimeError: If the store was already started
        """
        if self._started:
            raise RuntimeError("Store already started!")
        self._started = True

        await self.app.initialize()

        logger.info("Starting session check and initial content load")
        await asyncio.gather(self.session.initialize(), self.content.load_initial())
        await self.navigation.sync(self.session.state)
        await self.bus.wait_until_idle()
        logger.info(f"Store ready (screen={self.navigation.screen.value})")
