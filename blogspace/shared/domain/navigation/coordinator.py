"""View Coordinator: picks the one top-level screen to show.

The screen is a function of the session and the last explicit navigation
request. Home and Create are only reachable with a signed-in session;
requests for them while anonymous land on Auth.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from blogspace.shared.core import events
from blogspace.shared.core.event_bus import EventBus
from blogspace.shared.domain.models import SessionState

logger = logging.getLogger(__name__)


class Screen(str, Enum):
    LOADING = "loading"
    AUTH = "auth"
    CREATE = "create"
    HOME = "home"


class NavigationTarget(str, Enum):
    """Explicit navigation requests from the presentation layer."""
    HOME = "home"
    CREATE = "create"
    AUTH = "auth"
    CANCEL = "cancel"
    PUBLISHED = "published"


_PROTECTED = {Screen.HOME, Screen.CREATE}


def resolve_screen(
    current: Screen,
    session: SessionState,
    target: Optional[NavigationTarget] = None,
) -> Screen:
    """Next screen for a session snapshot and an optional navigation request."""
    if session.is_loading:
        return current if current == Screen.LOADING else Screen.LOADING

    if target is None:
        # Session-driven transitions
        if not session.is_authenticated:
            return Screen.AUTH
        if current in (Screen.LOADING, Screen.AUTH):
            return Screen.HOME
        return current

    if target == NavigationTarget.AUTH:
        requested = Screen.AUTH
    elif target == NavigationTarget.CREATE:
        requested = Screen.CREATE
    else:
        # home, cancel and published all return to the feed
        requested = Screen.HOME

    if requested in _PROTECTED and not session.is_authenticated:
        return Screen.AUTH
    return requested


class ViewCoordinator:
    """Holds the active screen and announces changes on the bus."""

    def __init__(self, event_bus: EventBus):
        self.event_bus = event_bus
        self._screen = Screen.LOADING
        self._session = SessionState.loading()

    @property
    def screen(self) -> Screen:
        return self._screen

    async def sync(self, session: SessionState) -> Screen:
        """Apply session-driven transitions (init finished, login, logout).

        Called by the intent dispatcher right after the session store
        settles, never from a bus handler, so a stale session cannot
        replay over a later navigation.
        """
        self._session = session
        return await self._move_to(resolve_screen(self._screen, session))

    async def navigate(self, target: NavigationTarget | str, session: Optional[SessionState] = None) -> Screen:
        """Apply an explicit navigation request.

        Ignored while the session is still loading.
        """
        target = NavigationTarget(target)
        if session is not None:
            self._session = session
        if self._session.is_loading:
            logger.debug(f"Navigation to '{target.value}' ignored while session is loading")
            return self._screen
        return await self._move_to(resolve_screen(self._screen, self._session, target))

    async def _move_to(self, screen: Screen) -> Screen:
        previous = self._screen
        if screen == previous:
            return screen
        self._screen = screen
        logger.debug(f"Screen {previous.value} -> {screen.value}")
        await self.event_bus.publish(
            events.TOPIC_VIEW_CHANGED,
            events.create_view_changed_event(screen.value, previous.value),
        )
        return screen
