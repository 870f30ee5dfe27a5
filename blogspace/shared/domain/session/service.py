"""Session Store for BlogSpace.

Tracks who is signed in. Sign-in is checked against an in-memory directory;
there is no real authentication.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from blogspace.shared.core import events
from blogspace.shared.core.errors import AuthenticationError, FieldValidationError
from blogspace.shared.core.event_bus import EventBus
from blogspace.shared.domain.models import IdGenerator, SessionState, User, generate_id
from blogspace.shared.infrastructure.persistence.base import UserDirectory

logger = logging.getLogger(__name__)


class SessionService:
    """Owns the current SessionState and publishes every change."""

    def __init__(
        self,
        event_bus: EventBus,
        directory: UserDirectory,
        init_delay: float = 0.5,
        id_generator: Optional[IdGenerator] = None,
    ):
        """Initialize the session store.

        Args:
            event_bus: Bus that receives session.changed events
            directory: Known accounts for login()
            init_delay: Seconds the simulated session check takes
            id_generator: Source of ids for registered users
        """
        self.event_bus = event_bus
        self.directory = directory
        self.init_delay = init_delay
        self._next_id = id_generator.next_id if id_generator else generate_id
        self._state = SessionState.loading()
        self._initialized = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def user(self) -> Optional[User]:
        return self._state.user

    @property
    def is_authenticated(self) -> bool:
        return self._state.is_authenticated

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    async def initialize(self) -> None:
        """Simulate checking for an existing session.

        Resolves to anonymous after `init_delay`, unless a login or
        registration completed in the meantime. Runs once.
        """
        if self._initialized:
            logger.debug("Session already initialized; ignoring")
            return
        self._initialized = True

        if not self._state.is_loading:
            await self._set_state(SessionState.loading())

        if self.init_delay > 0:
            await asyncio.sleep(self.init_delay)

        if self._state.is_loading:
            logger.info("No existing session found")
            await self._set_state(SessionState.anonymous())

    async def login(self, identifier: str, secret: str) -> User:
        """Sign in against the directory.

        Raises:
            FieldValidationError: identifier or secret is blank
            AuthenticationError: no directory entry matches
        """
        problems = {}
        if not identifier or not identifier.strip():
            problems["identifier"] = "Email is required"
        if not secret:
            problems["secret"] = "Password is required"
        if problems:
            raise FieldValidationError(problems)

        user = self.directory.authenticate(identifier, secret)
        if user is None:
            logger.info(f"Login rejected for '{identifier.strip()}'")
            raise AuthenticationError("invalid credentials", identifier=identifier.strip())

        logger.info(f"User '{user.username}' signed in")
        await self._set_state(SessionState.signed_in(user))
        return user

    async def register(
        self,
        username: str,
        email: str = "",
        password: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> User:
        """Create a user and sign them in. Always succeeds.

        When a password is given the account is added to the directory so
        it can sign in again after logout.
        """
        user = User(id=self._next_id(), username=username, email=email, avatar=avatar)
        if password:
            self.directory.add(user, password)
        logger.info(f"Registered user '{user.username}' ({user.id})")
        await self._set_state(SessionState.signed_in(user))
        return user

    async def logout(self) -> None:
        """Clear the session. No-op when nobody is signed in."""
        if not self._state.is_authenticated:
            return
        logger.info(f"User '{self._state.user.username}' signed out")
        await self._set_state(SessionState.anonymous())

    async def _set_state(self, state: SessionState) -> None:
        self._state = state
        await self.event_bus.publish(
            events.TOPIC_SESSION_CHANGED,
            events.create_session_changed_event(state),
        )
