"""Application Shell State.

Single entry point for the presentation layer: it dispatches intents to the
stores and the view coordinator, and republishes an immutable AppSnapshot
on the bus after every change.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from blogspace.shared.core import events
from blogspace.shared.core.errors import AuthenticationError
from blogspace.shared.core.event_bus import EventBus, EventHandler, EventPayload
from blogspace.shared.domain.content.service import CommentThread, ContentService
from blogspace.shared.domain.models import Comment, Post, SessionState, User
from blogspace.shared.domain.navigation.coordinator import NavigationTarget, Screen, ViewCoordinator
from blogspace.shared.domain.session.service import SessionService

logger = logging.getLogger(__name__)


class AppSnapshot(BaseModel):
    """Everything a renderer needs for one frame."""
    model_config = ConfigDict(frozen=True)

    session: SessionState
    screen: Screen
    search_term: str = ""
    posts: Tuple[Post, ...] = ()
    posts_loading: bool = True
    expanded_post_id: Optional[str] = None


class AppState:
    """Intent dispatcher and snapshot builder.

    Observers register with subscribe() and receive
    {"snapshot": AppSnapshot} after each state change.
    """

    def __init__(
        self,
        event_bus: EventBus,
        session: SessionService,
        content: ContentService,
        navigation: ViewCoordinator,
    ) -> None:
        self.bus = event_bus
        self.session = session
        self.content = content
        self.navigation = navigation

        self.search_term = ""
        self.expanded_post_id: Optional[str] = None

        self._started = False

    async def initialize(self) -> None:
        """Bind to store events. Call once during startup."""
        if self._started:
            return

        for topic in (
            events.TOPIC_SESSION_CHANGED,
            events.TOPIC_CONTENT_LOADED,
            events.TOPIC_POSTS_CHANGED,
            events.TOPIC_COMMENTS_CHANGED,
            events.TOPIC_SEARCH_CHANGED,
            events.TOPIC_VIEW_CHANGED,
        ):
            await self.bus.subscribe(topic, self._handle_store_change)

        self._started = True

    # --- Snapshot reads ---

    def snapshot(self) -> AppSnapshot:
        return AppSnapshot(
            session=self.session.state,
            screen=self.navigation.screen,
            search_term=self.search_term,
            posts=self.content.search(self.search_term),
            posts_loading=self.content.is_loading,
            expanded_post_id=self.expanded_post_id,
        )

    def comments_for(self, post_id: str) -> CommentThread:
        return self.content.comments_for(post_id)

    async def subscribe(self, handler: EventHandler) -> None:
        await self.bus.subscribe(events.TOPIC_APP_SNAPSHOT, handler)

    async def unsubscribe(self, handler: EventHandler) -> None:
        await self.bus.unsubscribe(events.TOPIC_APP_SNAPSHOT, handler)

    # --- Session intents ---

    async def login(self, identifier: str, secret: str) -> User:
        await self.raise_user_action("login", {"identifier": identifier})
        user = await self.session.login(identifier, secret)
        await self.navigation.sync(self.session.state)
        return user

    async def register(
        self,
        username: str,
        email: str = "",
        password: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> User:
        await self.raise_user_action("register", {"username": username})
        user = await self.session.register(username, email=email, password=password, avatar=avatar)
        await self.navigation.sync(self.session.state)
        return user

    async def logout(self) -> None:
        await self.raise_user_action("logout")
        await self.session.logout()
        self.expanded_post_id = None
        await self.navigation.sync(self.session.state)

    # --- Content intents ---

    async def search(self, term: str) -> Tuple[Post, ...]:
        self.search_term = term or ""
        await self.bus.publish(
            events.TOPIC_SEARCH_CHANGED,
            events.create_search_changed_event(self.search_term),
        )
        return self.content.search(self.search_term)

    async def create_post(self, title: str, content: str, tags: Optional[Iterable[str]] = None) -> str:
        """Publish a post as the signed-in user and return to the feed."""
        author = self._require_user("create_post")
        await self.raise_user_action("create_post", {"title": title})
        post_id = await self.content.create_post(title, content, tags, author)
        await self.navigation.navigate(NavigationTarget.PUBLISHED, self.session.state)
        return post_id

    async def create_comment(self, post_id: str, content: str) -> str:
        author = self._require_user("create_comment")
        await self.raise_user_action("create_comment", {"post_id": post_id})
        return await self.content.create_comment(post_id, content, author)

    async def toggle_like(self, post_id: str) -> Optional[Post]:
        await self.raise_user_action("toggle_like", {"post_id": post_id})
        return await self.content.toggle_like(post_id)

    async def toggle_comment_like(self, comment_id: str) -> Optional[Comment]:
        await self.raise_user_action("toggle_comment_like", {"comment_id": comment_id})
        return await self.content.toggle_comment_like(comment_id)

    async def toggle_comments(self, post_id: str) -> Optional[str]:
        """Expand the comment thread of a post, or collapse it if already open."""
        self.expanded_post_id = None if self.expanded_post_id == post_id else post_id
        await self._publish_snapshot()
        return self.expanded_post_id

    # --- Navigation ---

    async def navigate(self, target: NavigationTarget | str) -> Screen:
        await self.raise_user_action("navigate", {"target": NavigationTarget(target).value})
        return await self.navigation.navigate(target, self.session.state)

    async def raise_user_action(self, action: str, payload: Optional[EventPayload] = None) -> None:
        """Record user intent on the bus."""
        await self.bus.publish(events.TOPIC_USER_ACTION, events.create_user_action_event(action, payload))

    # --- Internals ---

    def _require_user(self, action: str) -> User:
        user = self.session.user
        if user is None:
            logger.info(f"Rejected '{action}': no signed-in user")
            raise AuthenticationError("authentication required")
        return user

    async def _publish_snapshot(self) -> None:
        await self.bus.publish(events.TOPIC_APP_SNAPSHOT, events.create_app_snapshot_event(self.snapshot()))

    async def _handle_store_change(self, payload: EventPayload) -> None:
        await self._publish_snapshot()
