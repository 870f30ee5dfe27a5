"""In-memory persistence adapters for BlogSpace.

There is no backend: the repository serves the mock dataset after a
simulated network delay and keeps writes in process memory only.
"""

from __future__ import annotations

import asyncio
import hmac
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from blogspace.shared.domain.models import Comment, Post, User
from blogspace.shared.infrastructure.persistence.base import ContentRepository, UserDirectory
from blogspace.shared.infrastructure.persistence import seed_data

logger = logging.getLogger(__name__)


class InMemoryContentRepository(ContentRepository):
    """Holds posts and comments in dicts keyed by id."""

    def __init__(
        self,
        delay: float = 0.5,
        posts: Optional[Iterable[Post]] = None,
        comments: Optional[Iterable[Comment]] = None,
    ):
        """Initialize the repository.

        Args:
            delay: Seconds to wait in load() to mimic a network fetch
            posts: Initial posts, most recent first (defaults to the mock dataset)
            comments: Initial comments, oldest first (defaults to the mock dataset)
        """
        self.delay = delay
        initial_posts = list(posts) if posts is not None else seed_data.build_seed_posts()
        initial_comments = list(comments) if comments is not None else seed_data.build_seed_comments()
        self._post_order: List[str] = [p.id for p in initial_posts]
        self._posts: Dict[str, Post] = {p.id: p for p in initial_posts}
        self._comment_order: List[str] = [c.id for c in initial_comments]
        self._comments: Dict[str, Comment] = {c.id: c for c in initial_comments}

    async def load(self) -> Tuple[List[Post], List[Comment]]:
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        posts = [self._posts[pid] for pid in self._post_order]
        comments = [self._comments[cid] for cid in self._comment_order]
        logger.debug(f"Loaded {len(posts)} posts and {len(comments)} comments from memory")
        return posts, comments

    async def add_post(self, post: Post) -> None:
        self._posts[post.id] = post
        self._post_order.insert(0, post.id)

    async def add_comment(self, comment: Comment) -> None:
        self._comments[comment.id] = comment
        self._comment_order.append(comment.id)

    async def update_post(self, post: Post) -> None:
        if post.id in self._posts:
            self._posts[post.id] = post

    async def update_comment(self, comment: Comment) -> None:
        if comment.id in self._comments:
            self._comments[comment.id] = comment


class InMemoryUserDirectory(UserDirectory):
    """Fixed credential table. Not real authentication."""

    def __init__(self, credentials: Optional[Iterable[Tuple[User, str]]] = None):
        self._entries: List[Tuple[User, str]] = list(
            credentials if credentials is not None else seed_data.build_seed_credentials()
        )

    def authenticate(self, identifier: str, secret: str) -> Optional[User]:
        needle = identifier.strip().lower()
        for user, stored in self._entries:
            if needle not in (user.email.lower(), user.username.lower()):
                continue
            if hmac.compare_digest(stored.encode("utf-8"), secret.encode("utf-8")):
                return user
        return None

    def add(self, user: User, secret: str) -> None:
        self._entries.append((user, secret))

    def __len__(self) -> int:
        return len(self._entries)
