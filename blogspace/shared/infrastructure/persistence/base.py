"""Persistence port for the content store.

The store keeps its own ordered collections and writes every change through
this interface. Swapping the in-memory adapter for a real backend must not
change the store's public contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from blogspace.shared.domain.models import Comment, Post, User


class ContentRepository(ABC):
    """Storage backend for posts and comments."""

    @abstractmethod
    async def load(self) -> Tuple[List[Post], List[Comment]]:
        """Fetch the initial dataset: posts most-recent-first, comments oldest-first."""

    @abstractmethod
    async def add_post(self, post: Post) -> None: ...

    @abstractmethod
    async def add_comment(self, comment: Comment) -> None: ...

    @abstractmethod
    async def update_post(self, post: Post) -> None: ...

    @abstractmethod
    async def update_comment(self, comment: Comment) -> None: ...


class UserDirectory(ABC):
    """Lookup of known accounts for sign-in."""

    @abstractmethod
    def authenticate(self, identifier: str, secret: str) -> Optional[User]:
        """Return the matching user, or None on mismatch."""

    @abstractmethod
    def add(self, user: User, secret: str) -> None: ...
