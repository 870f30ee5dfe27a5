"""Entity models for BlogSpace.

All models are frozen: a like toggle or a session change produces a new
instance, so anything handed to the presentation layer is a snapshot.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-01-15T10:30:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class IdGenerator:
    """Time-based identifiers that never repeat within the process.

    Ids are millisecond timestamps; when two are requested in the same
    millisecond the later one is bumped past the previous value.
    """

    def __init__(self) -> None:
        self._last = 0

    def next_id(self) -> str:
        candidate = time.time_ns() // 1_000_000
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return str(candidate)


_default_ids = IdGenerator()


def generate_id() -> str:
    return _default_ids.next_id()


def _check_like_count(entity):
    # A like by the current user is itself counted in `likes`
    if entity.is_liked and entity.likes < 1:
        raise ValueError("a liked entity must have at least one like")
    return entity


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    username: str
    email: str = ""
    avatar: Optional[str] = None


class Post(BaseModel):
    """A published post. `likes` and `is_liked` always move together."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    content: str
    excerpt: str
    author: User
    created_at: str
    updated_at: str
    tags: Tuple[str, ...] = ()
    likes: int = Field(default=0, ge=0)
    is_liked: bool = False

    @model_validator(mode="after")
    def check_like_count(self) -> "Post":
        return _check_like_count(self)

    def with_like_toggled(self) -> "Post":
        liked = not self.is_liked
        likes = self.likes + 1 if liked else self.likes - 1
        return self.model_copy(update={"is_liked": liked, "likes": likes})

    def matches(self, needle: str) -> bool:
        """Case-insensitive containment in title, content or any tag.

        `needle` must already be lower-cased.
        """
        return (
            needle in self.title.lower()
            or needle in self.content.lower()
            or any(needle in tag.lower() for tag in self.tags)
        )


class Comment(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    author: User
    post_id: str
    created_at: str
    likes: int = Field(default=0, ge=0)
    is_liked: bool = False

    @model_validator(mode="after")
    def check_like_count(self) -> "Comment":
        return _check_like_count(self)

    def with_like_toggled(self) -> "Comment":
        liked = not self.is_liked
        likes = self.likes + 1 if liked else self.likes - 1
        return self.model_copy(update={"is_liked": liked, "likes": likes})


class SessionState(BaseModel):
    """Exactly one of loading / authenticated-with-user / anonymous."""
    model_config = ConfigDict(frozen=True)

    user: Optional[User] = None
    is_authenticated: bool = False
    is_loading: bool = False

    @model_validator(mode="after")
    def check_exclusive(self) -> "SessionState":
        if self.is_loading and (self.is_authenticated or self.user is not None):
            raise ValueError("a loading session cannot carry a user")
        if self.is_authenticated != (self.user is not None):
            raise ValueError("is_authenticated must match presence of user")
        return self

    @classmethod
    def loading(cls) -> "SessionState":
        return cls(is_loading=True)

    @classmethod
    def anonymous(cls) -> "SessionState":
        return cls()

    @classmethod
    def signed_in(cls, user: User) -> "SessionState":
        return cls(user=user, is_authenticated=True)
