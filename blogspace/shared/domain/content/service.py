"""Content Store for BlogSpace.

Owns the post and comment collections and is the only place entities are
mutated. Posts are kept most-recent-first, comments oldest-first. Every
write goes through the ContentRepository port first; the collections only
change once the port accepts it, and the change is then announced on the bus.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from blogspace.shared.core import events
from blogspace.shared.core.configuration import ContentConfig
from blogspace.shared.core.errors import FieldValidationError
from blogspace.shared.core.event_bus import EventBus
from blogspace.shared.domain.models import (
    Comment,
    IdGenerator,
    Post,
    User,
    generate_id,
    utc_now_iso,
)
from blogspace.shared.infrastructure.persistence.base import ContentRepository

logger = logging.getLogger(__name__)


class CommentThread:
    """Comments for one post, filtered lazily on every iteration."""

    def __init__(self, comments: Sequence[Comment], post_id: str):
        self._comments = comments
        self.post_id = post_id

    def __iter__(self) -> Iterator[Comment]:
        return (c for c in self._comments if c.post_id == self.post_id)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __repr__(self) -> str:
        return f"CommentThread(post_id={self.post_id!r}, count={len(self)})"


def make_excerpt(content: str, length: int = 150, suffix: str = "...") -> str:
    """First `length` characters of content plus the suffix, always."""
    return content[:length] + suffix


def normalize_tags(tags: Optional[Iterable[str]], limit: int = 5) -> Tuple[str, ...]:
    """Strip, drop blanks, dedupe case-sensitively (first wins), cap at limit."""
    result: List[str] = []
    for raw in tags or ():
        tag = raw.strip()
        if not tag or tag in result:
            continue
        if len(result) >= limit:
            break
        result.append(tag)
    return tuple(result)


def _replace_by_id(items: List, updated) -> None:
    # Positions may have shifted while the repository write was awaited
    for index, item in enumerate(items):
        if item.id == updated.id:
            items[index] = updated
            return


class ContentService:
    """Posts, comments, likes and search."""

    def __init__(
        self,
        event_bus: EventBus,
        repository: ContentRepository,
        config: Optional[ContentConfig] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        self.event_bus = event_bus
        self.repository = repository
        self.config = config or ContentConfig()
        self._next_id = id_generator.next_id if id_generator else generate_id

        self._posts: List[Post] = []
        self._comments: List[Comment] = []
        self._is_loading = True
        self._load_started = False

    # --- Snapshot reads ---

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def posts(self) -> Tuple[Post, ...]:
        return tuple(self._posts)

    @property
    def comments(self) -> Tuple[Comment, ...]:
        return tuple(self._comments)

    def get_post(self, post_id: str) -> Optional[Post]:
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    def comments_for(self, post_id: str) -> CommentThread:
        return CommentThread(self._comments, post_id)

    def comment_count(self, post_id: str) -> int:
        return len(self.comments_for(post_id))

    def search(self, term: str) -> Tuple[Post, ...]:
        """Posts whose title, content or tags contain term, ignoring case.

        A blank term returns every post. Order is preserved and the
        collection is never modified.
        """
        needle = (term or "").strip().lower()
        if not needle:
            return tuple(self._posts)
        return tuple(post for post in self._posts if post.matches(needle))

    # --- Lifecycle ---

    async def load_initial(self) -> None:
        """Seed the collections from the repository. Runs once."""
        if self._load_started:
            logger.warning("Initial content load already performed; ignoring repeat call")
            return
        self._load_started = True
        self._is_loading = True

        posts, comments = await self.repository.load()
        self._posts[:] = posts
        self._comments[:] = comments
        self._is_loading = False

        logger.info(f"Content loaded: {len(self._posts)} posts, {len(self._comments)} comments")
        await self.event_bus.publish(
            events.TOPIC_CONTENT_LOADED,
            events.create_content_loaded_event(self._posts, self._comments),
        )

    # --- Mutations ---

    def validate_post(self, title: str, content: str) -> Dict[str, str]:
        """Return field problems for a prospective post (empty when valid)."""
        problems: Dict[str, str] = {}
        title = (title or "").strip()
        content = (content or "").strip()

        if not title:
            problems["title"] = "Title is required"
        elif len(title) < self.config.min_title_length:
            problems["title"] = f"Title must be at least {self.config.min_title_length} characters long"

        if not content:
            problems["content"] = "Content is required"
        elif len(content) < self.config.min_content_length:
            problems["content"] = f"Content must be at least {self.config.min_content_length} characters long"

        return problems

    async def create_post(
        self,
        title: str,
        content: str,
        tags: Optional[Iterable[str]],
        author: User,
    ) -> str:
        """Prepend a new post and return its id.

        Raises:
            FieldValidationError: title or content rejected; nothing is stored
        """
        problems = self.validate_post(title, content)
        if problems:
            raise FieldValidationError(problems)

        title = title.strip()
        content = content.strip()
        now = utc_now_iso()
        post = Post(
            id=self._next_id(),
            title=title,
            content=content,
            excerpt=make_excerpt(content, self.config.excerpt_length, self.config.excerpt_suffix),
            author=author,
            created_at=now,
            updated_at=now,
            tags=normalize_tags(tags, self.config.max_tags),
        )

        await self.repository.add_post(post)
        self._posts.insert(0, post)
        logger.info(f"Post {post.id} created by '{author.username}'")
        await self.event_bus.publish(
            events.TOPIC_POSTS_CHANGED,
            events.create_posts_changed_event("created", post, self._posts),
        )
        return post.id

    async def create_comment(self, post_id: str, content: str, author: User) -> str:
        """Append a comment and return its id. post_id is not checked."""
        content = (content or "").strip()
        if not content:
            raise FieldValidationError.single("content", "Comment cannot be empty")

        comment = Comment(
            id=self._next_id(),
            content=content,
            author=author,
            post_id=post_id,
            created_at=utc_now_iso(),
        )

        await self.repository.add_comment(comment)
        self._comments.append(comment)
        logger.info(f"Comment {comment.id} added to post {post_id} by '{author.username}'")
        await self.event_bus.publish(
            events.TOPIC_COMMENTS_CHANGED,
            events.create_comments_changed_event("created", comment),
        )
        return comment.id

    async def toggle_like(self, post_id: str) -> Optional[Post]:
        """Flip the like on a post. Unknown ids are ignored."""
        post = self.get_post(post_id)
        if post is None:
            logger.debug(f"toggle_like: no post {post_id}")
            return None

        updated = post.with_like_toggled()
        await self.repository.update_post(updated)
        _replace_by_id(self._posts, updated)
        await self.event_bus.publish(
            events.TOPIC_POSTS_CHANGED,
            events.create_posts_changed_event("liked", updated, self._posts),
        )
        return updated

    async def toggle_comment_like(self, comment_id: str) -> Optional[Comment]:
        """Flip the like on a comment. Unknown ids are ignored."""
        comment = next((c for c in self._comments if c.id == comment_id), None)
        if comment is None:
            logger.debug(f"toggle_comment_like: no comment {comment_id}")
            return None

        updated = comment.with_like_toggled()
        await self.repository.update_comment(updated)
        _replace_by_id(self._comments, updated)
        await self.event_bus.publish(
            events.TOPIC_COMMENTS_CHANGED,
            events.create_comments_changed_event("liked", updated),
        )
        return updated
