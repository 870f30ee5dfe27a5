"""Canonical event definitions for BlogSpace."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional

from .event_bus import EventPayload

if TYPE_CHECKING:
    from blogspace.shared.domain.models import Comment, Post, SessionState

# Store topics
TOPIC_SESSION_CHANGED = "session.changed"
TOPIC_CONTENT_LOADED = "content.loaded"
TOPIC_POSTS_CHANGED = "content.posts"
TOPIC_COMMENTS_CHANGED = "content.comments"
TOPIC_SEARCH_CHANGED = "content.search"

# Navigation
TOPIC_VIEW_CHANGED = "view.changed"

# Presentation-facing
TOPIC_APP_SNAPSHOT = "app.snapshot"
TOPIC_USER_ACTION = "user.action"


def create_session_changed_event(session: SessionState) -> EventPayload:
    """Create a session changed event carrying the new session snapshot."""
    return {"session": session}


def create_content_loaded_event(posts: Iterable[Post], comments: Iterable[Comment]) -> EventPayload:
    """Create a content loaded event (initial dataset is in place)."""
    posts = tuple(posts)
    comments = tuple(comments)
    return {
        "posts": posts,
        "comments": comments,
        "post_count": len(posts),
        "comment_count": len(comments),
    }


def create_posts_changed_event(
    change: str,
    post: Post,
    posts: Iterable[Post],
) -> EventPayload:
    """Create a posts changed event.

    Args:
        change: What happened ("created" or "liked")
        post: The post that changed
        posts: Full post collection after the change
    """
    return {
        "change": change,
        "post": post,
        "posts": tuple(posts),
    }


def create_comments_changed_event(change: str, comment: Comment) -> EventPayload:
    """Create a comments changed event."""
    return {
        "change": change,
        "comment": comment,
        "post_id": comment.post_id,
    }


def create_search_changed_event(term: str) -> EventPayload:
    return {"term": term}


def create_view_changed_event(screen: str, previous: Optional[str] = None) -> EventPayload:
    """Create a view changed event."""
    return {
        "screen": screen,
        "previous": previous,
    }


def create_user_action_event(action: str, payload: Dict[str, Any] | None = None) -> EventPayload:
    """Create a user action event."""
    result: EventPayload = {"action": action}
    if payload:
        result.update(payload)
    return result


def create_app_snapshot_event(snapshot: Any) -> EventPayload:
    return {"snapshot": snapshot}
