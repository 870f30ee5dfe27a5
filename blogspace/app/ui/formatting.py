"""Display helpers shared by the terminal renderer."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from blogspace.shared.domain.models import Post

READ_MORE_THRESHOLD = 300


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; naive values are taken as UTC."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_post_date(value: str) -> str:
    """e.g. 'January 15, 2024'"""
    dt = parse_timestamp(value)
    return f"{dt.strftime('%B')} {dt.day}, {dt.year}"


def format_relative(value: str, now: Optional[datetime] = None) -> str:
    """Comment age: 'Just now' under an hour, 'Nh ago' under a day, else 'Jan 15'."""
    dt = parse_timestamp(value)
    now = now or datetime.now(timezone.utc)
    hours = int((now - dt).total_seconds() // 3600)

    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours}h ago"
    return f"{dt.strftime('%b')} {dt.day}"


def should_show_read_more(post: Post) -> bool:
    return len(post.content) > READ_MORE_THRESHOLD
