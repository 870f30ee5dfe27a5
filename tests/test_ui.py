"""Tests for terminal presentation helpers."""

from datetime import datetime, timezone

import pytest
from rich.console import Console

from blogspace.app.ui.feed import render_snapshot
from blogspace.app.ui.formatting import format_post_date, format_relative, should_show_read_more
from blogspace.shared.infrastructure.persistence import seed_data

NOW = datetime(2024, 1, 15, 14, 0, tzinfo=timezone.utc)


def test_format_post_date():
    assert format_post_date("2024-01-15T10:30:00Z") == "January 15, 2024"
    assert format_post_date("2024-03-02T00:00:00.000Z") == "March 2, 2024"


@pytest.mark.parametrize("stamp, expected", [
    ("2024-01-15T13:30:00Z", "Just now"),
    ("2024-01-15T12:00:00Z", "2h ago"),
    ("2024-01-14T15:00:00Z", "23h ago"),
    ("2024-01-10T09:00:00Z", "Jan 10"),
])
def test_format_relative(stamp, expected):
    assert format_relative(stamp, now=NOW) == expected


def test_read_more_threshold():
    long_post, _ = seed_data.build_seed_posts()
    assert should_show_read_more(long_post)
    assert not should_show_read_more(long_post.model_copy(update={"content": "short"}))


@pytest.mark.asyncio
async def test_render_home_feed(store):
    await store.app.login("demo", "password")
    await store.app.toggle_comments("1")
    console = Console(record=True, width=120)

    render_snapshot(console, store.app.snapshot(), store.app.comments_for)
    text = console.export_text()

    assert "Welcome back, demo!" in text
    assert "Getting Started with React Development" in text
    assert "Comments (2)" in text
    assert "#Future Trends" in text


@pytest.mark.asyncio
async def test_render_auth_and_empty_search(store):
    console = Console(record=True, width=120)
    render_snapshot(console, store.app.snapshot(), store.app.comments_for)
    assert "Sign in" in console.export_text()

    await store.app.login("demo", "password")
    await store.app.search("zzz")
    console = Console(record=True, width=120)
    render_snapshot(console, store.app.snapshot(), store.app.comments_for)
    assert 'No posts match your search for "zzz"' in console.export_text()
