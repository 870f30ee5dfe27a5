"""Terminal presentation for BlogSpace snapshots."""

from .feed import render_post, render_snapshot
from .formatting import format_post_date, format_relative, should_show_read_more

__all__ = [
    "render_post",
    "render_snapshot",
    "format_post_date",
    "format_relative",
    "should_show_read_more",
]
