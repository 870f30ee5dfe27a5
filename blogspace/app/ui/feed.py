"""Terminal rendering of an AppSnapshot using rich.

Pure presentation: reads snapshots and comment threads, never mutates state.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from blogspace.app.state.app_state import AppSnapshot
from blogspace.app.ui.formatting import format_post_date, format_relative, should_show_read_more
from blogspace.shared.domain.models import Comment, Post
from blogspace.shared.domain.navigation.coordinator import Screen

CommentLookup = Callable[[str], Iterable[Comment]]


def render_post(post: Post, comments: Optional[Iterable[Comment]] = None) -> Panel:
    """One feed card; comments are shown only when given."""
    heart = "♥" if post.is_liked else "♡"
    header = Text.assemble(
        (post.author.username, "bold"),
        "  ·  ",
        (format_post_date(post.created_at), "dim"),
    )
    body = [header, Text(""), Text(post.excerpt)]
    if should_show_read_more(post):
        body.append(Text("Read more", style="blue underline"))
    if post.tags:
        body.append(Text("  ".join(f"#{tag}" for tag in post.tags), style="cyan"))
    body.append(Text(f"{heart} {post.likes}", style="red" if post.is_liked else ""))

    if comments is not None:
        comments = list(comments)
        table = Table(title=f"Comments ({len(comments)})", show_header=False, expand=True)
        table.add_column("author", style="bold", no_wrap=True)
        table.add_column("content")
        table.add_column("meta", style="dim", justify="right")
        for comment in comments:
            liked = "♥" if comment.is_liked else "♡"
            table.add_row(
                comment.author.username,
                comment.content,
                f"{format_relative(comment.created_at)}  {liked} {comment.likes}",
            )
        if not comments:
            table.add_row("", "No comments yet. Be the first to share your thoughts!", "")
        body.append(table)

    return Panel(Group(*body), title=post.title, title_align="left")


def render_snapshot(console: Console, snapshot: AppSnapshot, comments_for: CommentLookup) -> None:
    """Draw the active screen."""
    if snapshot.screen == Screen.LOADING:
        console.print("Loading...", style="dim")
        return
    if snapshot.screen == Screen.AUTH:
        console.print(Panel("Sign in or create an account to continue.", title="BlogSpace"))
        return
    if snapshot.screen == Screen.CREATE:
        console.print(Panel("Create New Post", subtitle="Share your thoughts with the community"))
        return

    user = snapshot.session.user
    console.rule(f"Welcome back, {user.username if user else 'guest'}!")
    if snapshot.posts_loading:
        console.print("Loading posts...", style="dim")
        return
    if not snapshot.posts:
        if snapshot.search_term:
            console.print(f'No posts match your search for "{snapshot.search_term}"')
        else:
            console.print("Be the first to share something amazing!")
        return

    for post in snapshot.posts:
        thread = comments_for(post.id) if snapshot.expanded_post_id == post.id else None
        console.print(render_post(post, thread))
