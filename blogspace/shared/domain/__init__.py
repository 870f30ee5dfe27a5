"""
Shared Domain Module
====================

Entity models plus the session, content and navigation stores.
"""

from blogspace.shared.domain.models import Comment, Post, SessionState, User

# Session
from blogspace.shared.domain.session.service import SessionService

# Content
from blogspace.shared.domain.content.service import CommentThread, ContentService

# Navigation
from blogspace.shared.domain.navigation.coordinator import NavigationTarget, Screen, ViewCoordinator

__all__ = [
    # Models
    "User",
    "Post",
    "Comment",
    "SessionState",
    # Session
    "SessionService",
    # Content
    "ContentService",
    "CommentThread",
    # Navigation
    "ViewCoordinator",
    "Screen",
    "NavigationTarget",
]
