"""
Shared Infrastructure Module
============================

Technical adapters behind the store ports.
"""

# Persistence
from blogspace.shared.infrastructure.persistence import (
    ContentRepository,
    InMemoryContentRepository,
    InMemoryUserDirectory,
    UserDirectory,
)

__all__ = [
    "ContentRepository",
    "UserDirectory",
    "InMemoryContentRepository",
    "InMemoryUserDirectory",
]
