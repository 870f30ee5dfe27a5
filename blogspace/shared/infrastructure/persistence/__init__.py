"""Persistence adapters (in-memory)."""

from blogspace.shared.infrastructure.persistence.base import ContentRepository, UserDirectory
from blogspace.shared.infrastructure.persistence.memory_service import (
    InMemoryContentRepository,
    InMemoryUserDirectory,
)

__all__ = [
    "ContentRepository",
    "UserDirectory",
    "InMemoryContentRepository",
    "InMemoryUserDirectory",
]
