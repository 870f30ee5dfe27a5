"""
Shared Core Module
==================

Event system, configuration, and error types.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Errors
from .errors import AuthenticationError, BlogError, FieldValidationError

# Configuration
from .configuration import (
    ConfigManager,
    ContentConfig,
    LoggingConfig,
    SessionConfig,
    SystemConfig,
    ValidationLevel,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Errors
    "BlogError",
    "FieldValidationError",
    "AuthenticationError",
    # Configuration
    "ConfigManager",
    "SystemConfig",
    "ContentConfig",
    "SessionConfig",
    "LoggingConfig",
    "ValidationLevel",
]
