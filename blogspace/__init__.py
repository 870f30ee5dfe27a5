"""BlogSpace package."""

from .shared.core.event_bus import EventBus
from .app.state import AppState, Store

__all__ = ["AppState", "EventBus", "Store"]
