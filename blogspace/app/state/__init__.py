"""Client-side state management for BlogSpace.

Architecture:
- AppState: intent dispatch and immutable snapshots for the presentation layer
- Store: composition root that owns the stores for one application run
"""

from .app_state import AppSnapshot, AppState
from .store import Store

__all__ = ["AppSnapshot", "AppState", "Store"]
