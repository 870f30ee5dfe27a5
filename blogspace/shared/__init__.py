"""
BlogSpace Shared Kernel
=======================

Architecture:
- core: EventBus, configuration, error types
- infrastructure: persistence adapters (in-memory)
- domain: session, content and navigation stores
"""

__version__ = "0.3.0"

__all__ = []
