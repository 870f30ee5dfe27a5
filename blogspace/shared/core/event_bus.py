"""Notification hub between the BlogSpace stores and their observers.

Stores publish a payload per state change (session.changed, content.posts,
view.changed, ...); AppState and renderers subscribe. Delivery is
fire-and-forget: publish() schedules one task per handler and returns, so
a slow renderer never holds up the intent that caused the change.
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, TypeAlias

EventPayload: TypeAlias = Dict[str, Any]
EventHandler: TypeAlias = Callable[[EventPayload], Awaitable[None]]

logger = logging.getLogger(__name__)


class EventBus:
    """Topic-keyed pub/sub on the running event loop.

    Subscriber lists are plain lists; the single loop is the only writer.
    Handlers for one publish are scheduled in registration order.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._in_flight: set[asyncio.Task] = set()

    async def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Add handler to topic; a handler already present is not added twice."""
        handlers = self._subscribers[topic]
        if handler not in handlers:
            handlers.append(handler)

    async def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        handlers = self._subscribers.get(topic)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, []))

    async def publish(self, topic: str, payload: EventPayload) -> None:
        """Schedule every handler of topic with payload."""
        handlers = tuple(self._subscribers.get(topic, ()))
        if not handlers:
            logger.debug(f"'{topic}' published with no subscribers")
            return

        logger.debug(f"'{topic}' -> {len(handlers)} handler(s)")
        for handler in handlers:
            task = asyncio.create_task(self._deliver(topic, handler, payload))
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)

    async def wait_until_idle(self, timeout: float = 5.0) -> bool:
        """Block until no delivery is in flight, follow-up publishes included.

        Returns False when deliveries are still running after timeout seconds.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while self._in_flight:
            remaining = deadline - loop.time()
            if remaining <= 0:
                logger.warning(f"Bus still busy after {timeout}s ({len(self._in_flight)} deliveries)")
                return False
            await asyncio.wait(tuple(self._in_flight), timeout=remaining)
            # done-callbacks run on the next loop iteration
            await asyncio.sleep(0)
        return True

    async def _deliver(self, topic: str, handler: EventHandler, payload: EventPayload) -> None:
        try:
            await handler(payload)
        except Exception:
            name = getattr(handler, "__name__", repr(handler))
            logger.exception(f"Handler '{name}' failed on '{topic}'")

    def clear(self) -> None:
        """Drop every subscription; in-flight deliveries still complete."""
        self._subscribers.clear()
