"""
Event Emitter Module

In-process publish/subscribe used by services to announce entity
lifecycle events such as ``Product.saved`` or ``Employee.deleted``.
"""

import inspect
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Optional, Union

logger = logging.getLogger(__name__)

EventHandler = Callable[[dict[str, Any]], Union[None, Awaitable[None]]]


class EventEmitter:
    """
    Event Emitter

    Handlers may be plain functions or coroutine functions. They are
    invoked in registration order; a failing handler is logged and the
    remaining handlers still run.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def on(self, event: str, handler: EventHandler) -> None:
        """Register a handler for an event name."""
        self._handlers[event].append(handler)
        logger.debug("Handler registered for: %s", event)

    def off(self, event: str, handler: EventHandler) -> None:
        """Unregister a handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(event)
        if not handlers:
            return
        self._handlers[event] = [h for h in handlers if h != handler]

    def listener_count(self, event: str) -> int:
        return len(self._handlers.get(event, []))

    async def emit(self, event: str, payload: Optional[dict[str, Any]] = None) -> int:
        """
        Emit an event to all registered handlers

        Args:
            event: Event name
            payload: Event data passed to every handler

        Returns:
            int: Number of handlers that completed without error
        """
        payload = payload or {}
        handlers = list(self._handlers.get(event, []))
        logger.debug("Emitting %s to %d handlers", event, len(handlers))

        invoked = 0
        for handler in handlers:
            try:
                result = handler(payload)
                if inspect.isawaitable(result):
                    await result
                invoked += 1
            except Exception:
                logger.exception("Event handler error for %s", event)
        return invoked


# Process-wide emitter instance
_event_emitter: Optional[EventEmitter] = None


def get_event_emitter() -> EventEmitter:
    """
    Get the process-wide Event Emitter (Singleton)

    Returns:
        EventEmitter: Shared emitter instance
    """
    global _event_emitter
    if _event_emitter is None:
        _event_emitter = EventEmitter()
    return _event_emitter
