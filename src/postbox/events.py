"""
postbox.events  ──  Lifecycle hooks fired after a message is created,
updated or deleted.
"""

from __future__ import annotations

from collections import defaultdict
from typing import TYPE_CHECKING, Callable, Dict, List

if TYPE_CHECKING:
    from .core.message import Message

EVENT_TYPES = ("create", "update", "delete")

Handler = Callable[["Message"], None]


class EventRegistry:
    """Handlers per event type, called in registration order."""

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def register(self, event_type: str, handler: Handler) -> None:
        if event_type not in EVENT_TYPES:
            raise ValueError(f"unknown event type {event_type!r}")
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)

    def emit(self, event_type: str, message: Message) -> None:
        """Emit event to all matching handlers"""
        for handler in list(self._handlers[event_type]):
            handler(message)


class OnDecorator:
    """Namespace for event decorators, bound to one registry."""

    def __init__(self, registry: EventRegistry):
        self._registry = registry

    def _decorator(self, event_type: str) -> Callable[[Handler], Handler]:
        def decorator(func: Handler) -> Handler:
            self._registry.register(event_type, func)
            return func

        return decorator

    def create(self, func: Handler) -> Handler:
        """Decorator for handling message creation events"""
        return self._decorator("create")(func)

    def update(self, func: Handler) -> Handler:
        """Decorator for handling message update events"""
        return self._decorator("update")(func)

    def delete(self, func: Handler) -> Handler:
        return self._decorator("delete")(func)
