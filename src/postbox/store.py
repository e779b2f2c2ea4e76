"""
In-memory message store.

* One ``dict`` of id ➜ frozen ``Message``; the store is its only owner.
* Every operation runs under one lock, so lookup, ownership check,
  validation and write happen as a single step.
* Nothing is written until every check has passed.
"""

from __future__ import annotations

import datetime as dt
import logging
import threading
from typing import Callable, Dict

from pydantic import BaseModel

from .core.errors import InvalidInput, NotFound, SizeExceeded, Unauthorized
from .core.message import Message, MessagePayload
from .events import EventRegistry, OnDecorator
from .persistence.allocator import IdAllocator, MemoryAllocator
from .persistence.models import now_utc

logger = logging.getLogger(__name__)

DEFAULT_MAX_TOTAL_LENGTH = 2048


class StorePolicy(BaseModel):
    max_total_length: int = DEFAULT_MAX_TOTAL_LENGTH
    enforce_ownership: bool = True

    model_config = {"frozen": True}


class MessageStore:
    """Create / update / delete / get over ``Message`` records."""

    def __init__(
        self,
        allocator: IdAllocator | None = None,
        *,
        policy: StorePolicy | None = None,
        clock: Callable[[], dt.datetime] = now_utc,
    ):
        self.allocator = allocator if allocator is not None else MemoryAllocator()
        self.policy = policy if policy is not None else StorePolicy()
        self.clock = clock
        self.events = EventRegistry()
        self.on = OnDecorator(self.events)
        self._messages: Dict[int, Message] = {}
        self._lock = threading.RLock()

    # ---- writes ---------------------------------------------------------
    def create(self, payload: MessagePayload, caller: str | None = None) -> Message:
        with self._lock:
            self._validate(payload)
            message = Message.new(
                self.allocator.next(),
                payload,
                owner=caller,
                created_at=self.clock(),
            )
            self._messages[message.id] = message
            logger.debug("created message %d owner=%s", message.id, caller)
        self.events.emit("create", message)
        return message

    def update(
        self, msg_id: int, payload: MessagePayload, caller: str | None = None
    ) -> Message:
        with self._lock:
            current = self._lookup(msg_id)
            self._authorize(current, caller, "update")
            self._validate(payload)
            message = current.revise(payload, self.clock())
            self._messages[msg_id] = message
            logger.debug("updated message %d", msg_id)
        self.events.emit("update", message)
        return message

    def delete(self, msg_id: int, caller: str | None = None) -> Message:
        with self._lock:
            current = self._lookup(msg_id)
            self._authorize(current, caller, "delete")
            message = self._messages.pop(msg_id)
            logger.debug("deleted message %d", msg_id)
        self.events.emit("delete", message)
        return message

    # ---- reads ----------------------------------------------------------
    def get(self, msg_id: int) -> Message:
        with self._lock:
            return self._lookup(msg_id)

    def __contains__(self, msg_id: object) -> bool:
        with self._lock:
            return msg_id in self._messages

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    # ---- checks ---------------------------------------------------------
    def _lookup(self, msg_id: int) -> Message:
        try:
            return self._messages[msg_id]
        except KeyError:
            logger.info("message %d not found", msg_id)
            raise NotFound(msg_id) from None

    def _authorize(self, message: Message, caller: str | None, action: str) -> None:
        if not self.policy.enforce_ownership:
            return
        if caller is None or caller != message.owner:
            logger.info(
                "refused %s of message %d for caller %s", action, message.id, caller
            )
            raise Unauthorized(
                f"Caller is not allowed to {action} message with id={message.id}."
            )

    def _validate(self, payload: MessagePayload) -> None:
        empty = payload.empty_fields()
        if empty:
            logger.info("rejected payload, empty fields: %s", empty)
            raise InvalidInput(empty)
        size = payload.total_length()
        if size > self.policy.max_total_length:
            logger.info("rejected payload of size %d", size)
            raise SizeExceeded(size, self.policy.max_total_length)
