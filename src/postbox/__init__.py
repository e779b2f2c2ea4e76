"""
Public surface for Postbox.
Importing this module does **not** touch a database or start a server;
call ``postbox.bootstrap.build_store(settings)`` during application start-up.
"""

from .core.errors import InvalidInput, MessageError, NotFound, SizeExceeded, Unauthorized
from .core.message import Message, MessagePayload
from .persistence.allocator import DurableAllocator, MemoryAllocator
from .store import MessageStore, StorePolicy

__all__ = [
    "DurableAllocator",
    "InvalidInput",
    "MemoryAllocator",
    "Message",
    "MessageError",
    "MessagePayload",
    "MessageStore",
    "NotFound",
    "SizeExceeded",
    "StorePolicy",
    "Unauthorized",
]
