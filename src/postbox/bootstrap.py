"""
Single entry-point that builds a MessageStore from Settings.
Call once, e.g. before handing the store to ``postbox.api.create_app``.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from .config import Settings
from .persistence.allocator import DurableAllocator, IdAllocator, MemoryAllocator
from .persistence.models import Base
from .store import MessageStore

logger = logging.getLogger(__name__)


def init_postbox(engine: Engine, start: int = 0) -> DurableAllocator:
    """Create the ``counters`` table, seed the id cell and return its allocator."""
    Base.metadata.create_all(engine)
    return DurableAllocator(engine, start=start)


def build_store(settings: Settings) -> MessageStore:
    allocator: IdAllocator
    if settings.database_url:
        engine = create_engine(settings.database_url, pool_pre_ping=True, future=True)
        allocator = init_postbox(engine, start=settings.id_start)
        logger.info("message ids backed by %s", engine.url.render_as_string())
    else:
        allocator = MemoryAllocator(start=settings.id_start)
        logger.info("message ids held in memory")
    return MessageStore(allocator, policy=settings.policy())
