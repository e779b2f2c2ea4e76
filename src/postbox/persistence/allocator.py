"""
Identifier allocators.

Both variants return the value *before* incrementing and keep the incremented
value, so the first id handed out is always ``start``.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from .models import CounterRow, now_utc

logger = logging.getLogger(__name__)

# dialect name ➜ INSERT construct supporting ON CONFLICT DO NOTHING
_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class IdAllocator(Protocol):
    def next(self) -> int: ...

    def peek(self) -> int: ...


class MemoryAllocator:
    """Process-lifetime counter."""

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            issued = self._value
            self._value += 1
            return issued

    def peek(self) -> int:
        with self._lock:
            return self._value


class DurableAllocator:
    """Counter kept in the ``counters`` table so it survives restarts.

    Any number of allocators, in one process or many, may share a cell: each
    ``next()`` is a single ``UPDATE ... RETURNING`` statement.
    """

    def __init__(self, engine: Engine, name: str = "message_id", start: int = 0):
        self.engine = engine
        self.name = name
        self.start = start
        self._seed()

    def _new_session(self) -> Session:
        return Session(bind=self.engine, future=True)

    def _seed(self) -> None:
        """Create the cell at ``start`` unless it already exists."""
        try:
            insert = _INSERTS[self.engine.dialect.name]
        except KeyError:
            raise ValueError(
                f"unsupported database dialect {self.engine.dialect.name!r}"
            ) from None
        stmt = (
            insert(CounterRow)
            .values(name=self.name, value=self.start, updated_ts=now_utc())
            .on_conflict_do_nothing(index_elements=[CounterRow.name])
        )
        with self._new_session() as s, s.begin():
            s.execute(stmt)

    def next(self) -> int:
        stmt = (
            update(CounterRow)
            .where(CounterRow.name == self.name)
            .values(value=CounterRow.value + 1, updated_ts=now_utc())
            .returning(CounterRow.value)
        )
        with self._new_session() as s, s.begin():
            value = s.execute(stmt).scalar_one()
        return value - 1

    def peek(self) -> int:
        with self._new_session() as s:
            q = select(CounterRow.value).where(CounterRow.name == self.name)
            return s.execute(q).scalar_one()
