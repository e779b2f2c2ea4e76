"""
Single-table schema: one row per named counter cell.
"""

import datetime as dt

from sqlalchemy import BigInteger, Column, DateTime, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def now_utc() -> dt.datetime:
    return dt.datetime.now(tz=dt.timezone.utc)


class CounterRow(Base):
    """Durable integer cell backing an identifier allocator."""

    __tablename__ = "counters"

    name = Column(String, primary_key=True)
    value = Column(BigInteger, nullable=False)
    updated_ts = Column(DateTime(timezone=True), default=now_utc, nullable=False)
