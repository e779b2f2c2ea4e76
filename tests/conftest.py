import datetime as dt

import pytest

from postbox import MemoryAllocator, MessagePayload, MessageStore, StorePolicy

EPOCH = dt.datetime(2024, 1, 1, tzinfo=dt.timezone.utc)


class FakeClock:
    """Advances one second per call unless told otherwise."""

    def __init__(
        self,
        start: dt.datetime = EPOCH,
        step: dt.timedelta = dt.timedelta(seconds=1),
    ):
        self.now = start
        self.step = step

    def __call__(self) -> dt.datetime:
        current = self.now
        self.now = self.now + self.step
        return current


@pytest.fixture
def epoch() -> dt.datetime:
    return EPOCH


@pytest.fixture
def make_clock():
    """Factory for clocks with a chosen start and step."""
    return FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> MessageStore:
    return MessageStore(MemoryAllocator(), clock=clock)


@pytest.fixture
def open_store(clock) -> MessageStore:
    return MessageStore(
        MemoryAllocator(), policy=StorePolicy(enforce_ownership=False), clock=clock
    )


@pytest.fixture
def payload() -> MessagePayload:
    return MessagePayload(
        title="Test Title", body="Test Body", attachment_url="https://test-url.com"
    )


@pytest.fixture
def updated_payload() -> MessagePayload:
    return MessagePayload(
        title="Updated Title",
        body="Updated Body",
        attachment_url="https://updated-url.com",
    )
