"""Tests for lifecycle hooks on the store."""

import pytest

from postbox import InvalidInput, NotFound, Unauthorized
from postbox.events import EventRegistry


def test_handlers_fire_once_per_mutation(store, payload, updated_payload) -> None:
    seen: list[tuple[str, int, str]] = []

    @store.on.create
    def on_create(message) -> None:
        seen.append(("create", message.id, message.title))

    @store.on.update
    def on_update(message) -> None:
        seen.append(("update", message.id, message.title))

    @store.on.delete
    def on_delete(message) -> None:
        seen.append(("delete", message.id, message.title))

    created = store.create(payload, "alice")
    store.update(created.id, updated_payload, "alice")
    store.delete(created.id, "alice")

    assert seen == [
        ("create", created.id, "Test Title"),
        ("update", created.id, "Updated Title"),
        ("delete", created.id, "Updated Title"),
    ]


def test_failed_operations_emit_nothing(store, payload) -> None:
    seen: list = []
    store.on.create(seen.append)
    store.on.update(seen.append)
    store.on.delete(seen.append)

    with pytest.raises(InvalidInput):
        store.create(payload.model_copy(update={"title": ""}), "alice")
    created = store.create(payload, "alice")
    seen.clear()

    with pytest.raises(Unauthorized):
        store.update(created.id, payload, "bob")
    with pytest.raises(Unauthorized):
        store.delete(created.id, "bob")
    with pytest.raises(NotFound):
        store.delete(999, "alice")

    assert seen == []


def test_decorator_returns_handler(store) -> None:
    def handler(message) -> None:
        pass

    assert store.on.create(handler) is handler


def test_registering_twice_is_a_noop() -> None:
    registry = EventRegistry()
    calls: list = []
    registry.register("create", calls.append)
    registry.register("create", calls.append)

    registry.emit("create", "msg")  # type: ignore[arg-type]

    assert calls == ["msg"]


def test_unknown_event_type_rejected() -> None:
    with pytest.raises(ValueError):
        EventRegistry().register("archive", print)


def test_stores_do_not_share_handlers(store, open_store, payload) -> None:
    seen: list = []
    store.on.create(seen.append)

    open_store.create(payload)

    assert seen == []
