"""
postbox.api  ──  FastAPI host exposing the four store operations.

Usage
-----
    from postbox import MessageStore
    from postbox.api import create_app

    app = create_app(MessageStore())
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from .core.errors import (
    InvalidInput,
    MessageError,
    NotFound,
    SizeExceeded,
    Unauthorized,
)
from .core.message import Message, MessagePayload
from .store import MessageStore

ERROR_STATUS_MAP: dict[type[MessageError], int] = {
    NotFound: 404,
    InvalidInput: 422,
    SizeExceeded: 413,
    Unauthorized: 403,
}


def error_response(error: MessageError) -> JSONResponse:
    """Map a store error to a JSON response with the matching status."""
    detail: dict[str, Any] = {"code": error.code, "message": error.message}
    if isinstance(error, InvalidInput):
        detail["fields"] = error.fields
    if isinstance(error, SizeExceeded):
        detail["size"] = error.size
        detail["limit"] = error.limit
    status_code = ERROR_STATUS_MAP.get(type(error), 400)
    return JSONResponse(status_code=status_code, content={"detail": detail})


def get_store(request: Request) -> MessageStore:
    return request.app.state.store


def current_identity(request: Request) -> str | None:
    """Caller identity as sent by the client, ``None`` when absent."""
    return request.headers.get(request.app.state.identity_header) or None


def require_identity(
    request: Request, caller: str | None = Depends(current_identity)
) -> str | None:
    """Refuse anonymous writes when the store records owners."""
    if caller is None and get_store(request).policy.enforce_ownership:
        raise HTTPException(
            status_code=401,
            detail={
                "code": "missing_identity",
                "message": f"Header {request.app.state.identity_header} is required.",
            },
        )
    return caller


def create_app(
    store: MessageStore,
    *,
    identity_header: str = "X-Caller-Identity",
    **fastapi_kwargs: Any,
) -> FastAPI:
    app = FastAPI(**fastapi_kwargs)
    app.state.store = store
    app.state.identity_header = identity_header

    @app.exception_handler(MessageError)
    async def handle_message_error(request: Request, exc: MessageError):
        return error_response(exc)

    @app.get("/")
    def health() -> dict[str, str]:
        return {"status": "running"}

    @app.post("/messages", status_code=201)
    def add_message(
        payload: MessagePayload,
        store: MessageStore = Depends(get_store),
        caller: str | None = Depends(require_identity),
    ) -> Message:
        return store.create(payload, caller)

    @app.put("/messages/{msg_id}")
    def update_message(
        msg_id: int,
        payload: MessagePayload,
        store: MessageStore = Depends(get_store),
        caller: str | None = Depends(current_identity),
    ) -> Message:
        return store.update(msg_id, payload, caller)

    @app.delete("/messages/{msg_id}")
    def delete_message(
        msg_id: int,
        store: MessageStore = Depends(get_store),
        caller: str | None = Depends(current_identity),
    ) -> Message:
        return store.delete(msg_id, caller)

    @app.get("/messages/{msg_id}")
    def get_message(msg_id: int, store: MessageStore = Depends(get_store)) -> Message:
        return store.get(msg_id)

    return app
