"""
Typed failures raised by the message store.

Every error carries a short machine ``code`` and a human ``message``; the
HTTP host maps each class to a status code (see ``postbox.api``).
"""

from __future__ import annotations


class MessageError(Exception):
    """Base class for all store errors."""

    code = "message_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFound(MessageError):
    """No message with the requested id."""

    code = "not_found"

    def __init__(self, msg_id: int) -> None:
        self.msg_id = msg_id
        super().__init__(f"Message with id={msg_id} not found.")


class InvalidInput(MessageError):
    """One or more required text fields are empty."""

    code = "invalid_input"

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Fields must not be empty: {', '.join(fields)}.")


class SizeExceeded(MessageError):
    """Combined length of the text fields is over the configured ceiling."""

    code = "size_exceeded"

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"Message size {size} exceeds the limit of {limit}.")


class Unauthorized(MessageError):
    """Caller identity does not own the message."""

    code = "unauthorized"
