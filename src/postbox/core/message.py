"""
Message / MessagePayload – *pure Pydantic* (no SQLAlchemy or FastAPI imports).

* ``Message`` is frozen: the store hands out instances without fear of
  callers mutating them behind its back.
* An update never edits in place; ``revise`` returns a copy with the new text.
"""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel

TEXT_FIELDS = ("title", "body", "attachment_url")


class MessagePayload(BaseModel):
    """Caller-supplied text of a message, used for both create and update."""

    title: str
    body: str
    attachment_url: str

    def empty_fields(self) -> list[str]:
        return [name for name in TEXT_FIELDS if getattr(self, name) == ""]

    def total_length(self) -> int:
        return sum(len(getattr(self, name)) for name in TEXT_FIELDS)


class Message(BaseModel):
    id: int
    owner: str | None = None
    title: str
    body: str
    attachment_url: str
    created_at: dt.datetime
    updated_at: dt.datetime | None = None

    model_config = {"frozen": True}

    @classmethod
    def new(
        cls,
        msg_id: int,
        payload: MessagePayload,
        *,
        owner: str | None,
        created_at: dt.datetime,
    ) -> "Message":
        return cls(
            id=msg_id,
            owner=owner,
            created_at=created_at,
            **payload.model_dump(),
        )

    def revise(self, payload: MessagePayload, updated_at: dt.datetime) -> "Message":
        """Copy with all three text fields replaced and ``updated_at`` bumped.

        ``updated_at`` never moves backwards, even if the clock does.
        """
        if self.updated_at is not None and updated_at < self.updated_at:
            updated_at = self.updated_at
        return self.model_copy(
            update={**payload.model_dump(), "updated_at": updated_at}
        )
