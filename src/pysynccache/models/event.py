"""Room event model."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pysynccache.models._base import SyncBaseModel


class Event(SyncBaseModel):
    """A single client event as embedded in a sync response.

    Events nested under a room in the sync response usually omit
    ``room_id``; lookups stamp it onto a copy before returning.
    """

    event_id: str | None = None
    event_type: str | None = Field(default=None, alias="type")
    room_id: str | None = None
    sender: str | None = None
    state_key: str | None = None
    content: dict[str, Any] = Field(default_factory=dict)
    origin_server_ts: int | None = None
    unsigned: dict[str, Any] | None = None

    def content_str(self, key: str) -> str | None:
        """Return ``content[key]`` if it is a string."""
        value = self.content.get(key)
        return value if isinstance(value, str) else None

    def content_first_str(self, key: str) -> str | None:
        """Return the first entry of the list ``content[key]`` if it is a string."""
        values = self.content.get(key)
        if not isinstance(values, list) or not values:
            return None
        first = values[0]
        return first if isinstance(first, str) else None

    def with_room_id(self, room_id: str) -> Event:
        """Return a copy of this event carrying *room_id*."""
        return self.model_copy(update={"room_id": room_id})
