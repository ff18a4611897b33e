"""Room summary model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class RoomSummary(BaseModel):
    """Denormalized room view derived from cached events.

    Unlike the cached payload models this one is mutable: callers may hand
    in a partially populated summary and have the projection update it.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    room_id: str
    display_name: str | None = None

    @field_validator("room_id")
    @classmethod
    def _require_room_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("room_id must be non-empty")
        return value
