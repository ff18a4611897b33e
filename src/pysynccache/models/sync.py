"""Sync response models, partitioned by room membership."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pysynccache.models._base import SyncBaseModel
from pysynccache.models.event import Event


class RoomEventList(SyncBaseModel):
    """A ``{"events": [...]}`` container (state, account data, invite state...)."""

    events: list[Event] = Field(default_factory=list)


class RoomTimeline(RoomEventList):
    """Timeline slice of a room."""

    limited: bool | None = None
    prev_batch: str | None = None


class JoinedRoomSync(SyncBaseModel):
    """Updates for a room the user has joined."""

    state: RoomEventList | None = None
    timeline: RoomTimeline | None = None
    ephemeral: RoomEventList | None = None
    account_data: RoomEventList | None = None
    unread_notifications: dict[str, Any] | None = None
    summary: dict[str, Any] | None = None


class InvitedRoomSync(SyncBaseModel):
    """A pending invite, with the stripped state the inviter shared."""

    invite_state: RoomEventList | None = None


class LeftRoomSync(SyncBaseModel):
    """Updates for a room the user has left or been removed from."""

    state: RoomEventList | None = None
    timeline: RoomTimeline | None = None
    account_data: RoomEventList | None = None


class RoomsSync(SyncBaseModel):
    """Rooms of a sync response, keyed by room id per membership."""

    join: dict[str, JoinedRoomSync] = Field(default_factory=dict)
    invite: dict[str, InvitedRoomSync] = Field(default_factory=dict)
    leave: dict[str, LeftRoomSync] = Field(default_factory=dict)


class SyncResponse(SyncBaseModel):
    """Body of a ``/sync`` response."""

    next_batch: str
    rooms: RoomsSync = Field(default_factory=RoomsSync)
    account_data: RoomEventList | None = None
    presence: RoomEventList | None = None
    to_device: RoomEventList | None = None
    device_lists: dict[str, Any] | None = None
    device_one_time_keys_count: dict[str, int] | None = None


class CachedSyncResponse(SyncBaseModel):
    """The cached snapshot: a sync response and the token it was requested with.

    ``sync_token`` is ``None`` for an initial sync.
    """

    sync_token: str | None = None
    sync_response: SyncResponse
