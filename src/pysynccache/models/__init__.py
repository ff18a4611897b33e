"""Data models for cached sync responses."""

from pysynccache.models._base import SyncBaseModel
from pysynccache.models.event import Event
from pysynccache.models.metadata import StoreMetadata
from pysynccache.models.summary import RoomSummary
from pysynccache.models.sync import (
    CachedSyncResponse,
    InvitedRoomSync,
    JoinedRoomSync,
    LeftRoomSync,
    RoomEventList,
    RoomsSync,
    RoomTimeline,
    SyncResponse,
)

__all__ = [
    "CachedSyncResponse",
    "Event",
    "InvitedRoomSync",
    "JoinedRoomSync",
    "LeftRoomSync",
    "RoomEventList",
    "RoomSummary",
    "RoomTimeline",
    "RoomsSync",
    "StoreMetadata",
    "SyncBaseModel",
    "SyncResponse",
]
