"""Ordered scans over the per-room partitions of a sync response.

A room can show up under ``join``, ``invite`` and ``leave`` of the same
response, each with its own event lists. When an event id (or a state
type) appears in several lists, whichever list is scanned first wins, so
the scan orders are spelled out here as data.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from enum import StrEnum

from pysynccache.models.event import Event
from pysynccache.models.sync import RoomEventList, SyncResponse


class RoomPartition(StrEnum):
    INVITE_STATE = "invite.invite_state"
    JOIN_STATE = "join.state"
    JOIN_TIMELINE = "join.timeline"
    JOIN_ACCOUNT_DATA = "join.account_data"
    LEAVE_STATE = "leave.state"
    LEAVE_TIMELINE = "leave.timeline"
    LEAVE_ACCOUNT_DATA = "leave.account_data"


#: Scan order used to look up a single event by id.
EVENT_LOOKUP_ORDER: tuple[RoomPartition, ...] = (
    RoomPartition.INVITE_STATE,
    RoomPartition.JOIN_STATE,
    RoomPartition.JOIN_TIMELINE,
    RoomPartition.JOIN_ACCOUNT_DATA,
    RoomPartition.LEAVE_STATE,
    RoomPartition.LEAVE_TIMELINE,
    RoomPartition.LEAVE_ACCOUNT_DATA,
)

#: Scan order used to derive a room summary. Account data carries no room
#: naming information and is skipped.
SUMMARY_SCAN_ORDER: tuple[RoomPartition, ...] = (
    RoomPartition.INVITE_STATE,
    RoomPartition.JOIN_STATE,
    RoomPartition.JOIN_TIMELINE,
    RoomPartition.LEAVE_STATE,
    RoomPartition.LEAVE_TIMELINE,
)


def _partition_events(response: SyncResponse, room_id: str, partition: RoomPartition) -> list[Event]:
    rooms = response.rooms
    container: RoomEventList | None = None

    if partition is RoomPartition.INVITE_STATE:
        invited = rooms.invite.get(room_id)
        container = invited.invite_state if invited is not None else None
    elif partition in (RoomPartition.JOIN_STATE, RoomPartition.JOIN_TIMELINE, RoomPartition.JOIN_ACCOUNT_DATA):
        joined = rooms.join.get(room_id)
        if joined is not None:
            container = {
                RoomPartition.JOIN_STATE: joined.state,
                RoomPartition.JOIN_TIMELINE: joined.timeline,
                RoomPartition.JOIN_ACCOUNT_DATA: joined.account_data,
            }[partition]
    else:
        left = rooms.leave.get(room_id)
        if left is not None:
            container = {
                RoomPartition.LEAVE_STATE: left.state,
                RoomPartition.LEAVE_TIMELINE: left.timeline,
                RoomPartition.LEAVE_ACCOUNT_DATA: left.account_data,
            }[partition]

    if container is None:
        return []
    return container.events


def iter_room_events(
    response: SyncResponse,
    room_id: str,
    order: Iterable[RoomPartition],
) -> Iterator[Event]:
    """Yield the events of *room_id* partition by partition, in *order*."""
    for partition in order:
        yield from _partition_events(response, room_id, partition)


def find_event(response: SyncResponse, event_id: str, room_id: str) -> Event | None:
    """Return the first event with *event_id* in :data:`EVENT_LOOKUP_ORDER`.

    The result is a copy with ``room_id`` set; the snapshot is untouched.
    """
    for event in iter_room_events(response, room_id, EVENT_LOOKUP_ORDER):
        if event.event_id == event_id:
            return event.with_room_id(room_id)
    return None
