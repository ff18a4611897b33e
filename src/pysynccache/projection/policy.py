"""Display-name precedence for room summaries.

Applied to events in scan order:

* ``m.room.name`` always overwrites, so the last name event wins.
* ``m.room.canonical_alias`` fills the name only while it is unset, from
  ``alias`` or else the first of ``alt_aliases``.
* ``m.room.aliases`` fills the name only while it is unset, from the first
  of ``aliases``.

The outcome is the last name event if there is one, else the first alias
event that yields a value, else whatever the caller supplied.
"""

from __future__ import annotations

from collections.abc import Iterable

from pysynccache._constants import (
    EVENT_TYPE_ROOM_ALIASES,
    EVENT_TYPE_ROOM_CANONICAL_ALIAS,
    EVENT_TYPE_ROOM_NAME,
)
from pysynccache.models.event import Event
from pysynccache.models.summary import RoomSummary
from pysynccache.models.sync import SyncResponse
from pysynccache.projection.partitions import SUMMARY_SCAN_ORDER, iter_room_events


def apply_display_name_event(summary: RoomSummary, event: Event) -> None:
    """Update ``summary.display_name`` from a single event."""
    if event.event_type == EVENT_TYPE_ROOM_NAME:
        summary.display_name = event.content_str("name")
    elif event.event_type == EVENT_TYPE_ROOM_CANONICAL_ALIAS:
        if summary.display_name is None:
            alias = event.content_str("alias")
            if alias is None:
                alias = event.content_first_str("alt_aliases")
            summary.display_name = alias
    elif event.event_type == EVENT_TYPE_ROOM_ALIASES:
        if summary.display_name is None:
            summary.display_name = event.content_first_str("aliases")


def apply_display_name_events(summary: RoomSummary, events: Iterable[Event]) -> RoomSummary:
    """Apply *events* in order to *summary* and return it."""
    for event in events:
        apply_display_name_event(summary, event)
    return summary


def project_room_summary(
    response: SyncResponse,
    room_id: str,
    summary: RoomSummary | None = None,
) -> RoomSummary:
    """Project the cached events of *room_id* onto *summary*.

    A fresh :class:`RoomSummary` is created when none is supplied. The
    supplied summary is updated in place and returned.
    """
    if summary is None:
        summary = RoomSummary(room_id=room_id)
    return apply_display_name_events(summary, iter_room_events(response, room_id, SUMMARY_SCAN_ORDER))
