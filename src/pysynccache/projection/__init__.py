"""Read-only projections over a cached sync response.

Nothing in this package performs I/O or mutates the snapshot it is given.
"""

from pysynccache.projection.partitions import (
    EVENT_LOOKUP_ORDER,
    SUMMARY_SCAN_ORDER,
    RoomPartition,
    find_event,
    iter_room_events,
)
from pysynccache.projection.policy import apply_display_name_event, project_room_summary

__all__ = [
    "EVENT_LOOKUP_ORDER",
    "SUMMARY_SCAN_ORDER",
    "RoomPartition",
    "apply_display_name_event",
    "find_event",
    "iter_room_events",
    "project_room_summary",
]
