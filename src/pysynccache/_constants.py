"""Internal constants shared across the library."""

FOLDER_NAME = "SyncResponse"
PAYLOAD_FILE_NAME = "syncResponse"
METADATA_FILE_NAME = "syncResponseMetadata"
FILE_ENCODING = "utf-8"

#: Version stamped into the metadata container.
METADATA_FORMAT_VERSION = 1

#: Subdirectory used under the per-user cache directory when no explicit
#: storage root is configured.
DEFAULT_CACHE_SUBDIR = "pysynccache"

# ------------------------------------------------------------------
# Event types the room summary projection understands
# ------------------------------------------------------------------

EVENT_TYPE_ROOM_NAME = "m.room.name"
EVENT_TYPE_ROOM_CANONICAL_ALIAS = "m.room.canonical_alias"
EVENT_TYPE_ROOM_ALIASES = "m.room.aliases"
