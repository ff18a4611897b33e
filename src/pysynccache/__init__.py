"""pysynccache - Crash-tolerant file cache of the latest Matrix sync response."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pysynccache")
except PackageNotFoundError:
    __version__ = "0+local"
from pysynccache._paths import StorePaths
from pysynccache.config import SyncCacheConfig
from pysynccache.exceptions import (
    SyncCacheCodecError,
    SyncCacheConfigError,
    SyncCacheDecodeError,
    SyncCacheEncodeError,
    SyncCacheError,
    SyncCacheFatalError,
    SyncCacheNotOpenedError,
)
from pysynccache.models import (
    CachedSyncResponse,
    Event,
    InvitedRoomSync,
    JoinedRoomSync,
    LeftRoomSync,
    RoomEventList,
    RoomsSync,
    RoomSummary,
    RoomTimeline,
    StoreMetadata,
    SyncResponse,
)
from pysynccache.store import SyncResponseStore

__all__ = [
    "__version__",
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
    "StorePaths",
    "SyncCacheCodecError",
    "SyncCacheConfig",
    "SyncCacheConfigError",
    "SyncCacheDecodeError",
    "SyncCacheEncodeError",
    "SyncCacheError",
    "SyncCacheFatalError",
    "SyncCacheNotOpenedError",
    "SyncResponse",
    "SyncResponseStore",
]
