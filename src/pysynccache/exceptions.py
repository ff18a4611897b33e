"""Custom exception hierarchy for pysynccache."""

from __future__ import annotations


class SyncCacheError(Exception):
    """Base exception for all pysynccache errors."""


class SyncCacheConfigError(SyncCacheError):
    """Invalid configuration or store lifecycle misuse (e.g. opening twice)."""


class SyncCacheNotOpenedError(SyncCacheError):
    """An operation was attempted before :meth:`SyncResponseStore.open`."""


class SyncCacheCodecError(SyncCacheError):
    """Serialization failure in one of the file codecs."""

    def __init__(self, message: str, *, kind: str = "") -> None:
        self.kind = kind
        super().__init__(message)


class SyncCacheDecodeError(SyncCacheCodecError):
    """Stored content could not be decoded into a typed model.

    Decoding fails closed: a payload that does not fully validate is
    rejected instead of producing a partially populated model.
    """


class SyncCacheEncodeError(SyncCacheCodecError):
    """A model could not be serialized for storage."""


class SyncCacheFatalError(BaseException):
    """Unrecoverable misuse: the store was opened without a usable identity.

    Derives from :class:`BaseException` so that generic ``except Exception``
    handlers do not let the process continue reading or writing the wrong
    namespace.
    """
