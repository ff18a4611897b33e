"""File codecs for the snapshot payload and the store metadata."""

from pysynccache._codec.metadata import decode_metadata, encode_metadata
from pysynccache._codec.payload import decode_snapshot, encode_snapshot

__all__ = [
    "decode_metadata",
    "decode_snapshot",
    "encode_metadata",
    "encode_snapshot",
]
