"""Store metadata codec (binary property list).

Layout::

    {"version": 1, "account_data": <UTF-8 JSON bytes>}

Account data is an arbitrary JSON mapping that may hold ``null`` values,
which property lists cannot represent, so it is embedded as a JSON blob.
The key is omitted when there is no account data.
"""

from __future__ import annotations

import json
import plistlib
from typing import Any

from pydantic import ValidationError

from pysynccache._constants import FILE_ENCODING, METADATA_FORMAT_VERSION
from pysynccache.exceptions import SyncCacheDecodeError, SyncCacheEncodeError
from pysynccache.models.metadata import StoreMetadata

_KIND = "metadata"


def encode_metadata(metadata: StoreMetadata) -> bytes:
    """Serialize *metadata* to a binary property list."""
    container: dict[str, Any] = {"version": METADATA_FORMAT_VERSION}
    if metadata.account_data is not None:
        try:
            blob = json.dumps(metadata.account_data, separators=(",", ":"), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise SyncCacheEncodeError(f"Account data is not JSON serializable: {exc}", kind=_KIND) from exc
        container["account_data"] = blob.encode(FILE_ENCODING)
    return plistlib.dumps(container, fmt=plistlib.FMT_BINARY)


def decode_metadata(data: bytes) -> StoreMetadata:
    """Parse a binary property list produced by :func:`encode_metadata`."""
    try:
        container = plistlib.loads(data, fmt=plistlib.FMT_BINARY)
    except (plistlib.InvalidFileException, ValueError, TypeError, OverflowError) as exc:
        raise SyncCacheDecodeError(f"Metadata is not a property list: {exc}", kind=_KIND) from exc

    if not isinstance(container, dict):
        raise SyncCacheDecodeError("Metadata root is not a dictionary", kind=_KIND)

    version = container.get("version")
    if version != METADATA_FORMAT_VERSION:
        raise SyncCacheDecodeError(f"Unsupported metadata version: {version!r}", kind=_KIND)

    account_data: Any = None
    blob = container.get("account_data")
    if blob is not None:
        if not isinstance(blob, bytes):
            raise SyncCacheDecodeError("Metadata account_data is not a data blob", kind=_KIND)
        try:
            account_data = json.loads(blob.decode(FILE_ENCODING))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise SyncCacheDecodeError(f"Metadata account_data is not JSON: {exc}", kind=_KIND) from exc

    try:
        return StoreMetadata(account_data=account_data)
    except ValidationError as exc:
        raise SyncCacheDecodeError("Metadata account_data is not a mapping", kind=_KIND) from exc
