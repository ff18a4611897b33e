"""Snapshot payload codec (UTF-8 JSON text)."""

from __future__ import annotations

from pydantic import ValidationError

from pysynccache.exceptions import SyncCacheDecodeError, SyncCacheEncodeError
from pysynccache.models.sync import CachedSyncResponse

_KIND = "payload"


def encode_snapshot(snapshot: CachedSyncResponse) -> str:
    """Serialize *snapshot* to JSON text."""
    try:
        return snapshot.model_dump_json(by_alias=True)
    except (TypeError, ValueError) as exc:
        raise SyncCacheEncodeError(f"Cannot serialize sync response: {exc}", kind=_KIND) from exc


def decode_snapshot(text: str | bytes) -> CachedSyncResponse:
    """Parse JSON text straight into a :class:`CachedSyncResponse`.

    Raises :class:`SyncCacheDecodeError` for malformed JSON as well as for
    JSON that does not match the model.
    """
    try:
        return CachedSyncResponse.model_validate_json(text)
    except ValidationError as exc:
        raise SyncCacheDecodeError(
            f"Invalid sync response payload ({exc.error_count()} errors): {exc.errors()[0]['msg']}",
            kind=_KIND,
        ) from exc
