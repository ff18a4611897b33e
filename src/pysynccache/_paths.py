"""On-disk path resolution for a store namespace."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import quote

from pysynccache.config import SyncCacheConfig

# Characters kept verbatim in the identity path segment. Matrix user ids
# look like ``@alice:example.org``; anything else (notably path separators)
# is percent-encoded.
_SAFE_IDENTITY_CHARS = "@:+=!$"


@dataclass(frozen=True)
class StorePaths:
    """Immutable location of one identity's cache files."""

    identity: str
    directory: Path
    payload_path: Path
    metadata_path: Path


def identity_segment(identity: str) -> str | None:
    """Return the directory name for *identity*, or ``None`` if unusable."""
    if not identity.strip():
        return None
    # Padding is part of the identity; only a blank identity is rejected.
    segment = quote(identity, safe=_SAFE_IDENTITY_CHARS)
    if segment in {".", ".."}:
        return None
    return segment


def resolve_store_paths(identity: str, config: SyncCacheConfig) -> StorePaths:
    """Compute payload and metadata paths for *identity*.

    Raises :class:`ValueError` when *identity* cannot be used as a namespace.
    """
    segment = identity_segment(identity)
    if segment is None:
        raise ValueError(f"identity {identity!r} cannot be used as a store namespace")
    directory = config.storage_root() / config.folder_name / segment
    return StorePaths(
        identity=identity,
        directory=directory,
        payload_path=directory / config.payload_file_name,
        metadata_path=directory / config.metadata_file_name,
    )
