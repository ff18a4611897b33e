"""Store configuration for pysynccache."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from pysynccache._constants import (
    DEFAULT_CACHE_SUBDIR,
    FOLDER_NAME,
    METADATA_FILE_NAME,
    PAYLOAD_FILE_NAME,
)


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_path(value: str | None) -> Path | None:
    if value is None or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def default_cache_root() -> Path:
    """Per-user cache directory used when no storage root is configured.

    Honours ``XDG_CACHE_HOME`` and falls back to ``~/.cache``.
    """
    xdg = os.environ.get("XDG_CACHE_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".cache"
    return base / DEFAULT_CACHE_SUBDIR


@dataclasses.dataclass(frozen=True)
class SyncCacheConfig:
    """Store configuration.

    Parameters
    ----------
    shared_storage_root : Path or None
        Storage area shared between the main application and its
        restricted auxiliary contexts (e.g. a notification handler).
        Takes precedence over every other root when set.
    cache_root : Path or None
        Fallback root used when no shared storage area is configured.
        Defaults to :func:`default_cache_root`.
    folder_name : str
        Directory under the root that holds one subdirectory per identity.
    payload_file_name : str
        File name of the serialized sync response.
    metadata_file_name : str
        File name of the serialized store metadata.
    fsync : bool
        Flush file contents to stable storage before the atomic rename.
        Slower, but survives power loss rather than only process crashes.
    """

    shared_storage_root: Path | None = None
    cache_root: Path | None = None
    folder_name: str = FOLDER_NAME
    payload_file_name: str = PAYLOAD_FILE_NAME
    metadata_file_name: str = METADATA_FILE_NAME
    fsync: bool = False

    def storage_root(self) -> Path:
        """Return the root directory the store namespace lives under."""
        if self.shared_storage_root is not None:
            return Path(self.shared_storage_root)
        if self.cache_root is not None:
            return Path(self.cache_root)
        return default_cache_root()

    @classmethod
    def from_env(cls, **overrides: Any) -> SyncCacheConfig:
        """Create configuration from environment variables.

        Reads ``SYNCCACHE_SHARED_STORAGE_ROOT``, ``SYNCCACHE_CACHE_ROOT``
        and ``SYNCCACHE_FSYNC``. Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        SyncCacheConfig
            Populated configuration.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}

        shared_root = _env_path(env.get("SYNCCACHE_SHARED_STORAGE_ROOT"))
        if shared_root is not None:
            config_kwargs["shared_storage_root"] = shared_root

        cache_root = _env_path(env.get("SYNCCACHE_CACHE_ROOT"))
        if cache_root is not None:
            config_kwargs["cache_root"] = cache_root

        if "fsync" not in overrides:
            config_kwargs["fsync"] = _env_bool(env.get("SYNCCACHE_FSYNC"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
