"""File-backed store for the latest sync response.

The store keeps exactly one cached sync response and one metadata file per
identity. It is written by the main application and read by restricted
contexts (notification handlers) that cannot resync or open the full
database.

Error policy: I/O, encode and decode failures never reach the caller.
Reads return ``None``; writes resolve their completion future to
``False``. Failures are logged.
"""

from __future__ import annotations

import logging
import os
import tempfile
import threading
import time
from concurrent.futures import Future
from functools import partial
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from pysynccache._codec import decode_metadata, decode_snapshot, encode_metadata, encode_snapshot
from pysynccache._constants import FILE_ENCODING
from pysynccache._paths import StorePaths, resolve_store_paths
from pysynccache._queue import SerialQueue
from pysynccache._redact import redact_for_log
from pysynccache.config import SyncCacheConfig
from pysynccache.exceptions import (
    SyncCacheConfigError,
    SyncCacheDecodeError,
    SyncCacheEncodeError,
    SyncCacheFatalError,
    SyncCacheNotOpenedError,
)
from pysynccache.models.event import Event
from pysynccache.models.metadata import StoreMetadata
from pysynccache.models.summary import RoomSummary
from pysynccache.models.sync import CachedSyncResponse
from pysynccache.projection import find_event, project_room_summary

_logger = logging.getLogger(__name__)


def _completed(result: bool) -> Future[bool]:
    future: Future[bool] = Future()
    future.set_result(result)
    return future


# ------------------------------------------------------------------
# File primitives (run on the store's worker thread)
# ------------------------------------------------------------------


def _ensure_directory(directory: Path) -> bool:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        _logger.warning("Cannot create cache directory %s", directory, exc_info=True)
        return False
    return True


def _temp_pattern(path: Path) -> str:
    return f".{path.name}.*.tmp"


def _sweep_temp_files(paths: StorePaths) -> bool:
    """Remove temp files a crashed write left next to the cache files."""
    clean = True
    for target in (paths.payload_path, paths.metadata_path):
        try:
            leftovers = list(target.parent.glob(_temp_pattern(target)))
        except OSError:
            _logger.warning("Cannot list cache directory %s", target.parent, exc_info=True)
            clean = False
            continue
        for leftover in leftovers:
            _logger.debug("Removing stale temp file %s", leftover)
            clean = _remove(leftover) and clean
    return clean


def _prepare_directory(paths: StorePaths) -> bool:
    return _ensure_directory(paths.directory) and _sweep_temp_files(paths)


def _read_bytes(path: Path) -> bytes | None:
    try:
        return path.read_bytes()
    except FileNotFoundError:
        _logger.debug("No cache file at %s", path)
        return None
    except OSError:
        _logger.warning("Cannot read cache file %s", path, exc_info=True)
        return None


def _atomic_write(path: Path, data: bytes, *, fsync: bool) -> bool:
    """Write *data* to a sibling temp file, then rename it over *path*.

    Readers see either the previous file or the complete new one.
    """
    if not _ensure_directory(path.parent):
        return False

    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(data)
            handle.flush()
            if fsync:
                os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except OSError:
        _logger.warning("Cannot write cache file %s", path, exc_info=True)
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        return False
    return True


def _remove(path: Path) -> bool:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        _logger.warning("Cannot remove cache file %s", path, exc_info=True)
        return False
    return True


def _read_metadata(path: Path) -> StoreMetadata | None:
    data = _read_bytes(path)
    if data is None:
        return None
    try:
        return decode_metadata(data)
    except SyncCacheDecodeError:
        _logger.warning("Ignoring undecodable metadata at %s", path, exc_info=True)
        return None


class SyncResponseStore:
    """Persistent cache of the latest sync response for one identity.

    Usage::

        store = SyncResponseStore(SyncCacheConfig.from_env())
        store.open("@alice:example.org")
        store.set_sync_response(cached)
        event = store.event_with_id("$event", "!room:example.org")

    :meth:`open` must be called once before anything else. All file work
    goes through one serial worker thread: writes return immediately with a
    completion future, reads block until the worker has processed every
    item queued before them.
    """

    def __init__(self, config: SyncCacheConfig | None = None) -> None:
        self._config = config or SyncCacheConfig()
        self._queue = SerialQueue(name="SyncResponseStore")
        self._paths: StorePaths | None = None
        self._open_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def paths(self) -> StorePaths | None:
        """Paths bound by :meth:`open`, or ``None`` before that."""
        return self._paths

    @property
    def is_open(self) -> bool:
        return self._paths is not None

    def open(self, identity: str) -> StorePaths:
        """Bind the store to *identity*.

        Raises
        ------
        SyncCacheFatalError
            *identity* is empty or unusable as a directory name. Carrying on
            would read or write another identity's namespace.
        SyncCacheConfigError
            The store is already open.
        """
        try:
            paths = resolve_store_paths(identity if isinstance(identity, str) else "", self._config)
        except ValueError as exc:
            _logger.critical("Sync response store opened without a usable identity: %r", identity)
            raise SyncCacheFatalError("Credentials must provide a user identifier") from exc

        with self._open_lock:
            if self._paths is not None:
                raise SyncCacheConfigError(f"Store already open for {self._paths.identity!r}")
            self._paths = paths

        _logger.debug("Sync response store opened at %s", paths.directory)
        self._queue.submit(partial(_prepare_directory, paths))
        return paths

    def _require_paths(self) -> StorePaths:
        paths = self._paths
        if paths is None:
            raise SyncCacheNotOpenedError("SyncResponseStore.open() must be called first")
        return paths

    def flush(self, timeout: float | None = None) -> bool:
        """Block until every write queued before this call has completed.

        Returns ``False`` if *timeout* seconds pass first; the queued writes
        keep running in the background.
        """
        try:
            self._queue.drain(timeout=timeout)
        except TimeoutError:
            _logger.debug("flush timed out after %ss", timeout)
            return False
        return True

    # ------------------------------------------------------------------
    # Sync response
    # ------------------------------------------------------------------

    def get_sync_response(self) -> CachedSyncResponse | None:
        """Return the cached sync response, or ``None`` on miss or corruption."""
        paths = self._require_paths()

        started = time.perf_counter()
        data = self._queue.run(partial(_read_bytes, paths.payload_path))
        if data is None:
            return None
        _logger.debug("Read %d bytes of sync response in %.3fs", len(data), time.perf_counter() - started)

        started = time.perf_counter()
        try:
            snapshot = decode_snapshot(data.decode(FILE_ENCODING))
        except (UnicodeDecodeError, SyncCacheDecodeError):
            _logger.warning("Ignoring undecodable sync response at %s", paths.payload_path, exc_info=True)
            return None
        _logger.debug("Decoded sync response in %.3fs", time.perf_counter() - started)
        return snapshot

    def set_sync_response(self, value: CachedSyncResponse | None) -> Future[bool]:
        """Replace the cached sync response, or remove it when *value* is ``None``.

        The snapshot is serialized on the calling thread; the write itself is
        queued. The returned future resolves to ``True`` once the file is in
        place (or removed), ``False`` if that failed. Ignoring it is fine:
        writes are best-effort and happen at most once.

        Removal is queued like any write, so it cannot overtake an earlier
        write. The file stays visible (to this and other processes) until the
        returned future resolves.
        """
        paths = self._require_paths()

        if value is None:
            _logger.debug("Removing cached sync response")
            return self._queue.submit(partial(_remove, paths.payload_path))

        started = time.perf_counter()
        try:
            text = encode_snapshot(value)
        except SyncCacheEncodeError:
            _logger.warning("Cannot serialize sync response; cache left unchanged", exc_info=True)
            return _completed(False)
        data = text.encode(FILE_ENCODING)
        _logger.debug("Encoded sync response (%d bytes) in %.3fs", len(data), time.perf_counter() - started)

        return self._queue.submit(partial(_atomic_write, paths.payload_path, data, fsync=self._config.fsync))

    # ------------------------------------------------------------------
    # Account data
    # ------------------------------------------------------------------

    def get_account_data(self) -> dict[str, Any] | None:
        """Return the cached account data, or ``None`` if there is none."""
        paths = self._require_paths()
        metadata = self._queue.run(partial(_read_metadata, paths.metadata_path))
        if metadata is None:
            return None
        return metadata.account_data

    def set_account_data(self, value: dict[str, Any] | None) -> Future[bool]:
        """Replace the account data held in the metadata file.

        The metadata file is read, updated and rewritten as a single item on
        the worker queue, so concurrent callers on this store apply in
        submission order and the last one wins. Separate store instances
        (e.g. in another process) are not coordinated.

        The value is serialized on the calling thread, so later changes the
        caller makes to it are not stored.
        """
        paths = self._require_paths()
        try:
            incoming = encode_metadata(StoreMetadata(account_data=value))
        except ValidationError:
            _logger.warning("Account data must be a mapping or None, got %s", type(value).__name__)
            return _completed(False)
        except SyncCacheEncodeError:
            _logger.warning("Cannot serialize account data; metadata left unchanged", exc_info=True)
            return _completed(False)

        return self._queue.submit(partial(self._update_account_data, paths, incoming))

    def _update_account_data(self, paths: StorePaths, incoming: bytes) -> bool:
        try:
            value = decode_metadata(incoming).account_data
        except SyncCacheDecodeError:
            _logger.warning("Cannot re-read serialized account data", exc_info=True)
            return False
        metadata = _read_metadata(paths.metadata_path) or StoreMetadata()
        metadata = metadata.model_copy(update={"account_data": value})
        try:
            data = encode_metadata(metadata)
        except SyncCacheEncodeError:
            _logger.warning("Cannot serialize account data; metadata left unchanged", exc_info=True)
            return False
        if _logger.isEnabledFor(logging.DEBUG):
            _logger.debug("Writing account data %s", redact_for_log(value))
        return _atomic_write(paths.metadata_path, data, fsync=self._config.fsync)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def event_with_id(self, event_id: str, room_id: str) -> Event | None:
        """Find an event of *room_id* in the cached sync response.

        Returns a copy with ``room_id`` set, or ``None``.
        """
        snapshot = self.get_sync_response()
        if snapshot is None:
            return None

        event = find_event(snapshot.sync_response, event_id, room_id)
        _logger.debug("event_with_id: %s %sfound", event_id, "" if event is not None else "not ")
        return event

    def room_summary(self, room_id: str, summary: RoomSummary | None = None) -> RoomSummary | None:
        """Derive the display name of *room_id* from the cached sync response.

        Returns *summary* untouched when nothing is cached. Otherwise
        *summary* (or a new :class:`RoomSummary`) is updated and returned;
        ``None`` when no summary was given and none can be built for
        *room_id*.
        """
        snapshot = self.get_sync_response()
        if snapshot is None:
            return summary
        if summary is None:
            try:
                summary = RoomSummary(room_id=room_id)
            except ValidationError:
                _logger.warning("Cannot build a room summary for room id %r", room_id)
                return None
        return project_room_summary(snapshot.sync_response, room_id, summary)

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------

    def delete_data(self) -> None:
        """Remove the cached sync response and metadata.

        Idempotent. Temp files left by interrupted writes are removed too.
        Runs on the worker queue and waits for it, so a write queued before
        the call cannot land afterwards.
        """
        paths = self._require_paths()
        removed = self._queue.run(
            lambda: all([_remove(paths.payload_path), _remove(paths.metadata_path), _sweep_temp_files(paths)])
        )
        _logger.debug("Deleted cached sync data (clean=%s)", removed)
