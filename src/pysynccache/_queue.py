"""Serial worker queue shared by all file operations of one store."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")

_logger = logging.getLogger(__name__)


class SerialQueue:
    """Single-threaded FIFO executor.

    Work items run one at a time in submission order. Writes are submitted
    with :meth:`submit` and not awaited; reads use :meth:`run`, which blocks
    the caller until the worker reaches the item. A read therefore observes
    every write enqueued earlier from the same calling thread.
    """

    def __init__(self, *, name: str = "pysynccache") -> None:
        self._name = f"{name}-{secrets.token_hex(4)}"
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=self._name)

    @property
    def name(self) -> str:
        return self._name

    def submit(self, fn: Callable[[], T]) -> Future[T]:
        """Enqueue *fn* and return immediately."""
        future = self._executor.submit(fn)
        future.add_done_callback(self._log_failure)
        return future

    def run(self, fn: Callable[[], T]) -> T:
        """Enqueue *fn* and block until it has run, returning its result."""
        return self.submit(fn).result()

    def drain(self, timeout: float | None = None) -> None:
        """Block until every item enqueued before this call has run."""
        self.submit(lambda: None).result(timeout=timeout)

    def _log_failure(self, future: Future[object]) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            _logger.warning("Work item on %s failed", self._name, exc_info=error)
