from __future__ import annotations

import threading

import pytest

from pysynccache._queue import SerialQueue


def test_items_run_in_submission_order() -> None:
    queue = SerialQueue(name="test")
    seen: list[int] = []

    for i in range(50):
        queue.submit(lambda i=i: seen.append(i))
    queue.drain(timeout=5)

    assert seen == list(range(50))


def test_run_observes_earlier_submissions() -> None:
    queue = SerialQueue(name="test")
    state = {"value": 0}
    release = threading.Event()

    def slow_write() -> None:
        release.wait(timeout=5)
        state["value"] = 1

    queue.submit(slow_write)
    release.set()

    assert queue.run(lambda: state["value"]) == 1


def test_all_items_share_one_worker_thread() -> None:
    queue = SerialQueue(name="test")

    names = {queue.run(lambda: threading.current_thread().name) for _ in range(5)}

    assert len(names) == 1
    assert names.pop().startswith(queue.name)


def test_failures_surface_only_through_future() -> None:
    queue = SerialQueue(name="test")

    def boom() -> None:
        raise RuntimeError("disk on fire")

    future = queue.submit(boom)
    with pytest.raises(RuntimeError, match="disk on fire"):
        future.result(timeout=5)
    # The worker keeps going after a failed item.
    assert queue.run(lambda: "alive") == "alive"


def test_queue_names_are_unique() -> None:
    assert SerialQueue(name="same").name != SerialQueue(name="same").name
