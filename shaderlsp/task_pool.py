"""A thread pool whose task results are sent to a queue."""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Any, Callable

_log = logging.getLogger(__name__)


class TaskPool:
    """Runs tasks on worker threads and puts their results on ``sender``.

    ``sender`` is any object with a ``put`` method, such as ``queue.Queue``.
    Tasks that raise send nothing; the failure is logged.
    """

    def __init__(self, sender: Any):
        self.sender = sender
        self._executor = ThreadPoolExecutor(max_workers=os.cpu_count() or 1)
        self._lock = threading.Lock()
        self._queued = 0
        self._futures: set[Future] = set()

    def _execute(self, job: Callable[[], None]) -> None:
        with self._lock:
            self._queued += 1

        def run() -> None:
            with self._lock:
                self._queued -= 1
            try:
                job()
            except Exception:
                _log.exception("task failed")

        future = self._executor.submit(run)
        with self._lock:
            self._futures.add(future)
        future.add_done_callback(self._forget)

    def _forget(self, future: Future) -> None:
        with self._lock:
            self._futures.discard(future)

    def spawn(self, task: Callable[[], Any]) -> None:
        """Run ``task`` and send its result."""
        self._execute(lambda: self.sender.put(task()))

    def spawn_with_sender(self, task: Callable[[Any], None]) -> None:
        """Run ``task`` with the sender, letting it send as it likes."""
        self._execute(lambda: task(self.sender))

    def __len__(self) -> int:
        """The number of tasks waiting for a worker."""
        with self._lock:
            return self._queued

    def join(self) -> None:
        """Wait until every spawned task has finished."""
        while True:
            with self._lock:
                pending = list(self._futures)
            if not pending:
                return
            wait(pending)

    def __enter__(self) -> "TaskPool":
        return self

    def __exit__(self, *args: Any) -> None:
        self.join()
        self._executor.shutdown(wait=True)