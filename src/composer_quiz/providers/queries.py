"""
Keyed background queries for provider calls.

Each request is identified by a hashable key, e.g. ``("composers",)`` or
``("works", 3)``. Results are reported back on the main thread with the
key they were issued for, so a receiver can discard responses for keys
it no longer cares about.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable

from PySide6.QtCore import QObject, QThread, Signal

logger = logging.getLogger(__name__)

COMPOSERS_KEY = ("composers",)


def works_key(composer_id: int) -> tuple[str, int]:
    """Query key for the work list of a composer."""
    return ("works", composer_id)


class FetchWorker(QThread):
    """Background thread running a single provider call."""
    result_ready = Signal(object, object)  # key, payload
    error_occurred = Signal(object, str)   # key, error message

    def __init__(self, key: Hashable, fetch: Callable[[], Any]):
        super().__init__()
        self.key = key
        self.fetch = fetch

    def run(self):
        """Execute the call in the background."""
        try:
            payload = self.fetch()
        except Exception as e:
            logger.exception(f"Query {self.key} failed")
            self.error_occurred.emit(self.key, str(e))
            return
        self.result_ready.emit(self.key, payload)


class QueryRunner(QObject):
    """
    Runs provider calls and reports keyed results.

    With ``threaded=True`` every call runs on its own FetchWorker and
    results arrive through queued signals on the owner's thread. With
    ``threaded=False`` calls run inline and the signals fire before
    ``submit`` returns (headless use and tests).

    A key that is already in flight is not submitted twice.

    Example:
        >>> runner = QueryRunner(threaded=False)
        >>> runner.succeeded.connect(lambda key, data: print(key, data))
        >>> runner.submit(("composers",), lambda: ["Bach"])
        ('composers',) ['Bach']
    """

    succeeded = Signal(object, object)  # key, payload
    failed = Signal(object, str)        # key, error message

    def __init__(self, threaded: bool = True, parent: QObject | None = None):
        super().__init__(parent)
        self.threaded = threaded
        self._workers: Dict[Hashable, FetchWorker] = {}

    def submit(self, key: Hashable, fetch: Callable[[], Any]) -> None:
        """
        Issue a request.

        Args:
            key: Identity of the request, echoed back with the result
            fetch: Zero-argument callable performing the provider call
        """
        if not self.threaded:
            self._run_inline(key, fetch)
            return

        if key in self._workers:
            logger.debug(f"Query {key} already in flight")
            return

        worker = FetchWorker(key, fetch)
        worker.result_ready.connect(self.succeeded)
        worker.error_occurred.connect(self.failed)
        worker.finished.connect(lambda: self._on_worker_finished(key))
        self._workers[key] = worker
        logger.debug(f"Query {key} started")
        worker.start()

    def is_in_flight(self, key: Hashable) -> bool:
        return key in self._workers

    def wait(self, timeout_ms: int = 1000) -> None:
        """Wait for running workers to finish (used on shutdown)."""
        for worker in list(self._workers.values()):
            if worker.isRunning():
                worker.wait(timeout_ms)

    def _run_inline(self, key: Hashable, fetch: Callable[[], Any]) -> None:
        try:
            payload = fetch()
        except Exception as e:
            logger.exception(f"Query {key} failed")
            self.failed.emit(key, str(e))
            return
        self.succeeded.emit(key, payload)

    def _on_worker_finished(self, key: Hashable) -> None:
        worker = self._workers.pop(key, None)
        if worker is not None:
            worker.deleteLater()
