"""
core/tasks.py

Purpose
-------
Run blocking remote calls off the UI thread and hand their outcome back to
the UI thread.

Public interface
----------------
- ThreadPoolRunner.submit(work, on_success, on_error=None) -> TaskHandle
- TaskHandle.cancel()
- default_runner() -> ThreadPoolRunner (process-wide)

`work` runs on a QThreadPool worker. Its result (or exception) is relayed
through a queued Qt signal, so `on_success(result)` / `on_error(exc)` always
run on the thread that owns the runner. A cancelled handle gets no callback.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from PySide6.QtCore import QCoreApplication, QObject, QRunnable, QThreadPool, Signal, Slot

_log = logging.getLogger(__name__)

SuccessCallback = Callable[[Any], None]
ErrorCallback = Callable[[BaseException], None]


class TaskHandle:
    __slots__ = ("_cancelled",)

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class _Relay(QObject):
    done = Signal(object, object, object)  # handle, result, error


class _JobRunnable(QRunnable):
    """
    Thin QRunnable wrapper that executes a callable and always reports back
    through the relay, success or failure.
    """
    def __init__(self, handle: TaskHandle, work: Callable[[], Any], relay: _Relay) -> None:
        super().__init__()
        self.setAutoDelete(True)
        self._handle = handle
        self._work = work
        self._relay = relay

    @Slot()
    def run(self) -> None:  # type: ignore[override]
        result, error = None, None
        try:
            result = self._work()
        except Exception as e:
            error = e
        try:
            self._relay.done.emit(self._handle, result, error)
        except RuntimeError:
            # relay's C++ side is gone (application shutting down)
            _log.debug("task finished after its runner was destroyed")


class ThreadPoolRunner(QObject):
    def __init__(self, pool: Optional[QThreadPool] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._pool = pool or QThreadPool.globalInstance()
        self._relay = _Relay(self)
        self._relay.done.connect(self._deliver)
        self._pending: Dict[TaskHandle, Tuple[SuccessCallback, Optional[ErrorCallback]]] = {}

    def submit(
        self,
        work: Callable[[], Any],
        on_success: SuccessCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> TaskHandle:
        handle = TaskHandle()
        self._pending[handle] = (on_success, on_error)
        self._pool.start(_JobRunnable(handle, work, self._relay))
        return handle

    def pending_count(self) -> int:
        return len(self._pending)

    @Slot(object, object, object)
    def _deliver(self, handle: TaskHandle, result: Any, error: Optional[BaseException]) -> None:
        callbacks = self._pending.pop(handle, None)
        if callbacks is None or handle.cancelled:
            return
        on_success, on_error = callbacks
        if error is None:
            on_success(result)
        elif on_error is not None:
            on_error(error)
        else:
            _log.error("background task failed: %s", error, exc_info=error)


_default: Optional[ThreadPoolRunner] = None


def default_runner() -> ThreadPoolRunner:
    """
    Runner shared by all dialogs. It is parented to the application object so
    it outlives any dialog whose fetch is still in flight.
    """
    global _default
    if _default is None:
        _default = ThreadPoolRunner(parent=QCoreApplication.instance())
    return _default
