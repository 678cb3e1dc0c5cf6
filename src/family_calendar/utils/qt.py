from __future__ import annotations

from typing import Any, Callable, Optional

from PyQt6.QtCore import QObject, QRunnable, QThreadPool, pyqtSignal


class TaskSignals(QObject):
    completed = pyqtSignal(object)
    failed = pyqtSignal(Exception)


class _Runnable(QRunnable):
    def __init__(self, fn: Callable[..., Any], args: tuple[Any, ...], signals: TaskSignals) -> None:
        super().__init__()
        self.fn = fn
        self.args = args
        self.signals = signals

    def run(self) -> None:  # noqa: D401
        try:
            result = self.fn(*self.args)
        except Exception as exc:  # noqa: BLE001
            self.signals.failed.emit(exc)
        else:
            self.signals.completed.emit(result)


class TaskRunner:
    """Runs blocking calls off the GUI thread and reports back through signals."""

    def __init__(self) -> None:
        self.pool = QThreadPool.globalInstance()
        self._pending: set[TaskSignals] = set()

    def submit(
        self,
        fn: Callable[..., Any],
        *args: Any,
        on_success: Optional[Callable[[Any], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> None:
        signals = TaskSignals()
        # Signals must outlive the runnable until they are delivered.
        self._pending.add(signals)
        signals.completed.connect(lambda _result: self._pending.discard(signals))
        signals.failed.connect(lambda _exc: self._pending.discard(signals))
        if on_success:
            signals.completed.connect(on_success)
        if on_error:
            signals.failed.connect(on_error)
        self.pool.start(_Runnable(fn, args, signals))
