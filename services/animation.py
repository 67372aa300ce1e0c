# services/animation.py
from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import QObject, QTimer

TICK_INTERVAL_MS = 100
TICK_STEP = 100


# ---------------- Schedulers ----------------

class QtTask:
    """A repeating QTimer; cancel() stops it for good."""

    def __init__(self, timer: QTimer):
        self._timer: QTimer | None = timer

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self):
        if self._timer:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None


class QtScheduler:
    """
    Schedules repeating callbacks on the Qt event loop.

    Timers are parented to ``parent`` (when given) so they die with the
    surface that owns them.
    """

    def __init__(self, parent: QObject | None = None):
        self._parent = parent

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> QtTask:
        timer = QTimer(self._parent)
        timer.setInterval(interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        return QtTask(timer)


class ManualTask:
    def __init__(self, scheduler: "ManualScheduler", interval_ms: int, callback: Callable[[], None]):
        self.interval_ms = interval_ms
        self.callback = callback
        self.next_due = scheduler.now + interval_ms
        self.active = True

    def cancel(self):
        self.active = False


class ManualScheduler:
    """Test clock: nothing fires until advance() is called."""

    def __init__(self):
        self.now = 0
        self._tasks: list[ManualTask] = []

    def schedule(self, interval_ms: int, callback: Callable[[], None]) -> ManualTask:
        task = ManualTask(self, interval_ms, callback)
        self._tasks.append(task)
        return task

    def active_tasks(self) -> list[ManualTask]:
        return [t for t in self._tasks if t.active]

    def advance(self, ms: int):
        target = self.now + ms
        while True:
            due = [t for t in self.active_tasks() if t.next_due <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.next_due)
            self.now = task.next_due
            task.next_due += task.interval_ms
            task.callback()
        self.now = target
        self._tasks = self.active_tasks()


# ---------------- Clock ----------------

class AnimationClock:
    """
    Drives a gauge forward on a fixed tick.

    - start() always restarts from zero and leaves exactly one live task.
    - Each timeout advances time by ``step`` and calls on_tick(time).
    """

    def __init__(
        self,
        scheduler,
        on_tick: Callable[[float], None],
        interval_ms: int = TICK_INTERVAL_MS,
        step: float = TICK_STEP,
    ):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.scheduler = scheduler
        self.on_tick = on_tick
        self.interval_ms = interval_ms
        self.step = step
        self.elapsed_ticks = 0
        self._task = None

    @property
    def running(self) -> bool:
        return self._task is not None and self._task.active

    @property
    def time(self) -> float:
        return self.elapsed_ticks * self.step

    def start(self):
        self.cancel()
        self.elapsed_ticks = 0
        self._task = self.scheduler.schedule(self.interval_ms, self._on_timeout)

    def cancel(self):
        if self._task is not None:
            logging.debug(f"Cancelling animation after {self.elapsed_ticks} ticks.")
            self._task.cancel()
            self._task = None

    def _on_timeout(self):
        self.elapsed_ticks += 1
        self.on_tick(self.time)


def default_scheduler(element) -> QtScheduler:
    parent = element if isinstance(element, QObject) else None
    return QtScheduler(parent)
