"""Hashed timing wheel for one-shot timers."""

from __future__ import annotations

import itertools
import logging
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TimerCallback = Callable[[], None]


class TimerType(Enum):
    """Kinds of timer implementation."""

    WHEEL = "wheel"
    HEAP = "heap"
    RBTREE = "rbtree"
    LIST = "list"


class Timer(ABC):
    """A scheduler of one-shot callbacks driven by ticks."""

    @abstractmethod
    def add_timer(self, delay_ms: int, callback: TimerCallback) -> int:
        """Schedule ``callback`` after ``delay_ms``; returns the timer id."""

    @abstractmethod
    def cancel_timer(self, timer_id: int) -> bool:
        """Cancel a pending timer; returns whether one was removed."""

    @abstractmethod
    def tick(self) -> None:
        """Advance one tick, firing whatever is due."""

    @abstractmethod
    def run(self) -> None:
        """Start ticking in a background thread."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the background thread."""

    def __enter__(self) -> "Timer":
        self.run()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


@dataclass
class _TimerTask:
    timer_id: int
    rotations: int
    callback: TimerCallback


class TimerWheel(Timer):
    """Timing wheel of ``slot_num`` slots, each ``tick_ms`` milliseconds wide."""

    def __init__(self, slot_num: int = 1024, tick_ms: int = 100) -> None:
        if slot_num <= 0:
            raise ValueError("slot_num must be positive")
        if tick_ms <= 0:
            raise ValueError("tick_ms must be positive")
        self.slot_num = slot_num
        self.tick_ms = tick_ms
        self._slots: list[dict[int, _TimerTask]] = [{} for _ in range(slot_num)]
        self._slot_of: dict[int, int] = {}
        self._current = 0
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._slot_of)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def add_timer(self, delay_ms: int, callback: TimerCallback) -> int:
        if delay_ms < 0:
            raise ValueError("delay_ms must not be negative")
        if delay_ms == 0:
            delay_ms = self.tick_ms
        ticks = delay_ms // self.tick_ms
        rotations, offset = divmod(ticks, self.slot_num)
        with self._lock:
            timer_id = next(self._ids)
            slot = (self._current + offset) % self.slot_num
            self._slots[slot][timer_id] = _TimerTask(timer_id, rotations, callback)
            self._slot_of[timer_id] = slot
        return timer_id

    def cancel_timer(self, timer_id: int) -> bool:
        with self._lock:
            slot = self._slot_of.pop(timer_id, None)
            if slot is None:
                return False
            del self._slots[slot][timer_id]
            return True

    def tick(self) -> None:
        due: list[TimerCallback] = []
        with self._lock:
            slot = self._slots[self._current]
            for timer_id, task in list(slot.items()):
                if task.rotations == 0:
                    due.append(task.callback)
                    del slot[timer_id]
                    del self._slot_of[timer_id]
                else:
                    task.rotations -= 1
            self._current = (self._current + 1) % self.slot_num
        for callback in due:
            callback()

    def run(self) -> None:
        if self.running:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, name="timer-wheel", daemon=True)
        self._thread.start()

    def stop(self) -> None:
        thread = self._thread
        if thread is None:
            return
        self._stop_event.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def _loop(self) -> None:
        interval = self.tick_ms / 1000.0
        while not self._stop_event.is_set():
            started = time.monotonic()
            try:
                self.tick()
            except Exception:
                logger.exception("timer callback failed")
            remaining = interval - (time.monotonic() - started)
            if remaining > 0:
                self._stop_event.wait(remaining)


def create_timer(timer_type: TimerType) -> Timer:
    """Build a timer of the given kind; only the wheel is available."""
    if timer_type is TimerType.WHEEL:
        return TimerWheel()
    raise ValueError(f"unsupported timer type: {timer_type}")