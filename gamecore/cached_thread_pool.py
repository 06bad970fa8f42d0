"""Thread pool that grows on demand and retires workers left idle too long."""

from __future__ import annotations

import itertools
import logging
import threading
import time
from collections import deque
from dataclasses import dataclass, replace
from typing import Deque, Iterable, Optional, Union

from .thread_pool import RejectionPolicy, Task, ThreadPool, ThreadPoolConfig, ThreadPoolStats

logger = logging.getLogger(__name__)

_TIMING_WINDOW = 1000


@dataclass
class _Worker:
    thread: threading.Thread
    last_active: float
    idle: bool = True


class CachedThreadPool(ThreadPool):
    """Starts ``core_threads`` workers and adds more, up to ``max_threads``, when all are busy.

    Workers beyond the core size that stay idle for ``keep_alive_ms`` exit on their
    own; with ``allow_core_thread_timeout`` core workers may exit too.
    """

    type_name = "CachedThreadPool"

    def __init__(self, config: Union[ThreadPoolConfig, int, None] = None) -> None:
        if config is None:
            config = ThreadPoolConfig()
        elif isinstance(config, int):
            config = ThreadPoolConfig.with_threads(config)
        else:
            config = replace(config)
        if config.core_threads > config.max_threads:
            raise ValueError("Core pool size cannot be greater than maximum pool size")
        self._config = config
        self.rejection_policy = RejectionPolicy.ABORT
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._queue: Deque[Task] = deque()
        self._workers: dict[int, _Worker] = {}
        self._ids = itertools.count()
        self._running = False
        self._shutdown = False
        self._terminated = threading.Event()
        self._active = 0
        self._completed = 0
        self._rejected = 0
        self._times: Deque[float] = deque(maxlen=_TIMING_WINDOW)

    @property
    def config(self) -> ThreadPoolConfig:
        """A copy of the pool's configuration."""
        with self._lock:
            return replace(self._config)

    def submit(self, task: Task) -> bool:
        if self._shutdown:
            return self._reject(task)
        with self._lock:
            full = len(self._queue) >= self._config.max_queue_size
            if not full:
                self._queue.append(task)
                if self._active >= len(self._workers):
                    self._spawn_locked()
                self._not_empty.notify()
        if full:
            return self._reject(task)
        return True

    def submit_batch(self, tasks: Iterable[Task]) -> int:
        return sum(1 for task in tasks if self.submit(task))

    def start(self) -> bool:
        with self._lock:
            if self._running:
                return False
            self._running = True
            self._shutdown = False
            self._terminated.clear()
            for _ in range(self._config.core_threads):
                self._spawn_locked()
        return True

    def stop(self) -> None:
        """Stop accepting work; workers finish the queue and exit without being awaited."""
        with self._lock:
            self._shutdown = True
            self._not_empty.notify_all()

    def shutdown(self) -> None:
        self.stop()
        self._finish()

    def shutdown_now(self) -> None:
        with self._lock:
            self._shutdown = True
            self._queue.clear()
            self._not_empty.notify_all()
        self._finish()

    def await_termination(self, timeout: Optional[float]) -> bool:
        return self._terminated.wait(timeout)

    def stats(self) -> ThreadPoolStats:
        with self._lock:
            average = sum(self._times) / len(self._times) if self._times else 0.0
            return ThreadPoolStats(
                thread_count=len(self._workers),
                active_threads=self._active,
                queue_size=len(self._queue),
                max_queue_size=self._config.max_queue_size,
                completed_tasks=self._completed,
                rejected_tasks=self._rejected,
                avg_execution_time=average,
            )

    def set_core_pool_size(self, core_size: int) -> bool:
        with self._lock:
            if core_size > self._config.max_threads:
                return False
            self._config.core_threads = core_size
            return True

    def set_maximum_pool_size(self, max_size: int) -> bool:
        with self._lock:
            if max_size < self._config.core_threads:
                return False
            self._config.max_threads = max_size
            return True

    def is_running(self) -> bool:
        return self._running

    def is_shutdown(self) -> bool:
        return self._shutdown

    def is_terminated(self) -> bool:
        return self._terminated.is_set()

    def _spawn_locked(self) -> bool:
        if len(self._workers) >= self._config.max_threads:
            return False
        worker_id = next(self._ids)
        thread = threading.Thread(
            target=self._work,
            args=(worker_id,),
            name=f"{self._config.thread_name_prefix}{worker_id}",
            daemon=True,
        )
        self._workers[worker_id] = _Worker(thread, time.monotonic())
        thread.start()
        return True

    def _may_retire_locked(self) -> bool:
        floor = 0 if self._config.allow_core_thread_timeout else self._config.core_threads
        return len(self._workers) > floor

    def _finish(self) -> None:
        with self._lock:
            threads = [worker.thread for worker in self._workers.values()]
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()
        with self._lock:
            self._workers.clear()
            self._running = False
        self._terminated.set()

    def _work(self, worker_id: int) -> None:
        while True:
            with self._lock:
                while not self._queue and not self._shutdown:
                    keep_alive = self._config.keep_alive_ms / 1000.0
                    woken = self._not_empty.wait(keep_alive)
                    if (
                        not woken
                        and not self._queue
                        and not self._shutdown
                        and self._may_retire_locked()
                    ):
                        self._workers.pop(worker_id, None)
                        return
                if not self._queue:
                    self._workers.pop(worker_id, None)
                    return
                task = self._queue.popleft()
                self._active += 1
                worker = self._workers.get(worker_id)
                if worker is not None:
                    worker.idle = False
                    worker.last_active = time.monotonic()

            started = time.perf_counter()
            try:
                task()
            except Exception:
                logger.exception("task failed in cached worker %d", worker_id)
            elapsed_ms = (time.perf_counter() - started) * 1000.0

            with self._lock:
                self._times.append(elapsed_ms)
                self._completed += 1
                self._active -= 1
                worker = self._workers.get(worker_id)
                if worker is not None:
                    worker.idle = True
                    worker.last_active = time.monotonic()

    def _reject(self, task: Task) -> bool:
        with self._lock:
            self._rejected += 1
        policy = self.rejection_policy
        if policy is RejectionPolicy.CALLER_RUNS:
            if self._shutdown:
                return False
            try:
                task()
            except Exception:
                return False
            return True
        if policy is RejectionPolicy.DISCARD_OLDEST:
            with self._lock:
                if not self._queue:
                    return False
                self._queue.popleft()
                self._queue.append(task)
                self._not_empty.notify()
            return True
        return False