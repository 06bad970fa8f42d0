"""Shared thread pool types: configuration, statistics, policies and the base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Future
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable

Task = Callable[[], Any]


class TaskRejectedError(RuntimeError):
    """Raised when a pool refuses a task under the abort policy."""


@dataclass
class ThreadPoolStats:
    """Snapshot of a pool's state."""

    thread_count: int = 0
    active_threads: int = 0
    queue_size: int = 0
    max_queue_size: int = 0
    completed_tasks: int = 0
    rejected_tasks: int = 0
    avg_execution_time: float = 0.0

    def __str__(self) -> str:
        return (
            "Thread pool statistics:\n"
            f"  Threads: {self.thread_count}\n"
            f"  Active threads: {self.active_threads}\n"
            f"  Queue: {self.queue_size}/{self.max_queue_size}\n"
            f"  Completed tasks: {self.completed_tasks}\n"
            f"  Rejected tasks: {self.rejected_tasks}\n"
            f"  Average execution time: {self.avg_execution_time:.2f}ms"
        )


@dataclass
class ThreadPoolConfig:
    """Sizing and behaviour of a pool."""

    core_threads: int = 4
    max_threads: int = 8
    max_queue_size: int = 1000
    keep_alive_ms: int = 60000
    allow_core_thread_timeout: bool = False
    thread_name_prefix: str = "ThreadPool-"

    @classmethod
    def with_threads(cls, cores: int, max_queue_size: int = 1000) -> "ThreadPoolConfig":
        """Configuration with ``cores`` core and maximum threads."""
        return cls(core_threads=cores, max_threads=cores, max_queue_size=max_queue_size)


class RejectionPolicy(Enum):
    """What a pool does with a task it cannot queue."""

    ABORT = "abort"
    DISCARD = "discard"
    DISCARD_OLDEST = "discard_oldest"
    CALLER_RUNS = "caller_runs"
    BLOCK = "block"


class ThreadPoolType(Enum):
    """Kinds of thread pool."""

    FIXED = "fixed"
    CACHED = "cached"
    SCHEDULED = "scheduled"
    WORK_STEALING = "work_stealing"
    PRIORITY = "priority"


class ThreadPool(ABC):
    """Interface shared by all thread pools."""

    @abstractmethod
    def submit(self, task: Task) -> bool:
        """Queue ``task``; returns whether it was accepted."""

    def submit_with_result(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result.

        If the pool declines the task, the future holds a RuntimeError.
        """
        future: Future = Future()

        def run() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

        if not self.submit(run):
            if not future.done():
                future.set_exception(RuntimeError("Task submission failed"))
        return future

    @abstractmethod
    def submit_batch(self, tasks: Iterable[Task]) -> int:
        """Submit each task; returns how many were accepted."""

    @abstractmethod
    def start(self) -> bool:
        """Start the workers; returns False if already running."""

    @abstractmethod
    def stop(self) -> None:
        """Stop accepting work."""

    @abstractmethod
    def shutdown(self) -> None:
        """Finish queued work, then stop."""

    @abstractmethod
    def shutdown_now(self) -> None:
        """Drop queued work and stop."""

    @abstractmethod
    def await_termination(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds for termination."""

    @abstractmethod
    def stats(self) -> ThreadPoolStats:
        """Current statistics."""

    @abstractmethod
    def set_core_pool_size(self, core_size: int) -> bool:
        """Change the core size; returns whether it was allowed."""

    @abstractmethod
    def set_maximum_pool_size(self, max_size: int) -> bool:
        """Change the maximum size; returns whether it was allowed."""

    @abstractmethod
    def is_running(self) -> bool:
        """Whether the pool has been started and not terminated."""

    @abstractmethod
    def is_shutdown(self) -> bool:
        """Whether shutdown has begun."""

    @abstractmethod
    def is_terminated(self) -> bool:
        """Whether the pool has fully stopped."""

    def __enter__(self) -> "ThreadPool":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()