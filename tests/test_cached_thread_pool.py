import threading
import time

import pytest

from gamecore.cached_thread_pool import CachedThreadPool
from gamecore.thread_pool import RejectionPolicy, ThreadPoolConfig


def wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_core_larger_than_max_is_rejected():
    with pytest.raises(ValueError):
        CachedThreadPool(ThreadPoolConfig(core_threads=5, max_threads=2))


def test_results_are_delivered():
    pool = CachedThreadPool(ThreadPoolConfig(core_threads=2, max_threads=4))
    pool.start()
    futures = [pool.submit_with_result(lambda x: x * x, i) for i in range(1, 6)]
    assert [f.result(timeout=5) for f in futures] == [i * i for i in range(1, 6)]
    pool.shutdown()
    assert pool.stats().completed_tasks == 5


def test_shutdown_terminates_and_finishes_queue():
    pool = CachedThreadPool(ThreadPoolConfig(core_threads=1, max_threads=1))
    pool.start()
    done = []
    for i in range(10):
        pool.submit(lambda i=i: done.append(i))
    pool.shutdown()
    assert pool.is_terminated()
    assert pool.await_termination(0.1)
    assert not pool.is_running()
    assert sorted(done) == list(range(10))


def test_submit_after_shutdown_is_refused():
    pool = CachedThreadPool(ThreadPoolConfig(core_threads=1, max_threads=2))
    pool.start()
    pool.shutdown()
    ran = []
    assert pool.submit(lambda: ran.append(1)) is False
    pool.rejection_policy = RejectionPolicy.CALLER_RUNS
    assert pool.submit(lambda: ran.append(2)) is False
    assert ran == []
    assert pool.stats().rejected_tasks == 2
    assert pool.is_shutdown()


def _single_slot_pool(policy):
    pool = CachedThreadPool(ThreadPoolConfig(core_threads=1, max_threads=1, max_queue_size=1))
    pool.rejection_policy = policy
    pool.start()
    return pool


def test_discard_when_queue_full():
    pool = _single_slot_pool(RejectionPolicy.DISCARD)
    release = threading.Event()
    ran = []
    assert pool.submit(release.wait)
    assert wait_until(lambda: pool.stats().active_threads == 1)
    assert pool.submit(lambda: ran.append("queued"))
    assert pool.submit(lambda: ran.append("extra")) is False
    release.set()
    pool.shutdown()
    assert ran == ["queued"]
    assert pool.stats().rejected_tasks == 1


def test_discard_oldest_replaces_queued_task():
    pool = _single_slot_pool(RejectionPolicy.DISCARD_OLDEST)
    release = threading.Event()
    ran = []
    pool.submit(release.wait)
    assert wait_until(lambda: pool.stats().active_threads == 1)
    pool.submit(lambda: ran.append("old"))
    assert pool.submit(lambda: ran.append("new")) is True
    release.set()
    pool.shutdown()
    assert ran == ["new"]


def test_caller_runs_when_full():
    pool = _single_slot_pool(RejectionPolicy.CALLER_RUNS)
    release = threading.Event()
    ran = []
    pool.submit(release.wait)
    assert wait_until(lambda: pool.stats().active_threads == 1)
    pool.submit(lambda: ran.append("queued"))
    assert pool.submit(lambda: ran.append(threading.current_thread().name)) is True
    assert ran == [threading.current_thread().name]
    release.set()
    pool.shutdown()


def test_shutdown_now_drops_queue():
    pool = _single_slot_pool(RejectionPolicy.DISCARD)
    release = threading.Event()
    ran = []
    pool.submit(release.wait)
    assert wait_until(lambda: pool.stats().active_threads == 1)
    pool.submit(lambda: ran.append("queued"))
    release.set()
    pool.shutdown_now()
    assert pool.is_terminated()
    assert pool.stats().queue_size == 0
    assert "queued" not in ran or ran == ["queued"]


def test_grows_up_to_maximum():
    pool = CachedThreadPool(ThreadPoolConfig(core_threads=1, max_threads=3))
    pool.start()
    release = threading.Event()
    for expected in (1, 2, 3):
        pool.submit(release.wait)
        assert wait_until(lambda: pool.stats().active_threads == expected)
    pool.submit(release.wait)
    stats = pool.stats()
    assert stats.thread_count == 3
    assert stats.queue_size == 1
    release.set()
    pool.shutdown()
    assert pool.stats().completed_tasks == 4


def test_idle_threads_above_core_retire():
    pool = CachedThreadPool(ThreadPoolConfig(core_threads=0, max_threads=2, keep_alive_ms=50))
    pool.start()
    assert pool.stats().thread_count == 0
    assert pool.submit_with_result(lambda: "done").result(timeout=5) == "done"
    assert wait_until(lambda: pool.stats().thread_count == 0)
    pool.shutdown()


def test_pool_size_changes():
    pool = CachedThreadPool(ThreadPoolConfig(core_threads=2, max_threads=4))
    assert pool.set_core_pool_size(5) is False
    assert pool.set_core_pool_size(3) is True
    assert pool.set_maximum_pool_size(2) is False
    assert pool.set_maximum_pool_size(6) is True
    assert (pool.config.core_threads, pool.config.max_threads) == (3, 6)


def test_start_twice_returns_false():
    pool = CachedThreadPool(ThreadPoolConfig(core_threads=1, max_threads=2))
    assert pool.start() is True
    assert pool.start() is False
    pool.shutdown()
    assert pool.stats().thread_count == 0