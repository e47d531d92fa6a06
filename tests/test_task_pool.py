import os
import queue
import threading

from shaderlsp.task_pool import TaskPool


def _drain(q):
    items = []
    while not q.empty():
        items.append(q.get_nowait())
    return items


def test_spawn_sends_results():
    results = queue.Queue()
    with TaskPool(results) as pool:
        for n in range(10):
            pool.spawn(lambda n=n: n * n)
    assert sorted(_drain(results)) == sorted(n * n for n in range(10))


def test_spawn_with_sender_can_send_many():
    results = queue.Queue()
    with TaskPool(results) as pool:
        pool.spawn_with_sender(lambda sender: [sender.put(x) for x in ("a", "b")])
    assert sorted(_drain(results)) == ["a", "b"]


def test_join_waits_and_pool_stays_usable():
    results = queue.Queue()
    pool = TaskPool(results)
    pool.spawn(lambda: "first")
    pool.join()
    assert _drain(results) == ["first"]
    pool.spawn(lambda: "second")
    pool.join()
    assert _drain(results) == ["second"]
    pool.__exit__(None, None, None)


def test_failing_task_sends_nothing():
    results = queue.Queue()

    def boom():
        raise RuntimeError("boom")

    with TaskPool(results) as pool:
        pool.spawn(boom)
        pool.spawn(lambda: "ok")
    assert _drain(results) == ["ok"]


def test_len_counts_waiting_tasks():
    results = queue.Queue()
    workers = os.cpu_count() or 1
    release = threading.Event()
    started = threading.Semaphore(0)

    def blocker():
        started.release()
        release.wait()
        return "blocked"

    with TaskPool(results) as pool:
        for _ in range(workers):
            pool.spawn(blocker)
        for _ in range(workers):
            assert started.acquire(timeout=10)
        for _ in range(3):
            pool.spawn(lambda: "extra")
        assert len(pool) == 3
        release.set()
        pool.join()
        assert len(pool) == 0
    assert _drain(results).count("extra") == 3