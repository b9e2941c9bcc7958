import threading
import time

from cutil.multi_event import MultiEvent


def test_notify_unblock_without_waiters_returns():
    event = MultiEvent()
    thread = threading.Thread(target=event.notify_unblock, daemon=True)
    thread.start()
    thread.join(5)
    assert not thread.is_alive()


def test_notify_blocks_until_a_waiter_arrives():
    event = MultiEvent()
    notifier = threading.Thread(target=event.notify, daemon=True)
    notifier.start()
    notifier.join(0.2)
    assert notifier.is_alive()
    waiter = threading.Thread(target=event.wait, daemon=True)
    waiter.start()
    notifier.join(5)
    waiter.join(5)
    assert not notifier.is_alive()
    assert not waiter.is_alive()


def test_all_waiters_released():
    event = MultiEvent()
    returned = []
    lock = threading.Lock()
    count = 8

    def worker():
        result = event.wait()
        with lock:
            returned.append(result)

    threads = [threading.Thread(target=worker, daemon=True) for _ in range(count)]
    for thread in threads:
        thread.start()
    deadline = time.monotonic() + 10
    while len(returned) < count and time.monotonic() < deadline:
        event.notify_unblock()
        time.sleep(0.001)
    for thread in threads:
        thread.join(5)
    assert returned == [None] * count
    assert event.notify_unblock() is None


def test_repeated_notifications_with_looping_workers():
    num_threads = 6
    num_iterates = 20
    event = MultiEvent()
    state = {"running": True, "count": 0, "exited": 0}
    returned = []
    notify_results = []
    lock = threading.Lock()

    def worker():
        while state["running"]:
            with lock:
                state["count"] += 1
            result = event.wait()
            with lock:
                returned.append(result)
        with lock:
            state["exited"] += 1

    threads = [threading.Thread(target=worker, daemon=True) for _ in range(num_threads)]
    for thread in threads:
        thread.start()
    for _ in range(num_iterates):
        notify_results.append(event.notify())
    state["running"] = False
    deadline = time.monotonic() + 10
    while state["exited"] != num_threads and time.monotonic() < deadline:
        event.notify_unblock()
        time.sleep(0.001)
    for thread in threads:
        thread.join(5)

    assert notify_results == [None] * num_iterates
    assert state["exited"] == num_threads
    assert all(not thread.is_alive() for thread in threads)
    # every notify releases at least one waiter, and every entered wait returned
    assert len(returned) >= num_iterates
    assert len(returned) == state["count"]
    assert returned == [None] * state["count"]
    assert num_threads <= state["count"] <= num_threads * (num_iterates + 1)

    # with every worker gone there is no waiter left, so this must not block
    finisher = threading.Thread(target=event.notify_unblock, daemon=True)
    finisher.start()
    finisher.join(5)
    assert not finisher.is_alive()