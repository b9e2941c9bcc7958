import threading

from cutil.rcu import RCU


def test_emplace_then_access():
    rcu = RCU([0, 0])
    assert rcu.emplace([1, 1]) == 0
    with rcu.access() as data:
        assert data == [1, 1]


def test_copy_data_is_independent():
    rcu = RCU([[1], [2]])
    copied = rcu.copy_data()
    copied[0].append(9)
    with rcu.access() as data:
        assert data == [[1], [2]]


def test_lock_and_unlock_track_readers():
    rcu = RCU("a")
    slot = rcu.lock()
    assert slot.data == "a"
    assert slot.refcount == 1
    rcu.unlock(slot)
    assert slot.refcount == 0


def test_writer_waits_for_reader_on_old_slot():
    rcu = RCU("first")
    slot = rcu.lock()
    assert rcu.emplace("second") == 0
    results = []
    writer = threading.Thread(target=lambda: results.append(rcu.emplace("third")), daemon=True)
    writer.start()
    writer.join(0.1)
    assert writer.is_alive()
    assert slot.data == "first"
    rcu.unlock(slot)
    writer.join(5)
    assert results and results[0] > 0
    with rcu.access() as data:
        assert data == "third"


def test_readers_never_see_mixed_data():
    size = 16
    rcu = RCU([0] * size)
    running = True
    errors = []

    def reader():
        while running:
            with rcu.access() as data:
                if any(n != data[0] for n in data):
                    errors.append(list(data))

    readers = [threading.Thread(target=reader, daemon=True) for _ in range(4)]
    for thread in readers:
        thread.start()
    for i in range(1, 50):
        tmp = rcu.copy_data()
        for j in range(size):
            tmp[j] = i % 10
        rcu.emplace(tmp)
    running = False
    for thread in readers:
        thread.join(5)
    assert errors == []
    with rcu.access() as data:
        assert data == [49 % 10] * size