import threading
from datetime import datetime, timedelta

import pytest

from gbstream.stat.queue import MAX_CAPACITY, CircleQueue, PercentData

BASE = datetime(2024, 1, 2, 3, 4, 5)


def sample(n):
    return PercentData(time=BASE + timedelta(seconds=n), used=float(n))


def test_empty_queue():
    q = CircleQueue(3)
    assert q.snapshot() == []
    assert q.last() is None
    assert len(q) == 0


def test_push_below_capacity_keeps_order():
    q = CircleQueue(5)
    items = [sample(i) for i in range(3)]
    for item in items:
        q.push(item)
    assert q.snapshot() == items
    assert len(q) == 3


def test_exactly_full_keeps_all():
    q = CircleQueue(3)
    items = [sample(i) for i in range(3)]
    for item in items:
        q.push(item)
    assert q.snapshot() == items


def test_overflow_drops_oldest():
    q = CircleQueue(3)
    items = [sample(i) for i in range(5)]
    for item in items:
        q.push(item)
    assert q.snapshot() == items[2:]
    assert len(q) == 3


def test_last_is_newest():
    q = CircleQueue(2)
    items = [sample(i) for i in range(4)]
    for item in items:
        q.push(item)
        assert q.last() == item


def test_capacity_one():
    q = CircleQueue(1)
    q.push(sample(1))
    q.push(sample(2))
    assert q.snapshot() == [sample(2)]


def test_snapshot_is_a_copy():
    q = CircleQueue(3)
    q.push(sample(1))
    snap = q.snapshot()
    snap.append(sample(2))
    assert q.snapshot() == [sample(1)]


@pytest.mark.parametrize("size", [0, -1, MAX_CAPACITY + 1])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        CircleQueue(size)


def test_max_capacity_accepted():
    q = CircleQueue(MAX_CAPACITY)
    assert q.capacity == MAX_CAPACITY


def test_concurrent_pushes_never_exceed_capacity():
    q = CircleQueue(10)

    def worker():
        for i in range(200):
            q.push(sample(i))

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(q) == 10
    assert len(q.snapshot()) == q.capacity


def test_to_dict():
    data = PercentData(time=BASE, used=1.5, up=2.0, down=3.0)
    assert data.to_dict() == {
        "time": "2024-01-02 03:04:05",
        "used": 1.5,
        "up": 2.0,
        "down": 3.0,
    }