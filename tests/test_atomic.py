import threading

import pytest

from zipkit.atomic import INT32_MAX, INT32_MIN, AtomicInt32


def test_inc_and_dec_return_previous():
    a = AtomicInt32(5)
    assert a.inc() == 5
    assert a.load() == 6
    assert a.dec() == 6
    assert a.load() == 5


def test_add_returns_previous():
    a = AtomicInt32(10)
    assert a.add(-3) == 10
    assert a.load() == 7


def test_bitwise_ops():
    a = AtomicInt32(0b1100)
    assert a.bitwise_and(0b1010) == 0b1100
    assert a.load() == 0b1000
    assert a.bitwise_or(0b0001) == 0b1000
    assert a.load() == 0b1001


def test_wraps_at_limits():
    a = AtomicInt32(INT32_MAX)
    a.inc()
    assert a.load() == INT32_MIN
    a.dec()
    assert a.load() == INT32_MAX


def test_store_and_constructor_wrap():
    a = AtomicInt32(1 << 32)
    assert a.load() == 0
    a.store(INT32_MAX + 1)
    assert a.load() == INT32_MIN


def test_compare_and_set():
    a = AtomicInt32(3)
    assert a.compare_and_set(4, 9) is False
    assert a.load() == 3
    assert a.compare_and_set(3, 9) is True
    assert a.load() == 9


@pytest.mark.parametrize("delta", [1, -1])
def test_inc_dec_are_inverse(delta):
    a = AtomicInt32(0)
    (a.inc if delta > 0 else a.dec)()
    (a.dec if delta > 0 else a.inc)()
    assert a.load() == 0


def test_concurrent_increments_are_not_lost():
    a = AtomicInt32()
    threads_count, per_thread = 8, 2000

    def work():
        for _ in range(per_thread):
            a.inc()

    threads = [threading.Thread(target=work) for _ in range(threads_count)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert a.load() == threads_count * per_thread


def test_concurrent_cas_only_one_wins():
    a = AtomicInt32(0)
    wins = []
    barrier = threading.Barrier(6)

    def work(n):
        barrier.wait()
        if a.compare_and_set(0, n):
            wins.append(n)

    threads = [threading.Thread(target=work, args=(n,)) for n in range(1, 7)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(wins) == 1
    assert a.load() == wins[0]