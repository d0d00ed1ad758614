import time

import pytest

from quadguide.timing import absolute_wait, get_system_time, get_time_second


def test_system_time_is_microseconds():
    before = time.time()
    t = get_system_time()
    after = time.time()
    assert before * 1e6 - 1 <= t <= after * 1e6 + 1


def test_time_second_tracks_system_time():
    assert abs(get_time_second() - get_system_time() * 1e-6) < 0.5


def test_system_time_does_not_go_backwards():
    a = get_system_time()
    b = get_system_time()
    assert b >= a


def test_absolute_wait_waits_until_deadline():
    start = get_system_time()
    absolute_wait(start, 20000)
    assert get_system_time() - start >= 20000


def test_absolute_wait_warns_when_late():
    start = get_system_time() - 1_000_000
    with pytest.warns(RuntimeWarning, match="not enough"):
        absolute_wait(start, 1000)
    assert get_system_time() - start >= 1000