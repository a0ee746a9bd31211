import time

from philodine.timing import now_ms, wait_until


def test_now_ms_tracks_wall_clock():
    before = int(time.time() * 1000)
    value = now_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1


def test_now_ms_does_not_go_backwards():
    first = now_ms()
    second = now_ms()
    assert second >= first


def test_wait_until_cancelled():
    assert wait_until(None) is False


def test_wait_until_future():
    target = now_ms() + 30
    assert wait_until(target) is True
    assert now_ms() >= target


def test_wait_until_past_returns_promptly():
    start = time.monotonic()
    assert wait_until(now_ms() - 1000) is True
    assert time.monotonic() - start < 0.5