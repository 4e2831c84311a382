import logging

import pytest

from arraylist import config
from arraylist.datastructures import Buffer


def fill(buf, values):
    for v in values:
        buf.grow_if_full()
        buf.write(buf.size, v)
        buf.size += 1


def test_default_capacity_comes_from_config():
    assert Buffer().capacity == config.DEFAULT_CAPACITY
    assert Buffer(7).capacity == 7


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Buffer(-1)


def test_growth_factor_below_two_rejected():
    with pytest.raises(ValueError):
        Buffer(4, growth_factor=1)


def test_grow_if_full_doubles_and_keeps_order():
    buf = Buffer(2)
    fill(buf, ["a", "b", "c"])
    assert buf.capacity == 4
    assert list(buf) == ["a", "b", "c"]


def test_zero_capacity_grows_to_one():
    buf = Buffer(0)
    fill(buf, [1])
    assert buf.capacity == 1
    fill(buf, [2, 3])
    assert buf.capacity == 4
    assert list(buf) == [1, 2, 3]


def test_ensure_capacity_grows_exactly_when_doubling_is_not_enough():
    buf = Buffer(4)
    buf.ensure_capacity(11)
    assert buf.capacity == 11


def test_ensure_capacity_prefers_doubling():
    buf = Buffer(4)
    buf.ensure_capacity(6)
    assert buf.capacity == 8


def test_ensure_capacity_never_shrinks():
    buf = Buffer(10)
    buf.ensure_capacity(3)
    assert buf.capacity == 10


def test_growth_is_logged(caplog):
    buf = Buffer(1)
    with caplog.at_level(logging.DEBUG, logger="arraylist.datastructures.buffer"):
        fill(buf, [1, 2])
    assert "buffer grown from 1 to 2 slots" in caplog.text


def test_shift_right_opens_gap():
    buf = Buffer(6)
    fill(buf, [1, 2, 3, 4])
    buf.shift_right(1, 3, 2)
    assert [buf.read(i) for i in (0, 3, 4, 5)] == [1, 2, 3, 4]


def test_shift_left_closes_gap():
    buf = Buffer(6)
    fill(buf, [1, 2, 3, 4, 5])
    buf.shift_left(3, 4, 2)
    assert [buf.read(i) for i in range(3)] == [1, 4, 5]


def test_empty_shift_is_noop():
    buf = Buffer(2)
    fill(buf, [1, 2])
    buf.shift_right(2, 1, 1)
    buf.shift_left(2, 1, 1)
    assert list(buf) == [1, 2]


def test_empty_shifts_at_the_front_are_noops():
    buf = Buffer(0)
    buf.shift_right(0, -1, 1)
    buf.shift_left(0, -1, 1)
    assert buf.size == 0


def test_size_cannot_exceed_capacity():
    buf = Buffer(2)
    with pytest.raises(ValueError):
        buf.size = 3
