from __future__ import annotations
import ctypes
import logging
from typing import Generic, Iterator, Optional, TypeVar

from .. import config

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Buffer(Generic[T]):
    """Contiguous storage for the list: a raw array plus a logical size.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • `capacity` is always the length of that array; `size` counts the live
      slots at the front of it. Slots at or past `size` are never read.
    • Capacity only ever grows, by `growth_factor` or by exactly the amount
      a bulk insertion needs when one multiplication is not enough.
    • The two shift primitives move runs of slots in place so the list can
      open or close gaps without reallocating.
    """

    __slots__ = ("_buf", "_size", "_capacity", "_growth_factor")

    def __init__(self, capacity: Optional[int] = None, growth_factor: Optional[int] = None) -> None:
        if capacity is None:
            capacity = config.DEFAULT_CAPACITY
        if growth_factor is None:
            growth_factor = config.GROWTH_FACTOR
        if growth_factor < 2:
            raise ValueError("growth_factor must be >= 2")
        self._buf = self._make_array(capacity)
        self._capacity = capacity
        self._size = 0
        self._growth_factor = growth_factor

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move the live elements into a fresh array of `new_capacity` slots."""
        new_buf = self._make_array(new_capacity)

        for i in range(self._size):
            new_buf[i] = self._buf[i]

        logger.debug("buffer grown from %d to %d slots (size=%d)", self._capacity, new_capacity, self._size)
        self._buf = new_buf
        self._capacity = new_capacity

    # ------------------------------ capacity ---------------------------------

    @property
    def size(self) -> int:
        return self._size

    @size.setter
    def size(self, value: int) -> None:
        if value < 0 or value > self._capacity:
            raise ValueError(f"size must be in [0, {self._capacity}], got {value}")
        self._size = value

    @property
    def capacity(self) -> int:
        return self._capacity

    def ensure_capacity(self, required: int) -> None:
        """Make sure at least `required` slots exist.

        Multiplies capacity by the growth factor when that is enough, and
        otherwise grows to exactly `required`. Never shrinks.
        """
        if required <= self._capacity:
            return
        grown = max(self._capacity * self._growth_factor, 1)
        self._resize(grown if grown >= required else required)

    def grow_if_full(self) -> None:
        """Guarantee room for one more element at index `size`."""
        self.ensure_capacity(self._size + 1)

    # ------------------------------- slots -----------------------------------

    def read(self, idx: int) -> T:
        return self._buf[idx]  # type: ignore[return-value]

    def write(self, idx: int, value: T) -> None:
        self._buf[idx] = value

    def release(self, start: int, end: int) -> None:
        """Drop references held by stale slots in `[start, end)`."""
        for i in range(start, end):
            self._buf[i] = None

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    # ------------------------------- shifts ----------------------------------

    def shift_right(self, start: int, end: int, amount: int) -> None:
        """Move slots `[start, end]` to `[start + amount, end + amount]`.

        Walks from the high end down so no source slot is overwritten
        before it has been copied.
        """
        assert end + amount < self._capacity or end < start
        buf = self._buf
        for i in range(end, start - 1, -1):
            buf[i + amount] = buf[i]

    def shift_left(self, start: int, end: int, amount: int) -> None:
        """Move slots `[start, end]` to `[start - amount, end - amount]`.

        Walks from the low end up, mirroring :meth:`shift_right`.
        """
        assert start - amount >= 0 or end < start
        buf = self._buf
        for i in range(start, end + 1):
            buf[i - amount] = buf[i]
