from __future__ import annotations
from collections.abc import MutableSequence
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar, overload

from ..errors import OutOfRangeError
from .buffer import Buffer
from .cursor import ListCursor

T = TypeVar("T")


class ArrayList(MutableSequence, Generic[T]):
    """An insertion-order list backed by one contiguous growable buffer.

    Implementation notes
    --------------------
    • Storage is a :class:`Buffer` (a ctypes `py_object` array plus a
      logical size); capacity grows geometrically and never shrinks.
    • Positional inserts/removes open or close gaps by shifting runs of
      slots in place.
    • Searches compare by equality; a ``None`` target never matches.
    • `sub_list` and slicing return independent copies, not views.
    • The explicit API (`get`, `set`, `insert`, `remove_at`, ...) rejects
      negative indices. The `[]` operators normalise them like a built-in
      list does.
    """

    __slots__ = ("_store", "_mod_count")

    def __init__(self, it: Optional[Iterable[T]] = None, capacity: Optional[int] = None) -> None:
        self._store: Buffer[T] = Buffer(capacity)
        self._mod_count = 0

        if it is not None:
            self.add_all(it)

    # ------------------------------- internals -------------------------------

    def _check_element_index(self, idx: int, action: str) -> None:
        """Bounds for reads/writes/removals: 0 <= idx < size."""
        if idx < 0 or idx >= self._store.size:
            raise OutOfRangeError(action, idx, self._store.size)

    def _check_position_index(self, idx: int, action: str) -> None:
        """Bounds for insertion points: 0 <= idx <= size."""
        if idx < 0 or idx > self._store.size:
            raise OutOfRangeError(action, idx, self._store.size)

    def _normalize_index(self, idx: int, action: str) -> int:
        """Map a negative index onto [0, size) and validate bounds.

        Raises OutOfRangeError naming the index as the caller passed it.
        """
        size = self._store.size
        i = idx + size if idx < 0 else idx
        if i < 0 or i >= size:
            raise OutOfRangeError(action, idx, size)
        return i

    def _close_gap(self, idx: int) -> T:
        """Remove the slot at `idx` and return what it held."""
        store = self._store
        value = store.read(idx)
        store.shift_left(idx + 1, store.size - 1, 1)
        store.size -= 1
        store.release(store.size, store.size + 1)
        self._mod_count += 1
        return value

    def _compact(self, keep) -> bool:
        """Keep only elements for which `keep(el)` is true, in one pass.

        Every element is tested before any slot is written, so an exception
        from `keep` leaves the list unchanged.
        """
        store = self._store
        old_size = store.size
        flags = [keep(store.read(i)) for i in range(old_size)]
        write = 0
        for read in range(old_size):
            if flags[read]:
                value = store.read(read)
                if write != read:
                    store.write(write, value)
                write += 1
        if write == old_size:
            return False
        store.size = write
        store.release(write, old_size)
        self._mod_count += 1
        return True

    # ------------------------------ inspection -------------------------------

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return self._store.capacity

    def size(self) -> int:
        return self._store.size

    def is_empty(self) -> bool:
        return self._store.size == 0

    def contains(self, value: Any) -> bool:
        return self.index_of(value) >= 0

    def get(self, idx: int) -> T:
        """Return the element at `idx`.

        Raises:
            OutOfRangeError: unless 0 <= idx < size.
        """
        self._check_element_index(idx, "get element at")
        return self._store.read(idx)

    def index_of(self, value: Any) -> int:
        """First index holding an element equal to `value`, else -1.

        A ``None`` target is never found.
        """
        if value is None:
            return -1
        store = self._store
        for i in range(store.size):
            if store.read(i) == value:
                return i
        return -1

    def last_index_of(self, value: Any) -> int:
        """Last index holding an element equal to `value`, else -1."""
        if value is None:
            return -1
        store = self._store
        for i in range(store.size - 1, -1, -1):
            if store.read(i) == value:
                return i
        return -1

    def contains_all(self, c: Iterable[Any]) -> bool:
        """True if every element of `c` is present in this list.

        Builds a membership set from the list once; elements must be hashable.
        """
        lookup = set(self._store)
        for el in c:
            if el not in lookup:
                return False
        return True

    # ------------------------------- mutation --------------------------------

    def set(self, idx: int, value: T) -> T:
        """Replace the element at `idx` and return the old one."""
        self._check_element_index(idx, "set element at")
        old = self._store.read(idx)
        self._store.write(idx, value)
        return old

    def add(self, value: T) -> bool:
        """Append `value`. Amortized O(1); always returns True."""
        store = self._store
        store.grow_if_full()
        store.write(store.size, value)
        store.size += 1
        self._mod_count += 1
        return True

    def insert(self, idx: int, value: T) -> None:
        """Insert `value` before position `idx` (0 <= idx <= size).

        Complexity: O(size - idx) due to right-shift of trailing elements.
        """
        self._check_position_index(idx, "add element to")
        store = self._store
        store.grow_if_full()
        store.shift_right(idx, store.size - 1, 1)
        store.write(idx, value)
        store.size += 1
        self._mod_count += 1

    def remove_at(self, idx: int) -> T:
        """Remove and return the element at `idx`.

        Complexity: O(size - idx) due to left-shift of trailing elements.
        """
        self._check_element_index(idx, "remove element at")
        return self._close_gap(idx)

    def remove(self, value: Any) -> bool:  # type: ignore[override]
        """Remove the first element equal to `value`.

        Returns False, leaving the list untouched, when there is none.
        """
        i = self.index_of(value)
        if i < 0:
            return False
        self._close_gap(i)
        return True

    def add_all(self, c: Iterable[T], index: Optional[int] = None) -> bool:
        """Insert every element of `c`, in iteration order, at `index`.

        Appends when `index` is None. The buffer grows at most once for the
        whole batch. Returns True if anything was added.
        """
        store = self._store
        if index is None:
            index = store.size
        else:
            self._check_position_index(index, "add elements to")

        # Snapshot first: `c` may be this list or a one-shot iterator.
        items = list(c)
        n = len(items)
        if n == 0:
            return False

        store.ensure_capacity(store.size + n)
        store.shift_right(index, store.size - 1, n)
        for offset, value in enumerate(items):
            store.write(index + offset, value)
        store.size += n
        self._mod_count += 1
        return True

    def clear(self) -> None:
        """Remove all items. Keeps capacity to avoid churn on re-use."""
        store = self._store
        store.release(0, store.size)
        store.size = 0
        self._mod_count += 1

    def retain_all(self, c: Iterable[Any]) -> bool:
        """Keep only elements also present in `c`; True if the list changed."""
        lookup = set(c)
        return self._compact(lambda el: el in lookup)

    def remove_all(self, c: Iterable[Any]) -> bool:
        """Drop every element present in `c`; True if the list changed."""
        lookup = set(c)
        return self._compact(lambda el: el not in lookup)

    # ------------------------------- copying ---------------------------------

    def sub_list(self, lo: int, hi: int) -> "ArrayList[T]":
        """Return a new, independent list holding a copy of `[lo, hi)`.

        Raises:
            OutOfRangeError: unless 0 <= lo < size and 0 <= hi <= size.
        """
        size = self._store.size
        if lo < 0 or lo >= size or hi < 0 or hi > size:
            raise OutOfRangeError(f"sub-list elements from index {lo} to", hi, size)
        return ArrayList(self._store.read(i) for i in range(lo, hi))

    def to_array(self, dst: Optional[List[Any]] = None) -> List[Any]:
        """Snapshot the live elements into a Python list.

        When `dst` is given and large enough it is filled in place and
        returned; if it has spare room the slot right after the last element
        is set to None. A too-small `dst` is ignored and a new list returned.
        """
        store = self._store
        size = store.size
        if dst is None or len(dst) < size:
            return [store.read(i) for i in range(size)]
        for i in range(size):
            dst[i] = store.read(i)
        if len(dst) > size:
            dst[size] = None
        return dst

    def copy(self) -> "ArrayList[T]":
        """Shallow copy with its own buffer."""
        return ArrayList(self._store)

    # ------------------------------- cursors ---------------------------------

    def iterator(self) -> ListCursor[T]:
        return ListCursor(self)

    def list_iterator(self, index: int = 0) -> ListCursor[T]:
        """Cursor whose first ``next()`` returns the element at `index`.

        Raises:
            OutOfRangeError: unless 0 <= index <= size.
        """
        self._check_position_index(index, "iterate from")
        return ListCursor(self, index)

    # ----------------------------- Python protocol ---------------------------

    def __len__(self) -> int:
        return self._store.size

    def __bool__(self) -> bool:
        return self._store.size != 0

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    @overload
    def __getitem__(self, idx: int) -> T: ...
    @overload
    def __getitem__(self, idx: slice) -> "ArrayList[T]": ...

    def __getitem__(self, idx):
        """Get an item or a slice.

        • `lst[i]` returns the element at i (supports negative indices).
        • `lst[a:b:c]` returns a new ArrayList with the slice.
        """
        if isinstance(idx, slice):
            start, stop, step = idx.indices(self._store.size)
            return ArrayList(self._store.read(i) for i in range(start, stop, step))
        return self.get(self._normalize_index(idx, "get element at"))

    def __setitem__(self, idx: int, value: T) -> None:
        if isinstance(idx, slice):
            raise TypeError("ArrayList does not support slice assignment")
        self.set(self._normalize_index(idx, "set element at"), value)

    def __delitem__(self, idx: int) -> None:
        if isinstance(idx, slice):
            raise TypeError("ArrayList does not support slice deletion")
        self.remove_at(self._normalize_index(idx, "remove element at"))

    def append(self, value: T) -> None:
        self.add(value)

    def extend(self, values: Iterable[T]) -> None:
        self.add_all(values)

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        """Like :meth:`list.index`, built on :meth:`index_of`.

        Raises:
            ValueError: if the value is not present in `[start, stop)`.
        """
        size = self._store.size
        start, stop, _ = slice(start, stop).indices(size)
        if value is not None:
            for i in range(start, stop):
                if self._store.read(i) == value:
                    return i
        raise ValueError(f"{value!r} is not in ArrayList")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, (ArrayList, list, tuple)):
            return NotImplemented
        if len(other) != self._store.size:
            return False
        return all(a == b for a, b in zip(self._store, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ArrayList({self.to_array()!r})"
