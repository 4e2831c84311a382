from __future__ import annotations
from typing import TYPE_CHECKING, Generic, Iterator, TypeVar

from ..errors import ConcurrentModificationError, InvalidCursorStateError

if TYPE_CHECKING:
    from .array_list import ArrayList

T = TypeVar("T")


class ListCursor(Generic[T]):
    """Bidirectional cursor over an :class:`ArrayList`.

    The cursor has no storage of its own: it keeps a position and an
    ``editable`` flag and reads/writes the owning list's buffer directly.

    ``set`` and ``remove`` act on the slot returned by the last ``next`` or
    ``previous`` call and are only legal while ``editable`` is true. Any
    structural edit through the cursor (``add``/``remove``) clears the flag.

    Structurally modifying the list by any other path while the cursor is in
    use is a caller error; the cursor notices it on its next access and
    raises :class:`ConcurrentModificationError`.
    """

    __slots__ = ("_owner", "_position", "_last", "_editable", "_expected_mods")

    def __init__(self, owner: "ArrayList[T]", position: int = 0) -> None:
        self._owner = owner
        self._position = position
        self._last = -1
        self._editable = False
        self._expected_mods = owner._mod_count

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _check_for_comodification(self) -> None:
        if self._owner._mod_count != self._expected_mods:
            raise ConcurrentModificationError("list was structurally modified outside this cursor")

    def _sync(self) -> None:
        self._owner._mod_count += 1
        self._expected_mods = self._owner._mod_count

    # -----------------------------
    # Traversal
    # -----------------------------
    @property
    def editable(self) -> bool:
        return self._editable

    def has_next(self) -> bool:
        """Return True if ``next()`` can be called without error."""
        return self._position < self._owner._store.size

    def next(self) -> T:
        """Return the next element and advance.

        Raises:
            StopIteration: if there is no next element.
        """
        self._check_for_comodification()
        if not self.has_next():
            raise StopIteration
        value = self._owner._store.read(self._position)
        self._last = self._position
        self._position += 1
        self._editable = True
        return value

    def has_previous(self) -> bool:
        """Return True if ``previous()`` can be called without error."""
        return self._position > 0

    def previous(self) -> T:
        """Step back and return the element there.

        Raises:
            StopIteration: if the cursor is already at the front.
        """
        self._check_for_comodification()
        if not self.has_previous():
            raise StopIteration
        self._position -= 1
        self._last = self._position
        self._editable = True
        return self._owner._store.read(self._position)

    def next_index(self) -> int:
        """Index ``next()`` would return; the list size at the end."""
        return self._position

    def previous_index(self) -> int:
        """Index ``previous()`` would return; -1 at the front."""
        return self._position - 1

    # -----------------------------
    # Editing
    # -----------------------------
    def set(self, value: T) -> None:
        """Overwrite the slot returned by the last read.

        Can be repeated, but not after ``add``/``remove``.

        Raises:
            InvalidCursorStateError: if there is no read to act on.
        """
        if not self._editable:
            raise InvalidCursorStateError(
                "Cannot set element if add/remove has been called after the last call to next/previous"
            )
        self._check_for_comodification()
        self._owner._store.write(self._last, value)

    def remove(self) -> None:
        """Remove the slot returned by the last read.

        Raises:
            InvalidCursorStateError: if there is no read to act on.
        """
        if not self._editable:
            raise InvalidCursorStateError("Cannot remove element without first calling next/previous")
        self._check_for_comodification()
        store = self._owner._store
        store.shift_left(self._last + 1, store.size - 1, 1)
        store.size -= 1
        store.release(store.size, store.size + 1)
        if self._last < self._position:
            self._position -= 1
        self._last = -1
        self._editable = False
        self._sync()

    def add(self, value: T) -> None:
        """Insert `value` at the cursor; ``next()`` skips it, ``previous()`` returns it."""
        self._check_for_comodification()
        store = self._owner._store
        store.grow_if_full()
        store.shift_right(self._position, store.size - 1, 1)
        store.write(self._position, value)
        store.size += 1
        self._position += 1
        self._last = -1
        self._editable = False
        self._sync()

    # -----------------------------
    # Python iterator protocol
    # -----------------------------
    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self.next()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ListCursor(position={self._position}, editable={self._editable})"
