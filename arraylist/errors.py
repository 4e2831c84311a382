"""Exception types raised by the list and its cursor."""

from __future__ import annotations


class ArrayListError(Exception):
    """Base class for every error raised by this package."""


class OutOfRangeError(ArrayListError, IndexError):
    """An index argument fell outside its bound for the current size."""

    def __init__(self, action: str, index: int, size: int) -> None:
        super().__init__(f"Cannot {action} index {index} from list of size {size}")
        self.index = index
        self.size = size


class InvalidCursorStateError(ArrayListError, RuntimeError):
    """Cursor ``set``/``remove`` issued without a preceding read."""


class ConcurrentModificationError(ArrayListError, RuntimeError):
    """The list was structurally modified behind a live cursor."""
