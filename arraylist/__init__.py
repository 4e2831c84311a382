"""A contiguous-buffer array list with a bidirectional editing cursor."""

from .datastructures import ArrayList, Buffer, ListCursor
from .errors import (
    ArrayListError,
    ConcurrentModificationError,
    InvalidCursorStateError,
    OutOfRangeError,
)

__all__ = [
    "ArrayList",
    "Buffer",
    "ListCursor",
    "ArrayListError",
    "ConcurrentModificationError",
    "InvalidCursorStateError",
    "OutOfRangeError",
]

__version__ = "0.1.0"
