from .buffer import Buffer
from .array_list import ArrayList
from .cursor import ListCursor

__all__ = [
    "Buffer",
    "ArrayList",
    "ListCursor",
]
