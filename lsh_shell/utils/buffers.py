"""
Growable buffer utilities for lsh-shell.

The line reader and the tokenizer both collect an unbounded number of
items. GrowableBuffer keeps a preallocated backing list and doubles it when
full; if the interpreter runs out of memory while growing, the failure is
turned into the fatal AllocationError.
"""

import logging
from typing import Any, List

from ..exceptions import AllocationError

logger = logging.getLogger(__name__)


class GrowableBuffer:
    """
    Sequence with amortized-doubling capacity.

    Usage:
        buffer = GrowableBuffer(4)
        for char in "hello":
            buffer.append(char)
        buffer.join()        # 'hello'
        buffer.capacity      # 8

    Attributes:
        _items: Backing storage, only the first _size slots are live
        _size: Number of appended items
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._items: List[Any] = [None] * capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def append(self, item: Any) -> None:
        """
        Append an item, growing the backing storage if it is full.

        Raises:
            AllocationError: If the backing storage cannot be enlarged
        """
        if self._size >= len(self._items):
            self._grow()
        self._items[self._size] = item
        self._size += 1

    def _grow(self) -> None:
        new_capacity = len(self._items) * 2
        try:
            self._items.extend([None] * (new_capacity - len(self._items)))
        except MemoryError as e:
            raise AllocationError() from e
        logger.debug("buffer grown to %d slots", new_capacity)

    def items(self) -> List[Any]:
        """Return the live items as a new list."""
        return self._items[:self._size]

    def join(self, separator: str = '') -> str:
        """Join live string items into a single string."""
        return separator.join(self._items[:self._size])

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __repr__(self):
        return f"GrowableBuffer(size={self._size}, capacity={self.capacity})"
