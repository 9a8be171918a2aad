from __future__ import annotations
import ctypes
import logging
from typing import Generic, Iterator, List, Optional, TypeVar

from .errors import ArrayIndexError, EmptyCollectionError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """A bounds-checked growable array used as backing storage for the heap.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Capacity doubles whenever an operation would exceed it; it never shrinks.
    • Only indices in [0, size) are addressable; negative indices are errors.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    # Initial allocated capacity for the dynamic array.
    _INITIAL_CAPACITY = 8

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is None:
            capacity = self._INITIAL_CAPACITY
        self._capacity = max(1, capacity)
        self._buf = self._make_array(self._capacity)
        self._size = 0

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        buf = (capacity * ctypes.py_object)()
        # ctypes leaves py_object slots NULL; reading one raises ValueError.
        for i in range(capacity):
            buf[i] = None
        return buf

    def _grow_if_needed(self, new_size: int) -> None:
        """Double capacity until `new_size` fits. Does not change size."""
        if new_size <= self._capacity:
            return
        new_capacity = self._capacity
        while new_capacity < new_size:
            new_capacity *= 2
        logger.debug("growing array capacity %d -> %d", self._capacity, new_capacity)

        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]
        self._buf = new_buf
        self._capacity = new_capacity

    def _check_index(self, idx: int) -> None:
        if idx < 0 or idx >= self._size:
            raise ArrayIndexError(f"array index {idx} out of range [0, {self._size})")

    # --------------------------------- API -----------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        """Number of allocated slots (always >= size)."""
        return self._capacity

    def get(self, idx: int) -> T:
        """Return the element at `idx`.

        Raises:
            ArrayIndexError: unless 0 <= idx < size.
        """
        self._check_index(idx)
        return self._buf[idx]  # type: ignore[return-value]

    def put(self, idx: int, value: T) -> None:
        """Overwrite the element at `idx`.

        Raises:
            ArrayIndexError: unless 0 <= idx < size.
        """
        self._check_index(idx)
        self._buf[idx] = value

    def append(self, value: T) -> None:
        """Append `value` to the end. Amortized O(1)."""
        self._grow_if_needed(self._size + 1)
        self._buf[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the last element. O(1); capacity is kept.

        Raises:
            EmptyCollectionError: if the array is empty.
        """
        if self._size == 0:
            raise EmptyCollectionError("pop from empty array")
        self._size -= 1
        val = self._buf[self._size]
        self._buf[self._size] = None
        return val  # type: ignore[return-value]

    def resize(self, new_size: int) -> None:
        """Set the logical size directly, growing capacity first if needed.

        Slots exposed by growing the size read as None until written.
        """
        if new_size < 0:
            raise ValueError("size must be >= 0")
        self._grow_if_needed(new_size)
        for i in range(new_size, self._size):
            self._buf[i] = None
        self._size = new_size

    def to_list(self) -> List[T]:
        """Copy the live elements into a plain Python list."""
        return [self._buf[i] for i in range(self._size)]  # type: ignore[misc]

    __getitem__ = get
    __setitem__ = put

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Yield items from index 0 up to size - 1."""
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"DynamicArray({self.to_list()!r}, capacity={self._capacity})"
