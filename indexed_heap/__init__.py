"""Indexed min-priority-queue backed by a dynamic array and a chained hash table."""

from .datastructures import (
    DuplicateValueError,
    EmptyCollectionError,
    Heap,
    HeapError,
    ValueNotPresentError,
)

__version__ = "0.1.0"

__all__ = [
    "Heap",
    "HeapError",
    "EmptyCollectionError",
    "DuplicateValueError",
    "ValueNotPresentError",
]
