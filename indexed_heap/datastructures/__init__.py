from .dynamic_array import DynamicArray
from .linked_list import LinkedList
from .hash_table import HashTable
from .heap import Entry, Heap
from .errors import (
    ArrayIndexError,
    DuplicateValueError,
    EmptyCollectionError,
    HeapError,
    ValueNotPresentError,
)

__all__ = [
    "DynamicArray",
    "LinkedList",
    "HashTable",
    "Entry",
    "Heap",
    "HeapError",
    "ArrayIndexError",
    "EmptyCollectionError",
    "DuplicateValueError",
    "ValueNotPresentError",
]
