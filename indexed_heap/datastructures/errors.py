"""Exceptions raised by the indexed heap and its backing structures.

Each error subclasses the builtin a caller would already catch for the same
situation, so ``except IndexError`` around a ``poll()`` keeps working.
"""


class HeapError(Exception):
    """Marker base for every error raised by this package."""


class ArrayIndexError(HeapError, IndexError):
    """Array access outside ``[0, size)``."""


class EmptyCollectionError(HeapError, IndexError):
    """Nothing to return: peek/poll/pop on an empty structure."""


class DuplicateValueError(HeapError, ValueError):
    """The value is already stored in the heap."""


class ValueNotPresentError(HeapError, KeyError):
    """The value is not stored in the heap."""
