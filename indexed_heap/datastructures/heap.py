from __future__ import annotations
from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .dynamic_array import DynamicArray
from .errors import DuplicateValueError, EmptyCollectionError, ValueNotPresentError
from .hash_table import HashTable

V = TypeVar("V")
P = TypeVar("P")


class Entry(Generic[V, P]):
    """A value and its priority, stored in one heap slot."""

    __slots__ = ("value", "priority")

    def __init__(self, value: V, priority: P) -> None:
        self.value = value
        self.priority = priority

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Entry({self.value!r}, {self.priority!r})"


class Heap(Generic[V, P]):
    """A binary min-heap of distinct values, each with a priority.

    The slots of ``_data`` form a complete binary tree: ``_data[0]`` is the
    root, the children of slot ``i`` are ``2i+1`` and ``2i+2``, and its parent
    is ``(i-1)//2``. ``_index`` maps every stored value to its slot so that
    membership and priority changes need no scan.

    Invariants (hold after every public call):
      1. slots ``[0, size)`` are all occupied.
      2. every non-root slot's priority is >= its parent's.
      3. no value is stored twice (equal priorities are fine).
      4. ``len(_index) == len(_data)``.
      5. ``_index.get(_data[i].value) == i`` for every slot ``i``.
    """

    __slots__ = ("_data", "_index")

    _INITIAL_CAPACITY = 10

    def __init__(self, items: Optional[Iterable[Tuple[V, P]]] = None) -> None:
        self._data: DynamicArray[Entry[V, P]] = DynamicArray(self._INITIAL_CAPACITY)
        self._index: HashTable[V, int] = HashTable()
        if items is not None:
            for value, priority in items:
                self.add(value, priority)

    # -----------------------------
    # Internal helpers
    # -----------------------------
    @staticmethod
    def _parent(idx: int) -> int:
        return (idx - 1) // 2

    @staticmethod
    def _left(idx: int) -> int:
        return 2 * idx + 1

    @staticmethod
    def _right(idx: int) -> int:
        return 2 * idx + 2

    def swap(self, i: int, j: int) -> None:
        """Exchange slots i and j and point both index entries at their new slots.

        Every move made while restoring heap order goes through here.
        """
        data = self._data
        a = data.get(i)
        b = data.get(j)
        self._index.put(b.value, i)
        self._index.put(a.value, j)
        data.put(i, b)
        data.put(j, a)

    # Paths are computed before any slot moves; all priority comparisons
    # happen in _path_up/_path_down, none in _follow.

    def _path_up(self, idx: int, priority: P) -> List[int]:
        """Ancestors of slot idx that an entry with *priority* would bubble past."""
        data = self._data
        path = []
        while idx > 0:
            parent = self._parent(idx)
            if not priority < data.get(parent).priority:
                break
            path.append(parent)
            idx = parent
        return path

    def _path_down(self, idx: int, priority: P, size: Optional[int] = None) -> List[int]:
        """Descendants of slot idx that an entry with *priority* would bubble past.

        When both children have equal priority the right one is chosen.
        Only slots below *size* (default: the heap size) count as occupied.
        """
        data = self._data
        n = len(data) if size is None else size
        path = []
        while self._left(idx) < n:
            child = self._left(idx)
            right = self._right(idx)
            if right < n and not data.get(child).priority < data.get(right).priority:
                child = right
            if not data.get(child).priority < priority:
                break
            path.append(child)
            idx = child
        return path

    def _follow(self, idx: int, path: List[int]) -> None:
        """Swap the entry at idx along *path*, one swap per step."""
        for nxt in path:
            self.swap(idx, nxt)
            idx = nxt

    # -----------------------------
    # Public API
    # -----------------------------
    def add(self, value: V, priority: P) -> None:
        """Add *value* with *priority*. Expected O(log n), worst case O(n).

        Raises:
            DuplicateValueError: if *value* is already in the heap.
            TypeError: if *priority* is None or cannot be compared with
                the priorities it would bubble past.
        """
        if priority is None:
            raise TypeError("priority must not be None")
        if self._index.contains_key(value):
            raise DuplicateValueError(f"{value!r} is already in the heap")
        idx = len(self._data)
        path = self._path_up(idx, priority)
        self._data.append(Entry(value, priority))
        self._index.put(value, idx)
        self._follow(idx, path)

    def peek(self) -> V:
        """Return the value with the lowest priority without removing it. O(1).

        Raises:
            EmptyCollectionError: if the heap is empty.
        """
        if len(self._data) == 0:
            raise EmptyCollectionError("peek on empty heap")
        return self._data.get(0).value

    def poll(self) -> V:
        """Remove and return the value with the lowest priority. Expected O(log n).

        Raises:
            EmptyCollectionError: if the heap is empty.
        """
        if len(self._data) == 0:
            raise EmptyCollectionError("poll from empty heap")
        n = len(self._data)
        top = self._data.get(0).value
        last = self._data.get(n - 1)
        # The last entry moves to the root; slot n-1 is about to be vacated.
        path = self._path_down(0, last.priority, n - 1) if n > 1 else []
        self._index.remove(top)
        self._data.pop()
        if n > 1:
            self._data.put(0, last)
            self._index.put(last.value, 0)
            self._follow(0, path)
        return top

    def contains(self, value: V) -> bool:
        """True if *value* is in the heap. Average O(1)."""
        return self._index.contains_key(value)

    def change_priority(self, value: V, priority: P) -> None:
        """Set the priority of *value* and restore heap order. Expected O(log n).

        Raises:
            ValueNotPresentError: if *value* is not in the heap.
            TypeError: if *priority* is None or cannot be compared with
                its neighbours' priorities.
        """
        if priority is None:
            raise TypeError("priority must not be None")
        if not self._index.contains_key(value):
            raise ValueNotPresentError(value)
        idx: int = self._index.get(value)  # type: ignore[assignment]
        # At most one direction moves the entry.
        path = self._path_up(idx, priority) or self._path_down(idx, priority)
        self._data.get(idx).priority = priority
        self._follow(idx, path)

    def priority(self, value: V) -> P:
        """Return the current priority of *value*.

        Raises:
            ValueNotPresentError: if *value* is not in the heap.
        """
        if not self._index.contains_key(value):
            raise ValueNotPresentError(value)
        return self._data.get(self._index.get(value)).priority  # type: ignore[arg-type]

    def check_invariants(self) -> bool:
        """Verify all five heap invariants; raise AssertionError on the first violation."""
        data = self._data
        n = len(data)
        seen: HashTable[Any, int] = HashTable()
        for i in range(n):
            entry = data.get(i)
            if entry is None:
                raise AssertionError(f"slot {i} is empty")
            if i > 0 and entry.priority < data.get(self._parent(i)).priority:
                raise AssertionError(f"slot {i} has lower priority than its parent")
            if seen.put(entry.value, i) is not None:
                raise AssertionError(f"value {entry.value!r} is stored twice")
            if not self._index.contains_key(entry.value) or self._index.get(entry.value) != i:
                raise AssertionError(f"index entry for {entry.value!r} does not point at slot {i}")
        if len(self._index) != n:
            raise AssertionError(f"index holds {len(self._index)} entries for {n} slots")
        return True

    def is_empty(self) -> bool:
        return len(self._data) == 0

    @property
    def size(self) -> int:
        return len(self._data)

    def entries(self) -> List[Tuple[V, P]]:
        """(value, priority) pairs in slot (level) order."""
        return [(e.value, e.priority) for e in self._data]

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) != 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[V]:
        # Slot order, not sorted order
        for entry in self._data:
            yield entry.value

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Heap({self.entries()!r})"
