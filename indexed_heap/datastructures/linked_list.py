from __future__ import annotations
from typing import Generic, Iterator, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class _LLNode(Generic[K, V]):
    """A lightweight node for a singly-linked list (used by HashTable buckets)."""

    __slots__ = ("key", "value", "next")

    def __init__(self, key: K, value: V, next: Optional["_LLNode[K, V]"] = None) -> None:
        self.key = key
        self.value = value
        self.next = next

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"({self.key!r}, {self.value!r})"


class LinkedList(Generic[K, V]):
    """Singly-linked chain of (key, value) nodes for one hash bucket.

    New nodes go to the head, so iteration yields the most recently
    inserted key first. Keys match by identity first, then equality, as
    with dict, so a key unequal to itself (NaN) can still be found.
    """

    __slots__ = ("head",)

    def __init__(self) -> None:
        self.head: Optional[_LLNode[K, V]] = None

    def find(self, key: K) -> Optional[_LLNode[K, V]]:
        """Return the node holding *key*, or None if not present."""
        n = self.head
        while n:
            if n.key is key or n.key == key:
                return n
            n = n.next
        return None

    def push_front(self, node: _LLNode[K, V]) -> None:
        """Link an existing node in as the new head."""
        node.next = self.head
        self.head = node

    def insert(self, key: K, value: V) -> _LLNode[K, V]:
        """Prepend a new node. The caller guarantees *key* is not present."""
        node = _LLNode(key, value)
        self.push_front(node)
        return node

    def delete(self, key: K) -> Optional[_LLNode[K, V]]:
        """Unlink the node with *key*; return it, or None if absent."""
        prev: Optional[_LLNode[K, V]] = None
        cur = self.head
        while cur:
            if cur.key is key or cur.key == key:
                if prev:
                    prev.next = cur.next
                else:
                    self.head = cur.next
                cur.next = None
                return cur
            prev, cur = cur, cur.next
        return None

    def nodes(self) -> Iterator[_LLNode[K, V]]:
        """Yield nodes in chain order. Safe against relinking the yielded node."""
        n = self.head
        while n:
            nxt = n.next
            yield n
            n = nxt

    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, value) pairs in chain order."""
        for n in self.nodes():
            yield (n.key, n.value)

    def __bool__(self) -> bool:
        return self.head is not None
