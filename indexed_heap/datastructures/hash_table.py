from __future__ import annotations
import logging
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from .linked_list import LinkedList

K = TypeVar("K")
V = TypeVar("V")
D = TypeVar("D")

logger = logging.getLogger(__name__)


class HashTable(Generic[K, V]):
    """A separate-chaining hash table modeled after a plain map ADT.

    - Each bucket is a singly-linked chain; new keys are prepended.
    - Buckets are created lazily, only when a key first lands in them.
    - When size / capacity exceeds the load factor after an insertion, the
      bucket array doubles and every node is re-chained into it.
    """

    __slots__ = ("_cap", "_load", "_buckets", "_size")

    _INITIAL_CAPACITY = 17
    _LOAD_FACTOR = 0.8

    def __init__(self, capacity: Optional[int] = None, load_factor: Optional[float] = None) -> None:
        if capacity is None:
            capacity = self._INITIAL_CAPACITY
        if load_factor is None:
            load_factor = self._LOAD_FACTOR
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        if not (0.0 < load_factor <= 1.0):
            raise ValueError("load_factor must be in (0.0, 1.0]")
        self._cap: int = capacity
        self._load: float = load_factor
        self._buckets: List[Optional[LinkedList[K, V]]] = [None] * self._cap
        self._size: int = 0

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _bucket_index(self, key: K) -> int:
        return hash(key) % self._cap

    def _bucket_for(self, key: K) -> LinkedList[K, V]:
        idx = self._bucket_index(key)
        bucket = self._buckets[idx]
        if bucket is None:
            bucket = self._buckets[idx] = LinkedList()
        return bucket

    def _grow_if_needed(self) -> None:
        """Double the bucket array and re-chain every node if over the load factor."""
        if self._size / self._cap <= self._load:
            return
        old_buckets = self._buckets
        logger.debug("rehashing table: capacity %d -> %d (size %d)", self._cap, self._cap * 2, self._size)
        self._cap *= 2
        self._buckets = [None] * self._cap

        for bucket in old_buckets:
            if bucket is None:
                continue
            for node in bucket.nodes():
                self._bucket_for(node.key).push_front(node)

    # -----------------------------
    # Core operations
    # -----------------------------
    def put(self, key: K, value: V) -> Optional[V]:
        """Map *key* to *value*. Return the previous value, or None if *key* was new."""
        bucket = self._bucket_for(key)
        node = bucket.find(key)
        if node is not None:
            old = node.value
            node.value = value
            return old
        bucket.insert(key, value)
        self._size += 1
        self._grow_if_needed()
        return None

    def get(self, key: K, default: Optional[D] = None) -> Union[V, D, None]:
        """Return the value for *key*, or *default*. Average O(1), worst O(size)."""
        bucket = self._buckets[self._bucket_index(key)]
        if bucket is None:
            return default
        node = bucket.find(key)
        return default if node is None else node.value

    def contains_key(self, key: K) -> bool:
        """True if *key* is mapped, whatever its value (0 and None included)."""
        bucket = self._buckets[self._bucket_index(key)]
        return bucket is not None and bucket.find(key) is not None

    def remove(self, key: K, default: Optional[D] = None) -> Union[V, D, None]:
        """Unmap *key* and return its value, or *default* if it was absent."""
        bucket = self._buckets[self._bucket_index(key)]
        if bucket is None:
            return default
        node = bucket.delete(key)
        if node is None:
            return default
        self._size -= 1
        return node.value

    # -----------------------------
    # Introspection
    # -----------------------------
    @property
    def size(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        """Length of the bucket array."""
        return self._cap

    def dump(self) -> str:
        """Render every bucket chain, one line per bucket, for debugging."""
        lines = [f"Table size: {self._size} capacity: {self._cap}"]
        for i, bucket in enumerate(self._buckets):
            chain = "".join(f">{node!r}--" for node in bucket.nodes()) if bucket else ""
            lines.append(f"{i}: --{chain}|")
        return "\n".join(lines)

    # -----------------------------
    # Iteration helpers
    # -----------------------------
    def items(self) -> Iterator[Tuple[K, V]]:
        for bucket in self._buckets:
            if bucket:
                yield from bucket.items()

    def keys(self) -> Iterator[K]:
        for k, _ in self.items():
            yield k

    def values(self) -> Iterator[V]:
        for _, v in self.items():
            yield v

    # -----------------------------
    # Standard magic methods
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:  # pragma: no cover - simple
        return self.keys()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashTable({{{pairs}}})"
