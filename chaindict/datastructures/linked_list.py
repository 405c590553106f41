from __future__ import annotations
from typing import Callable, Generic, Iterator, Optional, Tuple, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class _Entry(Generic[K, V]):
    """A lightweight node of the chain: one key, its item, and the next node."""

    __slots__ = ("key", "item", "next")

    def __init__(self, key: K, item: V, next: Optional["_Entry[K, V]"] = None) -> None:
        self.key = key
        self.item = item
        self.next = next


class LinkedList(Generic[K, V]):
    """Singly-linked chain of (key, item) entries kept in insertion order.

    New keys are appended at the tail; replacing an existing key keeps its
    position. Every traversal is a loop, so chain length never turns into
    call-stack depth.
    """

    __slots__ = ("head", "size")

    def __init__(self) -> None:
        self.head: Optional[_Entry[K, V]] = None
        self.size: int = 0

    # ------------------------------- lookups ---------------------------------

    def find(self, key: K) -> Optional[_Entry[K, V]]:
        """Return the entry holding *key*, or None if not present."""
        n = self.head
        while n is not None:
            if n.key == key:
                return n
            n = n.next
        return None

    # ------------------------------ mutations --------------------------------

    def insert_or_replace(self, key: K, item: V) -> bool:
        """Append (key, item) at the tail if key not present; otherwise replace.

        Returns True if a new entry was appended; False if an existing entry
        was found and its item replaced.
        """
        prev: Optional[_Entry[K, V]] = None
        n = self.head
        while n is not None:
            if n.key == key:
                n.item = item
                return False  # replaced
            prev, n = n, n.next

        entry = _Entry(key, item)
        if prev is None:
            self.head = entry
        else:
            prev.next = entry
        self.size += 1
        return True  # appended

    def delete(self, key: K) -> bool:
        """Unlink the entry with *key* if present; return True if deleted."""
        prev: Optional[_Entry[K, V]] = None
        cur = self.head
        while cur is not None:
            if cur.key == key:
                self._unlink(prev, cur)
                return True
            prev, cur = cur, cur.next
        return False

    def delete_if(self, predicate: Callable[[K], bool]) -> int:
        """Unlink every entry whose key satisfies *predicate*; return the count.

        After an unlink, `prev` stays put and `cur` becomes the successor, so
        the entry that slid into the freed position is tested before moving on.
        """
        removed = 0
        prev: Optional[_Entry[K, V]] = None
        cur = self.head
        while cur is not None:
            nxt = cur.next
            if predicate(cur.key):
                self._unlink(prev, cur)
                removed += 1
            else:
                prev = cur
            cur = nxt
        return removed

    def _unlink(self, prev: Optional[_Entry[K, V]], cur: _Entry[K, V]) -> None:
        if prev is None:
            self.head = cur.next
        else:
            prev.next = cur.next
        cur.next = None
        self.size -= 1

    def clear(self) -> None:
        """Release every entry, head to tail, one link at a time."""
        n = self.head
        self.head = None
        while n is not None:
            n.next, n = None, n.next
        self.size = 0

    # ------------------------- copy / ownership moves ------------------------

    def copy(self, copy_value: Callable[[object], object] = lambda v: v) -> "LinkedList[K, V]":
        """Build an independent chain with fresh entries in the same order.

        *copy_value* is applied to every key and item (identity by default).
        """
        out: LinkedList[K, V] = LinkedList()
        tail: Optional[_Entry[K, V]] = None
        n = self.head
        while n is not None:
            entry = _Entry(copy_value(n.key), copy_value(n.item))  # type: ignore[arg-type]
            if tail is None:
                out.head = entry
            else:
                tail.next = entry
            tail = entry
            n = n.next
        out.size = self.size
        return out

    def detach(self) -> Tuple[Optional[_Entry[K, V]], int]:
        """Hand over the whole chain and leave this list empty. O(1)."""
        head, size = self.head, self.size
        self.head = None
        self.size = 0
        return head, size

    def attach(self, head: Optional[_Entry[K, V]], size: int) -> None:
        """Take ownership of a chain previously returned by :meth:`detach`."""
        self.clear()
        self.head = head
        self.size = size

    # ------------------------------ iteration --------------------------------

    def entries(self) -> Iterator[_Entry[K, V]]:
        """Yield entries in chain order."""
        n = self.head
        while n is not None:
            yield n
            n = n.next

    def items(self) -> Iterator[Tuple[K, V]]:
        """Yield (key, item) pairs in chain order."""
        for n in self.entries():
            yield (n.key, n.item)

    def __len__(self) -> int:  # pragma: no cover - trivial
        return self.size
