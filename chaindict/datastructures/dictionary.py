from __future__ import annotations

import copy
import io
import logging
from typing import (
    Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, TextIO, Tuple, TypeVar, Union,
)

from .linked_list import LinkedList, _Entry

K = TypeVar("K")
V = TypeVar("V")
D = TypeVar("D")
S = TypeVar("S", bound=TextIO)

logger = logging.getLogger(__name__)

# Indentation of each entry line written by Dictionary.display().
DISPLAY_INDENT = "    "


class ItemRef(Generic[V]):
    """A live reference to the item stored in one dictionary entry.

    Reading or writing :attr:`value` goes straight to the entry, so
    ``d.lookup(k).value = x`` updates *d* in place. Two references compare
    equal only when they point at the same entry.

    A reference is valid until the next ``remove``, ``remove_if``, ``clear``,
    ``assign`` or ``take_from`` on the dictionary it came from. Re-inserting
    the same key keeps it valid. Using a stale reference is a caller error and
    is not detected.
    """

    __slots__ = ("_entry",)

    def __init__(self, entry: _Entry[Any, V]) -> None:
        self._entry = entry

    @property
    def value(self) -> V:
        return self._entry.item

    @value.setter
    def value(self, item: V) -> None:
        self._entry.item = item

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemRef):
            return NotImplemented
        return self._entry is other._entry

    def __hash__(self) -> int:
        return id(self._entry)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ItemRef({self._entry.item!r})"


class Dictionary(Generic[K, V]):
    """Key-item container backed by a single chain of entries.

    Keys only need ``==``; nothing is hashed. Entries stay in insertion
    order, which also drives equality: two dictionaries are equal when
    their chains match pair by pair, so the same pairs inserted in a
    different order compare unequal.

    Copying (``Dictionary(other)``, :meth:`copy`, :meth:`assign`) duplicates
    every key and item with :func:`copy.deepcopy`. Moving
    (:meth:`moved_from`, :meth:`take_from`) hands the chain over in O(1)
    and leaves the source empty.

    Not thread-safe; callers sharing an instance must lock around it.
    """

    __slots__ = ("_chain",)

    def __init__(
        self,
        it: Optional[Union["Dictionary[K, V]", Iterable[Tuple[K, V]]]] = None,
        **kwargs: V,
    ) -> None:
        self._chain: LinkedList[K, V] = LinkedList()
        if isinstance(it, Dictionary):
            self._chain = it._chain.copy(copy.deepcopy)
        elif it is not None:
            # Accept dict-like or iterable of pairs
            if hasattr(it, "items"):
                for k, v in it.items():  # type: ignore[attr-defined]
                    self.insert(k, v)
            else:
                for k, v in it:
                    self.insert(k, v)
        for k, v in kwargs.items():
            self.insert(k, v)  # type: ignore[arg-type]

    # --------------------------------- core ----------------------------------

    def insert(self, key: K, item: V) -> bool:
        """Insert *item* under *key*.

        Returns True if the key was new (appended at the end), False if it
        already existed and its item was replaced in place.
        """
        return self._chain.insert_or_replace(key, item)

    def lookup(self, key: K) -> Optional[ItemRef[V]]:
        """Return a live :class:`ItemRef` to the item for *key*, or None."""
        entry = self._chain.find(key)
        return None if entry is None else ItemRef(entry)

    def remove(self, key: K) -> bool:
        """Remove *key*; return True if it was present."""
        return self._chain.delete(key)

    def remove_if(self, predicate: Callable[[K], bool]) -> int:
        """Remove every entry whose key satisfies *predicate*.

        Returns the number of entries removed (0 when nothing matches).
        """
        if not callable(predicate):
            raise TypeError(f"predicate must be callable, not {type(predicate).__name__}")
        removed = self._chain.delete_if(predicate)
        logger.debug("remove_if removed %d entries, %d left", removed, self._chain.size)
        return removed

    def clear(self) -> None:
        """Drop every entry."""
        count = self._chain.size
        self._chain.clear()
        logger.debug("cleared %d entries", count)

    # ----------------------------- copy and move -----------------------------

    def copy(self) -> "Dictionary[K, V]":
        """Return an independent copy with the same pairs in the same order."""
        return Dictionary(self)

    def __copy__(self) -> "Dictionary[K, V]":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Dictionary[K, V]":
        out: Dictionary[K, V] = Dictionary()
        memo[id(self)] = out
        out._chain = self._chain.copy(lambda v: copy.deepcopy(v, memo))
        return out

    def assign(self, other: "Dictionary[K, V]") -> "Dictionary[K, V]":
        """Replace this dictionary's contents with a copy of *other*.

        Assigning a dictionary to itself leaves it untouched.
        """
        if not isinstance(other, Dictionary):
            raise TypeError(f"can only assign from a Dictionary, not {type(other).__name__}")
        if other is self:
            return self
        self._chain.clear()
        self._chain = other._chain.copy(copy.deepcopy)
        logger.debug("assigned copy of %d entries", self._chain.size)
        return self

    def take_from(self, other: "Dictionary[K, V]") -> "Dictionary[K, V]":
        """Move *other*'s entries into this dictionary and leave *other* empty.

        The current entries are dropped. No entry is copied. Taking from
        itself is a no-op.
        """
        if not isinstance(other, Dictionary):
            raise TypeError(f"can only move from a Dictionary, not {type(other).__name__}")
        if other is self:
            return self
        head, size = other._chain.detach()
        self._chain.attach(head, size)
        logger.debug("moved %d entries", size)
        return self

    @classmethod
    def moved_from(cls, other: "Dictionary[K, V]") -> "Dictionary[K, V]":
        """Build a new dictionary that takes over *other*'s entries."""
        return cls().take_from(other)

    # ------------------------------- equality --------------------------------

    def __eq__(self, other: object) -> bool:
        """Positional equality: same length and equal pairs at every position."""
        if not isinstance(other, Dictionary):
            return NotImplemented
        if other is self:
            return True
        if self._chain.size != other._chain.size:
            return False
        a, b = self._chain.head, other._chain.head
        while a is not None and b is not None:
            if not (a.key == b.key and a.item == b.item):
                return False
            a, b = a.next, b.next
        return a is None and b is None

    # ------------------------------- display ---------------------------------

    def display(self, sink: S) -> S:
        """Write a braced, one-entry-per-line listing to *sink* and return it.

        Example for ``{"a": 1, "b": 2}``::

            {
                { a : 1 }
                { b : 2 }
            }
        """
        sink.write("{\n")
        for k, v in self._chain.items():
            sink.write(f"{DISPLAY_INDENT}{{ {k} : {v} }}\n")
        sink.write("}")
        return sink

    def __str__(self) -> str:
        return self.display(io.StringIO()).getvalue()

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Dictionary({self.items()!r})"

    # --------------------------- mapping conveniences ------------------------

    def __setitem__(self, key: K, item: V) -> None:
        self.insert(key, item)

    def __getitem__(self, key: K) -> V:
        entry = self._chain.find(key)
        if entry is None:
            raise KeyError(key)
        return entry.item

    def __delitem__(self, key: K) -> None:
        if not self.remove(key):
            raise KeyError(key)

    def get(self, key: K, default: Optional[D] = None) -> Union[V, D, None]:
        entry = self._chain.find(key)
        return default if entry is None else entry.item

    def __contains__(self, key: object) -> bool:
        return self._chain.find(key) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self._chain.size

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._chain.size != 0

    def __iter__(self) -> Iterator[K]:
        # Iterate over keys to match dict-like iteration
        for k, _ in self._chain.items():
            yield k

    def keys(self) -> List[K]:
        return [k for k, _ in self._chain.items()]

    def values(self) -> List[V]:
        return [v for _, v in self._chain.items()]

    def items(self) -> List[Tuple[K, V]]:
        return list(self._chain.items())

    def to_py(self) -> Dict[K, Any]:
        """Convert to a native *dict*; recursively uses ``to_py`` when present."""
        d: Dict[K, Any] = {}
        for k, v in self._chain.items():
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                d[k] = v.to_py()
            else:
                d[k] = v
        return d
