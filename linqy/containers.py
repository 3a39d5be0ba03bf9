"""
concrete collections that carry the full query surface.

each one subclasses Sequence with a pair factory that enumerates its backing
store as it is at the moment a traversal starts. adding or removing elements
while a traversal over the same collection is in progress is not supported.
"""
from __future__ import annotations

import builtins
from collections.abc import Sized
from .types import *
from .errors import ArgumentError, DuplicateKeyError, IndexOutOfRangeError
from .helpers import equality_comparer
from .sequence import Sequence
from .source import check_source, iterate_source, iterate_values

_ABSENT = object()


# --- read-only view ---

class ReadOnlyCollection(Sequence[T]):
    """a read-only view over a caller-supplied container; nothing is copied"""

    def __init__(self, source: Any = None):
        if source is None:
            source = ()
        check_source(source)
        self._source = source
        super().__init__(self._enumerate, source)

    def _enumerate(self) -> Iterator[Tuple[Any, T]]:
        return iterate_source(self._source)

    @property
    def source(self) -> Any:
        return self._source

    def __len__(self) -> int:
        if isinstance(self._source, Sized):
            return len(self._source)
        return self.to.count()


# --- list ---

class List(Sequence[T]):
    """a dynamic array; positions are zero-based"""

    def __init__(self, source: Any = None):
        self._items: builtins.list = []
        if source is not None:
            check_source(source)
            self._items.extend(iterate_values(source))
        super().__init__(self._enumerate, self._items)

    def _enumerate(self) -> Iterator[Tuple[int, T]]:
        return enumerate(self._items)

    @property
    def length(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        self._check_index(index)
        return self._items[index]

    def __setitem__(self, index: int, item: T) -> None:
        self._check_index(index)
        self._items[index] = item

    def _check_index(self, index: int) -> None:
        if index < 0:
            raise IndexOutOfRangeError("index is less than 0")
        if index >= len(self._items):
            raise IndexOutOfRangeError("index is equal to or greater than length")

    def add(self, item: T) -> None:
        """adds an object to the end of the list"""
        self._items.append(item)

    def add_range(self, collection: Any) -> None:
        """adds the elements of the specified collection to the end of the list"""
        check_source(collection, "collection")
        self._items.extend(iterate_values(collection))

    def clear(self) -> None:
        """removes all elements"""
        self._items.clear()

    def index_of(self, item: T) -> int:
        """position of the first occurrence of item, or -1"""
        for index, value in enumerate(self._items):
            if value == item:
                return index
        return -1

    def remove(self, item: T) -> bool:
        """removes the first occurrence of item; false if it was not found"""
        index = self.index_of(item)
        if index < 0:
            return False
        del self._items[index]
        return True

    def remove_at(self, index: int) -> None:
        """removes the element at the specified position"""
        self._check_index(index)
        del self._items[index]

    def __repr__(self) -> str:
        return f"List({self._items!r})"


# --- hash set ---

class HashSet(Sequence[T]):
    """
    a set of unique values kept in insertion order. with a comparer, values are
    matched by comparer(existing, candidate) through a linear scan.
    """

    def __init__(self, source: Any = None, comparer: Optional[EqualityComparer] = None):
        self.comparer = comparer
        # slot -> value in insertion order. a hashed value is its own slot,
        # a value matched by scanning gets a fresh token as its slot
        self._entries: Dict[Any, T] = {}
        self._scanned: Dict[object, T] = {}
        if source is not None:
            check_source(source)
            for value in iterate_values(source):
                self.add(value)
        super().__init__(self._enumerate, self)

    def _uses_scan(self, item: Any) -> bool:
        if self.comparer is not None:
            return True
        try:
            hash(item)
            return False
        except TypeError:
            return True

    def _values(self) -> Iterator[T]:
        yield from self._entries.values()

    def _enumerate(self) -> Iterator[Tuple[int, T]]:
        return enumerate(builtins.list(self._entries.values()))

    def _find(self, item: Any) -> Tuple[Any, Any]:
        """(slot, stored value) of the element equal to item, or (_ABSENT, None)"""
        if self._uses_scan(item):
            equals = self.comparer or equality_comparer
            for slot, value in self._scanned.items():
                if equals(value, item):
                    return slot, value
            return _ABSENT, None
        if item in self._entries:
            return item, self._entries[item]
        return _ABSENT, None

    def _discard(self, slot: Any) -> None:
        del self._entries[slot]
        self._scanned.pop(slot, None)

    @property
    def length(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return self.length

    def __contains__(self, item: Any) -> bool:
        return self.contains(item)

    def add(self, item: T) -> bool:
        """adds item; false if an equal item is already present"""
        if self._find(item)[0] is not _ABSENT:
            return False
        if self._uses_scan(item):
            slot = object()
            self._scanned[slot] = item
        else:
            slot = item
        self._entries[slot] = item
        return True

    def clear(self) -> None:
        """removes all elements"""
        self._entries.clear()
        self._scanned.clear()

    def contains(self, item: T) -> bool:
        return self._find(item)[0] is not _ABSENT

    def remove(self, item: T) -> bool:
        """removes the equal item; false if it was not found"""
        slot, _ = self._find(item)
        if slot is _ABSENT:
            return False
        self._discard(slot)
        return True

    def remove_where(self, predicate: Callable[[T], bool]) -> int:
        """removes every element matching predicate, returning how many were removed"""
        doomed = [slot for slot, value in self._entries.items() if predicate(value)]
        for slot in doomed:
            self._discard(slot)
        return len(doomed)

    def try_get_value(self, equal_value: T) -> Tuple[bool, T]:
        """(true, stored value) when an equal value exists, otherwise (false, equal_value)"""
        slot, existing = self._find(equal_value)
        return (True, existing) if slot is not _ABSENT else (False, equal_value)

    def union_with(self, other: Any) -> None:
        """adds every element of other"""
        check_source(other, "other")
        for value in builtins.list(iterate_values(other)):
            self.add(value)

    def except_with(self, other: Any) -> None:
        """removes every element of other"""
        if other is self:
            self.clear()
            return
        check_source(other, "other")
        for value in builtins.list(iterate_values(other)):
            self.remove(value)

    def intersect_with(self, other: Any) -> None:
        """keeps only the elements also present in other"""
        if other is self or self.length == 0:
            return
        check_source(other, "other")
        kept = set()
        for value in iterate_values(other):
            slot, _ = self._find(value)
            if slot is not _ABSENT:
                kept.add(slot)
        for slot in [slot for slot in self._entries if slot not in kept]:
            self._discard(slot)

    def symmetric_except_with(self, other: Any) -> None:
        """keeps the elements present in exactly one of self and other"""
        if other is self:
            self.clear()
            return
        check_source(other, "other")
        # other's repeats collapse under this set's comparer first
        incoming = HashSet(other, self.comparer)
        for value in incoming._values():
            if not self.add(value):
                self.remove(value)

    def __repr__(self) -> str:
        return f"HashSet({builtins.list(self._entries.values())!r})"


# --- dictionary ---

class Dictionary(Sequence[V]):
    """
    an insertion-ordered map with unique keys, stored as two lists kept in
    lock step. enumerates (key, value) pairs.
    """

    def __init__(self, source: Any = None, comparer: Optional[EqualityComparer] = None):
        self.comparer = comparer
        self.keys: List[K] = List()
        self.values: List[V] = List()
        if source is not None:
            check_source(source)
            for key, value in iterate_source(source):
                self.add(key, value)
        super().__init__(self._enumerate, self)

    def _enumerate(self) -> Iterator[Tuple[K, V]]:
        return zip(builtins.list(self.keys._items), builtins.list(self.values._items))

    @staticmethod
    def _check_key(key: Any, operation: str) -> None:
        if key is None:
            raise ArgumentError(f"bad argument to '{operation}': 'key' cannot be None")

    def _find_key_index(self, key: K) -> Optional[int]:
        for index, existing in enumerate(self.keys._items):
            if (self.comparer(existing, key) if self.comparer else existing == key):
                return index
        return None

    @property
    def length(self) -> int:
        return self.keys.length

    def __len__(self) -> int:
        return self.keys.length

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: K) -> V:
        found, value = self.try_get_value(key)
        if not found:
            raise KeyError(key)
        return value

    def __setitem__(self, key: K, value: V) -> None:
        self._check_key(key, "__setitem__")
        index = self._find_key_index(key)
        if index is None:
            self.keys.add(key)
            self.values.add(value)
        else:
            self.values[index] = value

    def add(self, key: K, value: V) -> None:
        """adds the key and value; raises DuplicateKeyError if the key exists"""
        self._check_key(key, "add")
        if not self.try_add(key, value):
            raise DuplicateKeyError("an element with the same key already exists in the dictionary")

    def try_add(self, key: K, value: V) -> bool:
        """adds the key and value unless the key exists"""
        self._check_key(key, "try_add")
        if self._find_key_index(key) is not None:
            return False
        self.keys.add(key)
        self.values.add(value)
        return True

    def clear(self) -> None:
        """removes all elements"""
        self.keys.clear()
        self.values.clear()

    def contains_key(self, key: K) -> bool:
        self._check_key(key, "contains_key")
        return self._find_key_index(key) is not None

    def contains_value(self, value: V) -> bool:
        return any(existing == value for existing in self.values._items)

    def remove(self, key: K) -> Tuple[bool, Optional[V]]:
        """removes the entry for key, returning (removed, value)"""
        self._check_key(key, "remove")
        index = self._find_key_index(key)
        if index is None:
            return False, None
        value = self.values[index]
        self.keys.remove_at(index)
        self.values.remove_at(index)
        return True, value

    def try_get_value(self, key: K) -> Tuple[bool, Optional[V]]:
        """(true, value) when the key exists, otherwise (false, None)"""
        self._check_key(key, "try_get_value")
        index = self._find_key_index(key)
        if index is None:
            return False, None
        return True, self.values[index]

    def __repr__(self) -> str:
        return f"Dictionary({dict(zip(self.keys._items, self.values._items))!r})"
