from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Pair = Tuple[Any, T]
PairFactory = Callable[[], Iterator[Tuple[Any, T]]]

Predicate = Callable[..., bool]
Selector = Callable[..., U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
EqualityComparer = Callable[[T, T], bool]
Accumulator = Callable[..., U]


class Grouping(Generic[K, T]):
    """a key and the elements that were grouped under it"""

    def __init__(self, key: K, values: List[T]):
        self.key = key
        self.values = values

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Grouping):
            return NotImplemented
        return self.key == other.key and self.values == other.values

    def __repr__(self) -> str:
        return f"Grouping(key={self.key!r}, values={len(self.values)})"
