from __future__ import annotations

import logging
from functools import cmp_to_key
from .types import *
from .source import ISequence
from .helpers import default_compare

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor
from .extensions.zip import ZipAccessor

logger = logging.getLogger(__name__)

# --- base sequence implementation ---

class _BaseSequence(ISequence[T]):
    def __init__(self, pair_func: PairFactory, origin: Any = None):
        """init with a function that starts a new (key, value) iteration when called"""
        self._pair_func = pair_func
        self._origin = origin

    @property
    def origin(self) -> Any:
        """the container this chain was built from, if any"""
        return self._origin

    def get_enumerator(self) -> Iterator[Tuple[Any, T]]:
        # every call builds the whole chain afresh, so traversals never share state
        return iter(self._pair_func())

    def __iter__(self) -> Iterator[T]:
        for _, value in self.get_enumerator():
            yield value

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T]
):
    """a lazy, linq-inspired sequence of (key, value) pairs."""
    def __init__(self, pair_func: PairFactory, origin: Any = None):
        super().__init__(pair_func, origin)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(origin={type(self._origin).__name__})"

# --- ordered sequence class ---

class OrderedSequence(Sequence[T]):
    """represents a sorted sequence, allowing for subsequent orderings."""

    def __init__(self, upstream: Sequence[T], comparator: Comparer[T]):
        # always the pre-sort upstream, so then_by never sorts twice
        self._upstream = upstream
        self._comparator = comparator
        super().__init__(self._sorted_pairs, upstream.origin)

    def _sorted_pairs(self) -> Iterator[Tuple[int, T]]:
        """buffers the upstream once per traversal; python's sort is stable"""
        values = [value for _, value in self._upstream.get_enumerator()]
        logger.debug(f"order_by buffered {len(values)} elements")
        yield from enumerate(sorted(values, key=cmp_to_key(self._comparator)))

    def _then(self, comparator: Comparer[T]) -> 'OrderedSequence[T]':
        previous = self._comparator

        def composed(item1, item2):
            result = previous(item1, item2)
            return result if result != 0 else comparator(item1, item2)

        return OrderedSequence(self._upstream, composed)

    def then_by(self, key_selector: KeySelector[T, K],
                comparer: Optional[Comparer[K]] = None) -> 'OrderedSequence[T]':
        """secondary sort ascending"""
        compare = comparer or default_compare
        return self._then(lambda item1, item2: compare(key_selector(item1), key_selector(item2)))

    def then_by_descending(self, key_selector: KeySelector[T, K],
                           comparer: Optional[Comparer[K]] = None) -> 'OrderedSequence[T]':
        """secondary sort descending"""
        compare = comparer or default_compare
        return self._then(lambda item1, item2: compare(key_selector(item2), key_selector(item1)))
