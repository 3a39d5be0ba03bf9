from __future__ import annotations
import typing
import logging
from ..types import *
from ..helpers import Bag, is_index_key
from ..source import check_source, iterate_values

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


def _matcher(values: List[Any], comparer: Optional[EqualityComparer]) -> Callable[[Any], bool]:
    """membership test against a materialized sequence, using a hash lookup where possible"""
    if comparer is not None:
        return lambda item: any(comparer(other, item) for other in values)
    lookup = Bag()
    for value in values:
        lookup.add(value)
    return lookup.contains


class SetAccessor(Generic[T]):
    """
    provides the set-theoretic operations: distinct, union, intersection,
    difference and concatenation. all of them are deferred.
    """
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def distinct(self, comparer: Optional[EqualityComparer] = None) -> 'Sequence[T]':
        """return distinct elements. preserves order of first appearance and keys."""
        from ..sequence import Sequence
        source = self._sequence

        def distinct_pairs():
            seen = Bag(comparer)
            for key, value in source.get_enumerator():
                if seen.add(value):
                    yield key, value
        return Sequence(distinct_pairs, source.origin)

    def union(self, other: Any, comparer: Optional[EqualityComparer] = None) -> 'Sequence[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..sequence import Sequence
        check_source(other, "other")
        source = self._sequence

        def union_pairs():
            # a single bag spans both inputs
            seen = Bag(comparer)
            index = 0
            for _, value in source.get_enumerator():
                if seen.add(value):
                    yield index, value
                    index += 1
            for value in iterate_values(other):
                if seen.add(value):
                    yield index, value
                    index += 1
        return Sequence(union_pairs, source.origin)

    def intersect(self, other: Any, comparer: Optional[EqualityComparer] = None) -> 'Sequence[T]':
        """return the elements of this sequence that have a match in other."""
        from ..sequence import Sequence
        check_source(other, "other")
        source = self._sequence

        def intersect_pairs():
            other_values = list(iterate_values(other))
            matches = _matcher(other_values, comparer)
            for key, value in source.get_enumerator():
                if matches(value):
                    yield key, value
        return Sequence(intersect_pairs, source.origin)

    def except_(self, other: Any, comparer: Optional[EqualityComparer] = None) -> 'Sequence[T]':
        """return elements from the first sequence that have no match in the second (set difference)."""
        from ..sequence import Sequence
        check_source(other, "other")
        source = self._sequence

        def except_pairs():
            other_values = list(iterate_values(other))
            matches = _matcher(other_values, comparer)
            for key, value in source.get_enumerator():
                if not matches(value):
                    yield key, value
        return Sequence(except_pairs, source.origin)

    def concat(self, other: Any) -> 'Sequence[T]':
        """concatenate with another sequence, preserving all elements and order."""
        from ..sequence import Sequence
        check_source(other, "other")
        source = self._sequence

        def concat_pairs():
            max_index = -1
            for key, value in source.get_enumerator():
                if is_index_key(key) and key > max_index:
                    max_index = key
                yield key, value
            # the second key space is discarded and renumbered after the first
            for value in iterate_values(other):
                max_index += 1
                yield max_index, value
        return Sequence(concat_pairs, source.origin)
