from __future__ import annotations
import typing
import logging
from collections import defaultdict
from ..types import *
from ..source import check_source, iterate_values

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


def _build_inner_lookup(inner: Any, inner_key_selector: KeySelector[U, K],
                        comparer: Optional[EqualityComparer]) -> Callable[[K], List[U]]:
    """
    materializes inner once and returns a function giving the matching inner elements
    for an outer key, in inner order. a custom comparer means a linear scan per key.
    """
    keyed = [(inner_key_selector(item), item) for item in iterate_values(inner)]
    logger.debug(f"join materialized {len(keyed)} inner elements")

    if comparer is not None:
        return lambda outer_key: [item for key, item in keyed if comparer(outer_key, key)]

    inner_lookup = defaultdict(list)
    unhashable = []
    for key, item in keyed:
        try:
            inner_lookup[key].append(item)
        except TypeError:
            unhashable.append((key, item))

    if unhashable:
        # keep inner order when some keys cannot be hashed
        return lambda outer_key: [item for key, item in keyed if key == outer_key]

    def lookup(outer_key):
        try:
            return inner_lookup.get(outer_key, [])
        except TypeError:
            return []
    return lookup


class JoinAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def join(self, inner: Any, outer_key_selector: KeySelector[T, K],
             inner_key_selector: KeySelector[U, K],
             result_selector: Callable[[T, U], V],
             comparer: Optional[EqualityComparer] = None) -> 'Sequence[V]':
        """inner join two sequences based on matching keys"""
        from ..sequence import Sequence
        check_source(inner, "inner")
        outer = self._sequence

        def join_pairs():
            matches_for = _build_inner_lookup(inner, inner_key_selector, comparer)
            index = 0
            for _, outer_item in outer.get_enumerator():
                # every match for this outer element is emitted before the next is pulled
                for inner_item in matches_for(outer_key_selector(outer_item)):
                    yield index, result_selector(outer_item, inner_item)
                    index += 1
        return Sequence(join_pairs, outer.origin)

    def group_join(self, inner: Any, outer_key_selector: KeySelector[T, K],
                   inner_key_selector: KeySelector[U, K],
                   result_selector: Callable[[T, List[U]], V],
                   comparer: Optional[EqualityComparer] = None) -> 'Sequence[V]':
        """group join - one result per outer element with the list of its inner matches"""
        from ..sequence import Sequence
        check_source(inner, "inner")
        outer = self._sequence

        def group_join_pairs():
            matches_for = _build_inner_lookup(inner, inner_key_selector, comparer)
            for key, outer_item in outer.get_enumerator():
                yield key, result_selector(outer_item, list(matches_for(outer_key_selector(outer_item))))
        return Sequence(group_join_pairs, outer.origin)
