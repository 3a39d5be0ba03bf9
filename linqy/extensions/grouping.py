from __future__ import annotations
import typing
import logging
from ..types import *
from ..helpers import identity

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


def default_grouping(key: K, elements: List[T]) -> Grouping[K, T]:
    return Grouping(key, elements)


class _GroupTable:
    """insertion-ordered key -> elements table; keys compared by comparer, hash, or == scan"""

    def __init__(self, comparer: Optional[EqualityComparer] = None):
        self._comparer = comparer
        self._slots: Dict[Any, int] = {}
        self.keys: List[Any] = []
        self.groups: List[List[Any]] = []

    def _find(self, key: Any) -> Optional[int]:
        if self._comparer is not None:
            # first group whose key the comparer accepts
            return next((i for i, existing in enumerate(self.keys) if self._comparer(existing, key)), None)
        try:
            return self._slots.get(key)
        except TypeError:
            return next((i for i, existing in enumerate(self.keys) if existing == key), None)

    def add(self, key: Any, element: Any) -> None:
        slot = self._find(key)
        if slot is None:
            slot = len(self.keys)
            self.keys.append(key)
            self.groups.append([])
            if self._comparer is None:
                try:
                    self._slots[key] = slot
                except TypeError:
                    pass
        self.groups[slot].append(element)


class GroupingAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def group_by(self, key_selector: KeySelector[T, K],
                 element_selector: Optional[Selector] = None,
                 result_selector: Optional[Callable[[K, List[U]], V]] = None,
                 comparer: Optional[EqualityComparer] = None) -> 'Sequence[V]':
        """
        group elements by a key, keeping groups in order of first appearance
        and elements in source order within each group.
        each result is keyed by its group key; the default result is a Grouping.
        """
        from ..sequence import Sequence
        source = self._sequence
        select_element = element_selector or identity
        make_result = result_selector or default_grouping

        def group_pairs():
            # non-streaming: the whole upstream is grouped on the first pull
            table = _GroupTable(comparer)
            count = 0
            for _, value in source.get_enumerator():
                table.add(key_selector(value), select_element(value))
                count += 1
            logger.debug(f"group_by buffered {count} elements into {len(table.keys)} groups")
            for key, elements in zip(table.keys, table.groups):
                yield key, make_result(key, elements)
        return Sequence(group_pairs, source.origin)
