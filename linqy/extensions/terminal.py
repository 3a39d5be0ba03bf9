from __future__ import annotations
import typing
from itertools import zip_longest
import numpy as np
import pandas as pd
from ..types import *
from ..errors import (
    EmptySequenceError, NoMatchError, MultipleMatchError, IndexOutOfRangeError
)
from ..helpers import bind_callback, equality_comparer, always_true
from ..source import check_source, iterate_source

if typing.TYPE_CHECKING:
    from ..sequence import Sequence
    from ..containers import List as ListCollection, HashSet, Dictionary

_MISSING = object()


class TerminalAccessor(Generic[T]):
    """
    immediate operations. each call runs the whole chain exactly once, from
    the current state of its source; nothing is cached between calls.
    """
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def _test(self, predicate: Optional[Predicate]) -> Predicate:
        return bind_callback(predicate, 3) if predicate is not None else always_true

    # --- materialization ---

    def list(self) -> List[T]:
        """convert to list"""
        return [value for _, value in self._sequence.get_enumerator()]

    def table(self) -> Dict[Any, T]:
        """convert to a dict keyed by the pipeline keys"""
        return {key: value for key, value in self._sequence.get_enumerator()}

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self.list())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series, indexed by the pipeline keys"""
        table = self.table()
        return pd.Series(list(table.values()), index=list(table.keys()), dtype=object if not table else None)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def mutable_list(self) -> 'ListCollection[T]':
        """convert to a linqy List"""
        from ..containers import List as ListCollection
        return ListCollection(self.list())

    def hash_set(self, comparer: Optional[EqualityComparer] = None) -> 'HashSet[T]':
        """convert to a linqy HashSet"""
        from ..containers import HashSet
        return HashSet(self.list(), comparer)

    def dictionary(self, key_selector: KeySelector[T, K],
                   element_selector: Optional[Selector] = None,
                   comparer: Optional[EqualityComparer] = None) -> 'Dictionary[K, V]':
        """convert to a linqy Dictionary; raises DuplicateKeyError on a repeated key"""
        from ..containers import Dictionary
        result = Dictionary(comparer=comparer)
        for value in self._sequence:
            result.add(key_selector(value), element_selector(value) if element_selector else value)
        return result

    # --- quantifiers ---

    def count(self, predicate: Optional[Predicate] = None) -> int:
        """count elements"""
        test = self._test(predicate)
        origin = self._sequence.origin
        return sum(1 for key, value in self._sequence.get_enumerator() if test(value, key, origin))

    def any(self, predicate: Optional[Predicate] = None) -> bool:
        """check if any element exists or satisfies condition"""
        test = self._test(predicate)
        origin = self._sequence.origin
        return any(test(value, key, origin) for key, value in self._sequence.get_enumerator())

    def all(self, predicate: Predicate) -> bool:
        """check if all elements satisfy condition"""
        test = self._test(predicate)
        origin = self._sequence.origin
        return all(test(value, key, origin) for key, value in self._sequence.get_enumerator())

    def contains(self, value: T, comparer: Optional[EqualityComparer] = None) -> bool:
        """check if the sequence contains value"""
        equals = comparer or equality_comparer
        return any(equals(value, item) for item in self._sequence)

    def sequence_equal(self, other: Any, comparer: Optional[EqualityComparer] = None) -> bool:
        """
        true when both sequences have the same length, the same keys, and equal values pairwise.
        keys count too, so Q([1, 2, 3]).where(lambda x: x > 1) (keys 1, 2) does not equal [2, 3] (keys 0, 1).
        """
        check_source(other, "other")
        equals = comparer or equality_comparer
        end = object()
        for mine, theirs in zip_longest(self._sequence.get_enumerator(), iterate_source(other), fillvalue=end):
            if mine is end or theirs is end:
                return False
            if mine[0] != theirs[0] or not equals(mine[1], theirs[1]):
                return False
        return True

    # --- element access ---

    def element_at(self, index: int) -> T:
        """get the element at a zero-based position"""
        if index < 0:
            raise IndexOutOfRangeError("index must be greater than or equal to zero")
        for position, value in enumerate(self._sequence):
            if position == index:
                return value
        raise IndexOutOfRangeError("index must be less than the number of elements in source")

    def element_at_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        """get the element at a zero-based position, or default when out of range"""
        if index < 0:
            return default
        for position, value in enumerate(self._sequence):
            if position == index:
                return value
        return default

    def first(self, predicate: Optional[Predicate] = None) -> T:
        """get first element"""
        test = self._test(predicate)
        origin = self._sequence.origin
        has_element = False
        for key, value in self._sequence.get_enumerator():
            has_element = True
            if test(value, key, origin):
                return value
        if has_element: raise NoMatchError("no element satisfies the condition")
        raise EmptySequenceError("the source sequence is empty")

    def first_or_default(self, predicate: Optional[Predicate] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        test = self._test(predicate)
        origin = self._sequence.origin
        for key, value in self._sequence.get_enumerator():
            if test(value, key, origin):
                return value
        return default

    def last(self, predicate: Optional[Predicate] = None) -> T:
        """get last element"""
        test = self._test(predicate)
        origin = self._sequence.origin
        has_element, found, result = False, False, None
        for key, value in self._sequence.get_enumerator():
            has_element = True
            if test(value, key, origin):
                found, result = True, value
        if found: return result
        if has_element: raise NoMatchError("no element satisfies the condition")
        raise EmptySequenceError("the source sequence is empty")

    def last_or_default(self, predicate: Optional[Predicate] = None,
                        default: Optional[T] = None) -> Optional[T]:
        """get last element or default"""
        test = self._test(predicate)
        origin = self._sequence.origin
        result = default
        for key, value in self._sequence.get_enumerator():
            if test(value, key, origin):
                result = value
        return result

    def _single(self, predicate: Optional[Predicate]) -> Tuple[bool, bool, Optional[T]]:
        """returns (has_element, found, value), raising as soon as a second match appears"""
        test = self._test(predicate)
        origin = self._sequence.origin
        has_element, found, result = False, False, None
        for key, value in self._sequence.get_enumerator():
            has_element = True
            if test(value, key, origin):
                if found:
                    if predicate is None: raise MultipleMatchError("sequence contains more than one element")
                    raise MultipleMatchError("more than one element satisfies the condition")
                found, result = True, value
        return has_element, found, result

    def single(self, predicate: Optional[Predicate] = None) -> T:
        """get single element, erroring if not exactly one"""
        has_element, found, result = self._single(predicate)
        if found: return result
        if has_element: raise NoMatchError("no element satisfies the condition")
        raise EmptySequenceError("the source sequence is empty")

    def single_or_default(self, predicate: Optional[Predicate] = None,
                          default: Optional[T] = None) -> Optional[T]:
        """get single element or default when none matches; still errors on more than one"""
        _, found, result = self._single(predicate)
        return result if found else default

    # --- folding ---

    def aggregate(self, accumulator: Accumulator, seed: Any = _MISSING) -> Any:
        """applies accumulator(acc, value, key, origin) over the sequence"""
        step = bind_callback(accumulator, 4, min_args=2)
        origin = self._sequence.origin
        pairs = self._sequence.get_enumerator()
        if seed is _MISSING:
            first = next(pairs, _MISSING)
            if first is _MISSING: raise EmptySequenceError("cannot aggregate empty sequence without seed")
            seed = first[1]
        for key, value in pairs:
            seed = step(seed, value, key, origin)
        return seed

    def aggregate_with_selector(self, seed: U, accumulator: Accumulator,
                                result_selector: Selector[U, V]) -> V:
        """aggregate with seed and final transformation"""
        return result_selector(self.aggregate(accumulator, seed))
