from __future__ import annotations
import typing
import logging
from ..types import *
from ..helpers import bind_callback, default_compare, is_index_key
from ..source import check_source, iterate_values

if typing.TYPE_CHECKING:
    from ..sequence import Sequence, OrderedSequence

logger = logging.getLogger(__name__)


class _CoreOperations(Generic[T]):
    def where(self: 'Sequence[T]', predicate: Predicate) -> 'Sequence[T]':
        """filter elements based on a predicate(value, key, origin)"""
        from ..sequence import Sequence
        test = bind_callback(predicate, 3)
        origin = self.origin

        def filter_pairs():
            for key, value in self.get_enumerator():
                if test(value, key, origin):
                    yield key, value
        return Sequence(filter_pairs, origin)

    def select(self: 'Sequence[T]', selector: Selector) -> 'Sequence[U]':
        """project each element to a new form, keeping its key"""
        from ..sequence import Sequence
        transform = bind_callback(selector, 3)
        origin = self.origin

        def map_pairs():
            for key, value in self.get_enumerator():
                yield key, transform(value, key, origin)
        return Sequence(map_pairs, origin)

    def select_many(self: 'Sequence[T]', collection_selector: Selector,
                    result_selector: Optional[Callable[[T, U], V]] = None) -> 'Sequence[V]':
        """project each element to a collection and flatten the results"""
        from ..sequence import Sequence
        expand = bind_callback(collection_selector, 3)
        origin = self.origin

        def flat_map_pairs():
            index = 0
            for key, outer in self.get_enumerator():
                collection = expand(outer, key, origin)
                check_source(collection, "collection_selector result")
                # the inner collection is drained before the next outer element is pulled
                for inner in iterate_values(collection):
                    yield index, (result_selector(outer, inner) if result_selector else inner)
                    index += 1
        return Sequence(flat_map_pairs, origin)

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """skip the first 'count' elements"""
        from ..sequence import Sequence

        def skip_pairs():
            skipped = 0
            for key, value in self.get_enumerator():
                if skipped < count:
                    skipped += 1
                    continue
                yield key, value
        return Sequence(skip_pairs, self.origin)

    def skip_while(self: 'Sequence[T]', predicate: Predicate) -> 'Sequence[T]':
        """skip elements while predicate is true, then return everything after"""
        from ..sequence import Sequence
        test = bind_callback(predicate, 3)
        origin = self.origin

        def skip_while_pairs():
            skipping = True
            for key, value in self.get_enumerator():
                if skipping and test(value, key, origin):
                    continue
                skipping = False
                yield key, value
        return Sequence(skip_while_pairs, origin)

    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """take the first 'count' elements"""
        from ..sequence import Sequence

        def take_pairs():
            if count <= 0:
                return
            taken = 0
            for key, value in self.get_enumerator():
                yield key, value
                taken += 1
                # stop before pulling the upstream again
                if taken >= count:
                    return
        return Sequence(take_pairs, self.origin)

    def take_while(self: 'Sequence[T]', predicate: Predicate) -> 'Sequence[T]':
        """take elements while predicate is true"""
        from ..sequence import Sequence
        test = bind_callback(predicate, 3)
        origin = self.origin

        def take_while_pairs():
            for key, value in self.get_enumerator():
                if not test(value, key, origin):
                    return
                yield key, value
        return Sequence(take_while_pairs, origin)

    def append(self: 'Sequence[T]', element: T) -> 'Sequence[T]':
        """appends a value to the end of the sequence, keyed after the largest index"""
        from ..sequence import Sequence

        def append_pairs():
            max_index = -1
            for key, value in self.get_enumerator():
                if is_index_key(key) and key > max_index:
                    max_index = key
                yield key, value
            yield max_index + 1, element
        return Sequence(append_pairs, self.origin)

    def prepend(self: 'Sequence[T]', element: T) -> 'Sequence[T]':
        """adds a value to the beginning of the sequence and renumbers the rest"""
        from ..sequence import Sequence

        def prepend_pairs():
            yield 0, element
            for index, (_, value) in enumerate(self.get_enumerator(), start=1):
                yield index, value
        return Sequence(prepend_pairs, self.origin)

    def default_if_empty(self: 'Sequence[T]', default_value: Optional[T] = None) -> 'Sequence[T]':
        """returns the elements of a sequence, or a default value in a singleton collection if the sequence is empty"""
        from ..sequence import Sequence

        def default_pairs():
            is_empty = True
            for key, value in self.get_enumerator():
                is_empty = False
                yield key, value
            if is_empty:
                yield 0, default_value
        return Sequence(default_pairs, self.origin)

    def reverse(self: 'Sequence[T]') -> 'Sequence[T]':
        """inverts the order of the elements in a sequence"""
        from ..sequence import Sequence

        def reverse_pairs():
            # non-streaming: the whole upstream is buffered on the first pull
            values = [value for _, value in self.get_enumerator()]
            logger.debug(f"reverse buffered {len(values)} elements")
            yield from enumerate(reversed(values))
        return Sequence(reverse_pairs, self.origin)

    def of_type(self: 'Sequence[T]', type_filter: Type[U]) -> 'Sequence[U]':
        """filters the elements of a sequence based on a specified type"""
        return self.where(lambda item: isinstance(item, type_filter))

    def order_by(self: 'Sequence[T]', key_selector: KeySelector[T, K],
                 comparer: Optional[Comparer[K]] = None) -> 'OrderedSequence[T]':
        """sort elements by a key"""
        from ..sequence import OrderedSequence
        compare = comparer or default_compare
        return OrderedSequence(self, lambda item1, item2: compare(key_selector(item1), key_selector(item2)))

    def order_by_descending(self: 'Sequence[T]', key_selector: KeySelector[T, K],
                            comparer: Optional[Comparer[K]] = None) -> 'OrderedSequence[T]':
        """sort elements by a key in descending order"""
        from ..sequence import OrderedSequence
        compare = comparer or default_compare
        return OrderedSequence(self, lambda item1, item2: compare(key_selector(item2), key_selector(item1)))
