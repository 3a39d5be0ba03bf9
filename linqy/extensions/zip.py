from __future__ import annotations
import typing
from ..types import *
from ..source import check_source, iterate_values

if typing.TYPE_CHECKING:
    from ..sequence import Sequence


class ZipAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def zip(self, other: Any, result_selector: Optional[Callable[[T, U], V]] = None) -> 'Sequence[V]':
        """pair elements by position, stopping at the shorter sequence; tuples by default"""
        from ..sequence import Sequence
        check_source(other, "other")
        source = self._sequence

        def zip_pairs():
            firsts = iter(source)
            seconds = iterate_values(other)
            for index, (first, second) in enumerate(zip(firsts, seconds)):
                yield index, (result_selector(first, second) if result_selector else (first, second))
        return Sequence(zip_pairs, source.origin)
