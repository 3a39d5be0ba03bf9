from __future__ import annotations
import typing
import numbers
import numpy as np
from ..types import *
from ..errors import EmptySequenceError
from ..config import get_config

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class StatsAccessor(Generic[T]):
    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def _get_values(self, selector: Optional[Selector] = None) -> Iterator[Any]:
        """one fresh pass over the (optionally projected) values"""
        for value in self._sequence:
            yield selector(value) if selector else value

    def sum(self, selector: Optional[Selector] = None) -> Union[int, float]:
        """calc sum; None values are skipped and an empty sequence sums to 0"""
        values = [x for x in self._get_values(selector) if x is not None]
        if not values:
            return 0
        numeric = all(isinstance(x, numbers.Real) and not isinstance(x, bool) for x in values)
        # integer-only input stays in python ints, numpy would wrap at int64
        if get_config().use_numpy and numeric and any(isinstance(x, float) for x in values):
            result = np.sum(values)
            return result.item() if hasattr(result, 'item') else result
        return sum(values)

    def average(self, selector: Optional[Selector] = None) -> float:
        """calc average; an empty sequence gives nan"""
        count, total = 0, 0
        for x in self._get_values(selector):
            count += 1
            total += x
        if count == 0:
            return float('nan')
        return total / count

    def min(self, selector: Optional[Selector] = None) -> Any:
        """smallest (selected) value"""
        result, found = None, False
        for x in self._get_values(selector):
            if not found or x < result:
                result, found = x, True
        if not found: raise EmptySequenceError("sequence contains no elements")
        return result

    def max(self, selector: Optional[Selector] = None) -> Any:
        """largest (selected) value"""
        result, found = None, False
        for x in self._get_values(selector):
            if not found or x > result:
                result, found = x, True
        if not found: raise EmptySequenceError("sequence contains no elements")
        return result
