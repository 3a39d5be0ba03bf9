import typing
from itertools import repeat as _repeat
from .types import *
from .errors import ArgumentError
from .source import ISequence, check_source, iterate_source, origin_of

if typing.TYPE_CHECKING:
    from .sequence import Sequence
    from .containers import ReadOnlyCollection

def from_iterable(source: Any) -> 'Sequence[T]':
    """
    create a sequence over a container or another sequence.
    nothing is copied or evaluated; every traversal re-reads the source.
    """
    from .sequence import Sequence
    check_source(source)
    return Sequence(lambda: iterate_source(source), origin_of(source))

def from_range(start: int, count: int) -> 'Sequence[int]':
    """create sequence of count consecutive integers"""
    from .sequence import Sequence
    if count < 0: raise ArgumentError("count is less than 0")
    numbers = range(start, start + count)
    return Sequence(lambda: enumerate(numbers), numbers)

def repeat(item: T, count: int) -> 'Sequence[T]':
    """create sequence with repeated item"""
    from .sequence import Sequence
    if count < 0: raise ArgumentError("count is less than 0")
    return Sequence(lambda: enumerate(_repeat(item, count)))

def empty() -> 'ReadOnlyCollection[Any]':
    """create empty sequence"""
    from .containers import ReadOnlyCollection
    return ReadOnlyCollection()

def is_sequence(obj: Any) -> bool:
    """true when obj can start (key, value) enumerations"""
    return isinstance(obj, ISequence)

# --- aliases ---
query = from_iterable
Q = from_iterable
