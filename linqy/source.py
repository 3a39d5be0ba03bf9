from abc import ABC, abstractmethod
from collections.abc import Mapping
from .types import *
from .errors import ArgumentError

# --- capability interface ---

class ISequence(ABC, Generic[T]):
    """
    anything that can start a fresh (key, value) iteration on demand.
    objects exposing a callable get_enumerator() qualify without inheriting.
    """

    @abstractmethod
    def get_enumerator(self) -> Iterator[Tuple[Any, T]]:
        """start a new, independent iteration over (key, value) pairs"""
        pass

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is ISequence:
            return callable(getattr(subclass, "get_enumerator", None))
        return NotImplemented

# --- source adapter ---

def is_container(source: Any) -> bool:
    return isinstance(source, (ISequence, Mapping, Iterable))


def check_source(source: Any, name: str = "source") -> None:
    """raises ArgumentError unless source can be enumerated"""
    if not is_container(source):
        raise ArgumentError(f"{name} is not a container or sequence: {type(source).__name__}")


def iterate_source(source: Any) -> Iterator[Tuple[Any, Any]]:
    """native (key, value) order: the pairs of a sequence, items of a mapping, positions of anything else"""
    if isinstance(source, ISequence):
        return source.get_enumerator()
    if isinstance(source, Mapping):
        return iter(source.items())
    return enumerate(source)


def iterate_values(source: Any) -> Iterator[Any]:
    """values of a container or sequence, in native order"""
    for _, value in iterate_source(source):
        yield value


def origin_of(source: Any) -> Any:
    """the container a source ultimately reads from"""
    if isinstance(source, ISequence):
        return getattr(source, "origin", source)
    return source
