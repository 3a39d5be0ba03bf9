from __future__ import annotations
import inspect
from .types import *
from .config import get_config
from .errors import ArgumentError


def equality_comparer(item1: Any, item2: Any) -> bool:
    """default equality comparison"""
    return item1 == item2


def default_compare(item1: Any, item2: Any) -> int:
    """default three-way comparison: -1, 0 or 1"""
    if item1 == item2:
        return 0
    return -1 if item1 < item2 else 1


def always_true(*args) -> bool:
    return True


def identity(value: T) -> T:
    return value


def is_index_key(key: Any) -> bool:
    """true for integer keys that take part in key renumbering (bools excluded)"""
    return isinstance(key, int) and not isinstance(key, bool)


def _positional_capacity(func: Callable) -> Optional[Tuple[int, int]]:
    """(required, total) positional parameters of func, or None when it takes *args"""
    if isinstance(func, type) and func.__module__ == "builtins":
        # str, int, float and friends convert the value only
        return 1, 1
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without a signature take the value only
        return 1, 1
    required, total = 0, 0
    for parameter in signature.parameters.values():
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            total += 1
            if parameter.default is inspect.Parameter.empty:
                required += 1
    return required, total


def bind_callback(func: Callable, max_args: int, min_args: int = 1) -> Callable:
    """
    adapts an index-aware callback so it can always be called with max_args arguments.
    a callback receives as many leading arguments as it has positional parameters
    without defaults (at least min_args), so `lambda x: ...`, `lambda x, key, origin: ...`
    and `lambda x, factor=10: ...` all work wherever (value, key, origin) is offered.
    """
    if not callable(func):
        raise ArgumentError(f"expected a callable, got {type(func).__name__}")

    capacity = _positional_capacity(func)
    if capacity is None:
        accepted = None
    else:
        required, total = capacity
        accepted = max(required, min(total, min_args))
    if not get_config().pass_key_to_callbacks:
        accepted = min_args if accepted is None else min(accepted, min_args)
    if accepted is None or accepted >= max_args:
        return func
    if accepted == 0:
        return lambda *args: func()
    return lambda *args: func(*args[:accepted])


class Bag:
    """
    tracks values that were already seen, for distinct() and union().
    without a comparer hashable values go through a set and unhashable ones
    through a linear scan; with a comparer every lookup is a linear scan.
    """

    def __init__(self, comparer: Optional[EqualityComparer] = None):
        self.comparer = comparer
        self.length = 0
        self._hashed: Set[Any] = set()
        self._scanned: List[Any] = []

    def contains(self, item: Any) -> bool:
        if self.comparer is not None:
            return any(self.comparer(value, item) for value in self._scanned)
        try:
            return item in self._hashed
        except TypeError:
            return any(value == item for value in self._scanned)

    def add(self, item: Any) -> bool:
        """adds item, returning false when an equal item is already present"""
        if self.contains(item):
            return False
        if self.comparer is None:
            try:
                self._hashed.add(item)
            except TypeError:
                self._scanned.append(item)
        else:
            self._scanned.append(item)
        self.length += 1
        return True

    def __len__(self) -> int:
        return self.length
