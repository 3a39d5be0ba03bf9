r"""
'    .__  .__
'    |  | |__| ____   ________.__.
'    |  | |  |/    \ / ____<   |  |
'    |  |_|  |   |  < <_|  |\___  |
'    |____/__|___|  /\__   |/ ____|
'                 \/    |__|\/
"""
import logging

# expose the main classes
from .sequence import Sequence, OrderedSequence
from .source import ISequence

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    is_sequence,
    query,
    Q
)

# expose the collection types
from .containers import ReadOnlyCollection, List, HashSet, Dictionary

# expose supporting data classes, errors and configuration
from .types import Grouping
from .errors import (
    LinqyError,
    ArgumentError,
    EmptySequenceError,
    NoMatchError,
    MultipleMatchError,
    IndexOutOfRangeError,
    DuplicateKeyError
)
from .config import EngineConfig, configure, get_config, reset_config

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Sequence",
    "OrderedSequence",
    "ISequence",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "is_sequence",
    "query",
    "Q",
    "ReadOnlyCollection",
    "List",
    "HashSet",
    "Dictionary",
    "Grouping",
    "LinqyError",
    "ArgumentError",
    "EmptySequenceError",
    "NoMatchError",
    "MultipleMatchError",
    "IndexOutOfRangeError",
    "DuplicateKeyError",
    "EngineConfig",
    "configure",
    "get_config",
    "reset_config"
]
