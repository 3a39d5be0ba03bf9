"""
exception types raised by the query engine and the collection types.

each error also derives from the builtin exception callers would catch for the
same condition, so `except ValueError` keeps working.
"""


class LinqyError(Exception):
    """base class for every error raised by linqy"""
    pass


class ArgumentError(LinqyError, ValueError):
    """an invalid argument was passed to a public operation"""
    pass


class EmptySequenceError(LinqyError, ValueError):
    """the operation needs at least one element and the source had none"""
    pass


class NoMatchError(LinqyError, ValueError):
    """the source had elements but none satisfied the predicate"""
    pass


class MultipleMatchError(LinqyError, ValueError):
    """a single element was expected and more than one was found"""
    pass


class IndexOutOfRangeError(LinqyError, IndexError):
    """a position lies outside the bounds of the sequence or collection"""
    pass


class DuplicateKeyError(LinqyError, ValueError):
    """an element with the same key already exists"""
    pass
