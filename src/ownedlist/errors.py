"""Exception classes for ownedlist."""


class OwnedListError(Exception):
    """Base exception for all ownedlist errors."""


class IndexOutOfRangeError(OwnedListError, IndexError):
    """Raised by a strict list when an index falls outside its valid range."""


class EmptyListError(IndexOutOfRangeError):
    """Raised by a strict list when a first/last element is requested from an empty list."""


class ClosureConsumedError(OwnedListError):
    """Raised when a predicate, consumer or mapper is used after it was released."""


class CursorInvalidatedError(OwnedListError, RuntimeError):
    """Raised when a cursor's list was structurally modified by anything but the cursor."""


class ListDisposedError(OwnedListError):
    """Raised when operations are attempted on a list after clear() or destroy()."""


class RepresentationTooLongError(OwnedListError, ValueError):
    """Raised when a rendered element exceeds the declared maximum length."""
