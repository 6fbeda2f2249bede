"""ownedlist - Singly-linked list with cursors, single-use closures and an explicit value destructor policy."""

from ownedlist.closures import Consumer, Mapper, Predicate
from ownedlist.cursor import Cursor
from ownedlist.errors import (
    ClosureConsumedError,
    CursorInvalidatedError,
    EmptyListError,
    IndexOutOfRangeError,
    ListDisposedError,
    OwnedListError,
    RepresentationTooLongError,
)
from ownedlist.linkedlist import LinkedList, Node, release_value
from ownedlist.tree import Tree
from ownedlist.types import ABSENT, Absent, Destructor

__version__ = "0.0.1"

__all__ = [
    "LinkedList",
    "Node",
    "Cursor",
    "Tree",
    "Predicate",
    "Consumer",
    "Mapper",
    "ABSENT",
    "Absent",
    "Destructor",
    "release_value",
    "OwnedListError",
    "IndexOutOfRangeError",
    "EmptyListError",
    "ClosureConsumedError",
    "CursorInvalidatedError",
    "ListDisposedError",
    "RepresentationTooLongError",
]
