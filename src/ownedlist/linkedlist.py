"""Head/tail singly-linked list with an explicit value destructor policy."""

import logging
from typing import Any, Generic, Iterable

from ownedlist.closures import (
    ConsumerLike,
    MapperLike,
    Predicate,
    PredicateLike,
    as_consumer,
    as_mapper,
    as_predicate,
)
from ownedlist.cursor import Cursor
from ownedlist.errors import (
    EmptyListError,
    IndexOutOfRangeError,
    ListDisposedError,
    RepresentationTooLongError,
)
from ownedlist.types import ABSENT, Absent, Destructor, StringFunction, T

logger = logging.getLogger(__name__)


def release_value(value: Any) -> None:
    """Default destructor. Drops the list's reference and leaves the value to the garbage collector."""


class Node(Generic[T]):
    """A node in the singly-linked list."""

    __slots__ = ("value", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Node[T] | None = None


class LinkedList(Generic[T]):
    """
    Singly-linked list with head and tail references.

    The list owns its nodes but not the values inside them. "Remove"
    operations detach a value and hand it back to the caller; "delete"
    operations detach a value and pass it to the list's destructor. A value
    shared between several containers must be deleted through at most one
    of them.

    Positional and predicate-based operations are built on Cursor traversal.
    Out-of-range indices and empty-list accesses are silent no-ops returning
    ABSENT, unless the list was created with ``strict=True``.
    """

    def __init__(
        self,
        values: Iterable[T] | None = None,
        *,
        destructor: Destructor | None = None,
        strict: bool = False,
    ) -> None:
        """
        Initialize the list.

        Args:
            values: Optional initial values, added in order.
            destructor: Invoked on a value when the list deletes it. Defaults
                to release_value(), which does nothing beyond dropping the
                reference.
            strict: If True, out-of-range indices raise IndexOutOfRangeError
                and first/last access on an empty list raises EmptyListError
                instead of returning ABSENT.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        self._modcount = 0  # Bumped on every structural change
        self._destructor: Destructor = destructor if destructor is not None else release_value
        self._strict = strict
        self._disposed = False
        if values is not None:
            self.add_array(values)

    @classmethod
    def from_array(
        cls,
        values: Iterable[T],
        *,
        destructor: Destructor | None = None,
        strict: bool = False,
    ) -> "LinkedList[T]":
        """Create a new list holding the given values in order. Values are not copied."""
        return cls(values, destructor=destructor, strict=strict)

    @property
    def size(self) -> int:
        return self._size

    @property
    def destructor(self) -> Destructor:
        return self._destructor

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def disposed(self) -> bool:
        """True once clear() or destroy() has been called."""
        return self._disposed

    def _ensure_live(self) -> None:
        if self._disposed:
            raise ListDisposedError("Cannot use a list after clear() or destroy()")

    def _out_of_range(self, index: int) -> Absent:
        if self._strict:
            raise IndexOutOfRangeError(f"Index {index} out of range for list of size {self._size}")
        return ABSENT

    def _empty(self, operation: str) -> Absent:
        if self._strict:
            raise EmptyListError(f"Cannot {operation} on an empty list")
        return ABSENT

    def _dispose(self, value: T) -> None:
        logger.debug("Destroying value %r", value)
        self._destructor(value)

    def iterator(self) -> Cursor[T]:
        """Create a new cursor positioned before the first value."""
        self._ensure_live()
        return Cursor(self)

    # Insertion

    def add_first(self, value: T) -> None:
        """Add a value to the start of the list. O(1)."""
        self._ensure_live()
        node = Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        self._modcount += 1

    def add_last(self, value: T) -> None:
        """Add a value to the end of the list. O(1)."""
        self._ensure_live()
        node = Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        self._modcount += 1

    def add(self, value: T, index: int) -> None:
        """
        Insert a value so that it ends up at ``index``.

        Valid indices are 0 to size inclusive. Anything else does nothing.
        """
        self._ensure_live()
        if index == 0:
            self.add_first(value)
        elif index == self._size:
            self.add_last(value)
        elif 0 < index < self._size:
            before = self.iterator()._seek(index - 1)
            node = Node(value)
            node.next = before.next
            before.next = node
            self._size += 1
            self._modcount += 1
        else:
            self._out_of_range(index)

    def add_all(self, other: "LinkedList[T]") -> None:
        """Append every value of another list, keeping order. The other list is unchanged."""
        self.add_array(other.to_array())

    def add_array(self, values: Iterable[T]) -> None:
        """Append the given values in order. Only references are copied."""
        self._ensure_live()
        for value in tuple(values):
            self.add_last(value)

    # Access

    def get_first(self) -> T | Absent:
        self._ensure_live()
        if self._head is None:
            return self._empty("get_first")
        return self._head.value

    def get_last(self) -> T | Absent:
        self._ensure_live()
        if self._tail is None:
            return self._empty("get_last")
        return self._tail.value

    def get(self, index: int) -> T | Absent:
        """Return the value at ``index``, or ABSENT if the index is out of range."""
        self._ensure_live()
        if index == self._size - 1 and self._tail is not None:
            return self._tail.value
        if 0 <= index < self._size:
            return self.iterator()._seek(index).value
        return self._out_of_range(index)

    def set_first(self, value: T) -> T | Absent:
        """Replace the first value. Returns the old value, which isn't destroyed."""
        self._ensure_live()
        if self._head is None:
            return self._empty("set_first")
        old = self._head.value
        self._head.value = value
        return old

    def set_last(self, value: T) -> T | Absent:
        """Replace the last value. Returns the old value, which isn't destroyed."""
        self._ensure_live()
        if self._tail is None:
            return self._empty("set_last")
        old = self._tail.value
        self._tail.value = value
        return old

    def set(self, value: T, index: int) -> T | Absent:
        """Replace the value at ``index``. Returns the old value, or ABSENT if out of range."""
        self._ensure_live()
        if index == self._size - 1 and self._tail is not None:
            return self.set_last(value)
        if 0 <= index < self._size:
            cursor = self.iterator()
            cursor._seek(index)
            return cursor.replace_current(value)
        return self._out_of_range(index)

    # Removal (values handed back, destructor not invoked)

    def remove_first(self) -> T | Absent:
        """Remove and return the first value. O(1)."""
        self._ensure_live()
        node = self._head
        if node is None:
            return self._empty("remove_first")
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        self._modcount += 1
        return node.value

    def remove_last(self) -> T | Absent:
        """Remove and return the last value. O(n), the list has no back links."""
        self._ensure_live()
        if self._size == 0:
            return self._empty("remove_last")
        cursor = self.iterator()
        cursor._seek(self._size - 1)
        return cursor.remove_current()

    def remove(self, index: int) -> T | Absent:
        """Remove and return the value at ``index``, or ABSENT if out of range."""
        self._ensure_live()
        if index == 0 and self._size > 0:
            return self.remove_first()
        if 0 <= index < self._size:
            cursor = self.iterator()
            cursor._seek(index)
            return cursor.remove_current()
        return self._out_of_range(index)

    def remove_if(self, selector: PredicateLike) -> None:
        """
        Remove every value matching a predicate in a single pass.

        Surviving values keep their relative order. The predicate is released
        afterwards.
        """
        predicate = as_predicate(selector)
        try:
            self._ensure_live()
            cursor = self.iterator()
            while cursor.has_next():
                if predicate.test(cursor.next()):
                    cursor.remove_current()
        finally:
            predicate.release()

    def remove_value(self, value: T) -> None:
        """Remove every occurrence of ``value`` (compared by identity)."""
        self.remove_if(Predicate.identical_to(value))

    def remove_all(self) -> None:
        """Drop every node. Values are not destroyed and the list remains usable."""
        self._ensure_live()
        self._head = None
        self._tail = None
        self._size = 0
        self._modcount += 1

    # Deletion (values passed to the destructor)

    def delete_first(self) -> None:
        self._ensure_live()
        if self._size == 0:
            self._empty("delete_first")
            return
        self._dispose(self.remove_first())  # type: ignore[arg-type]

    def delete_last(self) -> None:
        self._ensure_live()
        if self._size == 0:
            self._empty("delete_last")
            return
        self._dispose(self.remove_last())  # type: ignore[arg-type]

    def delete(self, index: int) -> None:
        """Remove the value at ``index`` and destroy it. Does nothing if out of range."""
        self._ensure_live()
        if not 0 <= index < self._size:
            self._out_of_range(index)
            return
        self._dispose(self.remove(index))  # type: ignore[arg-type]

    def delete_if(self, selector: PredicateLike) -> None:
        """Remove and destroy every value matching a predicate in a single pass."""
        predicate = as_predicate(selector)
        try:
            self._ensure_live()
            cursor = self.iterator()
            while cursor.has_next():
                if predicate.test(cursor.next()):
                    cursor.delete_current()
        finally:
            predicate.release()

    def delete_value(self, value: T) -> None:
        """Remove and destroy every occurrence of ``value`` (compared by identity)."""
        self.delete_if(Predicate.identical_to(value))

    def delete_all(self) -> None:
        """Destroy every value, then drop every node. The list remains usable."""
        self._ensure_live()
        logger.debug("Deleting all %d values", self._size)
        cursor = self.iterator()
        while cursor.has_next():
            self._dispose(cursor.next())  # type: ignore[arg-type]
        self.remove_all()

    def clear(self) -> None:
        """Dispose of the list without touching its values. Further use raises ListDisposedError."""
        if self._disposed:
            return
        logger.debug("Clearing list of %d values", self._size)
        self.remove_all()
        self._disposed = True

    def destroy(self) -> None:
        """Destroy every value and dispose of the list. Further use raises ListDisposedError."""
        if self._disposed:
            return
        self.delete_all()
        self._disposed = True

    # Searching

    def find_first(self, selector: PredicateLike) -> int:
        """Return the index of the first value matching a predicate, or -1."""
        predicate = as_predicate(selector)
        try:
            self._ensure_live()
            cursor = self.iterator()
            while cursor.has_next():
                if predicate.test(cursor.next()):
                    return cursor.index
            return -1
        finally:
            predicate.release()

    def find_last(self, selector: PredicateLike) -> int:
        """Return the index of the last value matching a predicate, or -1."""
        predicate = as_predicate(selector)
        index = -1
        try:
            self._ensure_live()
            cursor = self.iterator()
            while cursor.has_next():
                if predicate.test(cursor.next()):
                    index = cursor.index
        finally:
            predicate.release()
        return index

    def first_index_of(self, value: T) -> int:
        return self.find_first(Predicate.identical_to(value))

    def last_index_of(self, value: T) -> int:
        return self.find_last(Predicate.identical_to(value))

    def matches(self, selector: PredicateLike) -> bool:
        """Return True if any value matches a predicate."""
        return self.find_first(selector) != -1

    def contains(self, value: T) -> bool:
        """Return True if ``value`` itself (by identity) is in the list."""
        return self.matches(Predicate.identical_to(value))

    # Bulk operations

    def copy(self) -> "LinkedList[T]":
        """Shallow copy with the same values, destructor and strictness."""
        self._ensure_live()
        return LinkedList(self.iterator(), destructor=self._destructor, strict=self._strict)

    def for_each(self, action: ConsumerLike) -> None:
        """Run an action on every value. The action is released afterwards."""
        consumer = as_consumer(action)
        try:
            cursor = self.iterator()
        except ListDisposedError:
            consumer.release()
            raise
        cursor.for_each_remaining(consumer)

    def map(self, function: MapperLike) -> None:
        """
        Replace each value in place with ``function(value)``.

        Old values are left alone, so the caller remains responsible for them.
        """
        mapper = as_mapper(function)
        try:
            self._ensure_live()
            cursor = self.iterator()
            while cursor.has_next():
                cursor.replace_current(mapper.apply(cursor.next()))
        finally:
            mapper.release()

    def dmap(self, function: MapperLike) -> None:
        """Replace each value in place with ``function(value)``, destroying each old value."""
        mapper = as_mapper(function)
        try:
            self._ensure_live()
            cursor = self.iterator()
            while cursor.has_next():
                old = cursor.replace_current(mapper.apply(cursor.next()))
                self._dispose(old)  # type: ignore[arg-type]
        finally:
            mapper.release()

    @staticmethod
    def equal(first: "LinkedList[Any]", second: "LinkedList[Any]") -> bool:
        """Return True if both lists hold the same values (by identity) in the same order."""
        first._ensure_live()
        second._ensure_live()
        if first.size != second.size:
            return False
        cursor1 = first.iterator()
        cursor2 = second.iterator()
        while cursor1.has_next() and cursor2.has_next():
            if cursor1.next() is not cursor2.next():
                return False
        return True

    # Conversion

    def to_array(self) -> list[T]:
        """Return a new Python list of the values in order. Values are not copied."""
        return list(self.iterator())

    def to_string(self, string_function: StringFunction = str, length: int | None = None) -> str:
        """
        Render the list as ``[a, b, c]``.

        Args:
            string_function: Converts a single value to a string.
            length: Maximum expected length of each rendered value.

        Raises:
            RepresentationTooLongError: If a rendered value exceeds ``length``.
        """
        parts: list[str] = []
        for value in self.iterator():
            text = string_function(value)
            if length is not None and len(text) > length:
                raise RepresentationTooLongError(
                    f"Rendered value {text!r} exceeds maximum length {length}"
                )
            parts.append(text)
        return "[" + ", ".join(parts) + "]"

    # Python protocols

    def __len__(self) -> int:
        """Return the number of values in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __iter__(self) -> Cursor[T]:
        return self.iterator()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return LinkedList.equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._disposed:
            return f"{type(self).__name__}(<disposed>)"
        return f"{type(self).__name__}({self.to_string(repr)})"
