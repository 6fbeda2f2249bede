"""Mutable cursor over a LinkedList."""

from typing import TYPE_CHECKING, Generic

from ownedlist.closures import ConsumerLike, as_consumer
from ownedlist.errors import CursorInvalidatedError, IndexOutOfRangeError
from ownedlist.types import ABSENT, Absent, T

if TYPE_CHECKING:
    from ownedlist.linkedlist import LinkedList, Node


class Cursor(Generic[T]):
    """
    Traversal handle bound to exactly one LinkedList.

    Tracks the previous, current and next nodes, plus the index of the most
    recently returned value (-1 before the first call to next()).

    A cursor stays valid only while its own remove_current()/delete_current()
    are the only structural changes made to the list. Inserting or removing
    through the list itself, or through another cursor, invalidates it and
    the next call raises CursorInvalidatedError.

    Cursors are also plain Python iterators, so ``for value in cursor`` drains
    the remaining values.
    """

    __slots__ = ("_list", "_previous", "_current", "_next", "_index", "_expected_modcount", "_closed")

    def __init__(self, owner: "LinkedList[T]") -> None:
        self._list = owner
        self._previous: Node[T] | None = None
        self._current: Node[T] | None = None
        self._next: Node[T] | None = owner._head
        self._index = -1
        self._expected_modcount = owner._modcount
        self._closed = False

    @property
    def index(self) -> int:
        """Index of the most recently returned value, -1 before the first next()."""
        return self._index

    def _check_valid(self) -> None:
        if self._closed:
            return
        if self._list._modcount != self._expected_modcount:
            raise CursorInvalidatedError("List was structurally modified outside this cursor")

    def has_next(self) -> bool:
        """Return True if an unconsumed value remains."""
        self._check_valid()
        return self._next is not None

    def next(self) -> T | Absent:
        """Advance one step and return the new current value, or ABSENT if exhausted."""
        self._check_valid()
        if self._next is None:
            return ABSENT
        # After a removal current is None and previous already precedes next
        if self._current is not None:
            self._previous = self._current
        self._current = self._next
        self._next = self._current.next
        self._index += 1
        return self._current.value

    def __iter__(self) -> "Cursor[T]":
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()  # type: ignore[return-value]

    def current(self) -> T | Absent:
        """Return the most recently returned value, or ABSENT if none or already removed."""
        if self._current is None:
            return ABSENT
        return self._current.value

    def replace_current(self, value: T) -> T | Absent:
        """Overwrite the current value in place. Returns the old value, which isn't destroyed."""
        self._check_valid()
        if self._current is None:
            return ABSENT
        old = self._current.value
        self._current.value = value
        return old

    def _unlink_current(self) -> "Node[T] | None":
        self._check_valid()
        node = self._current
        if node is None:
            return None

        owner = self._list
        if self._previous is None:
            owner._head = self._next
        else:
            self._previous.next = self._next
        if owner._tail is node:
            owner._tail = self._previous
        node.next = None
        owner._size -= 1
        owner._modcount += 1

        # Stay in step with the list so traversal can continue
        self._expected_modcount = owner._modcount
        self._current = None
        self._index -= 1
        return node

    def remove_current(self) -> T | Absent:
        """
        Remove the most recently returned value from the list.

        The value is handed back to the caller and the list's destructor is
        not invoked. A second removal without an intervening next() is a
        no-op returning ABSENT. Traversal continues with the following value.
        """
        node = self._unlink_current()
        if node is None:
            return ABSENT
        return node.value

    def delete_current(self) -> None:
        """Remove the most recently returned value and destroy it with the list's destructor."""
        node = self._unlink_current()
        if node is not None:
            self._list._dispose(node.value)

    def for_each_remaining(self, action: ConsumerLike) -> None:
        """
        Run an action on every remaining value, then discard the cursor.

        Args:
            action: A Consumer or plain callable. It is released afterwards.
        """
        consumer = as_consumer(action)
        try:
            while self.has_next():
                consumer.accept(self.next())
        finally:
            consumer.release()
            self.close()

    def close(self) -> None:
        """Drop all node references. A closed cursor behaves as exhausted."""
        self._closed = True
        self._previous = None
        self._current = None
        self._next = None

    def _seek(self, index: int) -> "Node[T]":
        """Advance until ``index`` is current. Raises IndexOutOfRangeError if the list is shorter."""
        while self._index < index and self._next is not None:
            self.next()
        if self._index != index or self._current is None:
            raise IndexOutOfRangeError(f"Index {index} out of range for list of size {self._list._size}")
        return self._current
