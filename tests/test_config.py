"""Tests for strict mode, destructors and list disposal."""

import logging

import pytest

from ownedlist import (
    EmptyListError,
    IndexOutOfRangeError,
    LinkedList,
    ListDisposedError,
    OwnedListError,
    release_value,
)


def test_default_destructor() -> None:
    """Test lists default to the reference-dropping destructor."""
    lst = LinkedList(["a"])
    assert lst.destructor is release_value
    lst.delete_first()
    assert lst.size == 0


def test_strict_out_of_range_raises() -> None:
    """Test strict lists raise instead of returning ABSENT."""
    lst = LinkedList(["a", "b"], strict=True)

    with pytest.raises(IndexOutOfRangeError):
        lst.get(2)
    with pytest.raises(IndexOutOfRangeError):
        lst.set("x", -1)
    with pytest.raises(IndexOutOfRangeError):
        lst.add("x", 3)
    with pytest.raises(IndexOutOfRangeError):
        lst.remove(5)
    with pytest.raises(IndexError):
        lst.delete(5)

    assert lst.to_array() == ["a", "b"]


def test_strict_empty_raises() -> None:
    """Test strict lists raise on first/last access when empty."""
    lst = LinkedList[str](strict=True)

    for operation in (lst.get_first, lst.get_last, lst.remove_first, lst.remove_last,
                      lst.delete_first, lst.delete_last):
        with pytest.raises(EmptyListError):
            operation()
    with pytest.raises(EmptyListError):
        lst.set_first("a")


def test_strict_in_range_behaves_normally() -> None:
    """Test strict mode does not affect valid operations."""
    lst = LinkedList(["a", "c"], strict=True)
    lst.add("b", 1)
    assert lst.get(1) == "b"
    assert lst.remove(2) == "c"


def test_clear_disposes_list_without_values() -> None:
    """Test clear releases the container but not its values."""
    destroyed: list[str] = []
    lst = LinkedList(["a", "b"], destructor=destroyed.append)

    lst.clear()
    assert lst.disposed
    assert destroyed == []
    assert len(lst) == 0

    with pytest.raises(ListDisposedError):
        lst.add_last("c")
    with pytest.raises(ListDisposedError):
        lst.get_first()
    with pytest.raises(OwnedListError):
        lst.iterator()

    # Clearing twice is harmless
    lst.clear()


def test_destroy_disposes_list_and_values() -> None:
    """Test destroy destroys every value then disposes the list."""
    destroyed: list[str] = []
    lst = LinkedList(["a", "b"], destructor=destroyed.append)

    lst.destroy()
    lst.destroy()

    assert destroyed == ["a", "b"]
    assert lst.disposed
    assert repr(lst) == "LinkedList(<disposed>)"
    with pytest.raises(ListDisposedError):
        lst.remove_first()


def test_destructor_errors_propagate() -> None:
    """Test a failing destructor surfaces its exception."""

    def broken(value: object) -> None:
        raise RuntimeError("cannot free")

    lst = LinkedList(["a"], destructor=broken)
    with pytest.raises(RuntimeError, match="cannot free"):
        lst.delete_first()


def test_disposal_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Test destruction emits debug records."""
    lst = LinkedList(["a"])
    with caplog.at_level(logging.DEBUG, logger="ownedlist.linkedlist"):
        lst.destroy()

    messages = [record.getMessage() for record in caplog.records]
    assert "Deleting all 1 values" in messages
    assert "Destroying value 'a'" in messages


def test_equality_with_disposed_lists_raises() -> None:
    """Test comparing disposed lists raises whatever their sizes were."""
    same_a = LinkedList(["a"])
    same_b = LinkedList(["b"])
    other = LinkedList(["a", "b"])
    same_a.clear()
    same_b.clear()

    with pytest.raises(ListDisposedError):
        same_a == same_b
    with pytest.raises(ListDisposedError):
        LinkedList.equal(same_a, other)
    with pytest.raises(ListDisposedError):
        other == same_a
