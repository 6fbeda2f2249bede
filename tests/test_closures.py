"""Tests for single-use closures."""

import pytest

from ownedlist import ClosureConsumedError, Consumer, LinkedList, ListDisposedError, Mapper, Predicate


def test_predicate_without_context() -> None:
    """Test a predicate calls its function with the value only."""
    predicate = Predicate(lambda value: value > 2)
    assert predicate.test(3)
    assert not predicate.test(1)


def test_predicate_with_context() -> None:
    """Test a predicate passes its context as the second argument."""
    predicate = Predicate(lambda value, limit: value > limit, 10)
    assert predicate.test(11)
    assert not predicate.test(10)


def test_closures_are_immutable() -> None:
    """Test closures cannot be reassigned."""
    consumer = Consumer(print)
    with pytest.raises(AttributeError):  # FrozenInstanceError
        consumer.func = len  # type: ignore[misc]


def test_identical_to_uses_identity() -> None:
    """Test the identity predicate ignores equality."""
    reference = [1]
    predicate = Predicate.identical_to(reference)
    assert predicate.test(reference)
    assert not predicate.test([1])


def test_released_closure_raises() -> None:
    """Test every closure kind refuses use after release."""
    predicate = Predicate(bool)
    consumer = Consumer(print)
    mapper = Mapper(str)
    for closure in (predicate, consumer, mapper):
        closure.release()

    with pytest.raises(ClosureConsumedError):
        predicate.test(1)
    with pytest.raises(ClosureConsumedError):
        consumer.accept(1)
    with pytest.raises(ClosureConsumedError):
        mapper.apply(1)


def test_list_operation_consumes_predicate() -> None:
    """Test a predicate passed to a list operation is released afterwards."""
    lst = LinkedList([1, 2, 3])
    predicate = Predicate(lambda value, target: value == target, 2)

    assert lst.find_first(predicate) == 1
    assert predicate.released

    with pytest.raises(ClosureConsumedError):
        lst.remove_if(predicate)
    assert lst.to_array() == [1, 2, 3]


def test_closure_released_when_operation_fails() -> None:
    """Test the closure is released even if it raises."""

    def explode(value: int) -> bool:
        raise ValueError("boom")

    predicate = Predicate(explode)
    lst = LinkedList([1])
    with pytest.raises(ValueError):
        lst.remove_if(predicate)
    assert predicate.released


def test_mapper_with_context() -> None:
    """Test a mapper with context used by map()."""
    lst = LinkedList([1, 2, 3])
    lst.map(Mapper(lambda value, factor: value * factor, 10))
    assert lst.to_array() == [10, 20, 30]


def test_consumer_with_context() -> None:
    """Test a consumer with context used by for_each()."""
    sink: list[int] = []
    LinkedList([1, 2]).for_each(Consumer(lambda value, out: out.append(value), sink))
    assert sink == [1, 2]


def test_closures_released_on_disposed_list() -> None:
    """Test closures are released even when the list was already disposed."""
    lst = LinkedList([1, 2])
    lst.clear()

    predicates = [Predicate(lambda value: True) for _ in range(4)]
    operations = [lst.remove_if, lst.delete_if, lst.find_first, lst.find_last]
    for operation, predicate in zip(operations, predicates):
        with pytest.raises(ListDisposedError):
            operation(predicate)
        assert predicate.released

    for operation in (lst.map, lst.dmap):
        mapper = Mapper(str)
        with pytest.raises(ListDisposedError):
            operation(mapper)
        assert mapper.released

    consumer = Consumer(print)
    with pytest.raises(ListDisposedError):
        lst.for_each(consumer)
    assert consumer.released
