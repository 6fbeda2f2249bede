"""Single-use closures used to parameterize list and tree traversals.

A closure bundles an operation with an optional context payload. When a
context is supplied the operation is called as ``func(value, context)``,
otherwise as ``func(value)``. The list or tree operation that accepts a
closure releases it once the operation finishes; any later use raises
:class:`~ownedlist.errors.ClosureConsumedError`.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeAlias, Union

from ownedlist.errors import ClosureConsumedError
from ownedlist.types import R

_NO_CONTEXT: Any = object()


@dataclass(frozen=True)
class _Closure(Generic[R]):
    """Immutable (operation, context) pair that can be released exactly once."""

    func: Callable[..., R]
    context: Any = _NO_CONTEXT
    released: bool = field(default=False, init=False, compare=False)

    def _call(self, value: Any) -> R:
        self.ensure_usable()
        if self.context is _NO_CONTEXT:
            return self.func(value)
        return self.func(value, self.context)

    def release(self) -> None:
        """Mark the closure as consumed. Further calls raise ClosureConsumedError."""
        object.__setattr__(self, "released", True)

    def ensure_usable(self) -> None:
        """Raise ClosureConsumedError if the closure was already released."""
        if self.released:
            raise ClosureConsumedError(f"{type(self).__name__} was already released")


@dataclass(frozen=True)
class Predicate(_Closure[bool]):
    """A closure which takes a value and returns a boolean."""

    def test(self, value: Any) -> bool:
        return bool(self._call(value))

    @classmethod
    def identical_to(cls, reference: Any) -> "Predicate":
        """Create a predicate matching values that *are* ``reference`` (identity, not ==)."""
        return cls(_is_same, reference)


@dataclass(frozen=True)
class Consumer(_Closure[None]):
    """A closure which takes a value and returns nothing."""

    def accept(self, value: Any) -> None:
        self._call(value)


@dataclass(frozen=True)
class Mapper(_Closure[R]):
    """A closure which takes a value and returns another value."""

    def apply(self, value: Any) -> R:
        return self._call(value)


def _is_same(element: Any, reference: Any) -> bool:
    return element is reference


PredicateLike: TypeAlias = Union[Predicate, Callable[[Any], bool]]
ConsumerLike: TypeAlias = Union[Consumer, Callable[[Any], None]]
MapperLike: TypeAlias = Union[Mapper, Callable[[Any], Any]]


def as_predicate(selector: PredicateLike) -> Predicate:
    """Return ``selector`` if it is already a Predicate, otherwise wrap the callable."""
    if isinstance(selector, Predicate):
        selector.ensure_usable()
        return selector
    return Predicate(selector)


def as_consumer(action: ConsumerLike) -> Consumer:
    """Return ``action`` if it is already a Consumer, otherwise wrap the callable."""
    if isinstance(action, Consumer):
        action.ensure_usable()
        return action
    return Consumer(action)


def as_mapper(mapper: MapperLike) -> Mapper:
    """Return ``mapper`` if it is already a Mapper, otherwise wrap the callable."""
    if isinstance(mapper, Mapper):
        mapper.ensure_usable()
        return mapper
    return Mapper(mapper)
