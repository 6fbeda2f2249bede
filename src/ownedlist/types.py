"""Type definitions for ownedlist."""

import enum
from typing import Any, Callable, Final, TypeAlias, TypeVar

# Generic type variables for stored and mapped values
T = TypeVar("T")  # Value type
U = TypeVar("U")  # Mapped value type
R = TypeVar("R")  # Closure result type


class Absent(enum.Enum):
    """Marker for a result that has no value (empty list, bad index, exhausted cursor)."""

    ABSENT = "ABSENT"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = Absent.ABSENT

# Invoked on a value when a list permanently disposes of it
Destructor: TypeAlias = Callable[[Any], None]

# Renders one value for LinkedList.to_string()
StringFunction: TypeAlias = Callable[[Any], str]
