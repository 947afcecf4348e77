"""Domain base classes.

Entities compare by id; value objects compare by value.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

IdT = TypeVar("IdT", int, str)


@dataclass(frozen=True)
class ValueObject(ABC):
    """Immutable object defined only by its attributes.

    Value objects carry no id and are embedded in whatever owns them.
    """


@dataclass(eq=False)
class Entity(ABC, Generic[IdT]):
    """Object whose identity survives changes to its attributes.

    Attributes:
        id: Identifier, unique per entity type.
    """

    id: IdT

    def __eq__(self, other: object) -> bool:
        """Same type and same id."""
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self.id))
