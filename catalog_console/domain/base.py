"""Base classes for the domain layer."""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class ValueObject(ABC):
    """Base class for value objects.

    Value objects are immutable and compared by their attributes,
    not by identity. Every type in the category draft tree is a value
    object, so a draft can be replaced wholesale but never edited in
    place.

    Example:
        @dataclass(frozen=True)
        class ServiceItem(ValueObject):
            id: str
            name: str
    """

    pass
