"""Identifier generation for draft tabs, items and finalized categories.

Ids only have to be unique within their parent (tabs within a draft,
items within a tab), but generators here never repeat an id within a
scope for the lifetime of the process, which is strictly stronger.
"""

import itertools
import time
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterator


class IdScope(str, Enum):
    """Kinds of identifiers issued during an editing session."""

    TAB = "tab"
    ITEM = "item"
    CATEGORY = "category"


# Id prefixes as the admin console has always rendered them.
ID_PREFIXES: dict[IdScope, str] = {
    IdScope.TAB: "tab_",
    IdScope.ITEM: "service_",
    IdScope.CATEGORY: "C",
}


class IdentifierGenerator(ABC):
    """Source of fresh identifiers.

    Implementations must never return the same id twice for the same
    scope. Ids from different scopes may coincide.
    """

    @abstractmethod
    def next_id(self, scope: IdScope | str) -> str:
        """Issue a new identifier.

        Args:
            scope: Scope the id is issued for.

        Returns:
            New identifier string.
        """


class SequentialIdGenerator(IdentifierGenerator):
    """Deterministic per-scope counters (tab_1, tab_2, service_1, C1, ...).

    Used by tests and by deployments that prefer short stable ids.
    """

    def __init__(self, start: int = 1) -> None:
        self._counters: dict[IdScope, Iterator[int]] = {
            scope: itertools.count(start) for scope in IdScope
        }

    def next_id(self, scope: IdScope | str) -> str:
        scope = IdScope(scope)
        return f"{ID_PREFIXES[scope]}{next(self._counters[scope])}"


class TimestampIdGenerator(IdentifierGenerator):
    """Millisecond wall-clock ids (tab_1718000000000, ...).

    Two calls in the same millisecond, or a clock that steps backwards,
    would otherwise collide; the last issued value per scope is kept and
    bumped by one when the clock has not moved past it.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        """Initialize generator.

        Args:
            clock: Returns the current time in milliseconds.
        """
        self._clock = clock or (lambda: time.time_ns() // 1_000_000)
        self._last: dict[IdScope, int] = {}

    def next_id(self, scope: IdScope | str) -> str:
        scope = IdScope(scope)
        value = self._clock()
        last = self._last.get(scope)
        if last is not None and value <= last:
            value = last + 1
        self._last[scope] = value
        return f"{ID_PREFIXES[scope]}{value}"


# Global generator instance
_id_generator: IdentifierGenerator | None = None


def get_id_generator() -> IdentifierGenerator:
    """Get the process-wide identifier generator.

    Returns:
        IdentifierGenerator instance (timestamp based unless replaced).
    """
    global _id_generator
    if _id_generator is None:
        _id_generator = TimestampIdGenerator()
    return _id_generator


def set_id_generator(generator: IdentifierGenerator | None) -> None:
    """Replace the process-wide identifier generator.

    Args:
        generator: New generator, or None to fall back to the default.
    """
    global _id_generator
    _id_generator = generator


def create_id_generator(strategy: str) -> IdentifierGenerator:
    """Build a generator from a configured strategy name.

    Args:
        strategy: "timestamp" or "sequential".

    Returns:
        IdentifierGenerator instance.

    Raises:
        ValueError: If the strategy is unknown.
    """
    if strategy == "timestamp":
        return TimestampIdGenerator()
    if strategy == "sequential":
        return SequentialIdGenerator()
    raise ValueError(f"Unknown id strategy: {strategy!r}")
