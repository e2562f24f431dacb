"""Tests for identifier generators."""

import pytest

from catalog_console.domain import (
    IdScope,
    SequentialIdGenerator,
    TimestampIdGenerator,
    create_id_generator,
    get_id_generator,
    set_id_generator,
)


class TestSequentialIdGenerator:
    """Tests for SequentialIdGenerator."""

    def test_prefixes_per_scope(self) -> None:
        """Each scope uses its own prefix."""
        ids = SequentialIdGenerator()
        assert ids.next_id(IdScope.TAB) == "tab_1"
        assert ids.next_id(IdScope.ITEM) == "service_1"
        assert ids.next_id(IdScope.CATEGORY) == "C1"

    def test_counters_are_independent(self) -> None:
        """Issuing in one scope does not advance another."""
        ids = SequentialIdGenerator()
        ids.next_id(IdScope.TAB)
        ids.next_id(IdScope.TAB)
        assert ids.next_id(IdScope.TAB) == "tab_3"
        assert ids.next_id(IdScope.ITEM) == "service_1"

    def test_accepts_scope_name(self) -> None:
        """Scopes can be given by value."""
        ids = SequentialIdGenerator(start=10)
        assert ids.next_id("tab") == "tab_10"

    def test_unknown_scope_raises(self) -> None:
        """Unknown scope names are rejected."""
        with pytest.raises(ValueError):
            SequentialIdGenerator().next_id("order")


class TestTimestampIdGenerator:
    """Tests for TimestampIdGenerator."""

    def test_uses_clock_value(self) -> None:
        """Ids carry the clock's millisecond value."""
        ids = TimestampIdGenerator(clock=lambda: 1718000000000)
        assert ids.next_id(IdScope.TAB) == "tab_1718000000000"

    def test_same_millisecond_does_not_collide(self) -> None:
        """Two ids in the same millisecond differ."""
        ids = TimestampIdGenerator(clock=lambda: 5000)
        first = ids.next_id(IdScope.ITEM)
        second = ids.next_id(IdScope.ITEM)
        assert first == "service_5000"
        assert second == "service_5001"

    def test_clock_going_backwards(self) -> None:
        """A clock that steps back still yields fresh ids."""
        ticks = iter([100, 50, 101])
        ids = TimestampIdGenerator(clock=lambda: next(ticks))
        issued = [ids.next_id(IdScope.TAB) for _ in range(3)]
        assert issued == ["tab_100", "tab_101", "tab_102"]

    def test_scopes_tracked_separately(self) -> None:
        """The collision guard is per scope."""
        ids = TimestampIdGenerator(clock=lambda: 7)
        assert ids.next_id(IdScope.TAB) == "tab_7"
        assert ids.next_id(IdScope.CATEGORY) == "C7"

    def test_default_clock_is_unique(self) -> None:
        """The real clock never repeats within a scope."""
        ids = TimestampIdGenerator()
        issued = {ids.next_id(IdScope.TAB) for _ in range(200)}
        assert len(issued) == 200


class TestGeneratorRegistry:
    """Tests for the process-wide generator."""

    def test_default_is_timestamp(self) -> None:
        """The default generator is timestamp based."""
        assert isinstance(get_id_generator(), TimestampIdGenerator)

    def test_set_and_reset(self) -> None:
        """set_id_generator replaces the generator; None restores the default."""
        ids = SequentialIdGenerator()
        set_id_generator(ids)
        assert get_id_generator() is ids
        set_id_generator(None)
        assert isinstance(get_id_generator(), TimestampIdGenerator)

    def test_create_from_strategy(self) -> None:
        """Strategies map to generator types."""
        assert isinstance(create_id_generator("sequential"), SequentialIdGenerator)
        assert isinstance(create_id_generator("timestamp"), TimestampIdGenerator)

    def test_unknown_strategy_raises(self) -> None:
        """Unknown strategies are rejected."""
        with pytest.raises(ValueError, match="Unknown id strategy"):
            create_id_generator("uuid")
