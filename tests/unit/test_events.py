"""
Unit tests for combat narration events.
"""
import pytest

from monster_arena.core.events import (
    AttackFailed,
    ChargeStarted,
    CombatantAttacked,
    CombatEvent,
    EventType,
    FightEnded,
    FightStarted,
    LogSaveRequested,
    TemperatureRaised,
)


class TestEventType:
    """Test the EventType enumeration."""

    def test_combat_event_types_exist(self):
        """Test that all narration event types exist."""
        expected_types = [
            'CHARGE_STARTED', 'COMBATANT_HEALED', 'TEMPERATURE_RAISED',
            'BLADDER_FILLED', 'BLADDER_OVERFLOWED', 'FIRE_TAUNT', 'BLADDER_VOLLEY',
            'COMBATANT_ATTACKED', 'COMBATANT_DEFEATED', 'ATTACK_FAILED', 'SOAKING_FINISHED',
        ]
        actual_types = [event_type.name for event_type in EventType]

        for expected in expected_types:
            assert expected in actual_types

    def test_event_type_values_unique(self):
        """Test that event type values are unique."""
        values = [event_type.value for event_type in EventType]
        assert len(values) == len(set(values))


class TestCombatEvents:
    """Test event construction and immutability."""

    def test_event_type_is_assigned(self):
        """Test that each event sets its own type."""
        assert ChargeStarted("a").event_type == EventType.CHARGE_STARTED
        assert TemperatureRaised("a", 64).event_type == EventType.TEMPERATURE_RAISED
        assert AttackFailed("a", 0).event_type == EventType.ATTACK_FAILED
        assert LogSaveRequested().event_type == EventType.LOG_SAVE_REQUESTED

    def test_events_are_combat_events(self):
        assert isinstance(CombatantAttacked("a", "b", 3, 7), CombatEvent)

    def test_frozen_dataclass(self):
        """Test that events are frozen (immutable)."""
        event = CombatantAttacked("a", "b", 3, 7)

        with pytest.raises(AttributeError):
            event.attack_power = 99  # type: ignore[misc] # Testing frozen dataclass immutability

    def test_value_equality(self):
        """Test that events with the same snapshot compare equal."""
        assert CombatantAttacked("a", "b", 3, 7) == CombatantAttacked("a", "b", 3, 7)
        assert CombatantAttacked("a", "b", 3, 7) != CombatantAttacked("a", "b", 3, 6)

    def test_event_type_not_constructor_argument(self):
        with pytest.raises(TypeError):
            ChargeStarted("a", event_type=EventType.FIRE_TAUNT)  # type: ignore[call-arg]

    def test_fight_events(self):
        started = FightStarted("actor", ("x", "y"))
        ended = FightEnded("actor", ("x",), 12)

        assert started.enemy_names == ("x", "y")
        assert ended.defeated_names == ("x",)
        assert ended.remaining_hit_points == 12
