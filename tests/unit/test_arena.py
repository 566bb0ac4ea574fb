"""
Unit tests for the Arena, which publishes combat events on the bus.
"""
from monster_arena.core.events import EventType
from monster_arena.game.arena import Arena
from monster_arena.game.narration_log import LogCategory
from tests.test_utils import EventSpy, make_combatant


class TestArenaOperations:
    """Test that arena operations publish exactly what the operations return."""

    def test_charge_publishes_events(self, event_manager, wizzrobe):
        arena = Arena(event_manager)
        spy = EventSpy(event_manager)

        events = arena.charge(wizzrobe)

        assert spy.events == events
        assert wizzrobe.fire_temperature == 64
        assert event_manager.process_events() == 0

    def test_attack_returns_result(self, event_manager, goblin, firesage):
        arena = Arena(event_manager)
        spy = EventSpy(event_manager)

        result = arena.attack(goblin, firesage)

        assert result.attempted is True
        assert spy.events == result.events
        assert firesage.hit_points == 13

    def test_failed_attack_is_not_an_exception(self, event_manager):
        arena = Arena(event_manager)
        spy = EventSpy(event_manager)

        result = arena.attack(make_combatant(hit_points=0), make_combatant())

        assert result.attempted is False
        assert spy.types == [EventType.ATTACK_FAILED]


class TestArenaFight:
    """Test fights published through the arena."""

    def test_fight_is_bracketed(self, event_manager, wizzrobe, firesage, cthulhu):
        arena = Arena(event_manager)
        spy = EventSpy(event_manager)

        result = arena.fight(wizzrobe, [firesage, cthulhu])

        combat_events = [
            e for e in spy.events
            if e.event_type not in (EventType.FIGHT_STARTED, EventType.FIGHT_ENDED, EventType.LOG_MESSAGE)
        ]
        assert combat_events == result.events
        assert spy.types[0] == EventType.FIGHT_STARTED
        assert EventType.FIGHT_ENDED in spy.types

        started = spy.of_type(EventType.FIGHT_STARTED)[0]
        ended = spy.of_type(EventType.FIGHT_ENDED)[0]
        assert started.enemy_names == ("Fiery-demon firesage", "Watery-cthulhu")
        assert ended.defeated_names == ()
        assert ended.remaining_hit_points == 19
        assert arena.fights_run == 1

    def test_fight_summary_logged_as_debug(self, arena, narration_log, wizzrobe, firesage):
        arena.fight(wizzrobe, [firesage])

        debug = narration_log.get_messages(categories={LogCategory.DEBUG})
        assert debug[-1].text == "[Arena] Fight #1: 8 damage dealt in 1 strikes"

    def test_defeated_actor_warns(self, arena, narration_log):
        arena.fight(make_combatant(name="ghost", hit_points=0), [make_combatant()])

        warnings = narration_log.get_messages(categories={LogCategory.WARNING})
        assert warnings[-1].text == "[Arena] ghost fought while defeated; no attack landed"
