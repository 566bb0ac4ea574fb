"""
Unit tests for vectorized roster summaries.
"""
import numpy as np

from monster_arena.game.combat import summarize_roster
from tests.test_utils import make_combatant


class TestRosterSummary:
    """Test summarizing a group of combatants."""

    def test_summary_masks(self):
        roster = summarize_roster([
            make_combatant(name="a", hit_points=5),
            make_combatant(name="b", hit_points=0),
            make_combatant(name="c", hit_points=-4),
            make_combatant(name="d", hit_points=12),
        ])

        assert roster.names == ("a", "b", "c", "d")
        np.testing.assert_array_equal(roster.hit_points, [5, 0, -4, 12])
        np.testing.assert_array_equal(roster.alive_mask, [True, False, False, True])
        assert roster.alive_names == ("a", "d")
        assert roster.defeated_names == ("b", "c")
        assert roster.alive_count == 2
        assert roster.total_hit_points == 17
        assert not roster.all_defeated

    def test_negative_hit_points_do_not_reduce_total(self):
        roster = summarize_roster([make_combatant(hit_points=-10), make_combatant(hit_points=3)])
        assert roster.total_hit_points == 3

    def test_all_defeated(self):
        roster = summarize_roster([make_combatant(hit_points=0), make_combatant(hit_points=-1)])

        assert roster.all_defeated
        assert roster.total_hit_points == 0

    def test_empty_roster(self):
        roster = summarize_roster([])

        assert roster.names == ()
        assert roster.alive_count == 0
        assert roster.total_hit_points == 0

    def test_summary_is_a_snapshot(self):
        combatant = make_combatant(hit_points=5)
        roster = summarize_roster([combatant])

        combatant.take_damage(10)

        assert roster.alive_count == 1
        assert int(roster.hit_points[0]) == 5
