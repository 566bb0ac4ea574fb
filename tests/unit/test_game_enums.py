"""
Unit tests for combat enumerations.
"""
import pytest

from monster_arena.core.data import CombatantKind, KIND_NAMES


class TestCombatantKind:
    """Test the CombatantKind enumeration."""

    def test_all_kinds_exist(self):
        """Test that exactly the three kinds exist."""
        assert [kind.name for kind in CombatantKind] == ['BASE', 'FIRE', 'WATER']

    def test_kind_values_unique(self):
        """Test that kind values are unique."""
        values = [kind.value for kind in CombatantKind]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize("name,expected", [
        ("fire", CombatantKind.FIRE),
        ("FIRE", CombatantKind.FIRE),
        (" Water ", CombatantKind.WATER),
        ("base", CombatantKind.BASE),
    ])
    def test_from_name(self, name, expected):
        """Test resolving kinds from their YAML spelling."""
        assert CombatantKind.from_name(name) == expected

    def test_from_name_unknown(self):
        """Test that unknown kinds raise ValueError listing the valid ones."""
        with pytest.raises(ValueError, match="earth"):
            CombatantKind.from_name("earth")

    def test_every_kind_has_display_name(self):
        """Test that every kind has a display name."""
        assert set(KIND_NAMES) == set(CombatantKind)
        assert KIND_NAMES[CombatantKind.FIRE] == "Fire Monster"
