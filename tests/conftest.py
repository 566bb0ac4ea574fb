"""
Basic test fixtures for the monster arena test suite.

Provides fresh combatants and a wired event bus for every test.
"""

import sys
import os
import pytest

# Make the project root (main.py) and the src/ layout importable without installing
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)
sys.path.insert(0, os.path.join(project_root, "src"))

from monster_arena.core.data import CombatantKind
from monster_arena.core.events import EventManager
from monster_arena.game.arena import Arena
from monster_arena.game.entities import create_combatant
from monster_arena.game.narration_log import NarrationLog


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def narration_log(event_manager, tmp_path):
    """Create a narration log subscribed to the test event manager."""
    return NarrationLog(event_manager, log_directory=str(tmp_path / "logs"))


@pytest.fixture
def arena(event_manager, narration_log):
    """Create an arena publishing to the test event manager (with a log attached)."""
    return Arena(event_manager)


@pytest.fixture
def wizzrobe():
    """The fire monster from the demo fight (power 8, 15 HP, 32 degrees)."""
    return create_combatant(CombatantKind.FIRE, "wizzrobe", 8)


@pytest.fixture
def firesage():
    """A fresh fire monster to be attacked."""
    return create_combatant(CombatantKind.FIRE, "demon firesage", 4)


@pytest.fixture
def cthulhu():
    """A fresh water monster (power 3, 20 HP, empty bladder)."""
    return create_combatant(CombatantKind.WATER, "cthulhu", 3)


@pytest.fixture
def goblin():
    """A fresh base monster (power 2, 10 HP)."""
    return create_combatant(CombatantKind.BASE, "goblin", 2)

