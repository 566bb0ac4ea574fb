"""Fight scenarios loaded from YAML.

- scenario.py: Scenario and combatant definitions
- scenario_loader.py: YAML loading and the bundled scenarios
"""

from .scenario import CombatantData, FightScenario
from .scenario_loader import DEFAULT_SCENARIO, ScenarioLoader, bundled_scenarios_dir

__all__ = [
    "CombatantData",
    "FightScenario",
    "DEFAULT_SCENARIO",
    "ScenarioLoader",
    "bundled_scenarios_dir",
]
