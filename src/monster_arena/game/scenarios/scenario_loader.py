import os
from pathlib import Path
from typing import Any

import yaml

from .scenario import CombatantData, FightScenario

DEFAULT_SCENARIO = "wizzrobe.yaml"


def bundled_scenarios_dir() -> str:
    """Directory holding the scenarios shipped with the package."""
    package_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    return os.path.join(package_root, "assets", "scenarios")


class ScenarioLoader:
    """Handles loading fight scenarios from YAML files."""

    @staticmethod
    def load_from_file(file_path: str) -> FightScenario:
        """Load a scenario from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid YAML or not a mapping
            KeyError: If a required key is missing
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"Scenario file not found: {file_path}") from e
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML scenario: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Scenario file must contain a mapping: {file_path}")

        try:
            return ScenarioLoader.parse_scenario(data, default_name=Path(file_path).stem)
        except KeyError as e:
            raise KeyError(f"Invalid scenario structure in {file_path}: missing {e}") from e

    @staticmethod
    def load_bundled(file_name: str = DEFAULT_SCENARIO) -> FightScenario:
        """Load one of the scenarios shipped with the package."""
        return ScenarioLoader.load_from_file(os.path.join(bundled_scenarios_dir(), file_name))

    @staticmethod
    def list_bundled() -> list[str]:
        """File names of the scenarios shipped with the package."""
        return sorted(
            name for name in os.listdir(bundled_scenarios_dir())
            if name.endswith((".yaml", ".yml"))
        )

    @staticmethod
    def parse_scenario(data: dict[str, Any], default_name: str = "Unnamed Scenario") -> FightScenario:
        """Parse scenario data from a dictionary.

        Raises:
            KeyError: If the actor or a required combatant key is missing
            ValueError: If ``enemies`` is not a list or a combatant entry is malformed
        """
        enemies = data.get("enemies") or []
        if not isinstance(enemies, list):
            raise ValueError("Scenario 'enemies' must be a list")

        return FightScenario(
            name=data.get("name", default_name),
            description=data.get("description", ""),
            author=data.get("author", "Unknown"),
            actor=CombatantData.from_dict(data["actor"]),
            enemies=[CombatantData.from_dict(enemy) for enemy in enemies],
        )
