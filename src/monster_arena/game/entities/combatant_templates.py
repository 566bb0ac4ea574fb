"""Combatant kind templates.

This module defines how each combatant kind starts out. Templates are loaded
from a YAML file shipped with the package and converted to data structures
that specify the name prefix, the default hit points and the kind-specific
state (fire temperature, water bladder level).
"""

import os
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import yaml

from ...core.data import CombatantKind
from .combatant import Combatant

# Kind-specific fields a template may initialise
STATE_FIELDS = ("fire_temperature", "water_bladder_level")


@dataclass
class CombatantTemplate:
    """Starting values for one combatant kind."""

    name_prefix: str
    hit_points: int
    state: dict[str, int] = field(default_factory=dict)


def _default_templates_path() -> str:
    # Two levels up from this file is the package root
    current_dir = os.path.dirname(os.path.abspath(__file__))
    package_root = os.path.dirname(os.path.dirname(current_dir))
    return os.path.join(
        package_root, "assets", "data", "combatants", "combatant_templates.yaml"
    )


def load_combatant_templates(
    yaml_path: Optional[str] = None,
) -> dict[CombatantKind, CombatantTemplate]:
    """Load combatant templates from a YAML file.

    Args:
        yaml_path: Template file to read (defaults to the bundled one)

    Returns:
        Dictionary mapping CombatantKind enums to CombatantTemplate objects

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If a template is missing a required key
        ValueError: If a kind name or state field is not recognized
    """
    yaml_path = yaml_path or _default_templates_path()

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Combatant templates file not found: {yaml_path}") from e

    try:
        templates = {}
        for kind_name, template_data in data["combatant_templates"].items():
            kind = CombatantKind.from_name(kind_name)
            state = dict(template_data.get("state") or {})
            unknown = set(state) - set(STATE_FIELDS)
            if unknown:
                raise ValueError(
                    f"Unknown state field(s) for {kind_name} in {yaml_path}: {sorted(unknown)}"
                )
            templates[kind] = CombatantTemplate(
                name_prefix=template_data.get("name_prefix", ""),
                hit_points=int(template_data["hit_points"]),
                state={key: int(value) for key, value in state.items()},
            )
    except (KeyError, TypeError, AttributeError) as e:
        raise KeyError(f"Invalid template structure in {yaml_path}: {e}") from e

    missing = [kind.name for kind in CombatantKind if kind not in templates]
    if missing:
        raise KeyError(f"Missing templates in {yaml_path}: {', '.join(missing)}")

    return templates


# Load templates from YAML file
COMBATANT_TEMPLATES: dict[CombatantKind, CombatantTemplate] = load_combatant_templates()


def get_template(kind: CombatantKind) -> CombatantTemplate:
    """Get the template for a combatant kind.

    Raises:
        KeyError: If kind is not recognized
    """
    if kind not in COMBATANT_TEMPLATES:
        raise KeyError(f"No template found for combatant kind: {kind}")

    return COMBATANT_TEMPLATES[kind]


def create_combatant(
    kind: Union[CombatantKind, str],
    name: str,
    attack_power: int,
    hit_points: Optional[int] = None,
) -> Combatant:
    """Create a combatant from its kind template.

    Args:
        kind: Combatant kind (enum or its name)
        name: Base name; the kind's prefix is prepended ("wizzrobe" -> "Fiery-wizzrobe")
        attack_power: Base damage dealt per strike
        hit_points: Starting hit points (defaults to the kind's template value)

    Returns:
        Combatant with its kind-specific state initialised
    """
    if not isinstance(kind, CombatantKind):
        kind = CombatantKind.from_name(kind)
    template = get_template(kind)

    return Combatant(
        name=template.name_prefix + name,
        hit_points=template.hit_points if hit_points is None else int(hit_points),
        attack_power=int(attack_power),
        kind=kind,
        **template.state,
    )


def create_combatant_from_dict(data: dict[str, Any]) -> Combatant:
    """Create a combatant from a scenario entry.

    The entry needs ``kind``, ``name`` and ``attack_power``; ``hit_points``
    is optional.

    Raises:
        KeyError: If a required key is missing
        ValueError: If the kind is not recognized
    """
    return create_combatant(
        kind=data["kind"],
        name=data["name"],
        attack_power=data["attack_power"],
        hit_points=data.get("hit_points"),
    )
