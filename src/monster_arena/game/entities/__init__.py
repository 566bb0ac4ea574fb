"""Combatant entities.

- combatant.py: The Combatant record
- combatant_templates.py: YAML-backed kind templates and the combatant factory
"""

from .combatant import Combatant
from .combatant_templates import (
    CombatantTemplate,
    COMBATANT_TEMPLATES,
    create_combatant,
    create_combatant_from_dict,
    get_template,
    load_combatant_templates,
)

__all__ = [
    "Combatant",
    "CombatantTemplate",
    "COMBATANT_TEMPLATES",
    "create_combatant",
    "create_combatant_from_dict",
    "get_template",
    "load_combatant_templates",
]
