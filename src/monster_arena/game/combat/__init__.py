"""Combat system components.

This package contains the core combat logic with clear separation of concerns:
- combat_rules.py: Rule constants and read-only rule lookups
- combat_resolver.py: Charge/attack strategies per kind and the fight sequence
- roster.py: Vectorized summaries of a group of combatants
"""

from .combat_resolver import (
    ATTACK_STRATEGIES,
    CHARGE_STRATEGIES,
    AttackResult,
    FightResult,
    attack,
    charge,
    fight,
    resolve_strike,
)
from .roster import RosterSummary, summarize_roster

__all__ = [
    "ATTACK_STRATEGIES",
    "CHARGE_STRATEGIES",
    "AttackResult",
    "FightResult",
    "attack",
    "charge",
    "fight",
    "resolve_strike",
    "RosterSummary",
    "summarize_roster",
]
