"""
Combat resolution: charges, attacks and fights.

Every combatant kind has one charge strategy and one attack strategy,
selected from a dispatch table by ``combatant.kind``. All attack strategies
end up in :func:`resolve_strike`, which applies one strike at an explicitly
computed effective attack power, so no strategy ever touches
``attack_power`` itself.

Operations never print. They return the narration events describing what
happened; see :mod:`monster_arena.game.narration_log` for turning those into text.
"""
from typing import Callable, Sequence

from ...core.data import CombatantKind
from ...core.events import (
    AttackFailed,
    BladderFilled,
    BladderOverflowed,
    BladderVolley,
    ChargeStarted,
    CombatantAttacked,
    CombatantDefeated,
    CombatantHealed,
    CombatEvent,
    FireTaunt,
    SoakingFinished,
    TemperatureRaised,
)
from ..entities.combatant import Combatant
from .combat_rules import (
    FIRE_CHARGE_HEAL,
    TEMPERATURE_MULTIPLIER,
    fire_power_bonus,
    next_bladder_level,
)
from .roster import RosterSummary, summarize_roster


class AttackResult:
    """Result of one attack action."""

    def __init__(self, attacker: Combatant, defender: Combatant):
        self.attacker = attacker
        self.defender = defender
        self.attempted: bool = False
        self.strikes: int = 0
        self.damage_dealt: int = 0
        self.defender_defeated: bool = False
        self.events: list[CombatEvent] = []

    def __bool__(self) -> bool:
        return self.attempted


class FightResult:
    """Result of a full fight: one charge followed by one attack per enemy."""

    def __init__(self, actor: Combatant):
        self.actor = actor
        self.charge_events: list[CombatEvent] = []
        self.attacks: list[AttackResult] = []
        self.roster: RosterSummary = summarize_roster([])

    @property
    def events(self) -> list[CombatEvent]:
        """Every event of the fight in the order it happened."""
        events = list(self.charge_events)
        for result in self.attacks:
            events.extend(result.events)
        return events

    @property
    def total_damage(self) -> int:
        return sum(result.damage_dealt for result in self.attacks)


# ============== Shared strike helper ==============

def resolve_strike(
    attacker: Combatant,
    defender: Combatant,
    attack_power: int,
    result: AttackResult,
) -> bool:
    """Apply a single strike at ``attack_power`` and record it on ``result``.

    A defeated attacker only reports the failure; the defender is untouched.

    Returns:
        True if the strike was attempted
    """
    if not attacker.is_alive:
        result.events.append(AttackFailed(attacker.name, attacker.hit_points))
        return False

    remaining = defender.take_damage(attack_power)
    result.attempted = True
    result.strikes += 1
    result.damage_dealt += attack_power
    result.events.append(
        CombatantAttacked(attacker.name, defender.name, attack_power, remaining)
    )

    if remaining <= 0:
        result.defender_defeated = True
        result.events.append(CombatantDefeated(defender.name, remaining))

    return True


# ============== Charge strategies ==============

def _charge_base(combatant: Combatant) -> list[CombatEvent]:
    return [ChargeStarted(combatant.name)]


def _charge_fire(combatant: Combatant) -> list[CombatEvent]:
    events = _charge_base(combatant)

    # Defeated is terminal: a charge never brings a combatant back
    if combatant.is_alive:
        hit_points = combatant.heal(FIRE_CHARGE_HEAL)
        events.append(CombatantHealed(combatant.name, FIRE_CHARGE_HEAL, hit_points))

    combatant.fire_temperature *= TEMPERATURE_MULTIPLIER
    events.append(TemperatureRaised(combatant.name, combatant.fire_temperature))
    return events


def _charge_water(combatant: Combatant) -> list[CombatEvent]:
    events = _charge_base(combatant)

    level, overflowed = next_bladder_level(combatant.water_bladder_level)
    combatant.water_bladder_level = level
    if overflowed:
        events.append(BladderOverflowed(combatant.name))
    events.append(BladderFilled(combatant.name, level))
    return events


# ============== Attack strategies ==============

def _attack_base(attacker: Combatant, defender: Combatant, result: AttackResult) -> None:
    resolve_strike(attacker, defender, attacker.attack_power, result)


def _attack_fire(attacker: Combatant, defender: Combatant, result: AttackResult) -> None:
    temperature = attacker.fire_temperature
    result.events.append(FireTaunt(attacker.name, temperature))

    effective_power = attacker.attack_power + fire_power_bonus(temperature)
    resolve_strike(attacker, defender, effective_power, result)


def _attack_water(attacker: Combatant, defender: Combatant, result: AttackResult) -> None:
    level = attacker.water_bladder_level

    if level < 1:
        resolve_strike(attacker, defender, attacker.attack_power, result)
    else:
        result.events.append(BladderVolley(attacker.name, level))
        for _ in range(level):
            resolve_strike(attacker, defender, attacker.attack_power, result)
        attacker.water_bladder_level = 0

    result.events.append(SoakingFinished(attacker.name))


ChargeStrategy = Callable[[Combatant], list[CombatEvent]]
AttackStrategy = Callable[[Combatant, Combatant, AttackResult], None]

CHARGE_STRATEGIES: dict[CombatantKind, ChargeStrategy] = {
    CombatantKind.BASE: _charge_base,
    CombatantKind.FIRE: _charge_fire,
    CombatantKind.WATER: _charge_water,
}

ATTACK_STRATEGIES: dict[CombatantKind, AttackStrategy] = {
    CombatantKind.BASE: _attack_base,
    CombatantKind.FIRE: _attack_fire,
    CombatantKind.WATER: _attack_water,
}


# ============== Public operations ==============

def charge(combatant: Combatant) -> list[CombatEvent]:
    """Charge up ``combatant`` according to its kind.

    Returns:
        The narration events of the charge, in order
    """
    return CHARGE_STRATEGIES[combatant.kind](combatant)


def attack(attacker: Combatant, defender: Combatant) -> AttackResult:
    """Have ``attacker`` attack ``defender`` according to the attacker's kind.

    Args:
        attacker: The combatant performing the attack
        defender: The combatant losing hit points

    Returns:
        AttackResult; ``attempted`` is False when the attacker was defeated
    """
    result = AttackResult(attacker, defender)
    ATTACK_STRATEGIES[attacker.kind](attacker, defender, result)
    return result


def fight(actor: Combatant, enemies: Sequence[Combatant]) -> FightResult:
    """Charge ``actor`` once, then attack each enemy in the given order.

    Returns:
        FightResult with the charge events, one AttackResult per enemy and
        a roster summary of the enemies afterwards
    """
    result = FightResult(actor)
    result.charge_events = charge(actor)

    for enemy in enemies:
        result.attacks.append(attack(actor, enemy))

    result.roster = summarize_roster(enemies)
    return result
