"""Combat rule constants and pure rule lookups.

Read-only calculations only; nothing here mutates a combatant.
"""

# Fire charge
FIRE_CHARGE_HEAL = 1
TEMPERATURE_MULTIPLIER = 2

# Fire attack bands as (minimum temperature, attack power bonus), hottest first
FIRE_POWER_BANDS: tuple[tuple[int, int], ...] = (
    (200, 5),
    (100, 3),
)

# Water charge
BLADDER_FILL_PER_CHARGE = 2
BLADDER_CAPACITY = 5


def fire_power_bonus(temperature: int) -> int:
    """Attack power bonus for a fire attack at ``temperature`` degrees."""
    for minimum, bonus in FIRE_POWER_BANDS:
        if temperature >= minimum:
            return bonus
    return 0


def next_bladder_level(level: int) -> tuple[int, bool]:
    """Bladder level after one charge, and whether it overflowed.

    The level resets to 0 the moment it exceeds :data:`BLADDER_CAPACITY`.
    """
    level += BLADDER_FILL_PER_CHARGE
    if level > BLADDER_CAPACITY:
        return 0, True
    return level, False
