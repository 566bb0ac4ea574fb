"""
Roster summaries for the combatants left standing after a fight.

Hit points are gathered into a numpy array once so liveness and totals come
from vectorized masks instead of per-combatant checks.
"""
from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from ..entities.combatant import Combatant


@dataclass(frozen=True)
class RosterSummary:
    """Read-only snapshot of a group of combatants."""
    names: tuple[str, ...]
    hit_points: NDArray[np.int64]
    alive_mask: NDArray[np.bool_]

    @property
    def alive_names(self) -> tuple[str, ...]:
        return tuple(name for name, alive in zip(self.names, self.alive_mask) if alive)

    @property
    def defeated_names(self) -> tuple[str, ...]:
        return tuple(name for name, alive in zip(self.names, self.alive_mask) if not alive)

    @property
    def alive_count(self) -> int:
        return int(np.count_nonzero(self.alive_mask))

    @property
    def total_hit_points(self) -> int:
        """Sum of hit points still held by living combatants."""
        return int(self.hit_points[self.alive_mask].sum())

    @property
    def all_defeated(self) -> bool:
        return not bool(self.alive_mask.any())


def summarize_roster(combatants: Sequence["Combatant"]) -> RosterSummary:
    """Snapshot names, hit points and liveness of ``combatants`` in order."""
    hit_points = np.array([c.hit_points for c in combatants], dtype=np.int64)
    return RosterSummary(
        names=tuple(c.name for c in combatants),
        hit_points=hit_points,
        alive_mask=hit_points > 0,
    )
