"""Combat simulator: combatants, combat rules, the arena and its narration log."""
