#!/usr/bin/env python3
"""Play a fight scenario and narrate it to the console."""

import argparse
import sys
from typing import Optional

from monster_arena.core.events import EventManager, LogSaveRequested
from monster_arena.game.arena import Arena
from monster_arena.game.narration_log import NarrationLog
from monster_arena.game.scenarios import ScenarioLoader


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Monster Arena fight simulator")
    parser.add_argument(
        "scenario",
        nargs="?",
        help="Scenario YAML file (defaults to the bundled wizzrobe fight)",
    )
    parser.add_argument("--quiet", action="store_true", help="Do not echo narration")
    parser.add_argument("--debug", action="store_true", help="Show debug messages")
    parser.add_argument("--save-log", metavar="DIR", nargs="?", const="logs",
                        help="Save the narration log to DIR (default: logs)")
    parser.add_argument("--list", action="store_true", help="List bundled scenarios and exit")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.list:
        print("Bundled scenarios:")
        for name in ScenarioLoader.list_bundled():
            print(f"  - {name}")
        return 0

    try:
        if args.scenario:
            scenario = ScenarioLoader.load_from_file(args.scenario)
        else:
            scenario = ScenarioLoader.load_bundled()
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    event_manager = EventManager()
    narration_log = NarrationLog(event_manager, echo=not args.quiet)
    if args.debug:
        narration_log.toggle_debug()
    arena = Arena(event_manager)

    print(f"=== {scenario.name} ===")
    if scenario.description:
        print(scenario.description)
    print()

    actor, enemies = scenario.create_combatants()
    arena.fight(actor, enemies)

    print("\nFinal state:")
    for combatant in [actor, *enemies]:
        print(f"  {combatant}")

    if args.save_log:
        event_manager.publish_immediate(LogSaveRequested(directory=args.save_log), source="main")
        if narration_log.last_saved_path is None:
            return 1
        print(f"\nLog saved to {narration_log.last_saved_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
