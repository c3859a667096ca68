"""Example script demonstrating the start balancer.

Shows programmatic use against a generated hex map, and the equivalent
command-line workflow.
"""

# Distant Start
# Copyright (C) 2025  Distant Start developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from distantstart.controllers.start_balancer import StartBalancer
from distantstart.models.config import BalancerConfig
from distantstart.spread.scorer import pairwise_profile
from distantstart.testing.rsg import HumanPlacement, RandomSetupGenerator, RSGConfig


def _human_spread(participants, distance):
    humans = tuple(p for p in participants if p.is_human)
    return pairwise_profile(humans, distance)


def example_programmatic_balance():
    """Example: balancing a generated game in code."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Programmatic Balancing")
    print("=" * 70 + "\n")

    config = RSGConfig(
        num_participants=10,
        num_humans=3,
        width=44,
        height=26,
        wrap_x=True,
        placement=HumanPlacement.CLUSTERED,
        seed=7,
    )
    setup = RandomSetupGenerator(config).generate()
    participants = setup["participants"]
    distance = setup["distance"]

    before = _human_spread(participants, distance)
    print(f"Before: min distance {before.min_distance}, sum {before.sum_distance}")

    result = StartBalancer(distance, BalancerConfig()).balance(participants)

    after = _human_spread(participants, distance)
    print(f"After:  min distance {after.min_distance}, sum {after.sum_distance}")
    print(f"Outcome: {result.outcome} ({result.swap_count} swap(s))")
    for instruction in result.instructions:
        print(f"  {instruction.human.name} <-> {instruction.other.name}")

    print("\n" + "=" * 70 + "\n")


def example_cli_usage():
    """Example: the same workflow from the command line."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Command-Line Usage")
    print("=" * 70 + "\n")

    print("Generate a snapshot with clustered humans:")
    print("  distant-start-generate --participants 10 --humans 3 --output game.json\n")
    print("Preview the swaps without applying them:")
    print("  distant-start game.json --dry-run -v\n")
    print("Apply and save the rebalanced snapshot:")
    print("  distant-start game.json --output balanced.json\n")
    print("Reproduce the original two-human-only behaviour:")
    print("  distant-start game.json --max-humans 2")

    print("\n" + "=" * 70 + "\n")


def main():
    """Run all examples."""
    example_programmatic_balance()
    example_cli_usage()


if __name__ == "__main__":
    main()
