"""Distant Start: spread human participants across the starting positions.

After a game engine has allocated starting positions, the balancer swaps
positions between human and AI participants so the humans end up as far
apart as the existing positions allow. No positions are created; only
who sits where changes.
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

from distantstart.controllers.start_balancer import (
    StartBalancer,
    balance_starting_positions,
)
from distantstart.maps.distance import CountingDistance, DistanceTable, HexGridDistance
from distantstart.models import (
    BalancerConfig,
    BalanceResult,
    DistanceProfile,
    Participant,
    SwapInstruction,
)
from distantstart.spread import (
    enumerate_combinations,
    find_most_distant_subset,
    plan_swaps,
    reconcile,
    score_combination,
)

__version__ = "0.1.0"

__all__ = [
    "BalancerConfig",
    "BalanceResult",
    "CountingDistance",
    "DistanceProfile",
    "DistanceTable",
    "HexGridDistance",
    "Participant",
    "StartBalancer",
    "SwapInstruction",
    "balance_starting_positions",
    "enumerate_combinations",
    "find_most_distant_subset",
    "plan_swaps",
    "reconcile",
    "score_combination",
]
