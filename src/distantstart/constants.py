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

# --- Constants ---
# Largest game the optimizer will run on (C(12, 6) = 924 combinations)
MAX_SUPPORTED_PARTICIPANTS = 12

# The spread objective needs at least one pair of humans
MIN_HUMAN_PARTICIPANTS = 2

# Balancer outcomes
OUTCOME_BALANCED = "balanced"  # Swaps planned (and applied unless dry run)
OUTCOME_ALREADY_OPTIMAL = "already_optimal"  # Humans already on target positions
OUTCOME_ALL_HUMAN = "all_human"  # No AI positions to swap with
OUTCOME_TOO_FEW_HUMANS = "too_few_humans"
OUTCOME_TOO_MANY_HUMANS = "too_many_humans"  # Above the configured max_humans
OUTCOME_TOO_MANY_PARTICIPANTS = "too_many_participants"

NO_OP_OUTCOMES = frozenset(
    {
        OUTCOME_ALL_HUMAN,
        OUTCOME_TOO_FEW_HUMANS,
        OUTCOME_TOO_MANY_HUMANS,
        OUTCOME_TOO_MANY_PARTICIPANTS,
    }
)

# Map types understood by snapshot files
MAP_TYPE_HEX = "hex"
MAP_TYPE_TABLE = "table"

SEPARATOR_LINE = "-" * 66
