"""Spread optimization: enumeration, scoring, search and swap planning."""

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

from distantstart.spread.combinations import (
    combination_count,
    enumerate_combinations,
    index_combinations,
    iter_combinations,
)
from distantstart.spread.optimizer import (
    BestCandidate,
    consider_candidate,
    find_most_distant_pair,
    find_most_distant_subset,
    search_most_distant_subset,
)
from distantstart.spread.reconciliation import (
    check_reconciliation,
    plan_swaps,
    reconcile,
)
from distantstart.spread.scorer import pairwise_profile, score_combination

__all__ = [
    "BestCandidate",
    "check_reconciliation",
    "combination_count",
    "consider_candidate",
    "enumerate_combinations",
    "find_most_distant_pair",
    "find_most_distant_subset",
    "index_combinations",
    "iter_combinations",
    "pairwise_profile",
    "plan_swaps",
    "reconcile",
    "score_combination",
    "search_most_distant_subset",
]
