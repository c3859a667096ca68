"""Pairwise distance scoring with early rejection."""

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

from typing import Optional

from distantstart.exceptions import PreconditionViolation
from distantstart.models.swap import DistanceProfile
from distantstart.type_hints import Combination, DistanceOracle


def score_combination(
    combo: Combination, min_distance_floor: int, distance: DistanceOracle
) -> Optional[DistanceProfile]:
    """Score one candidate against the current best minimum distance.

    Pairs are visited outer index ascending, inner index ascending. The
    first pairwise distance strictly below ``min_distance_floor`` stops
    scoring and the remaining pairs are never queried.

    Parameters
    ----------
        combo: Candidate combination, at least two members
        min_distance_floor: Best minimum distance found so far
        distance: Distance oracle over position ids

    Returns
    -------
        DistanceProfile for an accepted candidate, None when rejected
    """
    if len(combo) < 2:
        raise PreconditionViolation(
            f"Cannot score a combination of {len(combo)} participant(s)"
        )

    min_distance: Optional[int] = None
    sum_distance = 0

    for i in range(len(combo)):
        position_i = combo[i].position_id
        for j in range(i + 1, len(combo)):
            d = distance(position_i, combo[j].position_id)
            if d < min_distance_floor:
                return None
            if min_distance is None or d < min_distance:
                min_distance = d
            sum_distance += d

    return DistanceProfile(min_distance=min_distance, sum_distance=sum_distance)


def pairwise_profile(combo: Combination, distance: DistanceOracle) -> DistanceProfile:
    """Full profile of a combination, never rejected."""
    profile = score_combination(combo, 0, distance)
    if profile is None:
        raise PreconditionViolation("Distance oracle returned a negative distance")
    return profile
