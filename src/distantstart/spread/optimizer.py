"""Spread optimizer: choose the k positions that are furthest apart.

The primary criterion is the minimum pairwise distance inside a subset
(larger is better). Subsets tied on that are ranked by the sum of all
pairwise distances, and subsets tied on both keep the first one in
lexicographic enumeration order.
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

from dataclasses import dataclass
from typing import Optional, Sequence

from distantstart.constants import MAX_SUPPORTED_PARTICIPANTS, MIN_HUMAN_PARTICIPANTS
from distantstart.exceptions import PreconditionViolation
from distantstart.models.participant import Participant
from distantstart.models.swap import DistanceProfile
from distantstart.spread.combinations import iter_combinations
from distantstart.spread.scorer import score_combination
from distantstart.type_hints import Combination, DistanceOracle
from distantstart.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True, slots=True)
class BestCandidate:
    """Best combination found so far and its distance profile."""

    combination: Combination
    profile: DistanceProfile

    @property
    def min_distance(self) -> int:
        return self.profile.min_distance

    @property
    def sum_distance(self) -> int:
        return self.profile.sum_distance


def consider_candidate(
    best: Optional[BestCandidate], combo: Combination, profile: DistanceProfile
) -> BestCandidate:
    """Fold one accepted candidate into the running best.

    A strictly larger minimum always wins. An equal minimum wins only with
    a strictly larger sum, so equal sums keep the earlier candidate.
    """
    if best is None:
        return BestCandidate(combo, profile)

    if profile.min_distance > best.min_distance:
        return BestCandidate(combo, profile)

    if profile.min_distance == best.min_distance:
        if profile.sum_distance > best.sum_distance:
            logger.debug(
                "Tie on minimum distance %d broken by sum distance: %d > %d",
                profile.min_distance,
                profile.sum_distance,
                best.sum_distance,
            )
            return BestCandidate(combo, profile)

    return best


def _check_preconditions(n: int, k: int, max_participants: int) -> None:
    if n > max_participants:
        raise PreconditionViolation(
            f"{n} participants exceeds the supported maximum of {max_participants}"
        )
    if k < MIN_HUMAN_PARTICIPANTS:
        raise PreconditionViolation(f"Subset size must be at least 2, got {k}")
    if k > n:
        raise PreconditionViolation(
            f"Subset size {k} is larger than the participant count {n}"
        )


def find_most_distant_pair(
    participants: Sequence[Participant], distance: DistanceOracle
) -> Combination:
    """Return the two participants occupying the mutually farthest positions.

    Every unordered pair (i, j), i < j, is visited with i ascending in the
    outer loop and j ascending in the inner loop. Only a strictly greater
    distance replaces the current best, so the first pair to reach the
    maximum wins. Human or AI control plays no part in the search.
    """
    if len(participants) < 2:
        raise PreconditionViolation(
            f"Need at least two participants, got {len(participants)}"
        )

    best_pair: Optional[Combination] = None
    max_distance = -1

    for i in range(len(participants)):
        first = participants[i]
        for j in range(i + 1, len(participants)):
            second = participants[j]
            d = distance(first.position_id, second.position_id)
            if d > max_distance:
                max_distance = d
                best_pair = (first, second)

    logger.debug("Most distant pair is %d apart", max_distance)
    return best_pair


def search_most_distant_subset(
    participants: Sequence[Participant], k: int, distance: DistanceOracle
) -> BestCandidate:
    """Exhaustive search with early rejection, used for k >= 3.

    The current best minimum is used as the scoring floor, so a candidate
    is abandoned as soon as one of its pairs is closer than that.
    """
    best: Optional[BestCandidate] = None
    scored = 0
    rejected = 0

    for combo in iter_combinations(participants, k):
        floor = best.min_distance if best is not None else 0
        profile = score_combination(combo, floor, distance)
        scored += 1
        if profile is None:
            rejected += 1
            continue
        best = consider_candidate(best, combo, profile)

    if best is None:
        raise PreconditionViolation(
            f"No combinations of {k} out of {len(participants)} participants"
        )

    logger.debug(
        "Scored %d combinations, rejected %d early; best min=%d sum=%d",
        scored,
        rejected,
        best.min_distance,
        best.sum_distance,
    )
    return best


def find_most_distant_subset(
    participants: Sequence[Participant],
    k: int,
    distance: DistanceOracle,
    max_participants: int = MAX_SUPPORTED_PARTICIPANTS,
) -> Combination:
    """Choose the k participants whose positions are maximally spread.

    Args:
        participants: All participants in input order, human and AI alike
        k: Subset size, normally the number of human participants
        distance: Distance oracle over position ids
        max_participants: Participant cap guarding the combinatorial search

    Returns:
        Winning combination, members in input order

    Raises:
        PreconditionViolation: If k < 2, k > n, or n exceeds the cap
    """
    _check_preconditions(len(participants), k, max_participants)

    if k == 2:
        return find_most_distant_pair(participants, distance)

    return search_most_distant_subset(participants, k, distance).combination
