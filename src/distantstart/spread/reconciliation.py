"""Reconcile the winning subset with current human placements and plan swaps."""

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

from typing import List, Sequence, Tuple

from distantstart.exceptions import ReconciliationException
from distantstart.models.participant import Participant
from distantstart.models.swap import SwapInstruction
from distantstart.utils import setup_logger

logger = setup_logger(__name__)


def reconcile(
    target_set: Sequence[Participant], humans: Sequence[Participant]
) -> Tuple[List[Participant], List[Participant]]:
    """Drop humans that already occupy a target position.

    A human counts as placed when it is itself a member of the target set
    (the same participant, hence the same occupied position). Such humans
    are removed from both sides; neither input is modified.

    Args:
        target_set: Winning combination from the spread optimizer
        humans: All human participants

    Returns:
        Tuple of (remaining targets, remaining humans). The remaining
        targets are AI participants on target positions, the remaining
        humans are humans not yet on one.
    """
    target_positions = {p.position_id for p in target_set}

    placed = [h for h in humans if h.position_id in target_positions]
    placed_positions = {h.position_id for h in placed}

    for human in placed:
        logger.info(
            "Position %s is occupied by a human participant. "
            "This participant does not need to be repositioned.",
            human.position_id,
        )

    remaining_targets = [p for p in target_set if p.position_id not in placed_positions]
    remaining_humans = [h for h in humans if h.position_id not in placed_positions]
    return remaining_targets, remaining_humans


def check_reconciliation(
    remaining_targets: Sequence[Participant], remaining_humans: Sequence[Participant]
) -> None:
    """Raise unless every remaining human has exactly one target to take.

    Raises:
        ReconciliationException: If the two counts differ
    """
    if len(remaining_targets) != len(remaining_humans):
        raise ReconciliationException(
            "Unexpected remaining human and target counts: "
            f"{len(remaining_humans)}, {len(remaining_targets)}"
        )


def plan_swaps(
    remaining_targets: Sequence[Participant], remaining_humans: Sequence[Participant]
) -> List[SwapInstruction]:
    """Pair the i-th remaining human with the i-th remaining target occupant.

    No distance-based matching is done: every target position belongs to
    the winning subset, so any one-to-one pairing gives the same spread.
    """
    check_reconciliation(remaining_targets, remaining_humans)
    return [
        SwapInstruction(human=human, other=other)
        for human, other in zip(remaining_humans, remaining_targets)
    ]
