"""SwapInstruction and DistanceProfile data classes."""

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

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable

from distantstart.models.participant import Participant
from distantstart.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True, slots=True)
class DistanceProfile:
    """Pairwise distance summary of one accepted combination.

    Attributes
    ----------
    min_distance : int
        Smallest pairwise distance in the combination.
    sum_distance : int
        Sum of all pairwise distances in the combination.
    """

    min_distance: int
    sum_distance: int


@dataclass(frozen=True, slots=True)
class SwapInstruction:
    """Exchange the positions of a human and the AI holding a target position.

    Attributes
    ----------
    human : Participant
        Human participant that will move onto the target position.
    other : Participant
        Participant currently occupying the target position.
    """

    human: Participant
    other: Participant

    def apply(self) -> None:
        """Exchange the two participants' ``position_id`` fields."""
        human_position = self.human.position_id
        other_position = self.other.position_id

        self.human.position_id = other_position
        self.other.position_id = human_position

        logger.info(
            "Reassigned starting position %s from an AI participant to a human participant.",
            self.human.position_id,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize instruction to dictionary."""
        return {
            "human_id": self.human.id,
            "human_name": self.human.name,
            "human_position_id": self.human.position_id,
            "other_id": self.other.id,
            "other_name": self.other.name,
            "other_position_id": self.other.position_id,
        }


def apply_swaps(instructions: Iterable[SwapInstruction]) -> int:
    """Apply swap instructions in order.

    Returns:
        Number of swaps applied
    """
    applied = 0
    for instruction in instructions:
        instruction.apply()
        applied += 1
    return applied


#  LocalWords:  SwapInstruction DistanceProfile
