"""BalanceResult data class."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from distantstart.constants import NO_OP_OUTCOMES
from distantstart.models.participant import Participant
from distantstart.models.swap import SwapInstruction
from distantstart.type_hints import Combination, PositionId


@dataclass
class BalanceResult:
    """Outcome of one balancing run plus the values worth reporting.

    Attributes
    ----------
    outcome : str
        One of the ``OUTCOME_*`` constants.
    human_count : int
        Number of human participants in the snapshot.
    ai_count : int
        Number of AI participants in the snapshot.
    winning_combination : tuple of Participant or None
        Participants occupying the chosen target positions, None for no-ops.
    already_placed : list of Participant
        Humans that already occupied a target position.
    instructions : list of SwapInstruction
        Planned swaps, in the order they are applied.
    initial_positions : dict
        Participant id to position before the run.
    final_positions : dict
        Participant id to position after the run.
    applied : bool
        Whether the instructions were executed.
    message : str
        Human-readable summary of the outcome.
    """

    outcome: str
    human_count: int = 0
    ai_count: int = 0
    winning_combination: Optional[Combination] = None
    already_placed: List[Participant] = field(default_factory=list)
    instructions: List[SwapInstruction] = field(default_factory=list)
    initial_positions: Dict[str, PositionId] = field(default_factory=dict)
    final_positions: Dict[str, PositionId] = field(default_factory=dict)
    applied: bool = False
    message: str = ""

    @property
    def is_no_op(self) -> bool:
        """True when the optimizer was not run at all."""
        return self.outcome in NO_OP_OUTCOMES

    @property
    def swap_count(self) -> int:
        return len(self.instructions)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize result to dictionary."""
        return {
            "outcome": self.outcome,
            "message": self.message,
            "human_count": self.human_count,
            "ai_count": self.ai_count,
            "winning_combination": (
                [p.id for p in self.winning_combination]
                if self.winning_combination is not None
                else None
            ),
            "already_placed": [p.id for p in self.already_placed],
            "instructions": [i.to_dict() for i in self.instructions],
            "initial_positions": self.initial_positions,
            "final_positions": self.final_positions,
            "applied": self.applied,
        }
