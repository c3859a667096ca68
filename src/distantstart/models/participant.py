"""Participant model."""

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

from typing import Any, Dict, List, Optional, Sequence, Tuple

from distantstart.exceptions import InvalidSnapshotException
from distantstart.type_hints import PositionId
from distantstart.utils import generate_id, setup_logger

logger = setup_logger(__name__)


class Participant:
    """One game-session actor bound to exactly one starting position.

    Participants compare by identity: two distinct objects are never
    equal even when they share a name. ``is_human`` is fixed for the
    session; ``position_id`` is the only attribute the balancer mutates.

    Attributes:
        id: Unique identifier for the participant
        name: Display name (civilization, leader, or player name)
        is_human: Whether a human controls this participant
        position_id: Position currently occupied
    """

    def __init__(
        self,
        name: str,
        is_human: bool,
        position_id: PositionId,
        participant_id: Optional[str] = None,
    ) -> None:
        self.id: str = (
            participant_id
            if participant_id is not None
            else generate_id(self.__class__.__name__)
        )
        self.name: str = name
        self.is_human: bool = bool(is_human)
        self.position_id: PositionId = position_id

    @property
    def kind(self) -> str:
        """Human-readable controller type."""
        return "Human" if self.is_human else "AI"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary format."""
        return {
            "id": self.id,
            "name": self.name,
            "is_human": self.is_human,
            "position_id": self.position_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize a participant record.

        Accepts both ``is_human``/``position_id`` and the camelCase
        ``isHuman``/``positionId`` keys used by host exports.

        Raises:
            InvalidSnapshotException: If a required field is missing or has
                the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidSnapshotException(
                f"Participant record must be an object: {data!r}"
            )

        is_human = data.get("is_human", data.get("isHuman"))
        position_id = data.get("position_id", data.get("positionId"))
        if is_human is None or position_id is None:
            raise InvalidSnapshotException(
                f"Participant record needs is_human and position_id: {data!r}"
            )
        if not isinstance(is_human, bool):
            raise InvalidSnapshotException(
                f"is_human must be true or false, got {is_human!r}"
            )
        # Position ids are plot indices or table keys
        if isinstance(position_id, bool) or not isinstance(position_id, (int, str)):
            raise InvalidSnapshotException(
                f"position_id must be an integer or string, got {position_id!r}"
            )

        participant_id = data.get("id")
        if participant_id is not None:
            participant_id = str(participant_id)
        name = data.get("name") or (participant_id or "Unnamed")
        return cls(
            name=name,
            is_human=is_human,
            position_id=position_id,
            participant_id=participant_id,
        )

    def __repr__(self) -> str:
        return (
            f"Participant(id={self.id!r}, name={self.name!r}, "
            f"is_human={self.is_human}, position_id={self.position_id!r})"
        )

    def __str__(self) -> str:
        return f"{self.name} ({self.kind}) @ {self.position_id}"


def classify_participants(
    participants: Sequence[Participant],
) -> Tuple[List[Participant], List[Participant], List[Participant]]:
    """Split a snapshot into all, human and AI participants.

    Input order is preserved in every list.

    Args:
        participants: Participants in the host's enumeration order

    Returns:
        Tuple of (all participants, human participants, AI participants)
    """
    all_participants: List[Participant] = []
    humans: List[Participant] = []
    ais: List[Participant] = []

    for participant in participants:
        if participant.is_human:
            humans.append(participant)
            logger.info("Human participant %d found: %s", len(humans), participant.name)
        else:
            ais.append(participant)
            logger.info("AI participant %d found.", len(ais))
        all_participants.append(participant)

    return all_participants, humans, ais


def positions_by_id(participants: Sequence[Participant]) -> Dict[str, PositionId]:
    """Map participant id to currently occupied position."""
    return {p.id: p.position_id for p in participants}
