"""Validation utilities for participant snapshots.

Checks run before the balancer touches anything, so a malformed host
export is reported instead of producing a wrong swap plan.
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

from typing import List, Optional, Sequence

from distantstart.exceptions import InvalidSnapshotException, MapException
from distantstart.models.participant import Participant
from distantstart.type_hints import DistanceOracle


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        errors: Every problem found, in the order checked
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        errors: Optional[List[str]] = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.errors = errors or []

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return "ValidationResult(VALID)"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Snapshot Validation ==========


def validate_participants(
    participants: Sequence[Participant],
    distance: Optional[DistanceOracle] = None,
) -> ValidationResult:
    """Validate a participant snapshot.

    Args:
        participants: Participants in host order
        distance: Optional oracle; when given, every pair of positions
            must have a defined, non-negative distance

    Returns:
        ValidationResult listing every problem found

    Example:
        >>> result = validate_participants(participants, oracle)
        >>> if not result:
        ...     print(result.error_message)
    """
    errors: List[str] = []

    seen_ids = set()
    seen_positions = {}
    for participant in participants:
        if participant.id in seen_ids:
            errors.append(f"Duplicate participant id: {participant.id}")
        seen_ids.add(participant.id)

        holder = seen_positions.get(participant.position_id)
        if holder is not None:
            errors.append(
                f"Position {participant.position_id!r} is held by both "
                f"{holder} and {participant.name}"
            )
        else:
            seen_positions[participant.position_id] = participant.name

    if distance is not None and not errors:
        errors.extend(_check_distances(participants, distance))

    if errors:
        return ValidationResult(
            is_valid=False,
            error_message="; ".join(errors),
            errors=errors,
        )
    return ValidationResult(is_valid=True)


def _check_distances(
    participants: Sequence[Participant], distance: DistanceOracle
) -> List[str]:
    errors = []
    for i in range(len(participants)):
        for j in range(i + 1, len(participants)):
            a = participants[i].position_id
            b = participants[j].position_id
            try:
                d = distance(a, b)
            except MapException as e:
                errors.append(str(e))
                continue
            if d < 0:
                errors.append(f"Negative distance {d} between {a!r} and {b!r}")
    return errors


def validate_participants_strict(
    participants: Sequence[Participant],
    distance: Optional[DistanceOracle] = None,
) -> None:
    """Validate a snapshot and raise exception if invalid.

    Raises:
        InvalidSnapshotException: If the snapshot is invalid
    """
    result = validate_participants(participants, distance)
    if not result.is_valid:
        raise InvalidSnapshotException(result.error_message)
