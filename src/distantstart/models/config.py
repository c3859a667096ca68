"""BalancerConfig data class."""

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
from typing import Any, Dict, Optional

from distantstart.constants import MAX_SUPPORTED_PARTICIPANTS, MIN_HUMAN_PARTICIPANTS
from distantstart.exceptions import InvalidConfigurationException


@dataclass
class BalancerConfig:
    """Start balancer configuration settings.

    Attributes
    ----------
    max_participants : int
        Largest participant count the optimizer is run on. Larger games
        are left untouched.
    max_humans : int or None
        Optional cap on human participants. ``None`` allows any count of
        two or more; ``2`` reproduces the two-human-only behaviour.
    dry_run : bool
        Plan swaps without applying them.
    """

    max_participants: int = MAX_SUPPORTED_PARTICIPANTS
    max_humans: Optional[int] = None
    dry_run: bool = False

    def __post_init__(self) -> None:
        # bool is a subclass of int but never a valid count
        if isinstance(self.max_participants, bool) or not isinstance(
            self.max_participants, int
        ):
            raise InvalidConfigurationException(
                f"max_participants must be an integer, got {self.max_participants!r}"
            )
        if self.max_humans is not None and (
            isinstance(self.max_humans, bool) or not isinstance(self.max_humans, int)
        ):
            raise InvalidConfigurationException(
                f"max_humans must be an integer or null, got {self.max_humans!r}"
            )
        if not isinstance(self.dry_run, bool):
            raise InvalidConfigurationException(
                f"dry_run must be true or false, got {self.dry_run!r}"
            )
        if self.max_participants < MIN_HUMAN_PARTICIPANTS:
            raise InvalidConfigurationException(
                f"max_participants must be at least {MIN_HUMAN_PARTICIPANTS}, "
                f"got {self.max_participants}"
            )
        if self.max_humans is not None and self.max_humans < MIN_HUMAN_PARTICIPANTS:
            raise InvalidConfigurationException(
                f"max_humans must be at least {MIN_HUMAN_PARTICIPANTS}, "
                f"got {self.max_humans}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "max_participants": self.max_participants,
            "max_humans": self.max_humans,
            "dry_run": self.dry_run,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BalancerConfig":
        """Deserialize configuration from dictionary.

        Raises:
            InvalidConfigurationException: If data is not a mapping or a
                value has the wrong type
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Configuration must be a JSON object, got {type(data).__name__}"
            )
        return cls(
            max_participants=data.get("max_participants", MAX_SUPPORTED_PARTICIPANTS),
            max_humans=data.get("max_humans"),
            dry_run=data.get("dry_run", False),
        )
