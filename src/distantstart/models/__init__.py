"""Data models for Distant Start."""

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

from distantstart.models.config import BalancerConfig
from distantstart.models.participant import (
    Participant,
    classify_participants,
    positions_by_id,
)
from distantstart.models.result import BalanceResult
from distantstart.models.swap import DistanceProfile, SwapInstruction, apply_swaps

__all__ = [
    "BalancerConfig",
    "BalanceResult",
    "DistanceProfile",
    "Participant",
    "SwapInstruction",
    "apply_swaps",
    "classify_participants",
    "positions_by_id",
]
