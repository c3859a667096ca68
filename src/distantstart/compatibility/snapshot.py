"""JSON snapshot import and export.

A snapshot file holds the map description and the participants in host
order::

    {
        "map": {"type": "hex", "width": 44, "height": 26, "wrap_x": true},
        "participants": [
            {"id": "0", "name": "Rome", "is_human": true, "position_id": 512},
            ...
        ]
    }

``map`` may instead be ``{"type": "table", "distances": [[a, b, d], ...]}``.
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

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence, Tuple, Union

from distantstart.exceptions import (
    DistantStartException,
    FileLoadException,
    FileSaveException,
    InvalidSnapshotException,
)
from distantstart.maps.distance import create_distance_oracle
from distantstart.models.participant import Participant
from distantstart.type_hints import DistanceOracle
from distantstart.utils import setup_logger

logger = setup_logger(__name__)


def parse_snapshot(
    data: Mapping[str, Any],
) -> Tuple[List[Participant], DistanceOracle]:
    """Build participants and a distance oracle from snapshot data.

    Raises:
        InvalidSnapshotException: If the participant list is missing
        InvalidPositionException: If the map section is invalid
    """
    records = data.get("participants")
    if not isinstance(records, list):
        raise InvalidSnapshotException("Snapshot needs a 'participants' list")

    participants = [Participant.from_dict(record) for record in records]
    oracle = create_distance_oracle(data.get("map", {}))
    return participants, oracle


def snapshot_to_dict(
    participants: Sequence[Participant], map_spec: Mapping[str, Any]
) -> Dict[str, Any]:
    """Serialize participants and map description to snapshot data."""
    return {
        "map": dict(map_spec),
        "participants": [p.to_dict() for p in participants],
    }


def load_snapshot(
    file_path: Union[str, Path],
) -> Tuple[List[Participant], DistanceOracle, Dict[str, Any]]:
    """Load a snapshot file.

    Returns:
        Tuple of (participants, distance oracle, raw map section)

    Raises:
        FileLoadException: If the file cannot be read or parsed
    """
    logger.info(f"Loading snapshot: {file_path}")
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        logger.error(f"Snapshot file not found: {file_path}")
        raise FileLoadException(f"Snapshot file not found: {file_path}") from e
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error reading snapshot {file_path}: {e}")
        raise FileLoadException(f"Cannot read snapshot {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise FileLoadException(f"Snapshot {file_path} must contain a JSON object")

    try:
        participants, oracle = parse_snapshot(data)
    except DistantStartException as e:
        raise FileLoadException(f"Invalid snapshot {file_path}: {e}") from e

    logger.info(f"Loaded {len(participants)} participants")
    return participants, oracle, dict(data.get("map", {}))


def save_snapshot(
    file_path: Union[str, Path],
    participants: Sequence[Participant],
    map_spec: Mapping[str, Any],
) -> None:
    """Write participants and map description to a snapshot file.

    Raises:
        FileSaveException: If the file cannot be written
    """
    data = snapshot_to_dict(participants, map_spec)
    try:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except (OSError, TypeError) as e:
        logger.error(f"Error writing snapshot {file_path}: {e}")
        raise FileSaveException(f"Cannot write snapshot {file_path}: {e}") from e
    logger.info(f"Snapshot written to {file_path}")
