"""Distance oracles over map positions.

The spread optimizer only needs a callable ``distance(a, b) -> int``.
The oracles here cover the two common cases: positions given as plot
indices on a hex grid, and an explicit table exported by a host.
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

from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Tuple, Union

from distantstart.constants import MAP_TYPE_HEX, MAP_TYPE_TABLE
from distantstart.exceptions import InvalidPositionException
from distantstart.type_hints import DistanceOracle, PositionId
from distantstart.utils import setup_logger

logger = setup_logger(__name__)


class HexGridDistance:
    """Hex distance between plot indices on an "odd-r" offset grid.

    Plot ``index`` sits at column ``index % width`` and row
    ``index // width``; odd rows are shifted half a hex to the right.
    With ``wrap_x`` the map wraps east-west and the shorter way round
    is used.
    """

    def __init__(self, width: int, height: int, wrap_x: bool = False) -> None:
        if width <= 0 or height <= 0:
            raise InvalidPositionException(
                f"Map dimensions must be positive, got {width}x{height}"
            )
        self.width = width
        self.height = height
        self.wrap_x = wrap_x

    @property
    def plot_count(self) -> int:
        return self.width * self.height

    def coordinates(self, index: PositionId) -> Tuple[int, int]:
        """Column and row of a plot index."""
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidPositionException(f"Plot index must be an integer: {index!r}")
        if not 0 <= index < self.plot_count:
            raise InvalidPositionException(
                f"Plot index {index} is outside a {self.width}x{self.height} map"
            )
        return index % self.width, index // self.width

    def index_of(self, x: int, y: int) -> int:
        """Plot index of a column and row."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise InvalidPositionException(
                f"Plot ({x}, {y}) is outside a {self.width}x{self.height} map"
            )
        return y * self.width + x

    @staticmethod
    def _axial(x: int, y: int) -> Tuple[int, int]:
        return x - (y - (y & 1)) // 2, y

    @staticmethod
    def _axial_distance(a: Tuple[int, int], b: Tuple[int, int]) -> int:
        dq = a[0] - b[0]
        dr = a[1] - b[1]
        return max(abs(dq), abs(dr), abs(dq + dr))

    def __call__(self, a: PositionId, b: PositionId) -> int:
        ax, ay = self.coordinates(a)
        bx, by = self.coordinates(b)
        origin = self._axial(ax, ay)

        best = self._axial_distance(origin, self._axial(bx, by))
        if self.wrap_x:
            for shift in (-self.width, self.width):
                best = min(
                    best, self._axial_distance(origin, self._axial(bx + shift, by))
                )
        return best

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": MAP_TYPE_HEX,
            "width": self.width,
            "height": self.height,
            "wrap_x": self.wrap_x,
        }

    def __repr__(self) -> str:
        return f"HexGridDistance({self.width}x{self.height}, wrap_x={self.wrap_x})"


TableEntries = Union[
    Mapping[Tuple[PositionId, PositionId], int],
    Iterable[Tuple[PositionId, PositionId, int]],
]


class DistanceTable:
    """Explicit symmetric distance table keyed by unordered position pairs."""

    def __init__(self, entries: TableEntries) -> None:
        self._distances: Dict[FrozenSet[PositionId], int] = {}
        self.positions = set()

        if isinstance(entries, Mapping):
            items = entries.items()
        else:
            items = (((a, b), d) for a, b, d in entries)

        for (a, b), d in items:
            self.add(a, b, d)

    def add(self, a: PositionId, b: PositionId, d: int) -> None:
        """Record the distance between two positions (both directions)."""
        if d < 0:
            raise InvalidPositionException(
                f"Distance between {a!r} and {b!r} must be non-negative, got {d}"
            )
        if a == b:
            if d != 0:
                raise InvalidPositionException(
                    f"Distance from {a!r} to itself must be 0, got {d}"
                )
            self.positions.add(a)
            return

        key = frozenset((a, b))
        existing = self._distances.get(key)
        if existing is not None and existing != d:
            raise InvalidPositionException(
                f"Conflicting distances for {a!r}-{b!r}: {existing} and {d}"
            )
        self._distances[key] = int(d)
        self.positions.update((a, b))

    def __call__(self, a: PositionId, b: PositionId) -> int:
        if a == b:
            return 0
        try:
            return self._distances[frozenset((a, b))]
        except KeyError:
            raise InvalidPositionException(
                f"No distance known between positions {a!r} and {b!r}"
            ) from None

    def __len__(self) -> int:
        return len(self._distances)

    def triples(self) -> List[Tuple[PositionId, PositionId, int]]:
        """Table contents as sorted ``[a, b, d]`` triples."""
        rows = []
        for key, d in self._distances.items():
            a, b = sorted(key, key=repr)
            rows.append((a, b, d))
        return sorted(rows, key=repr)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": MAP_TYPE_TABLE,
            "distances": [list(row) for row in self.triples()],
        }


class CountingDistance:
    """Wrap an oracle and record every query made through it."""

    def __init__(self, oracle: DistanceOracle) -> None:
        self.oracle = oracle
        self.calls: List[Tuple[PositionId, PositionId]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def reset(self) -> None:
        self.calls.clear()

    def __call__(self, a: PositionId, b: PositionId) -> int:
        self.calls.append((a, b))
        return self.oracle(a, b)


def create_distance_oracle(map_spec: Mapping[str, Any]) -> DistanceOracle:
    """Build an oracle from a snapshot ``map`` section.

    Raises:
        InvalidPositionException: If the map type is unknown or incomplete
    """
    map_type = map_spec.get("type", MAP_TYPE_HEX)

    if map_type == MAP_TYPE_HEX:
        try:
            width = int(map_spec["width"])
            height = int(map_spec["height"])
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidPositionException(
                f"Hex map needs integer width and height: {e}"
            ) from e
        return HexGridDistance(width, height, wrap_x=bool(map_spec.get("wrap_x", False)))

    if map_type == MAP_TYPE_TABLE:
        rows = map_spec.get("distances", [])
        try:
            return DistanceTable((a, b, int(d)) for a, b, d in rows)
        except (TypeError, ValueError) as e:
            raise InvalidPositionException(f"Malformed distance table: {e}") from e

    raise InvalidPositionException(f"Unknown map type: {map_type!r}")


#  LocalWords:  HexGridDistance DistanceTable
