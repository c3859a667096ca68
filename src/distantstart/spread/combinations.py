"""Order-preserving "choose k of n" enumeration of participants."""

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

from itertools import combinations
from math import comb
from typing import Iterator, List, Sequence

from distantstart.exceptions import PreconditionViolation
from distantstart.models.participant import Participant
from distantstart.type_hints import Combination, IndexCombination


def _check_subset_size(n: int, k: int) -> None:
    if not 0 < k <= n:
        raise PreconditionViolation(
            f"Subset size must satisfy 0 < k <= n, got k={k}, n={n}"
        )


def index_combinations(n: int, k: int) -> Iterator[IndexCombination]:
    """Yield every ascending k-tuple of indices into ``range(n)``.

    Tuples come out in lexicographic order: (0, 1, 2), (0, 1, 3), ...
    """
    _check_subset_size(n, k)
    return combinations(range(n), k)


def iter_combinations(
    participants: Sequence[Participant], k: int
) -> Iterator[Combination]:
    """Lazily yield every k-subset of ``participants``.

    Each subset keeps the relative input order of its members, and the
    subsets are produced in lexicographic index order. Later stages rely
    on this order to break ties deterministically.

    Raises:
        PreconditionViolation: Unless 0 < k <= len(participants)
    """
    for indices in index_combinations(len(participants), k):
        yield tuple(participants[i] for i in indices)


def enumerate_combinations(
    participants: Sequence[Participant], k: int
) -> List[Combination]:
    """Return all C(n, k) subsets as a list (see ``iter_combinations``)."""
    return list(iter_combinations(participants, k))


def combination_count(n: int, k: int) -> int:
    """Number of k-subsets of n participants."""
    _check_subset_size(n, k)
    return comb(n, k)
