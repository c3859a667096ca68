"""Type hints used in Distant Start."""

from typing import Callable, Hashable, Tuple

# Opaque position token, a plot index for grid maps
PositionId = Hashable

# Symmetric, non-negative distance between two positions
DistanceOracle = Callable[[PositionId, PositionId], int]

# Order-preserving subsequence of participants
Combination = Tuple["Participant", ...]

# Indices into the participant sequence, ascending
IndexCombination = Tuple[int, ...]

#  LocalWords:  IndexCombination
