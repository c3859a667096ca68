import pytest

from distantstart.exceptions import PreconditionViolation
from distantstart.maps.distance import CountingDistance, DistanceTable
from distantstart.models.participant import Participant
from distantstart.models.swap import DistanceProfile
from distantstart.spread.scorer import pairwise_profile, score_combination


def _combo(*positions):
    return tuple(
        Participant(name=str(pos), is_human=False, position_id=pos) for pos in positions
    )


def _table():
    return DistanceTable(
        {
            ("A", "B"): 3,
            ("A", "C"): 8,
            ("A", "D"): 6,
            ("B", "C"): 9,
            ("B", "D"): 4,
            ("C", "D"): 7,
        }
    )


def test_profile_has_min_and_sum():
    profile = score_combination(_combo("A", "C", "D"), 0, _table())
    assert profile == DistanceProfile(min_distance=6, sum_distance=8 + 6 + 7)


def test_floor_equal_to_min_is_accepted():
    profile = score_combination(_combo("A", "C", "D"), 6, _table())
    assert profile is not None
    assert profile.min_distance == 6


def test_rejects_below_floor():
    assert score_combination(_combo("A", "C", "D"), 7, _table()) is None


def test_rejection_stops_at_first_short_pair():
    oracle = CountingDistance(_table())

    # A-B (3) is the very first pair and already below the floor
    assert score_combination(_combo("A", "B", "C", "D"), 5, oracle) is None
    assert oracle.calls == [("A", "B")]


def test_pairs_visited_outer_then_inner_ascending():
    oracle = CountingDistance(_table())
    score_combination(_combo("A", "B", "C", "D"), 0, oracle)

    assert oracle.calls == [
        ("A", "B"),
        ("A", "C"),
        ("A", "D"),
        ("B", "C"),
        ("B", "D"),
        ("C", "D"),
    ]


def test_rejection_midway_skips_remaining_pairs():
    oracle = CountingDistance(_table())

    # A-C (8) passes, then A-B (3) rejects before C-B is queried
    assert score_combination(_combo("A", "C", "B"), 5, oracle) is None
    assert oracle.calls == [("A", "C"), ("A", "B")]


def test_pairwise_profile_never_rejects():
    profile = pairwise_profile(_combo("A", "B"), _table())
    assert profile == DistanceProfile(min_distance=3, sum_distance=3)


def test_single_member_combination_is_a_precondition_violation():
    with pytest.raises(PreconditionViolation):
        score_combination(_combo("A"), 0, _table())


def test_negative_distance_is_a_precondition_violation():
    with pytest.raises(PreconditionViolation):
        pairwise_profile(_combo("A", "B"), lambda a, b: -1)
