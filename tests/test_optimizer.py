import pytest

from distantstart.exceptions import PreconditionViolation
from distantstart.maps.distance import CountingDistance, DistanceTable
from distantstart.models.participant import Participant
from distantstart.models.swap import DistanceProfile
from distantstart.spread.combinations import enumerate_combinations
from distantstart.spread.optimizer import (
    BestCandidate,
    consider_candidate,
    find_most_distant_pair,
    find_most_distant_subset,
)
from distantstart.spread.scorer import pairwise_profile
from distantstart.testing.rsg import HumanPlacement, RandomSetupGenerator, RSGConfig


def _make(spec):
    """Participants from (name, is_human, position) tuples."""
    return [
        Participant(name=name, is_human=is_human, position_id=pos, participant_id=name)
        for name, is_human, pos in spec
    ]


def _names(combo):
    return [p.name for p in combo]


def _brute_force(participants, k, distance):
    """Best (min, sum) subset; max() keeps the first of equal keys."""
    combos = enumerate_combinations(participants, k)
    return max(
        combos,
        key=lambda c: (
            pairwise_profile(c, distance).min_distance,
            pairwise_profile(c, distance).sum_distance,
        ),
    )


def _tie_table():
    # Triples with minimum 5: ABD (sum 15), ACD (sum 18), ADE (sum 18).
    # Every other triple contains a pair at distance 1.
    return DistanceTable(
        {
            ("A", "B"): 5,
            ("A", "C"): 6,
            ("A", "D"): 5,
            ("A", "E"): 6,
            ("B", "C"): 1,
            ("B", "D"): 5,
            ("B", "E"): 1,
            ("C", "D"): 7,
            ("C", "E"): 1,
            ("D", "E"): 7,
        }
    )


# ========== Two-human fast path ==========


def test_pair_scenario_picks_farthest_positions_regardless_of_control():
    participants = _make([("P1", True, "A"), ("P2", False, "B"), ("P3", False, "C")])
    table = DistanceTable({("A", "B"): 3, ("A", "C"): 7, ("B", "C"): 9})

    winner = find_most_distant_subset(participants, 2, table)
    assert _names(winner) == ["P2", "P3"]


def test_pair_ties_keep_first_found_pair():
    participants = _make([("P1", False, "A"), ("P2", False, "B"), ("P3", False, "C")])
    table = DistanceTable({("A", "B"): 4, ("A", "C"): 9, ("B", "C"): 9})

    assert _names(find_most_distant_pair(participants, table)) == ["P1", "P3"]


def test_pair_scan_visits_every_pair_once():
    participants = _make([(f"P{i}", False, i) for i in range(5)])
    oracle = CountingDistance(lambda a, b: abs(a - b))

    winner = find_most_distant_subset(participants, 2, oracle)
    assert _names(winner) == ["P0", "P4"]
    assert oracle.call_count == 10
    assert oracle.calls[:4] == [(0, 1), (0, 2), (0, 3), (0, 4)]


def test_pair_with_all_zero_distances_still_returns_a_pair():
    participants = _make([("P1", True, "A"), ("P2", True, "B"), ("P3", False, "C")])
    winner = find_most_distant_pair(participants, lambda a, b: 0)
    assert _names(winner) == ["P1", "P2"]


# ========== Three or more ==========


def test_triple_tie_on_minimum_broken_by_sum_then_enumeration_order():
    participants = _make([(n, False, n) for n in "ABCDE"])
    winner = find_most_distant_subset(participants, 3, _tie_table())
    assert _names(winner) == ["A", "C", "D"]


def test_larger_sum_breaks_tie_on_minimum():
    participants = _make([(n, False, n) for n in "ABCD"])
    table = DistanceTable(
        {
            ("A", "B"): 2,
            ("A", "C"): 50,
            ("A", "D"): 50,
            ("B", "C"): 6,
            ("B", "D"): 6,
            ("C", "D"): 6,
        }
    )
    # ACD and BCD both have minimum 6; ACD has the larger sum
    assert _names(find_most_distant_subset(participants, 3, table)) == ["A", "C", "D"]


def test_larger_minimum_beats_larger_sum():
    participants = _make([(n, False, n) for n in "ABCD"])
    table = DistanceTable(
        {
            ("A", "B"): 2,
            ("A", "C"): 50,
            ("A", "D"): 5,
            ("B", "C"): 6,
            ("B", "D"): 6,
            ("C", "D"): 6,
        }
    )
    # ACD has sum 61 but minimum 5; BCD has minimum 6
    assert _names(find_most_distant_subset(participants, 3, table)) == ["B", "C", "D"]


def test_whole_set_when_k_equals_n():
    participants = _make([(n, False, n) for n in "ABC"])
    table = DistanceTable({("A", "B"): 1, ("A", "C"): 2, ("B", "C"): 3})
    assert _names(find_most_distant_subset(participants, 3, table)) == ["A", "B", "C"]


def test_early_rejection_saves_distance_queries():
    participants = _make([(f"P{i}", False, i) for i in range(10)])
    # Positions on a line: the optimum keeps both ends
    oracle = CountingDistance(lambda a, b: abs(a - b) * 3)

    winner = find_most_distant_subset(participants, 4, oracle)
    full_cost = len(enumerate_combinations(participants, 4)) * 6

    assert _names(winner)[0] == "P0"
    assert _names(winner)[-1] == "P9"
    assert oracle.call_count < full_cost


@pytest.mark.parametrize("seed", range(25))
def test_matches_brute_force_on_random_hex_setups(seed):
    config = RSGConfig(
        num_participants=4 + seed % 5,
        num_humans=2 + seed % 3,
        width=12,
        height=8,
        wrap_x=bool(seed % 2),
        placement=HumanPlacement.CLUSTERED,
        seed=seed,
    )
    setup = RandomSetupGenerator(config).generate()
    participants = setup["participants"]
    distance = setup["distance"]
    k = config.num_humans

    winner = find_most_distant_subset(participants, k, distance)
    expected = _brute_force(participants, k, distance)

    assert [p.id for p in winner] == [p.id for p in expected]


@pytest.mark.parametrize("seed", range(10))
def test_matches_brute_force_on_random_tables(seed):
    config = RSGConfig(
        num_participants=7,
        num_humans=3,
        map_type="table",
        max_table_distance=6,
        seed=seed,
    )
    setup = RandomSetupGenerator(config).generate()
    participants = setup["participants"]

    winner = find_most_distant_subset(participants, 3, setup["distance"])
    expected = _brute_force(participants, 3, setup["distance"])

    assert [p.id for p in winner] == [p.id for p in expected]


def test_same_input_gives_same_winner():
    participants = _make([(n, False, n) for n in "ABCDE"])
    first = find_most_distant_subset(participants, 3, _tie_table())
    second = find_most_distant_subset(participants, 3, _tie_table())
    assert first == second


# ========== Tie-break accumulator ==========


def test_consider_candidate_rules():
    a, b, c = _make([("A", False, 1), ("B", False, 2), ("C", False, 3)])
    best = consider_candidate(None, (a,), DistanceProfile(5, 15))
    assert best == BestCandidate((a,), DistanceProfile(5, 15))

    # Equal minimum, equal sum: earlier candidate stays
    assert consider_candidate(best, (b,), DistanceProfile(5, 15)) is best
    # Equal minimum, larger sum: replaces
    assert consider_candidate(best, (b,), DistanceProfile(5, 16)).combination == (b,)
    # Larger minimum, smaller sum: replaces
    assert consider_candidate(best, (c,), DistanceProfile(6, 12)).combination == (c,)
    # Smaller minimum, larger sum: ignored
    assert consider_candidate(best, (c,), DistanceProfile(4, 99)) is best


# ========== Preconditions ==========


@pytest.mark.parametrize("k", [0, 1, 4])
def test_invalid_subset_sizes(k):
    participants = _make([(n, False, n) for n in "ABC"])
    table = DistanceTable({("A", "B"): 1, ("A", "C"): 2, ("B", "C"): 3})
    with pytest.raises(PreconditionViolation):
        find_most_distant_subset(participants, k, table)


def test_participant_cap_enforced():
    participants = _make([(f"P{i}", i < 2, i) for i in range(13)])
    with pytest.raises(PreconditionViolation):
        find_most_distant_subset(participants, 2, lambda a, b: abs(a - b))


def test_custom_cap():
    participants = _make([(f"P{i}", i < 2, i) for i in range(5)])
    with pytest.raises(PreconditionViolation):
        find_most_distant_subset(
            participants, 2, lambda a, b: abs(a - b), max_participants=4
        )
