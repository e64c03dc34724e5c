"""Unit tests for the greedy assignment solver and both scoring conventions."""

from collections import Counter

import pytest

from relief_matching.matcher import (
    ScoringMode,
    build_edges,
    compute_cost,
    cost_inverse_score,
    haversine,
    solve,
    weighted_score,
)
from relief_matching.models import Edge, ResourceType
from .conftest import make_offer, make_request


def _edge(offer_id: str, request_id: str, cost: float, distance_km: float = 1.0, urgency: int = 3) -> Edge:
    return Edge(
        offer_id=offer_id,
        request_id=request_id,
        resource_type=ResourceType.FOOD,
        cost=cost,
        distance_km=distance_km,
        offer_quantity=10,
        request_quantity=20,
        urgency=urgency,
    )


class TestGreedySelection:

    def test_accepts_cheapest_edges_first(self, two_cities):
        """Scenario C: each offer is paired with its nearby request."""
        offers, requests = two_cities
        o1, o2 = offers
        r2, r1 = requests

        def cost(o, r):
            d = haversine(o.location.lat, o.location.lng, r.location.lat, r.location.lng)
            return compute_cost(o, r, d)

        near = cost(o1, r1) + cost(o2, r2)
        cross = cost(o1, r2) + cost(o2, r1)
        assert near < cross
        assert cost(o1, r1) < cost(o2, r2)

        proposals = solve(build_edges(offers, requests))

        assert [(p.offer_id, p.request_id) for p in proposals] == [
            ("offer-1", "request-1"),
            ("offer-2", "request-2"),
        ]

    def test_no_offer_or_request_is_used_twice(self):
        edges = [
            _edge("o1", "r1", 5.0),
            _edge("o1", "r2", 1.0),
            _edge("o2", "r2", 2.0),
            _edge("o2", "r1", 3.0),
            _edge("o3", "r1", 0.5),
            _edge("o3", "r3", 0.1),
            _edge("o2", "r3", 0.2),
        ]

        proposals = solve(edges)

        offers = Counter(p.offer_id for p in proposals)
        requests = Counter(p.request_id for p in proposals)
        assert all(n == 1 for n in offers.values())
        assert all(n == 1 for n in requests.values())
        assert [(p.offer_id, p.request_id) for p in proposals] == [
            ("o3", "r3"), ("o1", "r2"), ("o2", "r1"),
        ]

    def test_ties_keep_enumeration_order(self):
        edges = [_edge("o1", "r1", 1.0), _edge("o2", "r1", 1.0), _edge("o2", "r2", 1.0)]

        proposals = solve(edges)

        assert [(p.offer_id, p.request_id) for p in proposals] == [("o1", "r1"), ("o2", "r2")]

    def test_greedy_is_not_globally_optimal(self):
        """A cheap first edge can force an expensive second one.

        Optimal total is o1-r2 + o2-r1 = 4; greedy takes o1-r1 first and
        is left with o2-r2 for a total of 101.
        """
        edges = [
            _edge("o1", "r1", 1.0),
            _edge("o1", "r2", 2.0),
            _edge("o2", "r1", 2.0),
            _edge("o2", "r2", 100.0),
        ]

        proposals = solve(edges)

        assert [(p.offer_id, p.request_id) for p in proposals] == [("o1", "r1"), ("o2", "r2")]

    def test_empty_edges(self):
        assert solve([]) == []

    def test_input_list_is_not_reordered(self):
        edges = [_edge("o1", "r1", 3.0), _edge("o2", "r2", 1.0)]
        snapshot = list(edges)
        solve(edges)
        assert edges == snapshot


class TestCostInverseScoring:

    def test_score_is_inverse_of_one_plus_cost(self):
        proposals = solve([_edge("o1", "r1", 3.0, distance_km=12.345)])
        assert proposals[0].score == pytest.approx(0.25)
        assert proposals[0].distance == 12.345

    def test_zero_cost_scores_one(self):
        assert cost_inverse_score(0.0) == 1.0

    def test_scores_are_in_unit_interval(self):
        for cost in [0.0, 0.01, 1.0, 1e6]:
            assert 0 < cost_inverse_score(cost) <= 1

    def test_proposal_carries_edge_details(self):
        proposal = solve([_edge("o1", "r1", 1.0, urgency=4)])[0]
        assert proposal.resource_type == ResourceType.FOOD
        assert proposal.offer_quantity == 10
        assert proposal.request_quantity == 20
        assert proposal.urgency == 4


class TestWeightedScoring:

    def test_weighted_formula(self):
        # 0.6 * (100 - 40) + 0.4 * (3 * 20) = 36 + 24
        assert weighted_score(40.0, 3) == 60

    def test_colocated_max_urgency_scores_100(self):
        assert weighted_score(0.0, 5) == 100

    def test_far_distance_contributes_nothing(self):
        assert weighted_score(250.0, 2) == 16

    def test_rounds_half_up(self):
        # 0.6 * (100 - 2.5) = 58.5, which banker's rounding would send to 58
        assert weighted_score(2.5, 0) == 59

    def test_not_clamped_above_100(self):
        """Urgency on a 1-10 scale can exceed 100."""
        assert weighted_score(0.0, 10) == 140

    def test_mode_accepts_string_value(self):
        proposals = solve([_edge("o1", "r1", 1.0, distance_km=0.0, urgency=5)], "weighted")
        assert proposals[0].score == 100

    def test_weighted_mode_rounds_distance_to_tenth(self):
        proposals = solve([_edge("o1", "r1", 1.0, distance_km=12.349, urgency=1)], ScoringMode.WEIGHTED)
        assert proposals[0].distance == pytest.approx(12.3)
        # score uses the unrounded distance: 0.6 * 87.651 + 8 = 60.59
        assert proposals[0].score == 61

    def test_selection_still_follows_cost(self):
        """Weighted mode changes scores, not which edges are accepted."""
        edges = [_edge("o1", "r1", 2.0, distance_km=90.0, urgency=5), _edge("o1", "r2", 1.0, distance_km=1.0, urgency=1)]

        cost_inverse = solve(edges, ScoringMode.COST_INVERSE)
        weighted = solve(edges, ScoringMode.WEIGHTED)

        assert [p.request_id for p in cost_inverse] == [p.request_id for p in weighted] == ["r2"]
