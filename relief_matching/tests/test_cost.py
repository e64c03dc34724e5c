"""Unit tests for the pairing cost function."""

import pytest

from relief_matching.matcher import CostWeights, compute_cost
from .conftest import make_offer, make_request


def test_cost_formula():
    """distance * 0.7 / urgency + (100 - quantity) * 0.003"""
    cost = compute_cost(make_offer(), make_request(urgency=2, quantity=40), 10.0)
    assert cost == pytest.approx(10.0 * 0.7 * 0.5 + 60 * 0.003)


def test_zero_distance_large_request_costs_nothing():
    assert compute_cost(make_offer(), make_request(quantity=100), 0.0) == 0.0


def test_requests_of_100_or_more_add_no_people_term():
    offer = make_offer()
    at_cap = compute_cost(offer, make_request(quantity=100, urgency=1), 5.0)
    over_cap = compute_cost(offer, make_request(quantity=5000, urgency=1), 5.0)
    assert at_cap == over_cap == pytest.approx(5.0 * 0.7)


def test_small_request_pays_people_surcharge():
    offer = make_offer()
    assert compute_cost(offer, make_request(quantity=0), 0.0) == pytest.approx(0.3)
    assert compute_cost(offer, make_request(quantity=90), 0.0) == pytest.approx(0.03)


@pytest.mark.parametrize("urgency", [0, -3, 1])
def test_urgency_is_floored_at_one(urgency):
    cost = compute_cost(make_offer(), make_request(urgency=urgency), 10.0)
    assert cost == pytest.approx(7.0)


def test_cost_is_non_increasing_in_urgency():
    offer = make_offer()
    costs = [compute_cost(offer, make_request(urgency=u), 42.0) for u in range(-2, 25)]
    assert all(later <= earlier for earlier, later in zip(costs, costs[1:]))
    assert costs[-1] < costs[0]


def test_urgency_has_no_upper_bound():
    """Urgency 10 keeps lowering the cost past the 1-5 scale."""
    offer = make_offer()
    at_five = compute_cost(offer, make_request(urgency=5), 100.0)
    at_ten = compute_cost(offer, make_request(urgency=10), 100.0)
    assert at_ten == pytest.approx(at_five / 2)


def test_cost_is_non_negative():
    assert compute_cost(make_offer(), make_request(quantity=0, urgency=100), 0.0) >= 0


def test_custom_weights():
    weights = CostWeights(distance_factor=1.0, people_factor=0.0)
    cost = compute_cost(make_offer(), make_request(urgency=4, quantity=1), 8.0, weights)
    assert cost == pytest.approx(2.0)
