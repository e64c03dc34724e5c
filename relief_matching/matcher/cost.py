"""Pairing cost for a compatible offer/request. Lower is better."""

from ..models.resource import ResourceOffer, ResourceRequest
from .weights import DEFAULT_COST_WEIGHTS, CostWeights


def compute_cost(
    offer: ResourceOffer,
    request: ResourceRequest,
    distance_km: float,
    weights: CostWeights = DEFAULT_COST_WEIGHTS,
) -> float:
    """Cost of serving ``request`` from ``offer`` at ``distance_km``.

    Higher urgency strictly lowers the distance term; urgency below 1 is
    treated as 1. Requests under ``people_cap`` units pay a small flat
    surcharge that shrinks as the request grows. This is the single cost
    definition for every matching mode.
    """
    urgency_weight = 1 / max(request.urgency, 1)
    people_weight = (weights.people_cap - min(request.quantity, weights.people_cap)) * weights.people_factor

    return distance_km * weights.distance_factor * urgency_weight + people_weight
