"""Greedy assignment over candidate edges.

Edges are taken cheapest first and accepted only if neither their offer
nor their request has been claimed yet. This is the classic greedy
approximation to min-cost bipartite matching: deterministic and
O(E log E), but not globally optimal. An early cheap edge can block two
pairings that would have been cheaper together. Exact assignment is not
worth it at dashboard scale.
"""

import logging
import math
from typing import Iterable, List, Set

from ..models.match import Edge, MatchProposal
from .weights import DEFAULT_COST_WEIGHTS, CostWeights, ScoringMode

logger = logging.getLogger(__name__)


def solve(
    edges: Iterable[Edge],
    mode: ScoringMode = ScoringMode.COST_INVERSE,
    weights: CostWeights = DEFAULT_COST_WEIGHTS,
) -> List[MatchProposal]:
    """Select a conflict-free subset of edges and score it.

    Args:
        edges: Candidate edges, in enumeration order.
        mode: Scoring convention for the accepted edges.
        weights: Constants for the weighted score.

    Returns:
        MatchProposals in acceptance order (ascending cost, ties broken by
        input order). Each offer id and request id appears at most once.
    """
    mode = ScoringMode(mode)
    ordered = sorted(edges, key=lambda edge: edge.cost)

    claimed_offers: Set[str] = set()
    claimed_requests: Set[str] = set()
    proposals: List[MatchProposal] = []

    for edge in ordered:
        if edge.offer_id in claimed_offers or edge.request_id in claimed_requests:
            continue

        claimed_offers.add(edge.offer_id)
        claimed_requests.add(edge.request_id)
        proposals.append(_to_proposal(edge, mode, weights))

    logger.info("Accepted %d of %d candidate edges (mode=%s)", len(proposals), len(ordered), mode.value)
    return proposals


def cost_inverse_score(cost: float) -> float:
    """Map a cost onto (0, 1]; zero cost scores 1."""
    return 1 / (1 + cost)


def weighted_score(distance_km: float, urgency: float, weights: CostWeights = DEFAULT_COST_WEIGHTS) -> int:
    """Blend of closeness and urgency, rounded half up.

    Nominally 0-100 for urgency 1-5. Larger urgencies push the score past
    100; it is deliberately not clamped.
    """
    distance_score = max(0.0, weights.distance_score_cap - distance_km)
    urgency_score = urgency * weights.urgency_points
    return _round_half_up(
        distance_score * weights.distance_share + urgency_score * weights.urgency_share
    )


def _to_proposal(edge: Edge, mode: ScoringMode, weights: CostWeights) -> MatchProposal:
    if mode is ScoringMode.WEIGHTED:
        score = float(weighted_score(edge.distance_km, edge.urgency, weights))
        # dashboard shows distance to one decimal
        distance = _round_half_up(edge.distance_km * 10) / 10
    else:
        score = cost_inverse_score(edge.cost)
        distance = edge.distance_km

    return MatchProposal(
        offer_id=edge.offer_id,
        request_id=edge.request_id,
        resource_type=edge.resource_type,
        score=score,
        distance=distance,
        offer_quantity=edge.offer_quantity,
        request_quantity=edge.request_quantity,
        urgency=edge.urgency,
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
