"""Candidate edge enumeration.

Every offer is paired with every request, so a run is O(offers x requests).
That is fine for the working sets the dashboard sees (dozens to low
hundreds of open records); larger sets would need a spatial index.
"""

import logging
from typing import Iterable, List

from ..models.location import location_is_set
from ..models.match import Edge
from ..models.resource import ResourceOffer, ResourceRequest
from .cost import compute_cost
from .geodesic import haversine
from .weights import DEFAULT_COST_WEIGHTS, CostWeights

logger = logging.getLogger(__name__)


def matchable_offers(offers: Iterable[ResourceOffer]) -> List[ResourceOffer]:
    """Active offers with a usable location, in input order."""
    result = []
    for offer in offers:
        if not offer.active:
            logger.debug("Skipping inactive offer %s", offer.id)
        elif not location_is_set(offer.location):
            logger.debug("Skipping offer %s: location unset or malformed", offer.id)
        else:
            result.append(offer)
    return result


def matchable_requests(requests: Iterable[ResourceRequest]) -> List[ResourceRequest]:
    """Unfulfilled requests with a usable location, in input order."""
    result = []
    for request in requests:
        if request.fulfilled:
            logger.debug("Skipping fulfilled request %s", request.id)
        elif not location_is_set(request.location):
            logger.debug("Skipping request %s: location unset or malformed", request.id)
        else:
            result.append(request)
    return result


def build_edges(
    offers: Iterable[ResourceOffer],
    requests: Iterable[ResourceRequest],
    weights: CostWeights = DEFAULT_COST_WEIGHTS,
) -> List[Edge]:
    """Build an Edge for every same-category (offer, request) pair.

    Inactive offers, fulfilled requests and records whose location is
    unset, (0, 0) or malformed produce no edges. Edges are emitted offer by
    offer, requests in input order within each offer; the solver relies on
    this order to break cost ties.
    """
    open_offers = matchable_offers(offers)
    open_requests = matchable_requests(requests)

    edges: List[Edge] = []
    for offer in open_offers:
        for request in open_requests:
            if offer.resource_type != request.resource_type:
                continue

            distance = haversine(
                offer.location.lat, offer.location.lng,
                request.location.lat, request.location.lng,
            )
            cost = compute_cost(offer, request, distance, weights)

            edges.append(
                Edge(
                    offer_id=offer.id,
                    request_id=request.id,
                    resource_type=offer.resource_type,
                    cost=cost,
                    distance_km=distance,
                    offer_quantity=offer.quantity,
                    request_quantity=request.quantity,
                    urgency=request.urgency,
                )
            )

    logger.info(
        "Built %d candidate edges from %d open offers and %d open requests",
        len(edges),
        len(open_offers),
        len(open_requests),
    )
    return edges
