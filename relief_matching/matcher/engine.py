"""Matching engine facade.

Two entry points share one pipeline (edge building, then greedy
assignment):

- ``match_all``: global matching over arbitrary collections, scored with
  the cost-inverse convention. Used by operator tooling.
- ``find_matches_for_actor``: one actor's own unfulfilled requests against
  their own active offers, scored with the weighted convention and sorted
  by score. The ledger has no cross-actor index, so this mode only ever
  sees a single actor's inventory.
"""

import logging
import time
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..ledger.base import LedgerReader
from ..models import MatchProposal, ResourceOffer, ResourceRequest
from .edges import build_edges
from .solver import solve
from .weights import DEFAULT_COST_WEIGHTS, CostWeights, ScoringMode

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class MatchingEngine:
    """Pairs resource offers with resource requests.

    The engine holds no mutable state and never modifies its inputs, so a
    single instance can be shared by concurrent callers.
    """

    def __init__(
        self,
        ledger: Optional[LedgerReader] = None,
        weights: CostWeights = DEFAULT_COST_WEIGHTS,
    ):
        """Initialize engine.

        Args:
            ledger: Read collaborator for ``find_matches_for_actor``.
                Not needed for ``match_all``.
            weights: Cost and scoring constants
        """
        self.ledger = ledger
        self.weights = weights

    def match_all(
        self,
        offers: Iterable[Any],
        requests: Iterable[Any],
        mode: ScoringMode = ScoringMode.COST_INVERSE,
    ) -> List[MatchProposal]:
        """Match every supplied offer against every supplied request.

        Records may be model instances or dicts in the ledger's record
        shape. Records that fail validation are skipped.

        Returns:
            MatchProposals in greedy acceptance order.
        """
        offer_models = _coerce(offers, ResourceOffer)
        request_models = _coerce(requests, ResourceRequest)

        edges = build_edges(offer_models, request_models, self.weights)
        return solve(edges, mode, self.weights)

    async def find_matches_for_actor(self, actor_id: str) -> List[MatchProposal]:
        """Match an actor's own requests against their own offers.

        Ledger failures are logged and produce an empty list so polling
        callers keep running. Cancellation is not intercepted.

        Returns:
            MatchProposals sorted by descending weighted score.
        """
        if self.ledger is None:
            raise RuntimeError("MatchingEngine has no ledger reader configured")

        logger.info("Running matching engine for %s", actor_id)
        start = time.monotonic()
        try:
            owned = await self.ledger.get_owned_resource_objects(actor_id)
        except Exception as exc:
            duration_ms = (time.monotonic() - start) * 1000
            logger.error(
                "fetch_complete actor=%s result=failure error=%s duration_ms=%.0f",
                actor_id,
                exc,
                duration_ms,
            )
            return []

        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            "fetch_complete actor=%s result=success offers=%d requests=%d duration_ms=%.0f",
            actor_id,
            len(owned.offers),
            len(owned.requests),
            duration_ms,
        )

        offers = _coerce(owned.offers, ResourceOffer)
        requests = _coerce(owned.requests, ResourceRequest)

        edges = build_edges(offers, requests, self.weights)
        proposals = solve(edges, ScoringMode.WEIGHTED, self.weights)
        return sorted(proposals, key=lambda proposal: proposal.score, reverse=True)


def _coerce(records: Iterable[Any], model: Type[RecordT]) -> List[RecordT]:
    result: List[RecordT] = []
    for record in records:
        if isinstance(record, model):
            result.append(record)
            continue
        if not isinstance(record, Mapping):
            logger.warning("Skipping %s record of type %s", model.__name__, type(record).__name__)
            continue
        try:
            result.append(model.model_validate(record))
        except ValidationError as exc:
            logger.warning(
                "Skipping invalid %s %s: %d validation error(s)",
                model.__name__,
                record.get("id"),
                exc.error_count(),
            )
    return result
