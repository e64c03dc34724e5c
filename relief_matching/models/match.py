"""Edge / MatchProposal - transient outputs of a matching run."""

from dataclasses import dataclass
from typing import Any, Dict

from pydantic import BaseModel, Field

from .resource import ResourceType


@dataclass(frozen=True)
class Edge:
    """A candidate offer-request pairing with its computed cost.

    Carries the quantities and urgency so the solver can build a
    MatchProposal without looking the records up again.
    """

    offer_id: str
    request_id: str
    resource_type: ResourceType
    cost: float
    distance_km: float
    offer_quantity: int = 0
    request_quantity: int = 0
    urgency: int = 1


class MatchProposal(BaseModel):
    """A proposed (not committed) offer-request pairing.

    Committing a proposal is a ledger transaction and happens elsewhere.
    """

    offer_id: str = Field(..., alias="offerId")
    request_id: str = Field(..., alias="requestId")
    resource_type: ResourceType = Field(..., alias="resourceType")
    score: float = Field(..., description="Higher is better; range depends on scoring mode")
    distance: float = Field(..., ge=0, description="Great-circle distance in km")
    offer_quantity: int = Field(..., alias="offerQuantity")
    request_quantity: int = Field(..., alias="requestQuantity")
    urgency: int

    model_config = {"populate_by_name": True}

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dict in the dashboard's camelCase shape."""
        return self.model_dump(mode="json", by_alias=True)
