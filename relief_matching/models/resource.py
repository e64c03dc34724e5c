"""ResourceOffer / ResourceRequest - records read from the relief ledger."""

from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from .location import Coordinates, format_location, parse_location


class ResourceType(IntEnum):
    """Resource categories, numbered as on the ledger contract."""

    FOOD = 0
    WATER = 1
    MEDICAL = 2
    SHELTER = 3
    TRANSPORTATION = 4
    RESCUE = 5
    COMMUNICATION = 6


class _ResourceRecord(BaseModel):
    """Fields shared by offers and requests.

    ``location`` accepts the ledger's "lat,lng" string as well as a
    ``{lat, lng}`` pair. Malformed locations become None rather than
    failing validation, so the record is still readable but never matched.
    """

    id: str = Field(..., description="Opaque ledger object id")
    resource_type: ResourceType = Field(..., alias="resourceType", description="Resource category")
    quantity: int = Field(..., ge=0, description="Units offered or requested")
    location: Optional[Coordinates] = Field(None, description="None when unset or malformed")

    model_config = {"populate_by_name": True}

    @field_validator("location", mode="before")
    @classmethod
    def _parse_location(cls, value: Any) -> Optional[Coordinates]:
        return parse_location(value)

    @field_serializer("location", when_used="json")
    def _serialize_location(self, location: Optional[Coordinates]) -> Optional[str]:
        # ledger encoding
        if location is None:
            return None
        return format_location(location)


class ResourceOffer(_ResourceRecord):
    """A provider's pledge of a quantity of one resource category."""

    active: bool = Field(default=True, description="Only active offers are matchable")
    provider: Optional[str] = Field(None, description="Ledger address of the provider")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "id": "0x5f1e...offer",
                "resourceType": 0,
                "quantity": 250,
                "location": "10.8231,106.6297",
                "active": True,
                "provider": "0x9a4c...",
            }
        },
    }


class ResourceRequest(_ResourceRecord):
    """A requester's need for one resource category.

    Urgency is monotonic (higher is more urgent) with no fixed upper bound;
    the ledger has used both 1-5 and 1-10 scales.
    """

    urgency: int = Field(default=1, description="1 = lowest urgency")
    fulfilled: bool = Field(default=False, description="Fulfilled requests are never matchable")
    requester: Optional[str] = Field(None, description="Ledger address of the requester")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "id": "0x77b0...request",
                "resourceType": 0,
                "quantity": 120,
                "location": "10.7769,106.7009",
                "urgency": 4,
                "fulfilled": False,
                "requester": "0x9a4c...",
            }
        },
    }
