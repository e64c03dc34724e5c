"""Shared Pydantic models for the relief matching engine."""

from .location import Coordinates, format_location, location_is_set, parse_location
from .match import Edge, MatchProposal
from .resource import ResourceOffer, ResourceRequest, ResourceType

__all__ = [
    "Coordinates",
    "Edge",
    "MatchProposal",
    "ResourceOffer",
    "ResourceRequest",
    "ResourceType",
    "format_location",
    "location_is_set",
    "parse_location",
]
