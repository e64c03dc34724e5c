"""Pytest configuration and fixtures."""

import pytest

from relief_matching.models import ResourceOffer, ResourceRequest, ResourceType


def make_offer(
    offer_id: str = "offer-1",
    resource_type: ResourceType = ResourceType.FOOD,
    location="10.0,106.0",
    quantity: int = 100,
    active: bool = True,
    **kwargs,
) -> ResourceOffer:
    return ResourceOffer(
        id=offer_id,
        resource_type=resource_type,
        quantity=quantity,
        location=location,
        active=active,
        **kwargs,
    )


def make_request(
    request_id: str = "request-1",
    resource_type: ResourceType = ResourceType.FOOD,
    location="10.0,106.0",
    quantity: int = 100,
    urgency: int = 5,
    fulfilled: bool = False,
    **kwargs,
) -> ResourceRequest:
    return ResourceRequest(
        id=request_id,
        resource_type=resource_type,
        quantity=quantity,
        location=location,
        urgency=urgency,
        fulfilled=fulfilled,
        **kwargs,
    )


@pytest.fixture
def colocated_pair():
    """Scenario A: one FOOD offer and one FOOD request at the same spot."""
    return (
        make_offer("offer-a", location="10.0,106.0"),
        make_request("request-a", location="10.0,106.0", urgency=5, quantity=100),
    )


@pytest.fixture
def two_cities():
    """Two offers and two requests, each request close to one offer."""
    offers = [
        make_offer("offer-1", location="10.0,106.0"),
        make_offer("offer-2", location="11.0,106.0"),
    ]
    requests = [
        make_request("request-2", location="11.02,106.0"),
        make_request("request-1", location="10.01,106.0"),
    ]
    return offers, requests


@pytest.fixture
def sample_owned_objects_response():
    """Sample suix_getOwnedObjects JSON-RPC response (single page)."""
    return {
        "jsonrpc": "2.0",
        "id": 1,
        "result": {
            "data": [
                {
                    "data": {
                        "objectId": "0xoffer1",
                        "type": "0xpkg::floodguard_protocol::ResourceOffer",
                        "content": {
                            "dataType": "moveObject",
                            "type": "0xpkg::floodguard_protocol::ResourceOffer",
                            "fields": {
                                "resource_type": 1,
                                "quantity": "500",
                                "location": {
                                    "type": "0x1::string::String",
                                    "fields": {"value": "10.7769,106.7009"},
                                },
                                "active": True,
                                "provider": "0xactor",
                            },
                        },
                    }
                },
                {
                    "data": {
                        "objectId": "0xrequest1",
                        "type": "0xpkg::floodguard_protocol::ResourceRequest",
                        "content": {
                            "dataType": "moveObject",
                            "type": "0xpkg::floodguard_protocol::ResourceRequest",
                            "fields": {
                                "resource_type": 1,
                                "quantity": "120",
                                "location": "10.8231,106.6297",
                                "urgency": 4,
                                "fulfilled": False,
                                "requester": "0xactor",
                            },
                        },
                    }
                },
            ],
            "nextCursor": "0xrequest1",
            "hasNextPage": False,
        },
    }
