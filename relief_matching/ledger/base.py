"""Read-side interface to the relief ledger."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..models import ResourceOffer, ResourceRequest

logger = logging.getLogger(__name__)

# Standard timeout for ledger RPC calls: 10s connect, 30s read
LEDGER_TIMEOUT = httpx.Timeout(connect=10.0, read=30.0, write=10.0, pool=10.0)


class LedgerError(Exception):
    """The ledger answered, but with an error instead of a result."""


@dataclass
class OwnedResources:
    """Offers and requests owned by a single actor."""

    offers: List[ResourceOffer] = field(default_factory=list)
    requests: List[ResourceRequest] = field(default_factory=list)


class LedgerReader(ABC):
    """Abstract read collaborator consumed by the matching engine."""

    @abstractmethod
    async def get_owned_resource_objects(self, actor_id: str) -> OwnedResources:
        """Fetch the offers and requests owned by ``actor_id``.

        May raise on network or ledger failure; callers decide how to
        recover.
        """
        pass


def ledger_retrying(attempts: int = 3, backoff: float = 1.0) -> AsyncRetrying:
    """Retry policy for ledger HTTP calls: exponential backoff on transport errors."""
    return AsyncRetrying(
        stop=stop_after_attempt(attempts),
        wait=wait_exponential(multiplier=backoff, min=0, max=10),
        retry=retry_if_exception_type(httpx.HTTPError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
