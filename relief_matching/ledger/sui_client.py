"""JSON-RPC reader for resource objects held on the Sui ledger."""

import logging
import time
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from ..models import ResourceOffer, ResourceRequest
from .base import LEDGER_TIMEOUT, LedgerError, LedgerReader, OwnedResources, ledger_retrying

logger = logging.getLogger(__name__)

DEFAULT_MODULE = "floodguard_protocol"


class SuiLedgerReader(LedgerReader):
    """Reads an actor's ResourceOffer / ResourceRequest objects.

    Uses ``suix_getOwnedObjects`` filtered on the protocol's two struct
    types and follows the cursor until every page is read. Objects that
    cannot be normalized are logged and skipped; transport errors are
    retried and then raised.
    """

    OWNED_OBJECTS_METHOD = "suix_getOwnedObjects"

    def __init__(
        self,
        rpc_url: str,
        package_id: str,
        module: str = DEFAULT_MODULE,
        page_limit: int = 50,
        retry_attempts: int = 3,
        retry_backoff: float = 1.0,
    ):
        """Initialize reader.

        Args:
            rpc_url: Fullnode JSON-RPC endpoint
            package_id: Package id that defines the resource structs
            module: Move module name inside the package
            page_limit: Objects requested per page
            retry_attempts: Total attempts per page on transport errors
            retry_backoff: Exponential backoff multiplier in seconds
        """
        self.rpc_url = rpc_url
        self.package_id = package_id
        self.module = module
        self.page_limit = page_limit
        self.retry_attempts = retry_attempts
        self.retry_backoff = retry_backoff

    @property
    def offer_type(self) -> str:
        return f"{self.package_id}::{self.module}::ResourceOffer"

    @property
    def request_type(self) -> str:
        return f"{self.package_id}::{self.module}::ResourceRequest"

    async def get_owned_resource_objects(self, actor_id: str) -> OwnedResources:
        owned = OwnedResources()
        cursor: Optional[str] = None

        async with httpx.AsyncClient(timeout=LEDGER_TIMEOUT) as client:
            while True:
                page = await self._fetch_page(client, actor_id, cursor)
                for item in page.get("data", []):
                    self._collect(item, owned)

                cursor = page.get("nextCursor")
                if not page.get("hasNextPage") or not cursor:
                    break

        logger.info(
            "Read %d offers and %d requests owned by %s",
            len(owned.offers),
            len(owned.requests),
            actor_id,
        )
        return owned

    async def _fetch_page(
        self,
        client: httpx.AsyncClient,
        actor_id: str,
        cursor: Optional[str],
    ) -> Dict[str, Any]:
        """POST one suix_getOwnedObjects call, retrying transport errors."""
        payload = {
            "jsonrpc": "2.0",
            "id": 1,
            "method": self.OWNED_OBJECTS_METHOD,
            "params": [
                actor_id,
                {
                    "filter": {
                        "MatchAny": [
                            {"StructType": self.offer_type},
                            {"StructType": self.request_type},
                        ]
                    },
                    "options": {"showContent": True, "showType": True},
                },
                cursor,
                self.page_limit,
            ],
        }

        async for attempt in ledger_retrying(self.retry_attempts, self.retry_backoff):
            with attempt:
                start = time.monotonic()
                response = await client.post(self.rpc_url, json=payload)
                duration_ms = (time.monotonic() - start) * 1000
                logger.debug(
                    "rpc method=%s url=%s status=%d duration_ms=%.0f",
                    self.OWNED_OBJECTS_METHOD,
                    self.rpc_url,
                    response.status_code,
                    duration_ms,
                )
                response.raise_for_status()
                body = response.json()

        if body.get("error"):
            error = body["error"]
            raise LedgerError(
                f"{self.OWNED_OBJECTS_METHOD} failed: "
                f"code={error.get('code')} message={error.get('message')}"
            )
        return body.get("result") or {}

    def _collect(self, item: Dict[str, Any], owned: OwnedResources) -> None:
        """Normalize one owned-object entry into ``owned``."""
        data = item.get("data") or {}
        content = data.get("content") or {}
        if content.get("dataType") != "moveObject":
            return

        object_type = data.get("type") or content.get("type") or ""
        fields = content.get("fields") or {}
        object_id = data.get("objectId")

        try:
            if "::ResourceOffer" in object_type:
                owned.offers.append(
                    ResourceOffer(
                        id=object_id,
                        resource_type=int(fields["resource_type"]),
                        quantity=int(fields["quantity"]),
                        location=_location_value(fields.get("location")),
                        active=fields.get("active", False),
                        provider=fields.get("provider"),
                    )
                )
            elif "::ResourceRequest" in object_type:
                owned.requests.append(
                    ResourceRequest(
                        id=object_id,
                        resource_type=int(fields["resource_type"]),
                        quantity=int(fields["quantity"]),
                        location=_location_value(fields.get("location")),
                        urgency=int(fields.get("urgency", 1)),
                        fulfilled=fields.get("fulfilled", False),
                        requester=fields.get("requester"),
                    )
                )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            logger.warning("Skipping malformed ledger object %s: %s", object_id, exc)


def _location_value(raw: Any) -> Any:
    """Unwrap a Move String, which arrives as ``{"fields": {"value": ...}}``."""
    if isinstance(raw, dict) and isinstance(raw.get("fields"), dict):
        return raw["fields"].get("value")
    return raw
