"""Location parsing for the ledger's "lat,lng" encoding.

The ledger stores locations as comma-separated decimal degrees, latitude
first. Anything that cannot be read as a valid coordinate pair is treated
as an unset location and never raises.
"""

import math
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError


class Coordinates(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    lat: float = Field(..., ge=-90.0, le=90.0, description="Latitude")
    lng: float = Field(..., ge=-180.0, le=180.0, description="Longitude")

    model_config = {"frozen": True}


def parse_location(value: Any) -> Optional[Coordinates]:
    """Parse a location into Coordinates.

    Accepts a "lat,lng" string, a mapping with ``lat``/``lng`` keys, a
    two-item sequence or an existing Coordinates instance.

    Returns:
        Coordinates, or None when the value is missing or malformed
        (non-numeric parts, wrong field count, non-finite or out of range).
    """
    if value is None:
        return None
    if isinstance(value, Coordinates):
        return value

    if isinstance(value, str):
        parts = value.split(",")
        if len(parts) != 2:
            return None
        raw_lat, raw_lng = parts
    elif isinstance(value, Mapping):
        if "lat" not in value or "lng" not in value:
            return None
        raw_lat, raw_lng = value["lat"], value["lng"]
    elif isinstance(value, (list, tuple)):
        if len(value) != 2:
            return None
        raw_lat, raw_lng = value
    else:
        return None

    lat = _to_float(raw_lat)
    lng = _to_float(raw_lng)
    if lat is None or lng is None:
        return None

    try:
        return Coordinates(lat=lat, lng=lng)
    except ValidationError:
        return None


def location_is_set(location: Optional[Coordinates]) -> bool:
    """False for a missing location or the (0, 0) "unset" sentinel."""
    if location is None:
        return False
    return not (location.lat == 0.0 and location.lng == 0.0)


def format_location(location: Coordinates) -> str:
    """Serialize Coordinates back to the ledger's "lat,lng" form."""
    return f"{location.lat},{location.lng}"


def _to_float(raw: Any) -> Optional[float]:
    # bool is an int subclass; "true,false" is not a location
    if isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        number = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(number):
        return None
    return number
