"""Route search response schemas.

A route is one flight, optionally preceded and/or followed by a single
ground transfer (BUS, SUBWAY, UBER).
"""

from typing import List
from uuid import UUID

from .base import CamelModel
from .location_schemas import LocationResponse


class RouteSegmentResponse(CamelModel):
    """One leg of a route; segment_order starts at 1."""
    transportation_id: UUID
    origin_location: LocationResponse
    destination_location: LocationResponse
    transportation_type: str
    segment_order: int


class RouteResponse(CamelModel):
    segments: List[RouteSegmentResponse]
    total_segments: int
    has_before_flight_transfer: bool
    has_after_flight_transfer: bool
