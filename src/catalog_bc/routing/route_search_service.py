"""Route search service - API-facing wrapper around the RouteFinder.

Formats itineraries into plain dicts (the shape returned by
GET /api/routes/search) and keeps them in the route cache.
"""

from datetime import date
from typing import List, Optional
from uuid import UUID

from src.catalog_bc.location.domain.entities.location import Location
from src.catalog_bc.routing.itinerary import Itinerary
from src.catalog_bc.routing.route_cache import RouteCache
from src.catalog_bc.routing.route_finder import RouteFinder
from src.catalog_bc.transportation.domain.entities.transportation import TransportEdge


def format_location(location: Location) -> dict:
    return {
        "id": str(location.id),
        "name": location.name,
        "country": location.country,
        "city": location.city,
        "location_code": location.code,
        "display_order": location.display_order,
    }


def format_segment(edge: TransportEdge, segment_order: int) -> dict:
    return {
        "transportation_id": str(edge.id),
        "origin_location": format_location(edge.origin),
        "destination_location": format_location(edge.destination),
        "transportation_type": edge.transportation_type.value,
        "segment_order": segment_order,
    }


def format_itinerary(itinerary: Itinerary) -> dict:
    return {
        "segments": [
            format_segment(edge, order) for order, edge in enumerate(itinerary.segments, start=1)
        ],
        "total_segments": itinerary.total_segments,
        "has_before_flight_transfer": itinerary.has_before_flight_transfer,
        "has_after_flight_transfer": itinerary.has_after_flight_transfer,
    }


class RouteSearchService:
    """High-level service for route searches."""

    def __init__(self, route_finder: RouteFinder, route_cache: Optional[RouteCache] = None):
        self.route_finder = route_finder
        self.route_cache = route_cache

    def search(self, origin_id: UUID, destination_id: UUID, travel_date: date) -> List[dict]:
        """Search itineraries, served from the route cache when possible.

        Args:
            origin_id: Origin location ID
            destination_id: Destination location ID
            travel_date: Date of travel

        Returns:
            List of formatted itineraries (empty when nothing operates)
        """
        def compute() -> List[dict]:
            itineraries = self.route_finder.find_itineraries(origin_id, destination_id, travel_date)
            return [format_itinerary(it) for it in itineraries]

        if self.route_cache is None:
            return compute()
        return self.route_cache.get_or_compute(origin_id, destination_id, travel_date, compute)
