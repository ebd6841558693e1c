"""Route finder: enumerates every flight itinerary between two locations on a date.

An itinerary is one of four shapes:
- Direct:          [flight]
- Before-transfer: [ground, flight]
- After-transfer:  [flight, ground]
- Both-transfer:   [ground, flight, ground]

Lookups are built from three batch queries against the catalog, keyed by
location, and the enumeration walks those in-memory lists:

    ground_from_origin       origin -> I               (ground)
    flights_by_origin[I]     I -> *  for I in {origin} + ground arrivals
    flights_to_destination   subset of flights_by_origin ending at destination
    ground_to_destination[J] J -> destination for every flight arrival J

The number of catalog calls per search is constant, whatever the graph size.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List
from uuid import UUID

from src.catalog_bc.routing.catalog_reader import CatalogReader
from src.catalog_bc.routing.itinerary import Itinerary, build_itinerary
from src.catalog_bc.transportation.domain.entities.transportation import (
    FLIGHT_TYPES,
    GROUND_TYPES,
    TransportEdge,
    day_of_week,
)

logger = logging.getLogger(__name__)


@dataclass
class EdgeLookups:
    """Per-search adjacency lists, all restricted to edges active on one weekday."""

    ground_from_origin: List[TransportEdge] = field(default_factory=list)
    flights_by_origin: Dict[UUID, List[TransportEdge]] = field(default_factory=lambda: defaultdict(list))
    flights_to_destination: Dict[UUID, List[TransportEdge]] = field(default_factory=lambda: defaultdict(list))
    ground_to_destination: Dict[UUID, List[TransportEdge]] = field(default_factory=lambda: defaultdict(list))


class RouteFinder:
    """Builds per-day edge lookups and enumerates valid itineraries.

    Holds no state between calls; safe to share across threads.
    """

    def __init__(self, catalog: CatalogReader):
        self.catalog = catalog

    def find_itineraries(
        self,
        origin_id: UUID,
        destination_id: UUID,
        travel_date: date,
    ) -> List[Itinerary]:
        """Find every itinerary from origin to destination on travel_date.

        Raises:
            LocationNotFoundError: origin or destination is unknown or deleted
            ItineraryInvariantError: enumeration produced an invalid candidate
        """
        origin = self.catalog.get_location(origin_id)
        destination = self.catalog.get_location(destination_id)

        if origin.id == destination.id:
            logger.debug(f"Origin equals destination ({origin.code}), no itineraries")
            return []

        day = day_of_week(travel_date)
        logger.debug(f"Finding itineraries {origin.code} -> {destination.code} on {travel_date} (day {day})")

        lookups = self._build_lookups(origin.id, destination.id, day)

        itineraries: List[Itinerary] = []
        itineraries.extend(self._direct(origin.id, destination.id, lookups))
        itineraries.extend(self._before_transfer(lookups))
        itineraries.extend(self._after_transfer(origin.id, destination.id, lookups))
        itineraries.extend(self._both_transfers(destination.id, lookups))

        logger.info(
            f"Found {len(itineraries)} itinerary(ies) from {origin.code} to {destination.code} on {travel_date}"
        )
        return itineraries

    def _build_lookups(self, origin_id: UUID, destination_id: UUID, day: int) -> EdgeLookups:
        lookups = EdgeLookups()

        # 1. Ground transfers leaving the origin
        lookups.ground_from_origin = [
            e for e in self.catalog.list_active_edges({origin_id}, None, GROUND_TYPES, day)
            if e.operates_on(day)
        ]

        # 2. Flights leaving the origin or any ground-transfer arrival, in one batch
        flight_origins = {origin_id} | {e.destination_id for e in lookups.ground_from_origin}
        for flight in self.catalog.list_active_edges(flight_origins, None, FLIGHT_TYPES, day):
            if not flight.operates_on(day):
                continue
            lookups.flights_by_origin[flight.origin_id].append(flight)
            if flight.destination_id == destination_id:
                lookups.flights_to_destination[flight.origin_id].append(flight)

        # 3. Ground transfers from any flight arrival to the destination, in one batch
        arrivals = {
            flight.destination_id
            for flights in lookups.flights_by_origin.values()
            for flight in flights
        }
        arrivals.discard(destination_id)
        if arrivals:
            for ground in self.catalog.list_active_edges(arrivals, {destination_id}, GROUND_TYPES, day):
                if ground.operates_on(day):
                    lookups.ground_to_destination[ground.origin_id].append(ground)

        logger.debug(
            f"Lookups: {len(lookups.ground_from_origin)} ground from origin, "
            f"{sum(len(v) for v in lookups.flights_by_origin.values())} flights, "
            f"{sum(len(v) for v in lookups.ground_to_destination.values())} ground to destination"
        )
        return lookups

    def _direct(self, origin_id: UUID, destination_id: UUID, lookups: EdgeLookups) -> List[Itinerary]:
        routes = [build_itinerary([flight]) for flight in lookups.flights_to_destination.get(origin_id, [])]
        logger.debug(f"Direct flights: {len(routes)}")
        return routes

    def _before_transfer(self, lookups: EdgeLookups) -> List[Itinerary]:
        routes = []
        for ground in lookups.ground_from_origin:
            for flight in lookups.flights_to_destination.get(ground.destination_id, []):
                routes.append(build_itinerary([ground, flight]))
        logger.debug(f"Before-flight transfer routes: {len(routes)}")
        return routes

    def _after_transfer(self, origin_id: UUID, destination_id: UUID, lookups: EdgeLookups) -> List[Itinerary]:
        routes = []
        for flight in lookups.flights_by_origin.get(origin_id, []):
            if flight.destination_id == destination_id:
                continue
            for ground in lookups.ground_to_destination.get(flight.destination_id, []):
                routes.append(build_itinerary([flight, ground]))
        logger.debug(f"After-flight transfer routes: {len(routes)}")
        return routes

    def _both_transfers(self, destination_id: UUID, lookups: EdgeLookups) -> List[Itinerary]:
        # Same flights_by_origin structure as the after-transfer shape, no extra fetch
        routes = []
        for before in lookups.ground_from_origin:
            for flight in lookups.flights_by_origin.get(before.destination_id, []):
                if flight.destination_id == destination_id:
                    continue
                for after in lookups.ground_to_destination.get(flight.destination_id, []):
                    routes.append(build_itinerary([before, flight, after]))
        logger.debug(f"Before and after-flight transfer routes: {len(routes)}")
        return routes
