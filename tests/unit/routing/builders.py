"""In-memory catalog builders for route finder tests."""

import uuid
from datetime import date
from typing import Collection, List, Optional, Tuple

from core.exceptions import LocationNotFoundError
from src.catalog_bc.location.domain.entities.location import Location
from src.catalog_bc.routing.catalog_reader import CatalogReader
from src.catalog_bc.routing.itinerary import Itinerary
from src.catalog_bc.transportation.domain.entities.transportation import (
    TransportEdge,
    TransportationType,
)

ALL_DAYS = frozenset(range(1, 8))

MONDAY = date(2025, 11, 24)
TUESDAY = date(2025, 11, 25)
SUNDAY = date(2025, 11, 30)


class InMemoryCatalogReader(CatalogReader):
    """CatalogReader over plain lists; records every batch call."""

    def __init__(self, locations: List[Location], edges: List[TransportEdge]):
        self.locations = {loc.id: loc for loc in locations}
        self.edges = list(edges)
        self.edge_calls = []

    def get_location(self, location_id):
        try:
            return self.locations[location_id]
        except KeyError:
            raise LocationNotFoundError(location_id)

    def list_active_edges(
        self,
        origin_ids: Collection,
        destination_ids: Optional[Collection],
        modes: Optional[Collection[TransportationType]],
        day_of_week: int,
    ) -> List[TransportEdge]:
        self.edge_calls.append((frozenset(origin_ids), destination_ids, modes, day_of_week))
        return [
            e for e in self.edges
            if e.origin_id in origin_ids
            and (destination_ids is None or e.destination_id in destination_ids)
            and (modes is None or e.transportation_type in modes)
            and e.operates_on(day_of_week)
        ]


def make_location(code: str, display_order: Optional[int] = None) -> Location:
    return Location(
        id=uuid.uuid4(),
        name=f"{code} location",
        country="Testland",
        city="Testville",
        code=code,
        display_order=display_order,
    )


def make_edge(origin: Location, destination: Location, transportation_type, days=ALL_DAYS) -> TransportEdge:
    return TransportEdge(
        id=uuid.uuid4(),
        origin=origin,
        destination=destination,
        transportation_type=TransportationType(transportation_type),
        operating_days=frozenset(days),
    )


class SeedNetwork:
    """Taksim -> Wembley fixture: two Istanbul airports, one London airport."""

    def __init__(self, with_after_transfers: bool = True):
        self.taksim = make_location("TAKSIM", 1)
        self.ist = make_location("IST", 2)
        self.saw = make_location("SAW", 3)
        self.lhr = make_location("LHR", 4)
        self.wembley = make_location("WEMBLEY", 5)

        self.bus_taksim_ist = make_edge(self.taksim, self.ist, "BUS")
        self.subway_taksim_ist = make_edge(self.taksim, self.ist, "SUBWAY")
        self.bus_taksim_saw = make_edge(self.taksim, self.saw, "BUS")
        self.flight_ist_lhr = make_edge(self.ist, self.lhr, "FLIGHT", {1, 3, 5, 7})
        self.flight_saw_lhr = make_edge(self.saw, self.lhr, "FLIGHT", {2, 4, 6})
        self.uber_lhr_wembley = make_edge(self.lhr, self.wembley, "UBER")
        self.bus_lhr_wembley = make_edge(self.lhr, self.wembley, "BUS")

        edges = [
            self.bus_taksim_ist,
            self.subway_taksim_ist,
            self.bus_taksim_saw,
            self.flight_ist_lhr,
            self.flight_saw_lhr,
        ]
        if with_after_transfers:
            edges += [self.uber_lhr_wembley, self.bus_lhr_wembley]

        self.reader = InMemoryCatalogReader(
            [self.taksim, self.ist, self.saw, self.lhr, self.wembley],
            edges,
        )


def segment_id_sequences(itineraries: List[Itinerary]) -> List[Tuple]:
    """Sorted segment-id tuples, for order-insensitive comparison of results."""
    return sorted((tuple(str(i) for i in it.segment_ids) for it in itineraries))
