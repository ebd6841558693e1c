"""Itinerary value object and its assembly rules.

An itinerary is 1-3 connected edges with exactly one flight, at most one
ground transfer before it and at most one after it.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from core.exceptions import ItineraryInvariantError
from src.catalog_bc.transportation.domain.entities.transportation import TransportEdge

logger = logging.getLogger(__name__)

MIN_SEGMENTS = 1
MAX_SEGMENTS = 3


@dataclass(frozen=True)
class Itinerary:
    """Ordered, connected sequence of transport edges containing one flight."""

    segments: Tuple[TransportEdge, ...]

    @property
    def total_segments(self) -> int:
        return len(self.segments)

    @property
    def flight_index(self) -> int:
        return next(i for i, s in enumerate(self.segments) if s.is_flight)

    @property
    def flight(self) -> TransportEdge:
        return self.segments[self.flight_index]

    @property
    def has_before_flight_transfer(self) -> bool:
        return self.flight_index > 0

    @property
    def has_after_flight_transfer(self) -> bool:
        return self.flight_index < len(self.segments) - 1

    @property
    def segment_ids(self) -> Tuple:
        return tuple(s.id for s in self.segments)


def check_itinerary_invariants(segments: Sequence[TransportEdge]) -> None:
    """Raise ItineraryInvariantError if the segments cannot form an itinerary."""
    ids = [s.id for s in segments]

    if not MIN_SEGMENTS <= len(segments) <= MAX_SEGMENTS:
        raise ItineraryInvariantError(
            f"Itinerary must have {MIN_SEGMENTS}-{MAX_SEGMENTS} segments, got {len(segments)}",
            ids,
        )

    for i in range(len(segments) - 1):
        if segments[i].destination_id != segments[i + 1].origin_id:
            raise ItineraryInvariantError(
                f"Segments are not connected: segment {i + 1} ends at "
                f"{segments[i].destination.code}, segment {i + 2} starts at "
                f"{segments[i + 1].origin.code}",
                ids,
            )

    flight_positions = [i for i, s in enumerate(segments) if s.is_flight]
    if len(flight_positions) != 1:
        raise ItineraryInvariantError(
            f"Itinerary must have exactly one flight segment, got {len(flight_positions)}",
            ids,
        )

    # With one flight and at most three segments, more than one ground
    # segment on the same side can only mean [g, g, f] or [f, g, g]
    flight_index = flight_positions[0]
    if flight_index > 1 or len(segments) - flight_index - 1 > 1:
        raise ItineraryInvariantError(
            "At most one ground transfer is allowed before and after the flight",
            ids,
        )


def build_itinerary(segments: Sequence[TransportEdge]) -> Itinerary:
    """Validate candidate segments and assemble them into an Itinerary."""
    try:
        check_itinerary_invariants(segments)
    except ItineraryInvariantError as e:
        logger.error(
            f"Rejected itinerary candidate {[str(i) for i in e.segment_ids]} "
            f"({' -> '.join(f'{s.origin.code}>{s.destination.code}:{s.transportation_type.value}' for s in segments)}): "
            f"{e.message}"
        )
        raise
    return Itinerary(segments=tuple(segments))
