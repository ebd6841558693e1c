from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import FrozenSet, Iterable, Optional
from uuid import UUID

from core.exceptions import CatalogValidationError
from src.catalog_bc.location.domain.entities.location import Location


MONDAY = 1
SUNDAY = 7


class TransportationType(str, Enum):
    """Transport modes. FLIGHT is the only air mode; the rest are ground transfers."""
    FLIGHT = "FLIGHT"
    BUS = "BUS"
    SUBWAY = "SUBWAY"
    UBER = "UBER"

    @property
    def is_flight(self) -> bool:
        return self is TransportationType.FLIGHT


FLIGHT_TYPES: FrozenSet[TransportationType] = frozenset({TransportationType.FLIGHT})
GROUND_TYPES: FrozenSet[TransportationType] = frozenset(
    t for t in TransportationType if not t.is_flight
)


def day_of_week(day: date) -> int:
    """Weekday number used by operating-day sets (1=Monday .. 7=Sunday)."""
    return day.isoweekday()


def validate_operating_days(days: Optional[Iterable[int]]) -> FrozenSet[int]:
    """Validate a list of operating days and return it as a set.

    Rejects empty input, values outside 1..7 and duplicates.
    """
    if days is None:
        raise CatalogValidationError("Operating days cannot be empty")
    days = list(days)
    if not days:
        raise CatalogValidationError("Operating days cannot be empty")
    for day in days:
        if day is None or isinstance(day, bool) or not MONDAY <= day <= SUNDAY:
            raise CatalogValidationError(
                f"Invalid operating day: {day}. Must be between 1 (Monday) and 7 (Sunday)"
            )
    if len(set(days)) != len(days):
        raise CatalogValidationError("Operating days cannot contain duplicates")
    return frozenset(days)


def parse_operating_days(value: Optional[str]) -> FrozenSet[int]:
    """Parse the stored "1,3,5,7" form. Blank or non-numeric tokens are skipped."""
    if not value:
        return frozenset()
    days = set()
    for token in value.split(","):
        token = token.strip()
        if token.isdigit() and MONDAY <= int(token) <= SUNDAY:
            days.add(int(token))
    return frozenset(days)


def format_operating_days(days: Iterable[int]) -> str:
    """Serialize operating days to the stored comma separated form, ascending."""
    return ",".join(str(day) for day in sorted(set(days)))


@dataclass(frozen=True)
class TransportEdge:
    """A directed, typed, day-scheduled connection between two locations."""

    id: UUID
    origin: Location
    destination: Location
    transportation_type: TransportationType
    operating_days: FrozenSet[int]

    @property
    def origin_id(self) -> UUID:
        return self.origin.id

    @property
    def destination_id(self) -> UUID:
        return self.destination.id

    @property
    def is_flight(self) -> bool:
        return self.transportation_type.is_flight

    def operates_on(self, day: int) -> bool:
        """Check if the edge operates on a weekday number (1=Monday)."""
        return day in self.operating_days

    @classmethod
    def from_model(cls, model) -> "TransportEdge":
        """Create TransportEdge from a TransportationModel with its locations loaded."""
        return cls(
            id=model.id,
            origin=Location.from_model(model.origin_location),
            destination=Location.from_model(model.destination_location),
            transportation_type=TransportationType(model.transportation_type),
            operating_days=parse_operating_days(model.operating_days),
        )
