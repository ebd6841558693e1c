"""Read-only catalog access used by the route finder.

The finder only talks to the catalog through batch queries: one call returns
every active edge for a set of origins x a set of destinations, with the
location data already attached. No per-edge or per-location fetch happens
inside the enumeration loops.
"""

from abc import ABC, abstractmethod
from typing import Collection, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from core.exceptions import LocationNotFoundError
from src.catalog_bc.location.domain.entities.location import Location
from src.catalog_bc.location.infrastructure.repositories import LocationRepository
from src.catalog_bc.transportation.domain.entities.transportation import (
    TransportEdge,
    TransportationType,
)
from src.catalog_bc.transportation.infrastructure.repositories import TransportationRepository


class CatalogReader(ABC):
    """Interface for the catalog queries the route finder needs."""

    @abstractmethod
    def get_location(self, location_id: UUID) -> Location:
        """Return an active location or raise LocationNotFoundError."""
        pass

    @abstractmethod
    def list_active_edges(
        self,
        origin_ids: Collection[UUID],
        destination_ids: Optional[Collection[UUID]],
        modes: Optional[Collection[TransportationType]],
        day_of_week: int,
    ) -> List[TransportEdge]:
        """Return edges operating on ``day_of_week`` from any origin to any destination.

        Args:
            origin_ids: Candidate origin locations
            destination_ids: Candidate destinations, None for any
            modes: Allowed transportation types, None for any
            day_of_week: 1=Monday .. 7=Sunday
        """
        pass


class SQLAlchemyCatalogReader(CatalogReader):
    """CatalogReader backed by the location and transportation repositories."""

    def __init__(
        self,
        location_repository: LocationRepository,
        transportation_repository: TransportationRepository,
    ):
        self.location_repository = location_repository
        self.transportation_repository = transportation_repository

    @classmethod
    def from_session(cls, session: Session) -> "SQLAlchemyCatalogReader":
        return cls(LocationRepository(session), TransportationRepository(session))

    def get_location(self, location_id: UUID) -> Location:
        model = self.location_repository.get_by_id(location_id)
        if model is None:
            raise LocationNotFoundError(location_id)
        return Location.from_model(model)

    def list_active_edges(
        self,
        origin_ids: Collection[UUID],
        destination_ids: Optional[Collection[UUID]],
        modes: Optional[Collection[TransportationType]],
        day_of_week: int,
    ) -> List[TransportEdge]:
        models = self.transportation_repository.find_active(
            origin_ids, destination_ids, modes, day_of_week
        )
        # Skip edges whose endpoint location was soft-deleted underneath them
        return [
            TransportEdge.from_model(m)
            for m in models
            if not m.origin_location.deleted and not m.destination_location.deleted
        ]
