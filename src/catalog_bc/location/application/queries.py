from dataclasses import dataclass
from typing import List
from uuid import UUID

from core.exceptions import LocationNotFoundError
from src.catalog_bc.location.domain.entities.location import Location
from src.catalog_bc.location.infrastructure.repositories import LocationRepository
from src.framework.application import Query, QueryHandler


@dataclass
class ListLocationsQuery(Query):
    pass


@dataclass
class GetLocationQuery(Query):
    location_id: UUID


class ListLocationsQueryHandler(QueryHandler[ListLocationsQuery, List[Location]]):
    def __init__(self, location_repository: LocationRepository):
        self.location_repository = location_repository

    def handle(self, query: ListLocationsQuery) -> List[Location]:
        return [Location.from_model(m) for m in self.location_repository.get_all_ordered()]


class GetLocationQueryHandler(QueryHandler[GetLocationQuery, Location]):
    def __init__(self, location_repository: LocationRepository):
        self.location_repository = location_repository

    def handle(self, query: GetLocationQuery) -> Location:
        model = self.location_repository.get_by_id(query.location_id)
        if model is None:
            raise LocationNotFoundError(query.location_id)
        return Location.from_model(model)
