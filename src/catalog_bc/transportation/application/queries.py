from dataclasses import dataclass
from typing import List
from uuid import UUID

from core.exceptions import TransportationNotFoundError
from src.catalog_bc.transportation.domain.entities.transportation import TransportEdge
from src.catalog_bc.transportation.infrastructure.repositories import TransportationRepository
from src.framework.application import Query, QueryHandler


@dataclass
class ListTransportationsQuery(Query):
    pass


@dataclass
class GetTransportationQuery(Query):
    transportation_id: UUID


class ListTransportationsQueryHandler(QueryHandler[ListTransportationsQuery, List[TransportEdge]]):
    def __init__(self, transportation_repository: TransportationRepository):
        self.transportation_repository = transportation_repository

    def handle(self, query: ListTransportationsQuery) -> List[TransportEdge]:
        return [TransportEdge.from_model(m) for m in self.transportation_repository.get_all_ordered()]


class GetTransportationQueryHandler(QueryHandler[GetTransportationQuery, TransportEdge]):
    def __init__(self, transportation_repository: TransportationRepository):
        self.transportation_repository = transportation_repository

    def handle(self, query: GetTransportationQuery) -> TransportEdge:
        model = self.transportation_repository.get_by_id(query.transportation_id)
        if model is None:
            raise TransportationNotFoundError(query.transportation_id)
        return TransportEdge.from_model(model)
