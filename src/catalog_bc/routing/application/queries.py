import logging
from dataclasses import dataclass
from datetime import date
from typing import List
from uuid import UUID

from src.catalog_bc.routing.route_search_service import RouteSearchService
from src.framework.application import Query, QueryHandler

logger = logging.getLogger(__name__)


@dataclass
class SearchItinerariesQuery(Query):
    origin_id: UUID
    destination_id: UUID
    travel_date: date


class SearchItinerariesQueryHandler(QueryHandler[SearchItinerariesQuery, List[dict]]):
    """Returns formatted itineraries, each a dict with segments and transfer flags."""

    def __init__(self, route_search_service: RouteSearchService):
        self.route_search_service = route_search_service

    def handle(self, query: SearchItinerariesQuery) -> List[dict]:
        logger.debug(
            f"Route search {query.origin_id} -> {query.destination_id} on {query.travel_date}"
        )
        return self.route_search_service.search(query.origin_id, query.destination_id, query.travel_date)
