"""Routing module for flight itinerary search.

Provides itinerary enumeration between two catalog locations.

- RouteFinder: batch-lookup enumeration of direct / before / after / both-transfer shapes
- CatalogReader: batch fetch interface the finder depends on
- RouteSearchService: formatting + cache-aside wrapper for API use
- route_cache: process-wide cache, invalidated on catalog mutations
"""

from .itinerary import Itinerary, build_itinerary
from .catalog_reader import CatalogReader, SQLAlchemyCatalogReader
from .route_finder import RouteFinder
from .route_cache import RouteCache, route_cache
from .route_search_service import RouteSearchService

__all__ = [
    "Itinerary",
    "build_itinerary",
    "CatalogReader",
    "SQLAlchemyCatalogReader",
    "RouteFinder",
    "RouteCache",
    "route_cache",
    "RouteSearchService",
]
