from datetime import date
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request

from core.rate_limiter import limiter, RateLimits
from adapters.http.api.flight_routes.schemas import RouteResponse
from adapters.http.api.flight_routes.utils.dependencies import (
    get_catalog_query_bus,
    require_admin_or_agency,
)
from src.auth_bc.user.domain.entities import User
from src.catalog_bc.routing.application.queries import SearchItinerariesQuery
from src.framework.application import QueryBus


router = APIRouter(prefix="/routes", tags=["Routes"])


@router.get("/search", response_model=List[RouteResponse])
@limiter.limit(RateLimits.ROUTE_SEARCH)
def search_routes(
    request: Request,
    origin_id: UUID = Query(..., alias="originId", description="Origin location ID"),
    destination_id: UUID = Query(..., alias="destinationId", description="Destination location ID"),
    travel_date: date = Query(..., alias="date", description="Travel date (YYYY-MM-DD)"),
    user: User = Depends(require_admin_or_agency),
    query_bus: QueryBus = Depends(get_catalog_query_bus),
):
    """Find every route from origin to destination operating on the given date.

    **Route rules:**
    - Exactly one FLIGHT segment
    - At most one ground transfer (BUS, SUBWAY, UBER) before the flight
    - At most one ground transfer after the flight
    - Every segment operates on the date's weekday
    - Consecutive segments are connected

    **Examples:** FLIGHT, UBER → FLIGHT, FLIGHT → BUS, SUBWAY → FLIGHT → UBER

    An empty list means no route operates that day. Results are cached for an
    hour and dropped whenever the catalog changes.
    """
    return query_bus.query(SearchItinerariesQuery(
        origin_id=origin_id,
        destination_id=destination_id,
        travel_date=travel_date,
    ))
