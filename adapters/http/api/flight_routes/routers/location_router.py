from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from core.rate_limiter import limiter, RateLimits
from adapters.http.api.flight_routes.schemas import LocationRequest, LocationResponse
from adapters.http.api.flight_routes.utils.dependencies import (
    get_catalog_command_bus,
    get_catalog_query_bus,
    require_admin,
    require_admin_or_agency,
)
from src.auth_bc.user.domain.entities import User
from src.catalog_bc.location.application.commands import (
    CreateLocationCommand,
    DeleteLocationCommand,
    UpdateLocationCommand,
)
from src.catalog_bc.location.application.queries import GetLocationQuery, ListLocationsQuery
from src.framework.application import CommandBus, QueryBus


router = APIRouter(prefix="/locations", tags=["Locations"])


@router.get("", response_model=List[LocationResponse])
@limiter.limit(RateLimits.CATALOG)
def list_locations(
    request: Request,
    user: User = Depends(require_admin_or_agency),
    query_bus: QueryBus = Depends(get_catalog_query_bus),
):
    """List non-deleted locations ordered by display order (unset last), then name."""
    locations = query_bus.query(ListLocationsQuery())
    return [LocationResponse.from_entity(loc) for loc in locations]


@router.get("/{location_id}", response_model=LocationResponse)
@limiter.limit(RateLimits.CATALOG)
def get_location(
    request: Request,
    location_id: UUID,
    user: User = Depends(require_admin_or_agency),
    query_bus: QueryBus = Depends(get_catalog_query_bus),
):
    return LocationResponse.from_entity(query_bus.query(GetLocationQuery(location_id=location_id)))


@router.post("", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RateLimits.CATALOG)
def create_location(
    request: Request,
    body: LocationRequest,
    user: User = Depends(require_admin),
    command_bus: CommandBus = Depends(get_catalog_command_bus),
):
    """Create a location. Location codes are unique (case-insensitive); duplicates yield 409."""
    location = command_bus.dispatch(CreateLocationCommand(
        name=body.name,
        country=body.country,
        city=body.city,
        code=body.location_code,
        display_order=body.display_order,
    ))
    return LocationResponse.from_entity(location)


@router.put("/{location_id}", response_model=LocationResponse)
@limiter.limit(RateLimits.CATALOG)
def update_location(
    request: Request,
    location_id: UUID,
    body: LocationRequest,
    user: User = Depends(require_admin),
    command_bus: CommandBus = Depends(get_catalog_command_bus),
):
    location = command_bus.dispatch(UpdateLocationCommand(
        location_id=location_id,
        name=body.name,
        country=body.country,
        city=body.city,
        code=body.location_code,
        display_order=body.display_order,
    ))
    return LocationResponse.from_entity(location)


@router.delete("/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(RateLimits.CATALOG)
def delete_location(
    request: Request,
    location_id: UUID,
    user: User = Depends(require_admin),
    command_bus: CommandBus = Depends(get_catalog_command_bus),
):
    """Soft delete a location. Fails with 409 while active transportations reference it."""
    command_bus.dispatch(DeleteLocationCommand(location_id=location_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
