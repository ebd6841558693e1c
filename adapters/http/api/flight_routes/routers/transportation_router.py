from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Request, Response, status

from core.rate_limiter import limiter, RateLimits
from adapters.http.api.flight_routes.schemas import TransportationRequest, TransportationResponse
from adapters.http.api.flight_routes.utils.dependencies import (
    get_catalog_command_bus,
    get_catalog_query_bus,
    require_admin,
)
from src.auth_bc.user.domain.entities import User
from src.catalog_bc.transportation.application.commands import (
    CreateTransportationCommand,
    DeleteTransportationCommand,
    UpdateTransportationCommand,
)
from src.catalog_bc.transportation.application.queries import (
    GetTransportationQuery,
    ListTransportationsQuery,
)
from src.framework.application import CommandBus, QueryBus


router = APIRouter(prefix="/transportations", tags=["Transportations"])


@router.get("", response_model=List[TransportationResponse])
@limiter.limit(RateLimits.CATALOG)
def list_transportations(
    request: Request,
    user: User = Depends(require_admin),
    query_bus: QueryBus = Depends(get_catalog_query_bus),
):
    edges = query_bus.query(ListTransportationsQuery())
    return [TransportationResponse.from_entity(edge) for edge in edges]


@router.get("/{transportation_id}", response_model=TransportationResponse)
@limiter.limit(RateLimits.CATALOG)
def get_transportation(
    request: Request,
    transportation_id: UUID,
    user: User = Depends(require_admin),
    query_bus: QueryBus = Depends(get_catalog_query_bus),
):
    edge = query_bus.query(GetTransportationQuery(transportation_id=transportation_id))
    return TransportationResponse.from_entity(edge)


@router.post("", response_model=TransportationResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RateLimits.CATALOG)
def create_transportation(
    request: Request,
    body: TransportationRequest,
    user: User = Depends(require_admin),
    command_bus: CommandBus = Depends(get_catalog_command_bus),
):
    """Create a transportation between two existing, distinct locations.

    Operating days: 1=Monday .. 7=Sunday, non-empty, no duplicates.
    """
    edge = command_bus.dispatch(CreateTransportationCommand(
        origin_location_id=body.origin_location_id,
        destination_location_id=body.destination_location_id,
        transportation_type=body.transportation_type,
        operating_days=body.operating_days,
    ))
    return TransportationResponse.from_entity(edge)


@router.put("/{transportation_id}", response_model=TransportationResponse)
@limiter.limit(RateLimits.CATALOG)
def update_transportation(
    request: Request,
    transportation_id: UUID,
    body: TransportationRequest,
    user: User = Depends(require_admin),
    command_bus: CommandBus = Depends(get_catalog_command_bus),
):
    edge = command_bus.dispatch(UpdateTransportationCommand(
        transportation_id=transportation_id,
        origin_location_id=body.origin_location_id,
        destination_location_id=body.destination_location_id,
        transportation_type=body.transportation_type,
        operating_days=body.operating_days,
    ))
    return TransportationResponse.from_entity(edge)


@router.delete("/{transportation_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(RateLimits.CATALOG)
def delete_transportation(
    request: Request,
    transportation_id: UUID,
    user: User = Depends(require_admin),
    command_bus: CommandBus = Depends(get_catalog_command_bus),
):
    command_bus.dispatch(DeleteTransportationCommand(transportation_id=transportation_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
