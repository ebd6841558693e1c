import logging
from dataclasses import dataclass
from typing import List
from uuid import UUID

from core.exceptions import (
    CatalogValidationError,
    LocationNotFoundError,
    TransportationNotFoundError,
)
from src.catalog_bc.location.infrastructure.repositories import LocationRepository
from src.catalog_bc.routing.route_cache import RouteCache
from src.catalog_bc.transportation.domain.entities.transportation import (
    TransportEdge,
    TransportationType,
    format_operating_days,
    validate_operating_days,
)
from src.catalog_bc.transportation.infrastructure.models import TransportationModel
from src.catalog_bc.transportation.infrastructure.repositories import TransportationRepository
from src.framework.application import Command, CommandHandler

logger = logging.getLogger(__name__)


@dataclass
class CreateTransportationCommand(Command):
    origin_location_id: UUID
    destination_location_id: UUID
    transportation_type: TransportationType
    operating_days: List[int]


@dataclass
class UpdateTransportationCommand(Command):
    transportation_id: UUID
    origin_location_id: UUID
    destination_location_id: UUID
    transportation_type: TransportationType
    operating_days: List[int]


@dataclass
class DeleteTransportationCommand(Command):
    transportation_id: UUID


class _TransportationWriter:
    """Shared validation for create/update: endpoints exist and differ, days are valid."""

    def __init__(
        self,
        transportation_repository: TransportationRepository,
        location_repository: LocationRepository,
        route_cache: RouteCache,
    ):
        self.transportation_repository = transportation_repository
        self.location_repository = location_repository
        self.route_cache = route_cache

    def _validated_fields(self, command) -> dict:
        origin = self.location_repository.get_by_id(command.origin_location_id)
        if origin is None:
            raise LocationNotFoundError(command.origin_location_id)
        destination = self.location_repository.get_by_id(command.destination_location_id)
        if destination is None:
            raise LocationNotFoundError(command.destination_location_id)

        if origin.id == destination.id:
            raise CatalogValidationError("Origin and destination locations must be different")

        days = validate_operating_days(command.operating_days)

        return {
            "origin_location_id": origin.id,
            "destination_location_id": destination.id,
            "transportation_type": TransportationType(command.transportation_type).value,
            "operating_days": format_operating_days(days),
        }


class CreateTransportationCommandHandler(_TransportationWriter, CommandHandler[CreateTransportationCommand, TransportEdge]):
    def handle(self, command: CreateTransportationCommand) -> TransportEdge:
        logger.info(
            f"Creating new transportation from {command.origin_location_id} to {command.destination_location_id}"
        )
        fields = self._validated_fields(command)
        model = self.transportation_repository.create(TransportationModel(deleted=False, **fields))
        self.route_cache.invalidate_all()

        logger.info(f"Transportation created successfully with id: {model.id}")
        return TransportEdge.from_model(model)


class UpdateTransportationCommandHandler(_TransportationWriter, CommandHandler[UpdateTransportationCommand, TransportEdge]):
    def handle(self, command: UpdateTransportationCommand) -> TransportEdge:
        logger.info(f"Updating transportation with id: {command.transportation_id}")

        if self.transportation_repository.get_by_id(command.transportation_id) is None:
            raise TransportationNotFoundError(command.transportation_id)

        fields = self._validated_fields(command)
        model = self.transportation_repository.update(command.transportation_id, fields)
        self.route_cache.invalidate_all()

        logger.info(f"Transportation updated successfully with id: {model.id}")
        return TransportEdge.from_model(model)


class DeleteTransportationCommandHandler(CommandHandler[DeleteTransportationCommand, None]):
    def __init__(self, transportation_repository: TransportationRepository, route_cache: RouteCache):
        self.transportation_repository = transportation_repository
        self.route_cache = route_cache

    def handle(self, command: DeleteTransportationCommand) -> None:
        logger.info(f"Deleting transportation with id: {command.transportation_id}")

        if not self.transportation_repository.delete(command.transportation_id):
            raise TransportationNotFoundError(command.transportation_id)
        self.route_cache.invalidate_all()

        logger.info(f"Transportation soft deleted successfully with id: {command.transportation_id}")
