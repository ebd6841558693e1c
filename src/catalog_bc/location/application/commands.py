import logging
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from core.exceptions import DuplicateResourceError, LocationNotFoundError, ResourceInUseError
from src.catalog_bc.location.domain.entities.location import Location
from src.catalog_bc.location.infrastructure.models import LocationModel
from src.catalog_bc.location.infrastructure.repositories import LocationRepository
from src.catalog_bc.routing.route_cache import RouteCache
from src.catalog_bc.transportation.infrastructure.repositories import TransportationRepository
from src.framework.application import Command, CommandHandler

logger = logging.getLogger(__name__)


@dataclass
class CreateLocationCommand(Command):
    name: str
    country: str
    city: str
    code: str
    display_order: Optional[int] = None


@dataclass
class UpdateLocationCommand(Command):
    location_id: UUID
    name: str
    country: str
    city: str
    code: str
    display_order: Optional[int] = None


@dataclass
class DeleteLocationCommand(Command):
    location_id: UUID


class CreateLocationCommandHandler(CommandHandler[CreateLocationCommand, Location]):
    def __init__(self, location_repository: LocationRepository, route_cache: RouteCache):
        self.location_repository = location_repository
        self.route_cache = route_cache

    def handle(self, command: CreateLocationCommand) -> Location:
        code = Location.normalize_code(command.code)
        logger.info(f"Creating new location with code: {code}")

        if self.location_repository.exists_by_code(code):
            raise DuplicateResourceError("Location", "locationCode", code)

        model = self.location_repository.create(LocationModel(
            name=command.name.strip(),
            country=command.country.strip(),
            city=command.city.strip(),
            code=code,
            display_order=command.display_order,
            deleted=False,
        ))
        # A new location can open new itineraries
        self.route_cache.invalidate_all()

        logger.info(f"Location created successfully with id: {model.id}")
        return Location.from_model(model)


class UpdateLocationCommandHandler(CommandHandler[UpdateLocationCommand, Location]):
    def __init__(self, location_repository: LocationRepository, route_cache: RouteCache):
        self.location_repository = location_repository
        self.route_cache = route_cache

    def handle(self, command: UpdateLocationCommand) -> Location:
        logger.info(f"Updating location with id: {command.location_id}")

        existing = self.location_repository.get_by_id(command.location_id)
        if existing is None:
            raise LocationNotFoundError(command.location_id)

        code = Location.normalize_code(command.code)
        if code != existing.code.upper() and self.location_repository.exists_by_code(code, exclude_id=existing.id):
            raise DuplicateResourceError("Location", "locationCode", code)

        model = self.location_repository.update(existing.id, {
            "name": command.name.strip(),
            "country": command.country.strip(),
            "city": command.city.strip(),
            "code": code,
            "display_order": command.display_order,
        })
        self.route_cache.invalidate_all()

        logger.info(f"Location updated successfully with id: {model.id}")
        return Location.from_model(model)


class DeleteLocationCommandHandler(CommandHandler[DeleteLocationCommand, None]):
    def __init__(
        self,
        location_repository: LocationRepository,
        transportation_repository: TransportationRepository,
        route_cache: RouteCache,
    ):
        self.location_repository = location_repository
        self.transportation_repository = transportation_repository
        self.route_cache = route_cache

    def handle(self, command: DeleteLocationCommand) -> None:
        logger.info(f"Deleting location with id: {command.location_id}")

        location = self.location_repository.get_by_id(command.location_id)
        if location is None:
            raise LocationNotFoundError(command.location_id)

        if self.transportation_repository.is_location_referenced(location.id):
            logger.warning(f"Cannot delete location {location.id} - has active transportations")
            raise ResourceInUseError(
                f"Cannot delete location '{location.name}' because it is referenced by one or more "
                f"active transportations. Please delete or modify the related transportations first."
            )

        self.location_repository.delete(location.id)
        self.route_cache.invalidate_all()

        logger.info(f"Location soft deleted successfully with id: {command.location_id}")
