from dependency_injector import containers, providers
from sqlalchemy.orm import Session

# Repositories
from src.catalog_bc.location.infrastructure.repositories import LocationRepository
from src.catalog_bc.transportation.infrastructure.repositories import TransportationRepository

# Routing
from src.catalog_bc.routing import (
    SQLAlchemyCatalogReader,
    RouteFinder,
    RouteSearchService,
    route_cache as shared_route_cache,
)

# Command Handlers
from src.catalog_bc.location.application.commands import (
    CreateLocationCommandHandler,
    UpdateLocationCommandHandler,
    DeleteLocationCommandHandler,
)
from src.catalog_bc.transportation.application.commands import (
    CreateTransportationCommandHandler,
    UpdateTransportationCommandHandler,
    DeleteTransportationCommandHandler,
)

# Query Handlers
from src.catalog_bc.location.application.queries import (
    ListLocationsQueryHandler,
    GetLocationQueryHandler,
)
from src.catalog_bc.transportation.application.queries import (
    ListTransportationsQueryHandler,
    GetTransportationQueryHandler,
)
from src.catalog_bc.routing.application.queries import SearchItinerariesQueryHandler


class CatalogContainer(containers.DeclarativeContainer):
    """Dependency injection container for the Catalog bounded context.

    Built per request with the request's database session:
        CatalogContainer(session=db)

    Handler naming convention for CommandBus/QueryBus:
    - CreateLocationCommand -> create_location_command_handler
    - SearchItinerariesQuery -> search_itineraries_query_handler
    """

    # External dependencies
    session = providers.Dependency(instance_of=Session)
    route_cache = providers.Object(shared_route_cache)

    # ===== Repositories =====
    location_repository = providers.Factory(
        LocationRepository,
        session=session
    )

    transportation_repository = providers.Factory(
        TransportationRepository,
        session=session
    )

    # ===== Routing =====
    catalog_reader = providers.Factory(
        SQLAlchemyCatalogReader,
        location_repository=location_repository,
        transportation_repository=transportation_repository
    )

    route_finder = providers.Factory(
        RouteFinder,
        catalog=catalog_reader
    )

    route_search_service = providers.Factory(
        RouteSearchService,
        route_finder=route_finder,
        route_cache=route_cache
    )

    # ===== Command Handlers (snake_case for CommandBus convention) =====

    # Location commands
    create_location_command_handler = providers.Factory(
        CreateLocationCommandHandler,
        location_repository=location_repository,
        route_cache=route_cache
    )

    update_location_command_handler = providers.Factory(
        UpdateLocationCommandHandler,
        location_repository=location_repository,
        route_cache=route_cache
    )

    delete_location_command_handler = providers.Factory(
        DeleteLocationCommandHandler,
        location_repository=location_repository,
        transportation_repository=transportation_repository,
        route_cache=route_cache
    )

    # Transportation commands
    create_transportation_command_handler = providers.Factory(
        CreateTransportationCommandHandler,
        transportation_repository=transportation_repository,
        location_repository=location_repository,
        route_cache=route_cache
    )

    update_transportation_command_handler = providers.Factory(
        UpdateTransportationCommandHandler,
        transportation_repository=transportation_repository,
        location_repository=location_repository,
        route_cache=route_cache
    )

    delete_transportation_command_handler = providers.Factory(
        DeleteTransportationCommandHandler,
        transportation_repository=transportation_repository,
        route_cache=route_cache
    )

    # ===== Query Handlers (snake_case for QueryBus convention) =====

    list_locations_query_handler = providers.Factory(
        ListLocationsQueryHandler,
        location_repository=location_repository
    )

    get_location_query_handler = providers.Factory(
        GetLocationQueryHandler,
        location_repository=location_repository
    )

    list_transportations_query_handler = providers.Factory(
        ListTransportationsQueryHandler,
        transportation_repository=transportation_repository
    )

    get_transportation_query_handler = providers.Factory(
        GetTransportationQueryHandler,
        transportation_repository=transportation_repository
    )

    search_itineraries_query_handler = providers.Factory(
        SearchItinerariesQueryHandler,
        route_search_service=route_search_service
    )
