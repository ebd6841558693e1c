from .commands import (
    CreateLocationCommand,
    CreateLocationCommandHandler,
    UpdateLocationCommand,
    UpdateLocationCommandHandler,
    DeleteLocationCommand,
    DeleteLocationCommandHandler,
)
from .queries import (
    ListLocationsQuery,
    ListLocationsQueryHandler,
    GetLocationQuery,
    GetLocationQueryHandler,
)
