from .commands import (
    CreateTransportationCommand,
    CreateTransportationCommandHandler,
    UpdateTransportationCommand,
    UpdateTransportationCommandHandler,
    DeleteTransportationCommand,
    DeleteTransportationCommandHandler,
)
from .queries import (
    ListTransportationsQuery,
    ListTransportationsQueryHandler,
    GetTransportationQuery,
    GetTransportationQueryHandler,
)
