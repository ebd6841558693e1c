from .query_bus import Query, QueryHandler, QueryBus
from .command_bus import Command, CommandHandler, CommandBus

__all__ = [
    "Query",
    "QueryHandler",
    "QueryBus",
    "Command",
    "CommandHandler",
    "CommandBus",
]
