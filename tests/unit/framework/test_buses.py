"""Unit tests for the command/query buses and handler resolution."""

from dataclasses import dataclass

import pytest
from dependency_injector import containers, providers

from src.framework.application import Command, CommandBus, CommandHandler, Query, QueryBus, QueryHandler


@dataclass
class RenameThingCommand(Command):
    name: str


@dataclass
class CountThingsQuery(Query):
    pass


@dataclass
class UnregisteredQuery(Query):
    pass


class RenameThingCommandHandler(CommandHandler[RenameThingCommand, str]):
    def __init__(self, prefix: str):
        self.prefix = prefix

    def handle(self, command: RenameThingCommand) -> str:
        return f"{self.prefix}{command.name}"


class CountThingsQueryHandler(QueryHandler[CountThingsQuery, int]):
    def handle(self, query: CountThingsQuery) -> int:
        return 42


class ThingsContainer(containers.DeclarativeContainer):
    prefix = providers.Object("thing:")
    rename_thing_command_handler = providers.Factory(RenameThingCommandHandler, prefix=prefix)
    count_things_query_handler = providers.Factory(CountThingsQueryHandler)


class TestCommandBus:
    def test_dispatch_resolves_handler_by_name(self):
        bus = CommandBus(ThingsContainer())
        assert bus.dispatch(RenameThingCommand(name="x")) == "thing:x"

    def test_new_handler_per_dispatch(self):
        container = ThingsContainer()
        bus = CommandBus(container)
        bus.dispatch(RenameThingCommand(name="a"))
        container.prefix.override(providers.Object("other:"))
        assert bus.dispatch(RenameThingCommand(name="b")) == "other:b"


class TestQueryBus:
    def test_query(self):
        assert QueryBus(ThingsContainer()).query(CountThingsQuery()) == 42

    def test_missing_handler(self):
        with pytest.raises(LookupError, match="unregistered_query_handler"):
            QueryBus(ThingsContainer()).query(UnregisteredQuery())
