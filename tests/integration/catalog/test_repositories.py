"""Integration tests for catalog repositories against SQLite."""

import pytest

from core.exceptions import ConcurrentModificationError
from src.catalog_bc.location.infrastructure.models import LocationModel
from src.catalog_bc.location.infrastructure.repositories import LocationRepository
from src.catalog_bc.routing.catalog_reader import SQLAlchemyCatalogReader
from src.catalog_bc.transportation.domain.entities.transportation import FLIGHT_TYPES, GROUND_TYPES
from src.catalog_bc.transportation.infrastructure.models import TransportationModel
from src.catalog_bc.transportation.infrastructure.repositories import TransportationRepository


def add_location(session, code, display_order=None, name=None):
    return LocationRepository(session).create(LocationModel(
        name=name or f"{code} name", country="Turkey", city="Istanbul",
        code=code, display_order=display_order, deleted=False,
    ))


def add_edge(session, origin, destination, transportation_type, days):
    return TransportationRepository(session).create(TransportationModel(
        origin_location_id=origin.id,
        destination_location_id=destination.id,
        transportation_type=transportation_type,
        operating_days=days,
        deleted=False,
    ))


class TestLocationRepository:
    def test_ordered_by_display_order_then_name(self, db_session):
        add_location(db_session, "CCC", name="Charlie")
        add_location(db_session, "BBB", display_order=2, name="Bravo")
        add_location(db_session, "AAA", display_order=1, name="Zulu")
        add_location(db_session, "DDD", name="Alpha")

        codes = [loc.code for loc in LocationRepository(db_session).get_all_ordered()]
        assert codes == ["AAA", "BBB", "DDD", "CCC"]

    def test_exists_by_code_is_case_insensitive(self, db_session):
        ist = add_location(db_session, "IST")
        repository = LocationRepository(db_session)
        assert repository.exists_by_code("ist")
        assert not repository.exists_by_code("IST", exclude_id=ist.id)

    def test_soft_deleted_rows_are_hidden(self, db_session):
        ist = add_location(db_session, "IST")
        repository = LocationRepository(db_session)

        assert repository.delete(ist.id) is True
        assert repository.get_by_id(ist.id) is None
        assert not repository.exists_by_code("IST")
        assert db_session.get(LocationModel, ist.id).deleted is True

    def test_version_increments_on_update(self, db_session):
        ist = add_location(db_session, "IST")
        assert ist.version == 1
        updated = LocationRepository(db_session).update(ist.id, {"name": "Istanbul Airport"})
        assert updated.version == 2

    def test_stale_version_raises_concurrent_modification(self, db_session):
        ist = add_location(db_session, "IST")
        # Another writer bumps the version underneath this session
        db_session.execute(
            LocationModel.__table__.update()
            .where(LocationModel.id == ist.id)
            .values(version=LocationModel.version + 1)
        )
        with pytest.raises(ConcurrentModificationError):
            LocationRepository(db_session).update(ist.id, {"name": "Renamed"})


class TestTransportationRepository:
    @pytest.fixture
    def network(self, db_session):
        taksim = add_location(db_session, "TAKSIM")
        ist = add_location(db_session, "IST")
        lhr = add_location(db_session, "LHR")
        bus = add_edge(db_session, taksim, ist, "BUS", "1,2,3,4,5,6,7")
        flight = add_edge(db_session, ist, lhr, "FLIGHT", "1,3,5,7")
        return taksim, ist, lhr, bus, flight

    def test_find_active_filters_by_weekday(self, db_session, network):
        taksim, ist, lhr, bus, flight = network
        repository = TransportationRepository(db_session)

        assert [m.id for m in repository.find_active({ist.id}, None, None, 1)] == [flight.id]
        assert repository.find_active({ist.id}, None, None, 2) == []

    def test_find_active_day_match_is_exact(self, db_session):
        a = add_location(db_session, "AAA")
        b = add_location(db_session, "BBB")
        add_edge(db_session, a, b, "FLIGHT", "2,3")
        # "1" must not match inside other tokens
        assert TransportationRepository(db_session).find_active({a.id}, None, None, 1) == []

    def test_find_active_filters_by_type_and_destination(self, db_session, network):
        taksim, ist, lhr, bus, flight = network
        repository = TransportationRepository(db_session)

        assert [m.id for m in repository.find_active({taksim.id, ist.id}, None, GROUND_TYPES, 1)] == [bus.id]
        assert [m.id for m in repository.find_active({taksim.id, ist.id}, {lhr.id}, FLIGHT_TYPES, 1)] == [flight.id]
        assert repository.find_active({taksim.id, ist.id}, set(), None, 1) == []
        assert repository.find_active(set(), None, None, 1) == []

    def test_is_location_referenced(self, db_session, network):
        taksim, ist, lhr, bus, flight = network
        repository = TransportationRepository(db_session)

        assert repository.is_location_referenced(lhr.id)
        repository.delete(flight.id)
        assert not repository.is_location_referenced(lhr.id)


class TestSQLAlchemyCatalogReader:
    def test_edges_carry_locations_and_day_sets(self, db_session):
        ist = add_location(db_session, "IST")
        lhr = add_location(db_session, "LHR")
        add_edge(db_session, ist, lhr, "FLIGHT", "1,3,5,7")

        edges = SQLAlchemyCatalogReader.from_session(db_session).list_active_edges({ist.id}, None, None, 3)

        assert len(edges) == 1
        assert edges[0].origin.code == "IST"
        assert edges[0].destination.code == "LHR"
        assert edges[0].operating_days == frozenset({1, 3, 5, 7})

    def test_edges_to_deleted_locations_are_skipped(self, db_session):
        ist = add_location(db_session, "IST")
        lhr = add_location(db_session, "LHR")
        add_edge(db_session, ist, lhr, "FLIGHT", "1")
        lhr.deleted = True
        db_session.commit()

        assert SQLAlchemyCatalogReader.from_session(db_session).list_active_edges({ist.id}, None, None, 1) == []
