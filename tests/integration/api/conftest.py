import pytest

from scripts.seed_catalog import seed_locations, seed_transportations


@pytest.fixture
def seeded_catalog(db_session, command_bus):
    """Taksim / IST / SAW / LHR / Wembley network; returns location code -> id."""
    location_ids = seed_locations(db_session, command_bus)
    seed_transportations(db_session, command_bus, location_ids)
    db_session.commit()
    return {code: str(location_id) for code, location_id in location_ids.items()}
