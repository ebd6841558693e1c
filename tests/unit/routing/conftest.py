import pytest

from tests.unit.routing.builders import SeedNetwork


@pytest.fixture
def seed_network():
    return SeedNetwork()


@pytest.fixture
def seed_network_without_after_transfers():
    return SeedNetwork(with_after_transfers=False)
