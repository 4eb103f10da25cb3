import pytest

from chainboard.dashboard import BlockchainSelector, DashboardStore
from chainboard.data.storage import MemoryStorage

from helpers import fake_registry


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def selector():
    return BlockchainSelector()


@pytest.fixture
def make_store(storage, selector):
    """Build a DashboardStore wired to fakes"""
    def _make(registry=None, hostname="explorer.example.com"):
        return DashboardStore(
            registry=registry or fake_registry(),
            storage=storage,
            selector=selector,
            hostname=hostname,
        )
    return _make
