"""Pytest configuration and fixtures."""

import pytest
import structlog

from pool_model import Pool, PoolConfig
from pool_model.models import ReserveSnapshot
from tests.helpers import make_pool, pool_with_reserves, seeded_pool


@pytest.fixture
def config() -> PoolConfig:
    """Default pool configuration."""
    return PoolConfig()


@pytest.fixture
def empty_pool() -> Pool:
    """A freshly created pool with no deposits."""
    return make_pool()


@pytest.fixture
def seeded() -> Pool:
    """Pool after a first deposit of (2000, 2000) by alice.

    reserves (2000, 2000), total supply 2000 (1000 alice, 1000 locked).
    """
    return seeded_pool()


@pytest.fixture
def balanced_pool() -> Pool:
    """Pool with reserves (1000, 1000) and only the locked 1000 shares."""
    return pool_with_reserves(1000, 1000)


@pytest.fixture
def recorded_snapshots(balanced_pool: Pool) -> list[ReserveSnapshot]:
    """Subscribe a recorder to balanced_pool and return what it receives."""
    received: list[ReserveSnapshot] = []
    balanced_pool.subscribe(received.append)
    return received


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any logging configuration a test installs."""
    yield
    structlog.reset_defaults()
