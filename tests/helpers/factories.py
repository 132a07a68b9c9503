"""Factory functions for creating pools in known states.

Usage:
    from tests.helpers import make_pool, pool_with_reserves

    pool = pool_with_reserves(1000, 1000)
"""

from pool_model import Pool, PoolConfig
from pool_model.config import DEFAULT_POOL_CONFIG
from tests.helpers.constants import ALICE, FIXED_TIMESTAMP, TOKEN_A, TOKEN_B


def make_pool(config: PoolConfig = DEFAULT_POOL_CONFIG) -> Pool:
    """Create an empty pool with a fixed clock."""
    return Pool(TOKEN_A, TOKEN_B, config=config, clock=lambda: FIXED_TIMESTAMP)


def seeded_pool(
    amount0: int = 2000,
    amount1: int = 2000,
    provider: str = ALICE,
    config: PoolConfig = DEFAULT_POOL_CONFIG,
) -> Pool:
    """Create a pool with one first deposit from `provider`.

    With the defaults: reserves (2000, 2000), total supply 2000,
    1000 shares to the provider and 1000 locked.
    """
    pool = make_pool(config)
    pool.mint(provider, amount0, amount1)
    return pool


def pool_with_reserves(reserve0: int, reserve1: int) -> Pool:
    """Create a pool whose only remaining shares are the locked minimum.

    Mints (2 * reserve0, 2 * reserve1) and burns the provider's shares,
    which leaves exactly (reserve0, reserve1) when the deposit's square
    root is 2000 (e.g. reserves (1000, 1000) or (500, 2000)).
    """
    pool = seeded_pool(2 * reserve0, 2 * reserve1)
    pool.burn(ALICE, pool.balance_of(ALICE))
    assert pool.get_reserves() == (reserve0, reserve1)
    return pool
