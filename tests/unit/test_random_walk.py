"""Randomized sequences of pool operations.

Every step either commits with all invariants intact or fails leaving the
pool exactly as it was.
"""

import random

import pytest

from pool_model import Phase, Pool, PoolError
from pool_model.invariants import check_all
from pool_model.quote import get_amount_in, get_amount_out
from tests.helpers import ALICE, BOB, CAROL, make_pool

PROVIDERS = (ALICE, BOB, CAROL)


def random_mint(pool: Pool, rng: random.Random) -> None:
    pool.mint(rng.choice(PROVIDERS), rng.randint(0, 5000), rng.randint(0, 5000))


def random_burn(pool: Pool, rng: random.Random) -> None:
    holder = rng.choice(PROVIDERS)
    pool.burn(holder, rng.randint(0, pool.balance_of(holder) + 10))


def random_swap(pool: Pool, rng: random.Random) -> None:
    reserve0, reserve1 = pool.get_reserves()
    amount_in = rng.randint(1, 2000)
    # Occasionally ask for one unit more than the pool admits
    greed = rng.choice((0, 0, 0, 1))
    if rng.random() < 0.5:
        amount_out = get_amount_out(amount_in, reserve0, reserve1) + greed
        pool.swap(0, amount_out, amount_in, 0)
    else:
        amount_out = get_amount_out(amount_in, reserve1, reserve0) + greed
        pool.swap(amount_out, 0, 0, amount_in)


def random_flash_swap(pool: Pool, rng: random.Random) -> None:
    reserve0, reserve1 = pool.get_reserves()
    amount1_out = rng.randint(1, max(reserve1 // 2, 1))
    # Repay in token0; sometimes one unit short
    shortfall = rng.choice((0, 0, 1))

    def callee(p, session, amount0_out, amount1_out):
        owed = get_amount_in(amount1_out, reserve0, reserve1) - shortfall
        p.repay(session.session_id, owed, 0)

    pool.flash_swap(0, amount1_out, callee)


OPERATIONS = (random_mint, random_burn, random_swap, random_flash_swap)


@pytest.mark.parametrize("seed", range(20))
def test_random_walk_preserves_invariants(seed):
    rng = random.Random(seed)
    pool = make_pool()
    pool.mint(ALICE, 10_000, 10_000)

    for _ in range(100):
        operation = rng.choice(OPERATIONS)
        before = pool.snapshot()
        try:
            operation(pool, rng)
        except PoolError:
            assert pool.snapshot() == before, operation.__name__
        assert pool.phase == Phase.IDLE
        assert check_all(pool.state, pool.config) == []
        reserve0, reserve1 = pool.get_reserves()
        assert reserve0 > 0 and reserve1 > 0
