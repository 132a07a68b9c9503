"""Mint engine: deposit into the pool in exchange for liquidity shares.

The deposited amounts have already been transferred to the pool by the
caller's transfer mechanism; this engine only prices them in shares.
"""

from __future__ import annotations

import structlog

from pool_model.config import PoolConfig
from pool_model.engines.guards import require_quantity, require_within_ceiling
from pool_model.errors import InsufficientLiquidityMinted
from pool_model.math import first_mint_liquidity, proportional_liquidity
from pool_model.results import MintResult
from pool_model.state import PoolState

logger = structlog.get_logger()


def apply_mint(
    state: PoolState,
    config: PoolConfig,
    to: str,
    amount0: int,
    amount1: int,
) -> tuple[PoolState, MintResult]:
    """Compute the state after depositing (amount0, amount1) for `to`.

    First deposit (total supply is zero):
        liquidity = floor(sqrt(amount0 * amount1)) - minimum_liquidity
        and minimum_liquidity shares are locked permanently.

    Later deposits:
        liquidity = min(floor(amount0 * supply / reserve0),
                        floor(amount1 * supply / reserve1))

    Args:
        state: Current pool state (not modified)
        config: Pool parameters
        to: Identity credited with the new shares
        amount0: Deposited amount of token0
        amount1: Deposited amount of token1

    Returns:
        Tuple of (new_state, MintResult)

    Raises:
        InvalidAmount: If an amount is negative or not an integer
        Overflow: If a resulting reserve exceeds the ceiling
        InsufficientLiquidityMinted: If the deposit is worth no shares
    """
    require_quantity("amount0", amount0)
    require_quantity("amount1", amount1)
    balance0 = require_within_ceiling("reserve0", state.reserve0 + amount0, config.balance_ceiling)
    balance1 = require_within_ceiling("reserve1", state.reserve1 + amount1, config.balance_ceiling)

    ledger = state.ledger.copy()
    total_supply = state.total_supply
    if total_supply == 0:
        liquidity = first_mint_liquidity(amount0, amount1, config.minimum_liquidity)
        if liquidity <= 0:
            raise InsufficientLiquidityMinted(
                f"First deposit ({amount0}, {amount1}) does not cover "
                f"minimum liquidity {config.minimum_liquidity}"
            )
        ledger.lock(config.minimum_liquidity)
    else:
        liquidity = proportional_liquidity(
            amount0, amount1, state.reserve0, state.reserve1, total_supply
        )
        if liquidity <= 0:
            raise InsufficientLiquidityMinted(
                f"Deposit ({amount0}, {amount1}) rounds to zero shares "
                f"against reserves ({state.reserve0}, {state.reserve1})"
            )
    ledger.credit(to, liquidity)

    new_state = state.settled(balance0, balance1, ledger=ledger, record_k=True)
    logger.debug(
        "mint_computed",
        to=to,
        liquidity=liquidity,
        amount0=amount0,
        amount1=amount1,
        first_deposit=total_supply == 0,
    )
    return new_state, MintResult(liquidity=liquidity, amount0=amount0, amount1=amount1)
