"""Burn engine: redeem liquidity shares for a pro-rata share of balances."""

from __future__ import annotations

import structlog

from pool_model.config import PoolConfig
from pool_model.engines.guards import require_quantity
from pool_model.errors import InsufficientLiquidityBurned, InsufficientShares
from pool_model.math import burn_amounts
from pool_model.results import BurnResult
from pool_model.state import PoolState

logger = structlog.get_logger()


def apply_burn(
    state: PoolState,
    config: PoolConfig,
    owner: str,
    liquidity: int,
) -> tuple[PoolState, BurnResult]:
    """Compute the state after `owner` burns `liquidity` shares.

    amount_i = floor(liquidity * balance_i / total_supply)

    Shares are debited directly from the owner's ledger balance. Locked
    minimum liquidity belongs to no holder, so it can never be burned.

    Raises:
        InvalidAmount: If liquidity is negative or not an integer
        InsufficientShares: If the owner holds fewer than `liquidity` shares
        InsufficientLiquidityBurned: If either returned amount rounds to zero
    """
    require_quantity("liquidity", liquidity)
    held = state.ledger.balance_of(owner)
    if liquidity > held:
        raise InsufficientShares(f"{owner} holds {held} shares, cannot burn {liquidity}")

    total_supply = state.total_supply
    if liquidity == 0 or total_supply == 0:
        raise InsufficientLiquidityBurned(f"Nothing to burn: liquidity={liquidity}")

    amount0, amount1 = burn_amounts(liquidity, state.balance0, state.balance1, total_supply)
    if amount0 == 0 or amount1 == 0:
        raise InsufficientLiquidityBurned(
            f"Burning {liquidity} of {total_supply} shares returns ({amount0}, {amount1})"
        )

    ledger = state.ledger.copy()
    ledger.debit(owner, liquidity)
    new_state = state.settled(
        state.balance0 - amount0,
        state.balance1 - amount1,
        ledger=ledger,
        record_k=True,
    )
    logger.debug(
        "burn_computed",
        owner=owner,
        liquidity=liquidity,
        amount0=amount0,
        amount1=amount1,
    )
    return new_state, BurnResult(liquidity=liquidity, amount0=amount0, amount1=amount1)
