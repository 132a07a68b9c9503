"""Flash-swap engine: output first, input later, checked once at the end.

A flash swap is three transitions over the same state:

1. begin: debit the requested outputs from the balances. Reserves are
   left as they were, so they keep the pre-session pricing base.
2. repay: credit whatever the borrower sends back to the balances.
3. verify: treat the balance excess over the reserves as input, apply the
   same fee-adjusted product check as a swap, and settle reserves to the
   balances.

Only verify changes reserves. Sequencing (which step may run when) is the
pool's lock, not this module.
"""

from __future__ import annotations

from dataclasses import replace

import structlog

from pool_model.config import PoolConfig
from pool_model.engines.guards import require_quantity, require_within_ceiling
from pool_model.engines.swap import check_constant_product, check_outputs
from pool_model.errors import InsufficientInputAmount
from pool_model.safe_int import S
from pool_model.state import PoolState

logger = structlog.get_logger()


def apply_begin(
    state: PoolState,
    config: PoolConfig,
    amount0_out: int,
    amount1_out: int,
) -> PoolState:
    """Optimistically send the requested outputs.

    Raises:
        InsufficientOutputAmount: If both outputs are zero
        InsufficientLiquidity: If an output would empty its reserve
    """
    check_outputs(state, amount0_out, amount1_out)
    new_state = replace(
        state,
        balance0=(S(state.balance0) - S(amount0_out)).value,
        balance1=(S(state.balance1) - S(amount1_out)).value,
    )
    logger.debug("flash_begin_computed", amount0_out=amount0_out, amount1_out=amount1_out)
    return new_state


def apply_repay(
    state: PoolState,
    config: PoolConfig,
    amount0: int,
    amount1: int,
) -> PoolState:
    """Credit the borrower's repayment to the balances.

    Zero repayment is accepted here; verify decides whether it was enough.

    Raises:
        InvalidAmount: If an amount is negative or not an integer
        Overflow: If a balance would exceed the ceiling
    """
    require_quantity("amount0", amount0)
    require_quantity("amount1", amount1)
    ceiling = config.balance_ceiling
    new_state = replace(
        state,
        balance0=require_within_ceiling("balance0", state.balance0 + amount0, ceiling),
        balance1=require_within_ceiling("balance1", state.balance1 + amount1, ceiling),
    )
    logger.debug("flash_repay_computed", amount0=amount0, amount1=amount1)
    return new_state


def apply_verify(state: PoolState, config: PoolConfig) -> tuple[PoolState, int, int]:
    """Check the session's net effect and settle reserves to balances.

    amount_i_in = max(balance_i - reserve_i, 0)

    Returns:
        Tuple of (new_state, amount0_in, amount1_in)

    Raises:
        InsufficientInputAmount: If neither balance exceeds its reserve
        InvariantViolation: If the fee-adjusted product check fails
    """
    amount0_in = S(state.balance0).saturating_sub(state.reserve0).value
    amount1_in = S(state.balance1).saturating_sub(state.reserve1).value
    if amount0_in == 0 and amount1_in == 0:
        raise InsufficientInputAmount(
            f"Balances ({state.balance0}, {state.balance1}) do not exceed "
            f"reserves ({state.reserve0}, {state.reserve1})"
        )
    check_constant_product(
        state, config, state.balance0, state.balance1, amount0_in, amount1_in
    )
    new_state = state.settled(state.balance0, state.balance1)
    logger.debug("flash_verify_computed", amount0_in=amount0_in, amount1_in=amount1_in)
    return new_state, amount0_in, amount1_in
