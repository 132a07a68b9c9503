"""Swap engine: exchange one asset for the other.

Input is whatever the caller has already transferred in. The engine never
asks how it arrived; it only checks that, after charging the fee on that
input, the product of the new balances is not below the product of the
old reserves.
"""

from __future__ import annotations

import structlog

from pool_model.config import PoolConfig
from pool_model.engines.guards import require_quantity, require_within_ceiling
from pool_model.errors import (
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientOutputAmount,
    InvariantViolation,
)
from pool_model.math import satisfies_constant_product
from pool_model.results import SwapResult
from pool_model.state import PoolState

logger = structlog.get_logger()


def check_outputs(state: PoolState, amount0_out: int, amount1_out: int) -> None:
    """Validate requested outputs against current reserves.

    Shared by swap and the start of a flash swap.

    Raises:
        InvalidAmount: If an output is negative or not an integer
        InsufficientOutputAmount: If both outputs are zero
        InsufficientLiquidity: If an output would empty its reserve
    """
    require_quantity("amount0_out", amount0_out)
    require_quantity("amount1_out", amount1_out)
    if amount0_out == 0 and amount1_out == 0:
        raise InsufficientOutputAmount("Swap must request a non-zero output")
    if amount0_out >= state.reserve0 or amount1_out >= state.reserve1:
        raise InsufficientLiquidity(
            f"Output ({amount0_out}, {amount1_out}) must be below "
            f"reserves ({state.reserve0}, {state.reserve1})"
        )


def check_constant_product(
    state: PoolState,
    config: PoolConfig,
    balance0: int,
    balance1: int,
    amount0_in: int,
    amount1_in: int,
) -> None:
    """Admission check against the current (pre-transition) reserves.

    Raises:
        InvariantViolation: If the fee-adjusted product decreased
    """
    if not satisfies_constant_product(
        balance0,
        balance1,
        amount0_in,
        amount1_in,
        state.reserve0,
        state.reserve1,
        config.fee_numerator,
        config.fee_denominator,
    ):
        raise InvariantViolation(
            f"Fee-adjusted product of ({balance0}, {balance1}) with input "
            f"({amount0_in}, {amount1_in}) is below reserves "
            f"({state.reserve0}, {state.reserve1})"
        )


def apply_swap(
    state: PoolState,
    config: PoolConfig,
    amount0_out: int,
    amount1_out: int,
    amount0_in: int,
    amount1_in: int,
) -> tuple[PoolState, SwapResult]:
    """Compute the state after a swap.

    new_balance_i = reserve_i + amount_i_in - amount_i_out

    Fees stay in the reserves; no shares are minted and k_last is unchanged.

    Args:
        state: Current pool state (not modified)
        config: Pool parameters
        amount0_out: token0 requested by the trader
        amount1_out: token1 requested by the trader
        amount0_in: token0 already transferred in
        amount1_in: token1 already transferred in

    Returns:
        Tuple of (new_state, SwapResult)

    Raises:
        InvalidAmount: If any amount is negative or not an integer
        InsufficientOutputAmount: If no output was requested
        InsufficientLiquidity: If an output would empty its reserve
        InsufficientInputAmount: If no input was supplied
        Overflow: If a new balance exceeds the ceiling
        InvariantViolation: If the fee-adjusted product check fails
    """
    check_outputs(state, amount0_out, amount1_out)
    require_quantity("amount0_in", amount0_in)
    require_quantity("amount1_in", amount1_in)
    if amount0_in == 0 and amount1_in == 0:
        raise InsufficientInputAmount("Swap must supply a non-zero input")

    ceiling = config.balance_ceiling
    balance0 = require_within_ceiling(
        "balance0", state.reserve0 + amount0_in - amount0_out, ceiling
    )
    balance1 = require_within_ceiling(
        "balance1", state.reserve1 + amount1_in - amount1_out, ceiling
    )
    check_constant_product(state, config, balance0, balance1, amount0_in, amount1_in)

    new_state = state.settled(balance0, balance1)
    logger.debug(
        "swap_computed",
        amount0_in=amount0_in,
        amount1_in=amount1_in,
        amount0_out=amount0_out,
        amount1_out=amount1_out,
    )
    return new_state, SwapResult(
        amount0_in=amount0_in,
        amount1_in=amount1_in,
        amount0_out=amount0_out,
        amount1_out=amount1_out,
    )
