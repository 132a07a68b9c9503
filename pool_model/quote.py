"""Constant-product quoting.

Read-only helpers that tell a trader or liquidity provider what the pool
will accept. They use the same fee as the swap admission check, so:
- a swap requesting get_amount_out(x) for input x is always admitted
- supplying get_amount_in(y) is always enough to receive y
"""

from __future__ import annotations

from pool_model.config import DEFAULT_POOL_CONFIG, PoolConfig
from pool_model.errors import (
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientOutputAmount,
)
from pool_model.safe_int import S


def get_amount_out(
    amount_in: int,
    reserve_in: int,
    reserve_out: int,
    config: PoolConfig = DEFAULT_POOL_CONFIG,
) -> int:
    """Largest output the pool admits for a given input.

    Formula: amount_out = (in * fee * res_out) / (res_in * D + in * fee)
    where fee = D - N (997 for the default 0.3%).

    Args:
        amount_in: Input token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool
        config: Pool parameters supplying the fee

    Returns:
        Output token amount (rounded down)

    Raises:
        InsufficientInputAmount: If amount_in is zero
        InsufficientLiquidity: If either reserve is zero
    """
    if amount_in <= 0:
        raise InsufficientInputAmount(f"amount_in must be positive: {amount_in}")
    if reserve_in <= 0 or reserve_out <= 0:
        raise InsufficientLiquidity(f"Empty reserves: ({reserve_in}, {reserve_out})")

    amount_in_with_fee = S(amount_in) * S(config.fee_multiplier)
    numerator = amount_in_with_fee * S(reserve_out)
    denominator = S(reserve_in) * S(config.fee_denominator) + amount_in_with_fee
    return (numerator // denominator).value


def get_amount_in(
    amount_out: int,
    reserve_in: int,
    reserve_out: int,
    config: PoolConfig = DEFAULT_POOL_CONFIG,
) -> int:
    """Smallest input that buys a desired output.

    Formula: amount_in = (res_in * out * D) / ((res_out - out) * fee) + 1

    Raises:
        InsufficientOutputAmount: If amount_out is zero
        InsufficientLiquidity: If a reserve is zero or amount_out would
            drain reserve_out
    """
    if amount_out <= 0:
        raise InsufficientOutputAmount(f"amount_out must be positive: {amount_out}")
    if reserve_in <= 0 or reserve_out <= 0:
        raise InsufficientLiquidity(f"Empty reserves: ({reserve_in}, {reserve_out})")
    if amount_out >= reserve_out:
        raise InsufficientLiquidity(f"Output {amount_out} drains reserve {reserve_out}")

    numerator = S(reserve_in) * S(amount_out) * S(config.fee_denominator)
    denominator = (S(reserve_out) - S(amount_out)) * S(config.fee_multiplier)
    return ((numerator // denominator) + S(1)).value


def quote(amount_a: int, reserve_a: int, reserve_b: int) -> int:
    """Amount of the other asset that balances a deposit of amount_a.

    Formula: amount_b = amount_a * reserve_b / reserve_a

    Depositing (amount_a, quote(amount_a, ...)) mints shares without
    donating value to existing holders beyond rounding.

    Raises:
        InsufficientLiquidity: If either reserve is zero
    """
    if reserve_a <= 0 or reserve_b <= 0:
        raise InsufficientLiquidity(f"Empty reserves: ({reserve_a}, {reserve_b})")
    return (S(amount_a) * S(reserve_b) // S(reserve_a)).value

