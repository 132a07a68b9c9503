"""Integer formulas for mint, burn and the swap admission check.

All quantities are non-negative integers. Every division truncates, and
only at the point shown in each formula: truncation always rounds against
the caller (fewer shares minted, fewer assets returned), which preserves
value for existing liquidity providers.
"""

from pool_model.safe_int import S


def first_mint_liquidity(amount0: int, amount1: int, minimum_liquidity: int) -> int:
    """Shares for the depositor on an empty pool.

    Formula: floor(sqrt(amount0 * amount1)) - minimum_liquidity

    The result is negative or zero when the deposit cannot cover the
    locked minimum; callers reject that.
    """
    root = (S(amount0) * S(amount1)).isqrt()
    return root.value - minimum_liquidity


def proportional_liquidity(
    amount0: int,
    amount1: int,
    reserve0: int,
    reserve1: int,
    total_supply: int,
) -> int:
    """Shares for a deposit into a pool that already has supply.

    Formula: min(floor(amount0 * supply / reserve0), floor(amount1 * supply / reserve1))

    Taking the minimum means an unbalanced deposit is credited only for its
    balanced part; the excess is donated to existing holders.

    Raises:
        DivisionByZero: If either reserve is zero
    """
    liquidity0 = S(amount0) * S(total_supply) // S(reserve0)
    liquidity1 = S(amount1) * S(total_supply) // S(reserve1)
    return liquidity0.min(liquidity1).value


def burn_amounts(
    liquidity: int,
    balance0: int,
    balance1: int,
    total_supply: int,
) -> tuple[int, int]:
    """Pro-rata withdrawal for burning shares.

    Formula: amount_i = floor(liquidity * balance_i / total_supply)

    Uses actual balances, not reserves.

    Raises:
        DivisionByZero: If total_supply is zero
    """
    amount0 = S(liquidity) * S(balance0) // S(total_supply)
    amount1 = S(liquidity) * S(balance1) // S(total_supply)
    return amount0.value, amount1.value


def fee_adjusted_balances(
    balance0: int,
    balance1: int,
    amount0_in: int,
    amount1_in: int,
    fee_numerator: int,
    fee_denominator: int,
) -> tuple[int, int]:
    """Balances scaled by the fee denominator, net of the fee on input.

    Formula: adj_i = balance_i * D - amount_i_in * N

    The result may be zero or negative for degenerate inputs, so plain
    signed integers are returned rather than SafeInt.
    """
    adjusted0 = balance0 * fee_denominator - amount0_in * fee_numerator
    adjusted1 = balance1 * fee_denominator - amount1_in * fee_numerator
    return adjusted0, adjusted1


def satisfies_constant_product(
    balance0: int,
    balance1: int,
    amount0_in: int,
    amount1_in: int,
    reserve0: int,
    reserve1: int,
    fee_numerator: int,
    fee_denominator: int,
) -> bool:
    """Fee-adjusted constant product check.

    Requires adj0 > 0, adj1 > 0 and adj0 * adj1 >= reserve0 * reserve1 * D^2,
    i.e. the product of balances, after charging the fee on whatever input
    was supplied, is not below the product of the pre-transition reserves.
    """
    adjusted0, adjusted1 = fee_adjusted_balances(
        balance0, balance1, amount0_in, amount1_in, fee_numerator, fee_denominator
    )
    if adjusted0 <= 0 or adjusted1 <= 0:
        return False
    lhs = S(adjusted0) * S(adjusted1)
    rhs = S(reserve0) * S(reserve1) * S(fee_denominator) * S(fee_denominator)
    return lhs >= rhs
