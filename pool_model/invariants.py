"""State invariants for an idle pool.

Each function returns True when the invariant holds. ``check_all()``
returns the names of violated invariants (empty = all pass). They only
apply between transitions, i.e. while no flash-swap session is open.
"""

from __future__ import annotations

from typing import Callable

from pool_model.config import PoolConfig
from pool_model.errors import StateInvariantError
from pool_model.state import PoolState


def inv_reserves_match_balances(s: PoolState, config: PoolConfig) -> bool:
    return s.reserve0 == s.balance0 and s.reserve1 == s.balance1


def inv_product_not_below_k_last(s: PoolState, config: PoolConfig) -> bool:
    return s.reserve_product >= s.k_last


def inv_ledger_sums_to_total_supply(s: PoolState, config: PoolConfig) -> bool:
    # The running total and the enumerated sum must agree.
    holders = s.ledger.enumerated_total()
    if holders != s.ledger.holder_total:
        return False
    if s.total_supply == 0:
        return holders == 0
    return holders + s.ledger.locked == s.total_supply


def inv_minimum_liquidity_locked(s: PoolState, config: PoolConfig) -> bool:
    if s.total_supply == 0:
        return s.ledger.locked == 0
    return s.ledger.locked == config.minimum_liquidity


def inv_quantities_within_ceiling(s: PoolState, config: PoolConfig) -> bool:
    ceiling = config.balance_ceiling
    return all(
        0 <= q <= ceiling for q in (s.reserve0, s.reserve1, s.balance0, s.balance1)
    )


InvariantFn = Callable[[PoolState, PoolConfig], bool]

INVARIANTS: dict[str, InvariantFn] = {
    "reserves_match_balances": inv_reserves_match_balances,
    "product_not_below_k_last": inv_product_not_below_k_last,
    "ledger_sums_to_total_supply": inv_ledger_sums_to_total_supply,
    "minimum_liquidity_locked": inv_minimum_liquidity_locked,
    "quantities_within_ceiling": inv_quantities_within_ceiling,
}


def check_all(state: PoolState, config: PoolConfig) -> list[str]:
    """Return the names of all violated invariants."""
    return [name for name, fn in INVARIANTS.items() if not fn(state, config)]


def assert_invariants(state: PoolState, config: PoolConfig) -> None:
    """Raise StateInvariantError if any invariant is violated."""
    violations = check_all(state, config)
    if violations:
        raise StateInvariantError(violations)
