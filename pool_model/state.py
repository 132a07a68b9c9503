"""Pool state aggregate.

PoolState is immutable. Transitions build a new PoolState and the pool
swaps it in on commit; a failed transition never touches the old one.
The ledger inside a PoolState is never mutated after construction;
transitions work on ``ledger.copy()``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from pool_model.ledger import LiquidityLedger


@dataclass(frozen=True)
class PoolState:
    """The pool's persistent record.

    Attributes:
        reserve0, reserve1: Cached holdings used for pricing
        balance0, balance1: Actual holdings. Equal to the reserves whenever
            no flash-swap session is open.
        ledger: Liquidity share balances and locked minimum
        k_last: reserve0 * reserve1 as of the last completed transition
    """

    reserve0: int = 0
    reserve1: int = 0
    balance0: int = 0
    balance1: int = 0
    ledger: LiquidityLedger = field(default_factory=LiquidityLedger)
    k_last: int = 0

    @property
    def total_supply(self) -> int:
        return self.ledger.total_supply

    @property
    def reserve_product(self) -> int:
        return self.reserve0 * self.reserve1

    def settled(
        self,
        balance0: int,
        balance1: int,
        *,
        ledger: LiquidityLedger | None = None,
        record_k: bool = False,
    ) -> PoolState:
        """Return a state whose reserves and balances both equal the given balances.

        Args:
            balance0, balance1: New holdings
            ledger: Replacement ledger (default: keep the current one)
            record_k: If True, set k_last to the new reserve product
                (mint and burn do; swaps leave k_last alone)
        """
        return replace(
            self,
            reserve0=balance0,
            reserve1=balance1,
            balance0=balance0,
            balance1=balance1,
            ledger=self.ledger if ledger is None else ledger,
            k_last=balance0 * balance1 if record_k else self.k_last,
        )


def initial_state() -> PoolState:
    """Return the empty state every pool starts from."""
    return PoolState()
