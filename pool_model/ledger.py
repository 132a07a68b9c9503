"""Liquidity share ledger.

Shares are tracked per holder identity in a sparse mapping (zero balances
are omitted). The sum over holders is maintained as a running total so
total supply never requires enumerating the mapping.

The locked minimum liquidity is held separately: it belongs to no holder
and can only ever be set once, on the first deposit.
"""

from __future__ import annotations

from collections.abc import Iterator


class LiquidityLedger:
    """Share balances for one pool.

    Invariant: ``holder_total == sum(balances)`` and
    ``total_supply == holder_total + locked``.
    """

    __slots__ = ("_balances", "_holder_total", "_locked")

    def __init__(self) -> None:
        self._balances: dict[str, int] = {}
        self._holder_total = 0
        self._locked = 0

    def copy(self) -> LiquidityLedger:
        """Return an independent copy for building a new state."""
        clone = LiquidityLedger()
        clone._balances = dict(self._balances)
        clone._holder_total = self._holder_total
        clone._locked = self._locked
        return clone

    @property
    def locked(self) -> int:
        """Permanently locked shares."""
        return self._locked

    @property
    def holder_total(self) -> int:
        """Sum of all holder balances (excludes locked shares)."""
        return self._holder_total

    @property
    def total_supply(self) -> int:
        """All shares in existence, locked ones included."""
        return self._holder_total + self._locked

    def balance_of(self, holder: str) -> int:
        """Get share balance for holder. Returns 0 if not found."""
        return self._balances.get(holder, 0)

    def lock(self, amount: int) -> None:
        """Lock the minimum liquidity.

        Raises:
            ValueError: If shares are already locked or amount is negative
        """
        if amount < 0:
            raise ValueError(f"Locked amount cannot be negative: {amount}")
        if self._locked != 0:
            raise ValueError(f"Minimum liquidity already locked: {self._locked}")
        self._locked = amount

    def credit(self, holder: str, amount: int) -> None:
        """Add shares to a holder's balance."""
        if amount < 0:
            raise ValueError(f"Credit must be non-negative: {amount}")
        if amount == 0:
            return
        self._balances[holder] = self._balances.get(holder, 0) + amount
        self._holder_total += amount

    def debit(self, holder: str, amount: int) -> None:
        """Remove shares from a holder's balance.

        Raises:
            ValueError: If amount is negative or exceeds the balance
        """
        if amount < 0:
            raise ValueError(f"Debit must be non-negative: {amount}")
        current = self.balance_of(holder)
        if amount > current:
            raise ValueError(f"Insufficient shares: {current} < {amount}")
        remaining = current - amount
        if remaining == 0:
            self._balances.pop(holder, None)
        else:
            self._balances[holder] = remaining
        self._holder_total -= amount

    def holders(self) -> Iterator[tuple[str, int]]:
        """Iterate over (holder, balance) pairs in sorted holder order."""
        for holder in sorted(self._balances):
            yield holder, self._balances[holder]

    def as_dict(self) -> dict[str, int]:
        """Return all non-zero holder balances."""
        return dict(self._balances)

    def enumerated_total(self) -> int:
        """Sum holder balances by full enumeration (for invariant checks)."""
        return sum(self._balances.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiquidityLedger):
            return NotImplemented
        return self._balances == other._balances and self._locked == other._locked

    def __repr__(self) -> str:
        return (
            f"LiquidityLedger({len(self._balances)} holders, "
            f"total_supply={self.total_supply}, locked={self._locked})"
        )
