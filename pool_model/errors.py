"""Pool error classes.

Every error aborts the attempted transition with no effect on the pool.
Each class carries a stable ``code`` for callers that map errors to
their own reporting.
"""


class PoolError(Exception):
    """Base error for pool transitions."""

    code = "POOL_ERROR"


class InsufficientOutputAmount(PoolError):
    """Swap requested no output."""

    code = "INSUFFICIENT_OUTPUT_AMOUNT"


class InsufficientInputAmount(PoolError):
    """Swap or flash-swap verification found no input."""

    code = "INSUFFICIENT_INPUT_AMOUNT"


class InsufficientLiquidity(PoolError):
    """Requested output would drain a reserve."""

    code = "INSUFFICIENT_LIQUIDITY"


class InvariantViolation(PoolError):
    """Fee-adjusted constant product check failed."""

    code = "K"


class InsufficientLiquidityMinted(PoolError):
    """Deposit rounds to zero shares."""

    code = "INSUFFICIENT_LIQUIDITY_MINTED"


class InsufficientLiquidityBurned(PoolError):
    """Burn would return zero of either asset."""

    code = "INSUFFICIENT_LIQUIDITY_BURNED"


class InsufficientShares(PoolError):
    """Owner holds fewer shares than the burn requests."""

    code = "INSUFFICIENT_SHARES"


class Overflow(PoolError, OverflowError):
    """A reserve or balance would exceed the configured ceiling."""

    code = "OVERFLOW"


class InvalidAmount(PoolError, ValueError):
    """Quantity is negative or not an integer, or identity is empty."""

    code = "INVALID_AMOUNT"


class IdenticalTokens(PoolError, ValueError):
    """Pool created with the same asset on both sides."""

    code = "IDENTICAL_ADDRESSES"


class LockHeld(PoolError):
    """Mutating transition attempted while a flash-swap session is open.

    Recoverable: the caller may retry once the session has been verified.
    """

    code = "LOCKED"


class InvalidPhase(PoolError):
    """Callback or verify invoked out of sequence."""

    code = "INVALID_PHASE"


class InvalidSession(InvalidPhase):
    """Session identifier does not match the open flash-swap session."""

    code = "INVALID_SESSION"


class StateInvariantError(PoolError):
    """A committed Idle state violates one or more pool invariants."""

    code = "STATE_INVARIANT"

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")
