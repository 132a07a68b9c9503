"""Results returned by pool transitions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MintResult:
    """Shares credited for a deposit."""

    liquidity: int
    amount0: int
    amount1: int


@dataclass(frozen=True)
class BurnResult:
    """Assets released for burned shares."""

    liquidity: int
    amount0: int
    amount1: int


@dataclass(frozen=True)
class SwapResult:
    """Amounts that moved through the pool in a swap."""

    amount0_in: int
    amount1_in: int
    amount0_out: int
    amount1_out: int


@dataclass(frozen=True)
class FlashSession:
    """Open flash-swap session handed to the borrower by begin_flash_swap.

    The session_id must be presented to repay() and verify().
    """

    session_id: str
    amount0_out: int
    amount1_out: int


@dataclass(frozen=True)
class VerifyResult:
    """Outcome of a verified flash swap.

    amount0_in/amount1_in are the balance excess over the pre-session
    reserves that the constant product check was applied to.
    """

    session_id: str
    amount0_in: int
    amount1_in: int
    amount0_out: int
    amount1_out: int
