"""Constant-product pool: the state store and its reentrancy lock.

Pool owns the single PoolState aggregate and the lock. Every mutating
call follows the same sequence:

1. try_enter: reject immediately if the lock is not in an allowed phase
2. run the engine on the current state (pure; raises on failure)
3. check invariants on the candidate state when returning to idle
4. commit: replace state and lock phase together

Nothing is committed until step 4, so a failed call leaves the pool
exactly as it was.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import Protocol, TypeVar

import structlog

from pool_model.config import DEFAULT_POOL_CONFIG, PoolConfig
from pool_model.context import atomic
from pool_model.engines import (
    apply_begin,
    apply_burn,
    apply_mint,
    apply_repay,
    apply_swap,
    apply_verify,
)
from pool_model.errors import IdenticalTokens, LockHeld, PoolError, StateInvariantError
from pool_model.invariants import check_all
from pool_model.lock import (
    CALLBACK_ONLY,
    IDLE_ONLY,
    VERIFICATION_ONLY,
    LockState,
    Phase,
    ReentrancyLock,
    new_session_id,
)
from pool_model.models.snapshot import PoolSnapshot, ReserveSnapshot
from pool_model.models.types import normalize_identity
from pool_model.results import BurnResult, FlashSession, MintResult, SwapResult, VerifyResult
from pool_model.state import PoolState, initial_state

logger = structlog.get_logger()

T = TypeVar("T")

ReserveObserver = Callable[[ReserveSnapshot], None]


class FlashSwapCallee(Protocol):
    """Borrower invoked between begin and verify.

    Must call ``pool.repay(session.session_id, ...)`` with enough to pass
    verification before returning.
    """

    def __call__(
        self, pool: Pool, session: FlashSession, amount0_out: int, amount1_out: int
    ) -> None: ...


@dataclass(frozen=True)
class Checkpoint:
    """Captured state, lock and open session, for execution-context rollback."""

    state: PoolState
    lock: LockState
    session: FlashSession | None = None


class Pool:
    """A single constant-product liquidity pool.

    Args:
        token0: Identity of the first asset
        token1: Identity of the second asset
        config: Pool parameters (default: DEFAULT_POOL_CONFIG)
        clock: Returns the current timestamp in seconds for reserve
            snapshots (default: int(time.time()))

    Tokens are sorted so that token0 < token1 regardless of argument order.
    """

    def __init__(
        self,
        token0: str,
        token1: str,
        config: PoolConfig = DEFAULT_POOL_CONFIG,
        clock: Callable[[], int] | None = None,
    ) -> None:
        token_a = normalize_identity(token0)
        token_b = normalize_identity(token1)
        if token_a == token_b:
            raise IdenticalTokens(f"Pool tokens must differ: {token_a}")
        self.token0, self.token1 = sorted((token_a, token_b))
        self.config = config
        self._clock = clock or (lambda: int(time.time()))
        self._state = initial_state()
        self._lock = ReentrancyLock()
        self._observers: list[ReserveObserver] = []
        # Outputs of the open flash-swap session, reported by verify()
        self._session: FlashSession | None = None

    # --- Read access ---

    @property
    def state(self) -> PoolState:
        """Current committed state (immutable)."""
        return self._state

    @property
    def phase(self) -> Phase:
        return self._lock.phase

    @property
    def locked(self) -> bool:
        return self._lock.held

    @property
    def session_id(self) -> str | None:
        return self._lock.session_id

    @property
    def total_supply(self) -> int:
        return self._state.total_supply

    @property
    def k_last(self) -> int:
        return self._state.k_last

    def get_reserves(self) -> tuple[int, int]:
        """Get (reserve0, reserve1)."""
        return self._state.reserve0, self._state.reserve1

    def get_balances(self) -> tuple[int, int]:
        """Get (balance0, balance1)."""
        return self._state.balance0, self._state.balance1

    def balance_of(self, holder: str) -> int:
        """Share balance of a liquidity provider."""
        return self._state.ledger.balance_of(normalize_identity(holder))

    def snapshot(self) -> PoolSnapshot:
        """Full read-only view of the store."""
        s = self._state
        return PoolSnapshot(
            token0=self.token0,
            token1=self.token1,
            reserve0=s.reserve0,
            reserve1=s.reserve1,
            balance0=s.balance0,
            balance1=s.balance1,
            total_supply=s.total_supply,
            k_last=s.k_last,
            phase=self._lock.phase,
            session_id=self._lock.session_id,
            shares=s.ledger.as_dict(),
        )

    # --- Observers ---

    def subscribe(self, observer: ReserveObserver) -> None:
        """Register a callable notified with a ReserveSnapshot after each
        completed mint, burn, swap and flash-swap verification.

        An observer that raises is logged and skipped; the transition it
        was notified about stays committed.
        """
        self._observers.append(observer)

    def unsubscribe(self, observer: ReserveObserver) -> None:
        self._observers.remove(observer)

    # --- Transitions ---

    def mint(self, to: str, amount0: int, amount1: int) -> MintResult:
        """Credit shares for a deposit already transferred to the pool."""
        holder = normalize_identity(to)
        return self._transition(
            "mint",
            IDLE_ONLY,
            None,
            lambda s: apply_mint(s, self.config, holder, amount0, amount1),
            Phase.IDLE,
        )

    def burn(self, owner: str, liquidity: int) -> BurnResult:
        """Redeem `liquidity` of owner's shares for a pro-rata withdrawal."""
        holder = normalize_identity(owner)
        return self._transition(
            "burn",
            IDLE_ONLY,
            None,
            lambda s: apply_burn(s, self.config, holder, liquidity),
            Phase.IDLE,
        )

    def swap(
        self,
        amount0_out: int,
        amount1_out: int,
        amount0_in: int,
        amount1_in: int,
    ) -> SwapResult:
        """Exchange input already transferred to the pool for the requested output."""
        return self._transition(
            "swap",
            IDLE_ONLY,
            None,
            lambda s: apply_swap(
                s, self.config, amount0_out, amount1_out, amount0_in, amount1_in
            ),
            Phase.IDLE,
        )

    def begin_flash_swap(self, amount0_out: int, amount1_out: int) -> FlashSession:
        """Start a flash swap: send outputs now, take the lock until verify().

        Returns:
            FlashSession whose session_id must be passed to repay() and verify()
        """
        session = FlashSession(
            session_id=new_session_id(),
            amount0_out=amount0_out,
            amount1_out=amount1_out,
        )

        def _begin(s: PoolState) -> tuple[PoolState, FlashSession]:
            return apply_begin(s, self.config, amount0_out, amount1_out), session

        result = self._transition(
            "flash_swap_begin",
            IDLE_ONLY,
            None,
            _begin,
            Phase.AWAITING_CALLBACK,
            session.session_id,
        )
        self._session = session
        return result

    def repay(self, session_id: str, amount0: int, amount1: int) -> None:
        """Record the borrower's repayment for the open session."""

        def _repay(s: PoolState) -> tuple[PoolState, None]:
            return apply_repay(s, self.config, amount0, amount1), None

        self._transition(
            "flash_swap_repay",
            CALLBACK_ONLY,
            session_id,
            _repay,
            Phase.AWAITING_VERIFICATION,
            session_id,
        )

    def verify(self, session_id: str) -> VerifyResult:
        """Check the session's repayment, settle reserves and release the lock."""
        session = self._session

        def _verify(s: PoolState) -> tuple[PoolState, VerifyResult]:
            new_state, amount0_in, amount1_in = apply_verify(s, self.config)
            return new_state, VerifyResult(
                session_id=session_id,
                amount0_in=amount0_in,
                amount1_in=amount1_in,
                amount0_out=session.amount0_out if session else 0,
                amount1_out=session.amount1_out if session else 0,
            )

        result = self._transition(
            "flash_swap_verify",
            VERIFICATION_ONLY,
            session_id,
            _verify,
            Phase.IDLE,
        )
        self._session = None
        return result

    def flash_swap(
        self,
        amount0_out: int,
        amount1_out: int,
        callee: FlashSwapCallee,
    ) -> VerifyResult:
        """Run a full flash swap inside an all-or-nothing context.

        Begins the session, hands the outputs to `callee`, then verifies.
        If anything raises, or the callee never repays, the pool is rolled
        back to its state before the call.
        """
        with atomic(self):
            session = self.begin_flash_swap(amount0_out, amount1_out)
            callee(self, session, amount0_out, amount1_out)
            return self.verify(session.session_id)

    # --- Execution context support ---

    def checkpoint(self) -> Checkpoint:
        """Capture state, lock and open session for a later rollback()."""
        return Checkpoint(state=self._state, lock=self._lock.state, session=self._session)

    def rollback(self, checkpoint: Checkpoint) -> None:
        """Discard every effect since `checkpoint` was taken.

        Observers already notified are not rewound.
        """
        self._state = checkpoint.state
        self._lock.restore(checkpoint.lock)
        self._session = checkpoint.session
        logger.debug(
            "pool_rolled_back",
            reserve0=self._state.reserve0,
            reserve1=self._state.reserve1,
            phase=self._lock.phase.value,
        )

    # --- Internals ---

    def _transition(
        self,
        name: str,
        allowed_phases: Collection[Phase],
        session_id: str | None,
        apply: Callable[[PoolState], tuple[PoolState, T]],
        next_phase: Phase,
        next_session_id: str | None = None,
    ) -> T:
        try:
            self._lock.try_enter(allowed_phases, session_id)
        except LockHeld:
            logger.info("pool_locked", transition=name, session_id=self._lock.session_id)
            raise

        try:
            new_state, result = apply(self._state)
        except PoolError as err:
            logger.debug("transition_rejected", transition=name, error=err.code, detail=str(err))
            raise

        if next_phase == Phase.IDLE and self.config.check_invariants:
            violations = check_all(new_state, self.config)
            if violations:
                logger.error("invariant_violated", transition=name, violations=violations)
                raise StateInvariantError(violations)

        self._state = new_state
        self._lock.commit(next_phase, next_session_id)
        logger.debug(
            "transition_committed",
            transition=name,
            reserve0=new_state.reserve0,
            reserve1=new_state.reserve1,
            balance0=new_state.balance0,
            balance1=new_state.balance1,
            total_supply=new_state.total_supply,
            phase=next_phase.value,
        )

        if next_phase == Phase.IDLE:
            self._notify()
        return result

    def _notify(self) -> None:
        if not self._observers:
            return
        snapshot = ReserveSnapshot(
            reserve0=self._state.reserve0,
            reserve1=self._state.reserve1,
            timestamp=self._clock(),
        )
        for observer in list(self._observers):
            try:
                observer(snapshot)
            except Exception:
                logger.exception("observer_failed", observer=repr(observer))

    def __repr__(self) -> str:
        s = self._state
        return (
            f"Pool({self.token0}/{self.token1}, reserves=({s.reserve0}, {s.reserve1}), "
            f"total_supply={s.total_supply}, phase={self._lock.phase.value})"
        )
