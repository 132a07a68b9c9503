"""Reentrancy lock with an explicit flash-swap phase.

The lock is a single mutex over the whole pool. Mint, burn, swap and the
start of a flash swap all require IDLE. A flash swap moves the lock
through AWAITING_CALLBACK and AWAITING_VERIFICATION and only verify
returns it to IDLE, so the lock spans the whole three-step session rather
than a single call.

Contention is never queued: a caller that finds the lock in the wrong
phase gets LockHeld or InvalidPhase immediately.
"""

from __future__ import annotations

import itertools
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from pool_model.errors import InvalidPhase, InvalidSession, LockHeld


class Phase(str, Enum):
    """Lock phase."""

    IDLE = "idle"
    AWAITING_CALLBACK = "awaiting_callback"
    AWAITING_VERIFICATION = "awaiting_verification"


# Phases from which each transition may run
IDLE_ONLY = frozenset({Phase.IDLE})
CALLBACK_ONLY = frozenset({Phase.AWAITING_CALLBACK})
VERIFICATION_ONLY = frozenset({Phase.AWAITING_VERIFICATION})

_session_counter = itertools.count(1)


def new_session_id() -> str:
    """Return a process-unique flash-swap session identifier."""
    return f"flash-{next(_session_counter)}"


@dataclass(frozen=True)
class LockState:
    """Phase plus the identifier of the open session (None when idle)."""

    phase: Phase = Phase.IDLE
    session_id: str | None = None

    @property
    def held(self) -> bool:
        return self.phase != Phase.IDLE


class ReentrancyLock:
    """Mutual-exclusion gate guarding every mutating pool transition."""

    def __init__(self) -> None:
        self._state = LockState()

    @property
    def state(self) -> LockState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def held(self) -> bool:
        return self._state.held

    @property
    def session_id(self) -> str | None:
        return self._state.session_id

    def try_enter(
        self,
        allowed_phases: Collection[Phase],
        session_id: str | None = None,
    ) -> LockState:
        """Check that the current phase admits a transition.

        Does not change the lock; the caller applies the transition and
        then calls commit().

        Args:
            allowed_phases: Phases from which the transition may run
            session_id: Session presented by callback/verify. Required
                whenever the lock is held and the phase is allowed.

        Returns:
            The lock state observed on entry

        Raises:
            LockHeld: Lock held and the transition needs IDLE
            InvalidPhase: Transition needs a session phase the lock is not in
            InvalidSession: Session identifier does not match the open session
        """
        current = self._state
        if current.phase not in allowed_phases:
            if current.held and Phase.IDLE in allowed_phases:
                raise LockHeld(
                    f"Pool locked by session {current.session_id} ({current.phase.value})"
                )
            expected = ", ".join(sorted(p.value for p in allowed_phases))
            raise InvalidPhase(f"Expected phase {expected}, pool is {current.phase.value}")
        if current.held and session_id != current.session_id:
            raise InvalidSession(
                f"Session {session_id!r} does not match open session {current.session_id!r}"
            )
        return current

    def commit(self, phase: Phase, session_id: str | None = None) -> None:
        """Move the lock to its post-transition phase."""
        if phase == Phase.IDLE:
            session_id = None
        elif session_id is None:
            raise ValueError(f"Phase {phase.value} requires a session id")
        self._state = LockState(phase=phase, session_id=session_id)

    def restore(self, state: LockState) -> None:
        """Reinstate a previously captured lock state (execution-context rollback)."""
        self._state = state

    def __repr__(self) -> str:
        return f"ReentrancyLock(phase={self._state.phase.value}, session={self._state.session_id})"
