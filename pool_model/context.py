"""All-or-nothing execution context around pool calls.

The pool itself never undoes a committed transition. Callers that need a
multi-call sequence to apply entirely or not at all (a flash swap is the
main case) wrap it in ``atomic(pool)``:

    with atomic(pool):
        session = pool.begin_flash_swap(0, 100)
        ...  # use the borrowed amount
        pool.repay(session.session_id, 0, 101)
        pool.verify(session.session_id)

If the block raises, or leaves a flash-swap session open that was not open
on entry, every effect since entry is discarded.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import structlog

from pool_model.errors import InvalidPhase

if TYPE_CHECKING:
    from pool_model.pool import Pool

logger = structlog.get_logger()


@contextmanager
def atomic(pool: Pool) -> Iterator[Pool]:
    """Run a block against `pool`, rolling back on failure or abandonment.

    Raises:
        InvalidPhase: If the block exits normally with a session still open
            (the pool is rolled back first)
    """
    checkpoint = pool.checkpoint()
    try:
        yield pool
    except BaseException as err:
        pool.rollback(checkpoint)
        logger.debug("atomic_block_rolled_back", error=type(err).__name__)
        raise

    if pool.locked and pool.session_id != checkpoint.lock.session_id:
        abandoned = pool.session_id
        pool.rollback(checkpoint)
        logger.info("flash_swap_abandoned", session_id=abandoned)
        raise InvalidPhase(f"Flash-swap session {abandoned} was never verified")
