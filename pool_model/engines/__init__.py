"""Pure transition engines.

Each engine takes the current PoolState and returns a new one (plus a
result). Engines raise a PoolError on any failed precondition and never
modify the state they were given.
"""

from pool_model.engines.burn import apply_burn
from pool_model.engines.flash import apply_begin, apply_repay, apply_verify
from pool_model.engines.mint import apply_mint
from pool_model.engines.swap import apply_swap

__all__ = [
    "apply_mint",
    "apply_burn",
    "apply_swap",
    "apply_begin",
    "apply_repay",
    "apply_verify",
]
