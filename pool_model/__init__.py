"""Constant-product liquidity pool state machine."""

from pool_model.config import DEFAULT_POOL_CONFIG, PoolConfig
from pool_model.context import atomic
from pool_model.errors import (
    IdenticalTokens,
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientLiquidityBurned,
    InsufficientLiquidityMinted,
    InsufficientOutputAmount,
    InsufficientShares,
    InvalidAmount,
    InvalidPhase,
    InvalidSession,
    InvariantViolation,
    LockHeld,
    Overflow,
    PoolError,
    StateInvariantError,
)
from pool_model.lock import Phase
from pool_model.models import PoolSnapshot, ReserveSnapshot
from pool_model.pool import Checkpoint, Pool
from pool_model.results import BurnResult, FlashSession, MintResult, SwapResult, VerifyResult

__version__ = "0.1.0"
__all__ = [
    # Pool
    "Pool",
    "Checkpoint",
    "Phase",
    "atomic",
    # Config
    "PoolConfig",
    "DEFAULT_POOL_CONFIG",
    # Results and views
    "MintResult",
    "BurnResult",
    "SwapResult",
    "FlashSession",
    "VerifyResult",
    "PoolSnapshot",
    "ReserveSnapshot",
    # Errors
    "PoolError",
    "InsufficientOutputAmount",
    "InsufficientInputAmount",
    "InsufficientLiquidity",
    "InvariantViolation",
    "InsufficientLiquidityMinted",
    "InsufficientLiquidityBurned",
    "InsufficientShares",
    "Overflow",
    "InvalidAmount",
    "IdenticalTokens",
    "LockHeld",
    "InvalidPhase",
    "InvalidSession",
    "StateInvariantError",
    "__version__",
]
