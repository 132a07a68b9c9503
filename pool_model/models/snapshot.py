"""Pydantic models for read-only pool views.

ReserveSnapshot is what price-accumulator (oracle) consumers receive at
each completed transition. PoolSnapshot is the full store view used for
inspection and serialization.
"""

from pydantic import BaseModel, ConfigDict, Field

from pool_model.lock import Phase
from pool_model.models.types import Quantity


class ReserveSnapshot(BaseModel):
    """Reserves at an Idle-to-Idle boundary."""

    model_config = ConfigDict(frozen=True)

    reserve0: Quantity
    reserve1: Quantity
    timestamp: int = Field(ge=0, description="Seconds since epoch from the pool clock")


class PoolSnapshot(BaseModel):
    """Complete view of the pool's state store."""

    model_config = ConfigDict(frozen=True)

    token0: str
    token1: str
    reserve0: Quantity
    reserve1: Quantity
    balance0: Quantity
    balance1: Quantity
    total_supply: Quantity
    k_last: Quantity
    phase: Phase
    session_id: str | None = None
    shares: dict[str, Quantity] = Field(default_factory=dict)

    @property
    def is_idle(self) -> bool:
        """True if no flash-swap session is open."""
        return self.phase == Phase.IDLE
