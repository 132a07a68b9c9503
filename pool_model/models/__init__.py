"""Pool data models."""

from pool_model.models.snapshot import PoolSnapshot, ReserveSnapshot
from pool_model.models.types import (
    Quantity,
    is_valid_address,
    normalize_identity,
)

__all__ = [
    "Quantity",
    "is_valid_address",
    "normalize_identity",
    "PoolSnapshot",
    "ReserveSnapshot",
]
