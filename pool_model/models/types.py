"""Shared type definitions for pool models.

Asset and account identities are plain strings. Ethereum-style addresses
are normalized to lowercase so that the same account is never keyed twice
in the liquidity ledger.
"""

from typing import Annotated

from pydantic import Field

from pool_model.errors import InvalidAmount

# Non-negative integer quantity (reserves, balances, shares)
Quantity = Annotated[int, Field(ge=0, description="Non-negative integer quantity")]


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address.

    Args:
        address: String to validate

    Returns:
        True if valid Ethereum address format
    """
    if not isinstance(address, str):
        return False
    if not address.lower().startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def normalize_identity(identity: str) -> str:
    """Normalize an asset or account identity.

    Valid addresses are lowercased; any other non-empty string is returned
    unchanged, so tests and simulations can use names like "alice".

    Raises:
        InvalidAmount: If identity is not a non-empty string
    """
    if not isinstance(identity, str) or identity.strip() == "":
        raise InvalidAmount(f"Identity must be a non-empty string: {identity!r}")
    if is_valid_address(identity):
        return identity.lower()
    return identity
