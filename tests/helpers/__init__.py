"""Test helpers module for shared test utilities.

- constants: Identities and fixed values
- factories: Pools in known states
"""

from tests.helpers.constants import ALICE, BOB, CAROL, FIXED_TIMESTAMP, TOKEN_A, TOKEN_B
from tests.helpers.factories import make_pool, pool_with_reserves, seeded_pool

__all__ = [
    # Constants
    "TOKEN_A",
    "TOKEN_B",
    "ALICE",
    "BOB",
    "CAROL",
    "FIXED_TIMESTAMP",
    # Factories
    "make_pool",
    "seeded_pool",
    "pool_with_reserves",
]
