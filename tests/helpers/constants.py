"""Common identities and amounts used across tests."""

# Asset identities (lowercase addresses; token0 sorts first)
TOKEN_A = "0x1111111111111111111111111111111111111111"
TOKEN_B = "0x2222222222222222222222222222222222222222"

# Liquidity providers and traders
ALICE = "alice"
BOB = "bob"
CAROL = "carol"

# Fixed clock value for reserve snapshots
FIXED_TIMESTAMP = 1_700_000_000
