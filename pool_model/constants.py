"""Fixed protocol parameters for the constant-product pool.

These are the reference values. A pool may override them through
PoolConfig (see pool_model.config), which takes its defaults from here.
"""

# Shares minted on the first deposit and credited to no account.
# They can never be burned, so total supply never returns to zero.
MINIMUM_LIQUIDITY = 1000

# Swap fee charged on input amounts: 3 / 1000 = 0.3%
FEE_NUMERATOR = 3
FEE_DENOMINATOR = 1000

# Reserves and balances are stored as uint112 in the reference pool
UINT112_MAX = 2**112 - 1
