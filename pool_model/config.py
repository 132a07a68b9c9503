"""Pool configuration."""

import os
from dataclasses import dataclass

from pool_model.constants import (
    FEE_DENOMINATOR,
    FEE_NUMERATOR,
    MINIMUM_LIQUIDITY,
    UINT112_MAX,
)

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class PoolConfig:
    """Parameters of a single pool.

    Attributes:
        minimum_liquidity: Shares permanently locked on the first deposit
            (default: 1000)
        fee_numerator: Swap fee numerator (default: 3)
        fee_denominator: Swap fee denominator (default: 1000, so 0.3%)
        balance_ceiling: Largest value a reserve or balance may hold
            (default: 2^112 - 1)
        check_invariants: If True, the pool re-checks every state invariant
            after each completed transition and raises StateInvariantError
            on a violation.
    """

    minimum_liquidity: int = MINIMUM_LIQUIDITY
    fee_numerator: int = FEE_NUMERATOR
    fee_denominator: int = FEE_DENOMINATOR
    balance_ceiling: int = UINT112_MAX
    check_invariants: bool = True

    def __post_init__(self) -> None:
        if self.minimum_liquidity < 0:
            raise ValueError(f"minimum_liquidity must be >= 0: {self.minimum_liquidity}")
        if self.fee_denominator <= 0:
            raise ValueError(f"fee_denominator must be positive: {self.fee_denominator}")
        if not (0 <= self.fee_numerator < self.fee_denominator):
            raise ValueError(
                f"fee_numerator must be in [0, {self.fee_denominator}): {self.fee_numerator}"
            )
        if self.balance_ceiling <= 0:
            raise ValueError(f"balance_ceiling must be positive: {self.balance_ceiling}")

    @property
    def fee_multiplier(self) -> int:
        """Input multiplier net of fee (fee_denominator - fee_numerator).

        For the default 0.3% fee this returns 997.
        """
        return self.fee_denominator - self.fee_numerator

    @classmethod
    def from_env(cls, prefix: str = "POOL_") -> "PoolConfig":
        """Build a config from environment variables.

        Reads {prefix}MINIMUM_LIQUIDITY, {prefix}FEE_NUMERATOR,
        {prefix}FEE_DENOMINATOR, {prefix}BALANCE_CEILING and
        {prefix}CHECK_INVARIANTS. Unset variables keep their defaults.

        Raises:
            ValueError: If a variable is not an integer or the resulting
                config is invalid
        """
        defaults = cls()

        def _int(name: str, default: int) -> int:
            raw = os.environ.get(prefix + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return int(raw)
            except ValueError as err:
                raise ValueError(f"{prefix}{name} must be an integer: '{raw}'") from err

        check_raw = os.environ.get(prefix + "CHECK_INVARIANTS")
        check_invariants = (
            defaults.check_invariants
            if check_raw is None
            else check_raw.strip().lower() in _TRUTHY
        )

        return cls(
            minimum_liquidity=_int("MINIMUM_LIQUIDITY", defaults.minimum_liquidity),
            fee_numerator=_int("FEE_NUMERATOR", defaults.fee_numerator),
            fee_denominator=_int("FEE_DENOMINATOR", defaults.fee_denominator),
            balance_ceiling=_int("BALANCE_CEILING", defaults.balance_ceiling),
            check_invariants=check_invariants,
        )


# Default configuration instance
DEFAULT_POOL_CONFIG = PoolConfig()
