"""Tests for PoolConfig."""

import pytest

from pool_model.config import DEFAULT_POOL_CONFIG, PoolConfig
from pool_model.constants import FEE_DENOMINATOR, FEE_NUMERATOR, MINIMUM_LIQUIDITY, UINT112_MAX


class TestPoolConfigDefaults:
    """Default values match the reference parameters."""

    def test_defaults(self):
        config = PoolConfig()
        assert config.minimum_liquidity == MINIMUM_LIQUIDITY == 1000
        assert config.fee_numerator == FEE_NUMERATOR == 3
        assert config.fee_denominator == FEE_DENOMINATOR == 1000
        assert config.balance_ceiling == UINT112_MAX == 2**112 - 1
        assert config.check_invariants is True

    def test_fee_multiplier(self):
        """0.3% fee leaves 997 of every 1000 units of input."""
        assert DEFAULT_POOL_CONFIG.fee_multiplier == 997

    def test_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_POOL_CONFIG.fee_numerator = 5  # type: ignore[misc]


class TestPoolConfigValidation:
    """Invalid parameters are rejected at construction."""

    def test_negative_minimum_liquidity(self):
        with pytest.raises(ValueError, match="minimum_liquidity"):
            PoolConfig(minimum_liquidity=-1)

    def test_fee_numerator_not_below_denominator(self):
        with pytest.raises(ValueError, match="fee_numerator"):
            PoolConfig(fee_numerator=1000, fee_denominator=1000)

    def test_zero_fee_denominator(self):
        with pytest.raises(ValueError, match="fee_denominator"):
            PoolConfig(fee_numerator=0, fee_denominator=0)

    def test_non_positive_ceiling(self):
        with pytest.raises(ValueError, match="balance_ceiling"):
            PoolConfig(balance_ceiling=0)

    def test_zero_fee_allowed(self):
        assert PoolConfig(fee_numerator=0).fee_multiplier == 1000


class TestPoolConfigFromEnv:
    """Configuration from environment variables."""

    def test_unset_uses_defaults(self, monkeypatch):
        for name in (
            "MINIMUM_LIQUIDITY",
            "FEE_NUMERATOR",
            "FEE_DENOMINATOR",
            "BALANCE_CEILING",
            "CHECK_INVARIANTS",
        ):
            monkeypatch.delenv(f"POOL_{name}", raising=False)
        assert PoolConfig.from_env() == PoolConfig()

    def test_reads_values(self, monkeypatch):
        monkeypatch.setenv("POOL_MINIMUM_LIQUIDITY", "10")
        monkeypatch.setenv("POOL_FEE_NUMERATOR", "25")
        monkeypatch.setenv("POOL_FEE_DENOMINATOR", "10000")
        monkeypatch.setenv("POOL_BALANCE_CEILING", "1000000")
        monkeypatch.setenv("POOL_CHECK_INVARIANTS", "no")

        config = PoolConfig.from_env()

        assert config.minimum_liquidity == 10
        assert config.fee_numerator == 25
        assert config.fee_denominator == 10000
        assert config.balance_ceiling == 1_000_000
        assert config.check_invariants is False

    @pytest.mark.parametrize("raw", ["true", "1", "YES"])
    def test_truthy_check_invariants(self, monkeypatch, raw):
        monkeypatch.setenv("POOL_CHECK_INVARIANTS", raw)
        assert PoolConfig.from_env().check_invariants is True

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("TEST_FEE_NUMERATOR", "5")
        assert PoolConfig.from_env(prefix="TEST_").fee_numerator == 5

    def test_non_integer_raises(self, monkeypatch):
        monkeypatch.setenv("POOL_FEE_NUMERATOR", "0.3%")
        with pytest.raises(ValueError, match="POOL_FEE_NUMERATOR"):
            PoolConfig.from_env()

    def test_invalid_combination_raises(self, monkeypatch):
        monkeypatch.setenv("POOL_FEE_NUMERATOR", "2000")
        with pytest.raises(ValueError, match="fee_numerator"):
            PoolConfig.from_env()
