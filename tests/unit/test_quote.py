"""Tests for quoting helpers."""

import pytest

from pool_model import (
    InsufficientInputAmount,
    InsufficientLiquidity,
    InsufficientOutputAmount,
    InvariantViolation,
    PoolConfig,
)
from pool_model.quote import get_amount_in, get_amount_out, quote


class TestGetAmountOut:
    def test_reference_value(self):
        """100 in against (1000, 1000) at 0.3% buys 90."""
        assert get_amount_out(100, 1000, 1000) == 90

    def test_quoted_output_admitted_by_swap(self, balanced_pool):
        amount_out = get_amount_out(100, 1000, 1000)
        balanced_pool.swap(0, amount_out, 100, 0)
        assert balanced_pool.get_reserves() == (1100, 910)

    def test_one_more_than_quoted_rejected(self, balanced_pool):
        amount_out = get_amount_out(100, 1000, 1000)
        with pytest.raises(InvariantViolation):
            balanced_pool.swap(0, amount_out + 1, 100, 0)

    def test_zero_fee(self):
        config = PoolConfig(fee_numerator=0)
        assert get_amount_out(100, 1000, 1000, config) == 90

    def test_zero_input_raises(self):
        with pytest.raises(InsufficientInputAmount):
            get_amount_out(0, 1000, 1000)

    def test_empty_reserves_raise(self):
        with pytest.raises(InsufficientLiquidity):
            get_amount_out(100, 0, 1000)


class TestGetAmountIn:
    def test_reference_value(self):
        assert get_amount_in(90, 1000, 1000) == 100
        assert get_amount_in(100, 1000, 1000) == 112

    def test_quoted_input_sufficient(self, balanced_pool):
        amount_in = get_amount_in(100, 1000, 1000)
        balanced_pool.swap(100, 0, 0, amount_in)
        assert balanced_pool.get_reserves() == (900, 1112)

    def test_draining_output_raises(self):
        with pytest.raises(InsufficientLiquidity):
            get_amount_in(1000, 1000, 1000)

    def test_zero_output_raises(self):
        with pytest.raises(InsufficientOutputAmount):
            get_amount_in(0, 1000, 1000)


class TestQuote:
    def test_proportional(self):
        assert quote(100, 1000, 2000) == 200

    def test_rounds_down(self):
        assert quote(1, 3, 2) == 0

    def test_quoted_deposit_mints_evenly(self, seeded):
        amount1 = quote(500, *seeded.get_reserves())
        result = seeded.mint("0x" + "33" * 20, 500, amount1)
        assert result.liquidity == 500

    def test_empty_reserves_raise(self):
        with pytest.raises(InsufficientLiquidity):
            quote(100, 0, 0)
