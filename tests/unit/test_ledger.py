"""Tests for LiquidityLedger."""

import pytest

from pool_model.ledger import LiquidityLedger


class TestLiquidityLedger:
    """Share balances, running total and locked floor."""

    def test_empty(self):
        ledger = LiquidityLedger()
        assert ledger.total_supply == 0
        assert ledger.balance_of("alice") == 0
        assert ledger.as_dict() == {}

    def test_credit_and_running_total(self):
        ledger = LiquidityLedger()
        ledger.credit("alice", 100)
        ledger.credit("bob", 50)
        ledger.credit("alice", 25)
        assert ledger.balance_of("alice") == 125
        assert ledger.holder_total == 175
        assert ledger.enumerated_total() == 175

    def test_total_supply_includes_locked(self):
        ledger = LiquidityLedger()
        ledger.lock(1000)
        ledger.credit("alice", 1000)
        assert ledger.total_supply == 2000
        assert ledger.holder_total == 1000
        assert ledger.locked == 1000

    def test_lock_only_once(self):
        ledger = LiquidityLedger()
        ledger.lock(1000)
        with pytest.raises(ValueError, match="already locked"):
            ledger.lock(1000)

    def test_debit_to_zero_removes_holder(self):
        """Zero balances are omitted to keep the table sparse."""
        ledger = LiquidityLedger()
        ledger.credit("alice", 100)
        ledger.debit("alice", 100)
        assert ledger.as_dict() == {}
        assert ledger.holder_total == 0

    def test_debit_more_than_balance_raises(self):
        ledger = LiquidityLedger()
        ledger.credit("alice", 10)
        with pytest.raises(ValueError, match="Insufficient shares"):
            ledger.debit("alice", 11)
        assert ledger.balance_of("alice") == 10

    def test_negative_amounts_raise(self):
        ledger = LiquidityLedger()
        with pytest.raises(ValueError):
            ledger.credit("alice", -1)
        with pytest.raises(ValueError):
            ledger.debit("alice", -1)

    def test_copy_is_independent(self):
        ledger = LiquidityLedger()
        ledger.credit("alice", 10)
        clone = ledger.copy()
        clone.credit("alice", 5)
        clone.credit("bob", 1)
        assert ledger.balance_of("alice") == 10
        assert ledger.holder_total == 10
        assert clone.holder_total == 16

    def test_holders_sorted(self):
        ledger = LiquidityLedger()
        ledger.credit("carol", 3)
        ledger.credit("alice", 1)
        ledger.credit("bob", 2)
        assert list(ledger.holders()) == [("alice", 1), ("bob", 2), ("carol", 3)]

    def test_equality(self):
        a, b = LiquidityLedger(), LiquidityLedger()
        a.credit("alice", 1)
        b.credit("alice", 1)
        assert a == b
        b.lock(5)
        assert a != b
