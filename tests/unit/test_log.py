"""Tests for logging setup."""

import pytest

from pool_model import LockHeld
from pool_model.log import configure_logging
from tests.helpers import ALICE, seeded_pool


class TestConfigureLogging:
    def test_verbose_emits_transitions(self, capsys):
        configure_logging(verbose=True)
        seeded_pool()

        out = capsys.readouterr().out
        assert "transition_committed" in out
        assert "mint" in out

    def test_default_hides_debug_events(self, capsys, balanced_pool):
        configure_logging()
        capsys.readouterr()
        balanced_pool.swap(0, 90, 100, 0)

        assert "transition_committed" not in capsys.readouterr().out

    def test_default_reports_lock_contention(self, capsys, balanced_pool):
        configure_logging()
        capsys.readouterr()
        balanced_pool.begin_flash_swap(100, 0)

        with pytest.raises(LockHeld):
            balanced_pool.mint(ALICE, 10, 10)

        assert "pool_locked" in capsys.readouterr().out
