"""
conftest.py - Shared pytest fixtures for balances tests

Provides common fixtures used across unit and conformance tests:
- Basic ledgers (empty, funded, small-capacity)
"""

import pytest

from balances import Ledger


# =============================================================================
# BASIC FIXTURES
# =============================================================================

@pytest.fixture
def empty_ledger():
    """Fresh ledger with no accounts."""
    return Ledger("test")


@pytest.fixture
def funded_ledger():
    """Ledger with alice=100, bob=50, charlie=0."""
    ledger = Ledger("test")
    ledger.set_balance("alice", 100)
    ledger.set_balance("bob", 50)
    ledger.set_balance("charlie", 0)
    return ledger


@pytest.fixture
def small_ledger():
    """Ledger capped at 1000 per account, for exercising overflow."""
    ledger = Ledger("small", max_balance=1000)
    ledger.set_balance("alice", 500)
    ledger.set_balance("whale", 995)
    return ledger
