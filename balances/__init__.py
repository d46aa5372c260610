"""
balances - In-Memory Account Ledger

A small ledger that tracks an unsigned integer balance per account and moves
value between accounts with insufficient-funds and overflow protection.

Usage:
    from balances import Ledger, TransferResult

    ledger = Ledger("main")
    ledger.set_balance("alice", 100)

    result = ledger.transfer("alice", "bob", 10)
    assert result is TransferResult.APPLIED
    assert ledger.get_balance("bob") == 10

    # Rejections are values, not exceptions
    result = ledger.transfer("carol", "bob", 1)
    print(result.message)  # "Not enough funds."
"""

# Core types
from .core import (
    LedgerView,
    Transfer,
    TransferPlan,
    TransferResult,
    LedgerError,
    InsufficientFunds,
    BalanceOverflow,
    AccountId,
    Balance,
    BalanceMap,
    checked_add,
    checked_sub,
    compute_transfer,
    MAX_BALANCE,
    INSUFFICIENT_FUNDS_MESSAGE,
    OVERFLOW_MESSAGE,
)

# Ledger
from .ledger import Ledger

__all__ = [
    # Core
    'LedgerView', 'Transfer', 'TransferPlan', 'TransferResult',
    'LedgerError', 'InsufficientFunds', 'BalanceOverflow',
    'AccountId', 'Balance', 'BalanceMap',
    'checked_add', 'checked_sub', 'compute_transfer',
    'MAX_BALANCE', 'INSUFFICIENT_FUNDS_MESSAGE', 'OVERFLOW_MESSAGE',
    # Ledger
    'Ledger',
]

__version__ = '1.0.0'
