"""
Core types and pure functions for the balances ledger.

This module provides the foundational pieces the Ledger is built from:
1. Protocols: LedgerView for read-only ledger access
2. Immutable data structures: Transfer, TransferPlan
3. Outcomes and exceptions: TransferResult, LedgerError and its subclasses
4. Checked arithmetic: checked_add, checked_sub
5. Transfer planning: compute_transfer, a pure function over a LedgerView

Nothing in this module can mutate ledger state.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Protocol, Set, Tuple, runtime_checkable


# ============================================================================
# CONSTANTS
# ============================================================================

# Largest balance an account may hold: the range of an unsigned 128-bit integer.
MAX_BALANCE = 2 ** 128 - 1

INSUFFICIENT_FUNDS_MESSAGE = "Not enough funds."
OVERFLOW_MESSAGE = "Overflow error."


# ============================================================================
# TYPE ALIASES
# ============================================================================

AccountId = str

# Non-negative integer amount, never above the ledger's max_balance.
Balance = int

# Mapping from account ID to balance.
BalanceMap = Dict[AccountId, Balance]


# ============================================================================
# PROTOCOLS
# ============================================================================

@runtime_checkable
class LedgerView(Protocol):
    """
    Read-only interface to ledger state.

    Functions accepting a LedgerView declare that they only read. The Ledger
    class implements this protocol but also provides mutation methods; for
    testing, FakeView provides a plain-dict implementation.
    """

    @property
    def max_balance(self) -> Balance:
        """Return the largest balance any account may hold."""
        ...

    def get_balance(self, account: AccountId) -> Balance:
        """Return the balance of an account, 0 if it has no entry."""
        ...

    def list_accounts(self) -> Set[AccountId]:
        """Return the set of accounts that have an entry."""
        ...


# ============================================================================
# EXCEPTIONS
# ============================================================================

class LedgerError(Exception):
    """Base exception for all ledger-related errors."""
    pass


class InsufficientFunds(LedgerError):
    """Raised when the caller's balance is less than the transfer amount."""

    def __init__(self, message: str = INSUFFICIENT_FUNDS_MESSAGE):
        super().__init__(message)


class BalanceOverflow(LedgerError):
    """Raised when a credit would push a balance above the ledger's maximum."""

    def __init__(self, message: str = OVERFLOW_MESSAGE):
        super().__init__(message)


# ============================================================================
# ENUMS
# ============================================================================

class TransferResult(Enum):
    """
    Outcome of a transfer attempt.

    APPLIED: Both balances were written.
    INSUFFICIENT_FUNDS: The caller could not cover the amount; nothing changed.
    OVERFLOW: The recipient's balance would exceed the maximum; nothing changed.
    """
    APPLIED = "applied"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    OVERFLOW = "overflow"

    @property
    def ok(self) -> bool:
        return self is TransferResult.APPLIED

    @property
    def message(self) -> str:
        """Human-readable reason for a rejection ("" when applied)."""
        return _RESULT_MESSAGES[self]

    def raise_for_result(self) -> None:
        """Raise the LedgerError matching a rejected result; no-op when applied."""
        if self is TransferResult.INSUFFICIENT_FUNDS:
            raise InsufficientFunds()
        if self is TransferResult.OVERFLOW:
            raise BalanceOverflow()


_RESULT_MESSAGES = {
    TransferResult.APPLIED: "",
    TransferResult.INSUFFICIENT_FUNDS: INSUFFICIENT_FUNDS_MESSAGE,
    TransferResult.OVERFLOW: OVERFLOW_MESSAGE,
}


# ============================================================================
# VALIDATION
# ============================================================================

def validate_account(account: AccountId) -> None:
    """
    Raise TypeError unless account is a string.

    Identifiers are opaque: any string, including "" and whitespace, names an account.
    """
    if not isinstance(account, str):
        raise TypeError(f"Account identifier must be str, got {type(account).__name__}")


def validate_amount(amount: Balance, max_value: Balance = MAX_BALANCE) -> None:
    """
    Check that amount is an integer in [0, max_value].

    Raises:
        TypeError: If amount is not an int (bool is rejected too)
        ValueError: If amount is negative or above max_value
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"Amount must be int, got {type(amount).__name__}")
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}")
    if amount > max_value:
        raise ValueError(f"Amount {amount} exceeds maximum balance {max_value}")


# ============================================================================
# CHECKED ARITHMETIC
# ============================================================================

def checked_sub(balance: Balance, amount: Balance) -> Optional[Balance]:
    """Return balance - amount, or None if the result would be negative."""
    if amount > balance:
        return None
    return balance - amount


def checked_add(balance: Balance, amount: Balance, max_value: Balance = MAX_BALANCE) -> Optional[Balance]:
    """Return balance + amount, or None if the result would exceed max_value."""
    total = balance + amount
    if total > max_value:
        return None
    return total


# ============================================================================
# CORE DATA STRUCTURES
# ============================================================================

@dataclass(frozen=True, slots=True)
class Transfer:
    """
    A request to move value from one account to another.

    Attributes:
        caller: The account debited.
        to: The account credited. May equal caller.
        amount: Units to move. Zero is allowed.

    Fields are validated in __post_init__. The amount is only checked against
    MAX_BALANCE here; the ledger's own bound applies when the transfer is planned.
    """
    caller: AccountId
    to: AccountId
    amount: Balance

    def __post_init__(self):
        validate_account(self.caller)
        validate_account(self.to)
        validate_amount(self.amount)

    @property
    def is_self_transfer(self) -> bool:
        return self.caller == self.to

    def __repr__(self) -> str:
        return f"Transfer({self.amount}: {self.caller}→{self.to})"


@dataclass(frozen=True, slots=True)
class TransferPlan:
    """
    The outcome of planning a transfer against a view, before anything is written.

    Attributes:
        transfer: The transfer that was planned.
        result: APPLIED if the writes may be performed, otherwise the rejection.
        writes: (account, new_balance) pairs to apply, in order. Empty on rejection.
    """
    transfer: Transfer
    result: TransferResult
    writes: Tuple[Tuple[AccountId, Balance], ...] = ()

    @property
    def ok(self) -> bool:
        return self.result.ok


# ============================================================================
# TRANSFER PLANNING
# ============================================================================

def compute_transfer(view: LedgerView, transfer: Transfer) -> TransferPlan:
    """
    Plan a transfer against a read-only view of the ledger.

    Both balances are read before either check runs, so a self-transfer is
    checked exactly like a transfer between two accounts holding the same
    balance. The debit is checked first: an empty caller sending to a full
    recipient is reported as INSUFFICIENT_FUNDS, not OVERFLOW.

    Args:
        view: Read-only ledger access
        transfer: The transfer to plan

    Returns:
        A TransferPlan. On success its writes hold the new balances; a
        self-transfer writes the caller's unchanged balance once.

    Example:
        plan = compute_transfer(ledger, Transfer("alice", "bob", 10))
        if plan.ok:
            for account, balance in plan.writes:
                ...
    """
    caller_balance = view.get_balance(transfer.caller)
    to_balance = view.get_balance(transfer.to)

    new_caller_balance = checked_sub(caller_balance, transfer.amount)
    if new_caller_balance is None:
        return TransferPlan(transfer, TransferResult.INSUFFICIENT_FUNDS)

    new_to_balance = checked_add(to_balance, transfer.amount, view.max_balance)
    if new_to_balance is None:
        return TransferPlan(transfer, TransferResult.OVERFLOW)

    if transfer.is_self_transfer:
        return TransferPlan(transfer, TransferResult.APPLIED, ((transfer.caller, caller_balance),))

    return TransferPlan(
        transfer,
        TransferResult.APPLIED,
        ((transfer.caller, new_caller_balance), (transfer.to, new_to_balance)),
    )
