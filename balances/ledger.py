"""
ledger.py - Stateful Account Ledger

The Ledger class is the state manager for the balances package.
It is the only object that mutates state.

Key responsibilities:
    - Implements LedgerView protocol for safe read-only access by pure functions
    - Applies transfers atomically (both balances change or neither does)
    - Maintains the account -> balance mapping
    - Serializes all access behind a single lock so it can be shared across threads
"""

from __future__ import annotations
from typing import Set
import threading

from .core import (
    # Types
    Transfer, TransferPlan, TransferResult,
    AccountId, Balance, BalanceMap,
    # Constants
    MAX_BALANCE,
    # Validation
    validate_account, validate_amount,
    # Pure functions
    compute_transfer,
)


class Ledger:
    """
    In-memory ledger of account balances with checked transfers.

    Implements the LedgerView protocol, so the ledger itself can be handed to
    compute_transfer() and any other function that only reads.

    Design Principles:
        - Reads never mutate: get_balance() on an unknown account returns 0
          without creating an entry.
        - Plan, then apply: transfer() plans against the current state and
          writes only when every check has passed.

    Thread Safety:
        Every operation holds the ledger's lock, including the whole
        read-check-write sequence of transfer().

    Example:
        ledger = Ledger("main")
        ledger.set_balance("alice", 100)
        result = ledger.transfer("alice", "bob", 10)
        assert result is TransferResult.APPLIED
    """

    def __init__(
        self,
        name: str = "balances",
        max_balance: Balance = MAX_BALANCE,
        verbose: bool = False,
    ):
        """
        Create an empty ledger.

        Args:
            name: Ledger identifier
            max_balance: Largest balance any account may hold (default and upper limit: 2**128 - 1)
            verbose: Print one line per transfer outcome (default: False)
        """
        validate_amount(max_balance)
        self.name = name
        self.verbose = verbose
        self._max_balance = max_balance
        self._balances: BalanceMap = {}
        self._lock = threading.RLock()

    # ========================================================================
    # LedgerView PROTOCOL IMPLEMENTATION (read-only methods)
    # ========================================================================

    @property
    def max_balance(self) -> Balance:
        """Largest balance any account may hold."""
        return self._max_balance

    def get_balance(self, account: AccountId) -> Balance:
        """
        Get the balance of an account.

        Args:
            account: Account identifier

        Returns:
            Current balance (0 if the account has no entry)
        """
        validate_account(account)
        with self._lock:
            return self._balances.get(account, 0)

    def list_accounts(self) -> Set[AccountId]:
        """List every account that has an entry, including zero balances."""
        with self._lock:
            return set(self._balances)

    def has_account(self, account: AccountId) -> bool:
        """Check if an account has an entry."""
        validate_account(account)
        with self._lock:
            return account in self._balances

    def snapshot(self) -> BalanceMap:
        """Return an independent copy of all balances."""
        with self._lock:
            return dict(self._balances)

    def total_supply(self) -> Balance:
        """
        Sum of all balances.

        Transfers never change this value; only set_balance() does.
        """
        with self._lock:
            return sum(self._balances.values())

    # ========================================================================
    # MUTATION
    # ========================================================================

    def set_balance(self, account: AccountId, amount: Balance) -> None:
        """
        Set an account's balance, creating the entry if needed.

        Args:
            account: Account identifier
            amount: New balance (overwrites existing)

        Raises:
            ValueError: If amount is negative or above max_balance
            TypeError: If account is not a str, or amount is not an int
        """
        validate_account(account)
        validate_amount(amount, self._max_balance)
        with self._lock:
            self._balances[account] = amount

    def transfer(self, caller: AccountId, to: AccountId, amount: Balance) -> TransferResult:
        """
        Move amount from caller to to.

        The caller must hold at least amount, and the recipient's new balance
        must not exceed max_balance. Both conditions are checked before either
        balance is written; a rejected transfer changes nothing.

        Args:
            caller: Account debited
            to: Account credited (may equal caller, which leaves the balance unchanged)
            amount: Units to move (zero is allowed)

        Returns:
            TransferResult.APPLIED if both balances were written
            TransferResult.INSUFFICIENT_FUNDS if caller's balance < amount
            TransferResult.OVERFLOW if to's balance + amount > max_balance

        Raises:
            ValueError, TypeError: If an argument is malformed
        """
        transfer = Transfer(caller, to, amount)
        with self._lock:
            plan = compute_transfer(self, transfer)
            if plan.ok:
                self._apply(plan)
        if self.verbose:
            self._print_result(plan)
        return plan.result

    def transfer_or_raise(self, caller: AccountId, to: AccountId, amount: Balance) -> None:
        """
        Same as transfer(), but a rejection raises instead of returning.

        Raises:
            InsufficientFunds: If caller's balance < amount
            BalanceOverflow: If to's balance + amount > max_balance
        """
        self.transfer(caller, to, amount).raise_for_result()

    def _apply(self, plan: TransferPlan) -> None:
        """Write a plan's balances. Caller must hold the lock."""
        for account, balance in plan.writes:
            self._balances[account] = balance

    def _print_result(self, plan: TransferPlan) -> None:
        t = plan.transfer
        if plan.ok:
            print(f"✓ APPLIED: {t.amount} {t.caller} → {t.to}")
        else:
            print(f"✗ REJECTED: {t.amount} {t.caller} → {t.to}: {plan.result.message}")

    # ========================================================================
    # LEDGER OPERATIONS
    # ========================================================================

    def clone(self) -> Ledger:
        """
        Create an independent copy of this ledger.

        The clone has the same name, max_balance, verbose setting and balances,
        and its own lock. Changes to either ledger do not affect the other.
        """
        cloned = Ledger(self.name, max_balance=self._max_balance, verbose=self.verbose)
        cloned._balances = self.snapshot()
        return cloned

    def __len__(self) -> int:
        with self._lock:
            return len(self._balances)

    def __repr__(self) -> str:
        return f"Ledger({self.name!r}, accounts={len(self)}, total_supply={self.total_supply()})"
