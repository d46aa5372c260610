"""
test_core_types.py - Unit tests for core data structures

Tests:
- Transfer: creation, validation, immutability
- TransferResult: ok, message, raise_for_result
- Exceptions: hierarchy and default messages
- checked_add / checked_sub
"""

import dataclasses

import pytest
from balances import (
    Transfer, TransferResult, TransferPlan,
    LedgerError, InsufficientFunds, BalanceOverflow,
    checked_add, checked_sub,
    MAX_BALANCE,
)


class TestTransferCreation:
    """Tests for Transfer creation and validation."""

    def test_create_valid_transfer(self):
        transfer = Transfer("alice", "bob", 100)
        assert transfer.caller == "alice"
        assert transfer.to == "bob"
        assert transfer.amount == 100
        assert not transfer.is_self_transfer

    def test_zero_amount_allowed(self):
        assert Transfer("alice", "bob", 0).amount == 0

    def test_same_caller_and_recipient_allowed(self):
        assert Transfer("alice", "alice", 5).is_self_transfer

    def test_max_amount_allowed(self):
        assert Transfer("alice", "bob", MAX_BALANCE).amount == MAX_BALANCE

    def test_repr(self):
        assert repr(Transfer("alice", "bob", 10)) == "Transfer(10: alice→bob)"

    def test_transfer_is_immutable(self):
        transfer = Transfer("alice", "bob", 10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            transfer.amount = 20


class TestTransferValidation:
    """Tests for Transfer input validation."""

    def test_empty_caller_allowed(self):
        assert Transfer("", "bob", 1).caller == ""

    def test_blank_recipient_allowed(self):
        assert Transfer("alice", "  ", 1).to == "  "

    def test_non_string_account_raises(self):
        with pytest.raises(TypeError, match="Account identifier"):
            Transfer(None, "bob", 1)

    def test_negative_amount_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            Transfer("alice", "bob", -1)

    def test_amount_above_u128_raises(self):
        with pytest.raises(ValueError, match="exceeds maximum"):
            Transfer("alice", "bob", MAX_BALANCE + 1)

    def test_float_amount_raises(self):
        with pytest.raises(TypeError, match="Amount must be int"):
            Transfer("alice", "bob", 1.0)

    def test_bool_amount_raises(self):
        with pytest.raises(TypeError):
            Transfer("alice", "bob", True)


class TestTransferResult:
    """Tests for the TransferResult enum."""

    def test_applied(self):
        assert TransferResult.APPLIED.ok
        assert TransferResult.APPLIED.message == ""
        assert TransferResult.APPLIED.raise_for_result() is None

    def test_insufficient_funds(self):
        result = TransferResult.INSUFFICIENT_FUNDS
        assert not result.ok
        assert result.message == "Not enough funds."
        with pytest.raises(InsufficientFunds):
            result.raise_for_result()

    def test_overflow(self):
        result = TransferResult.OVERFLOW
        assert not result.ok
        assert result.message == "Overflow error."
        with pytest.raises(BalanceOverflow):
            result.raise_for_result()

    def test_values(self):
        assert {r.value for r in TransferResult} == {"applied", "insufficient_funds", "overflow"}


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_hierarchy(self):
        assert issubclass(InsufficientFunds, LedgerError)
        assert issubclass(BalanceOverflow, LedgerError)
        assert not issubclass(InsufficientFunds, BalanceOverflow)

    def test_default_messages(self):
        assert str(InsufficientFunds()) == "Not enough funds."
        assert str(BalanceOverflow()) == "Overflow error."

    def test_custom_message(self):
        assert str(InsufficientFunds("alice is broke")) == "alice is broke"


class TestCheckedArithmetic:
    """Tests for checked_add and checked_sub."""

    def test_sub(self):
        assert checked_sub(10, 3) == 7

    def test_sub_to_zero(self):
        assert checked_sub(10, 10) == 0

    def test_sub_underflow(self):
        assert checked_sub(10, 11) is None

    def test_sub_from_zero(self):
        assert checked_sub(0, 1) is None
        assert checked_sub(0, 0) == 0

    def test_add(self):
        assert checked_add(10, 3) == 13

    def test_add_to_max(self):
        assert checked_add(MAX_BALANCE - 1, 1) == MAX_BALANCE

    def test_add_overflow(self):
        assert checked_add(MAX_BALANCE, 1) is None

    def test_add_custom_max(self):
        assert checked_add(90, 10, max_value=100) == 100
        assert checked_add(90, 11, max_value=100) is None


class TestTransferPlan:
    """Tests for TransferPlan."""

    def test_rejected_plan_has_no_writes(self):
        plan = TransferPlan(Transfer("alice", "bob", 1), TransferResult.OVERFLOW)
        assert not plan.ok
        assert plan.writes == ()
