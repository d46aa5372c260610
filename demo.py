#!/usr/bin/env python3
"""
demo.py - Interactive Tutorial: Learn the Balances Ledger Step by Step

Each step builds on the previous one. Press Enter to advance.

WHAT YOU'LL LEARN:
  1-3: Foundation - The empty ledger, reads, setting a balance
  4-6: Transfers  - Rejections, a successful transfer, overflow
  7-8: Edge cases - Self-transfer, conservation

Run:
    python demo.py           # Interactive mode (press Enter for each step)
    python demo.py --quick   # Run all steps without pausing
"""

from dataclasses import dataclass
import sys

from balances import Ledger, TransferResult, InsufficientFunds


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class DemoConfig:
    """Configuration for the tutorial. Modify these to experiment."""
    alice_initial: int = 100
    transfer_amount: int = 10
    # Small cap so step 6 can show an overflow without 39-digit numbers
    capped_max_balance: int = 1_000


CONFIG = DemoConfig()

QUICK_MODE = "--quick" in sys.argv


def wait_for_enter():
    """Pause for user input unless in quick mode."""
    if not QUICK_MODE:
        input("\n[Press Enter to continue...]")


def step_header(number: int, title: str, objective: str):
    """Print a step header with learning objective."""
    print(f"\n{'='*70}")
    print(f"STEP {number}: {title}")
    print(f"{'='*70}")
    print(f"\nObjective: {objective}\n")


def section_header(text: str):
    """Print a section header within a step."""
    print(f"\n--- {text} ---\n")


# ============================================================================
# PHASE 1: FOUNDATION (Steps 1-3)
# ============================================================================

def step_01_empty_ledger():
    step_header(1, "The Empty Ledger",
        "A ledger starts with no accounts at all.")

    print(">>> ledger = Ledger('tutorial', verbose=True)")
    ledger = Ledger("tutorial", verbose=True)

    section_header("Initial State")
    print(f"Ledger name:  {ledger.name}")
    print(f"Accounts:     {sorted(ledger.list_accounts())}")
    print(f"Max balance:  {ledger.max_balance}")
    return ledger


def step_02_reads(ledger: Ledger):
    step_header(2, "Reading Balances",
        "An unknown account has a balance of 0, and reading it creates nothing.")

    print(f">>> ledger.get_balance('alice')  ->  {ledger.get_balance('alice')}")
    print(f">>> ledger.has_account('alice')  ->  {ledger.has_account('alice')}")
    return ledger


def step_03_set_balance(ledger: Ledger):
    step_header(3, "Setting a Balance",
        "set_balance() creates or overwrites an entry.")

    print(f">>> ledger.set_balance('alice', {CONFIG.alice_initial})")
    ledger.set_balance("alice", CONFIG.alice_initial)
    print(f">>> ledger.get_balance('alice')  ->  {ledger.get_balance('alice')}")
    return ledger


# ============================================================================
# PHASE 2: TRANSFERS (Steps 4-6)
# ============================================================================

def step_04_rejected_transfer(ledger: Ledger):
    step_header(4, "A Rejected Transfer",
        "Rejections are returned as values and change nothing.")

    amount = CONFIG.transfer_amount
    print(f">>> ledger.transfer('bob', 'alice', {amount})")
    result = ledger.transfer("bob", "alice", amount)
    print(f"Result:  {result}  ({result.message})")

    section_header("The Raising Variant")
    print(f">>> ledger.transfer_or_raise('bob', 'alice', {amount})")
    try:
        ledger.transfer_or_raise("bob", "alice", amount)
    except InsufficientFunds as e:
        print(f"InsufficientFunds: {e}")
    return ledger


def step_05_transfer(ledger: Ledger):
    step_header(5, "A Successful Transfer",
        "Both balances change together.")

    amount = CONFIG.transfer_amount
    print(f">>> ledger.transfer('alice', 'bob', {amount})")
    result = ledger.transfer("alice", "bob", amount)
    assert result is TransferResult.APPLIED

    section_header("Balances")
    for account, balance in sorted(ledger.snapshot().items()):
        print(f"  {account:<8} {balance}")
    return ledger


def step_06_overflow():
    step_header(6, "Overflow",
        "A credit that would exceed max_balance is rejected before the debit.")

    capped = Ledger("capped", max_balance=CONFIG.capped_max_balance, verbose=True)
    capped.set_balance("alice", 500)
    capped.set_balance("whale", CONFIG.capped_max_balance - 5)
    print(">>> capped.transfer('alice', 'whale', 6)")
    result = capped.transfer("alice", "whale", 6)
    print(f"Result:  {result}  ({result.message})")
    print(f"alice still holds {capped.get_balance('alice')}")


# ============================================================================
# PHASE 3: EDGE CASES (Steps 7-8)
# ============================================================================

def step_07_self_transfer(ledger: Ledger):
    step_header(7, "Self-Transfer",
        "Sending to yourself needs the funds but leaves the balance unchanged.")

    before = ledger.get_balance("alice")
    ledger.transfer("alice", "alice", before)
    print(f"alice before: {before}, after: {ledger.get_balance('alice')}")
    ledger.transfer("alice", "alice", before + 1)
    return ledger


def step_08_conservation(ledger: Ledger):
    step_header(8, "Conservation",
        "Transfers never change the total supply.")

    total = ledger.total_supply()
    for _ in range(3):
        ledger.transfer("alice", "bob", 1)
        ledger.transfer("bob", "carol", 1)
    print(f"Total before: {total}, after: {ledger.total_supply()}")
    print(repr(ledger))
    return ledger


def main():
    """Run the complete tutorial."""
    print("=" * 70)
    print("       BALANCES LEDGER - INTERACTIVE TUTORIAL")
    print("=" * 70)

    if QUICK_MODE:
        print("Running in QUICK mode (no pauses)")
    else:
        print("Running in INTERACTIVE mode (press Enter to advance)")

    wait_for_enter()

    ledger = step_01_empty_ledger()
    wait_for_enter()
    ledger = step_02_reads(ledger)
    wait_for_enter()
    ledger = step_03_set_balance(ledger)
    wait_for_enter()

    ledger = step_04_rejected_transfer(ledger)
    wait_for_enter()
    ledger = step_05_transfer(ledger)
    wait_for_enter()
    step_06_overflow()
    wait_for_enter()

    ledger = step_07_self_transfer(ledger)
    wait_for_enter()
    step_08_conservation(ledger)

    print("\nDone. Run tests with: pytest tests/")


if __name__ == "__main__":
    main()
