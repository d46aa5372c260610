"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the balances Ledger.

The tests are organized by invariant:
1. test_conservation.py - Transfers never create or destroy value
2. test_atomicity.py - Rejected transfers change nothing; concurrent transfers never interleave

These tests use hypothesis for property-based testing.
"""
