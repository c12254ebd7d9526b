"""Shared-expense ledger: balances and settlement for expense groups."""
