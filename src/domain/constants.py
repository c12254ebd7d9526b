"""Domain constants for ledger computations."""

from decimal import Decimal

PERCENT_TOTAL = Decimal("100")
PERCENT_QUANTUM = Decimal("0.01")

DEFAULT_CURRENCY = "USD"


__all__ = ["PERCENT_TOTAL", "PERCENT_QUANTUM", "DEFAULT_CURRENCY"]
