"""
Bank Ledger

In-memory savings and checking account ledger with overdraft handling,
interest accrual, transfers and per-account transaction history. All
financial math uses Decimal.
"""

__version__ = "1.0.0"
