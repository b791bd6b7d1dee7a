"""
Transaction Records Module

Immutable records of balance-affecting events. Each account owns its own
ordered list of transactions; insertion order is chronological order.
"""

from decimal import Decimal
from datetime import datetime, timezone
from dataclasses import dataclass, field
from enum import Enum

from .currency import format_amount


class TransactionType(Enum):
    """Types of balance-affecting events"""
    DEPOSIT = "deposit"              # Cash deposit or overdraft repayment
    WITHDRAWAL = "withdrawal"        # Cash withdrawal
    TRANSFER_IN = "transfer_in"      # Incoming leg of a transfer
    TRANSFER_OUT = "transfer_out"    # Outgoing leg of a transfer
    INTEREST = "interest"            # Interest credited
    FEE = "fee"                      # Overdraft fee

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class Transaction:
    """
    A single ledger entry on one account.

    ``balance_after`` is the account's reported balance once the event was
    applied. Checking accounts report raw balance minus overdraft owed, so
    their rows show negative balances while overdrawn.
    """
    transaction_id: str
    transaction_type: TransactionType
    amount: Decimal
    balance_after: Decimal
    description: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))
        if not isinstance(self.balance_after, Decimal):
            object.__setattr__(self, 'balance_after', Decimal(str(self.balance_after)))

        if self.amount <= Decimal('0'):
            raise ValueError("Transaction amount must be positive")

    @property
    def is_credit(self) -> bool:
        """Check if the event added money to the account"""
        return self.transaction_type in (
            TransactionType.DEPOSIT,
            TransactionType.TRANSFER_IN,
            TransactionType.INTEREST,
        )

    def to_row(self) -> str:
        """Format as one row of a transaction table"""
        return "| {:<14} | {:<12} | {:>12} | {:>13} | {:<19} | {} |".format(
            self.transaction_id,
            self.transaction_type.label,
            format_amount(self.amount),
            format_amount(self.balance_after),
            self.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            self.description,
        )

    @staticmethod
    def table_header() -> str:
        header = "| {:<14} | {:<12} | {:>12} | {:>13} | {:<19} | {} |".format(
            "TXN ID", "TYPE", "AMOUNT", "BALANCE", "TIMESTAMP", "DESCRIPTION"
        )
        return header + "\n" + "-" * 100
