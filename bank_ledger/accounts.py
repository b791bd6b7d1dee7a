"""
Account Management Module

Savings and checking accounts with their withdrawal, interest and overdraft
policies. Each account owns its balance and an append-only transaction log;
the balance only changes through deposit, withdraw and apply_interest, and
every such change is recorded.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from datetime import datetime, timezone
from typing import List, Optional, Tuple
from enum import Enum

from .currency import ZERO, AmountLike, to_decimal, format_amount, format_rate
from .exceptions import (
    InvalidAmountError, InsufficientFundsError, WithdrawalLimitExceededError
)
from .logging_config import get_logger, log_action
from .transactions import Transaction, TransactionType


logger = get_logger("bank_ledger.accounts")


class ProductType(Enum):
    """Banking product types"""
    SAVINGS = "savings"
    CHECKING = "checking"


class Account(ABC):
    """
    Bank account base class.

    Subclasses provide the withdrawal eligibility and interest policy;
    deposits and withdrawals are validated and recorded here.
    """

    MAX_TRANSACTION_AMOUNT = Decimal('1000000')

    product_type: ProductType

    def __init__(self, account_number: str, holder_name: str,
                 initial_balance: AmountLike = ZERO):
        opening = self.validate_opening_balance(initial_balance)

        self.account_number = account_number
        self.holder_name = holder_name
        self.created_at = datetime.now(timezone.utc)
        self._balance = opening
        self._transactions: List[Transaction] = []
        self._transaction_counter = 0

        if opening > ZERO:
            self._record_transaction(TransactionType.DEPOSIT, opening, "Initial deposit")

    @property
    @abstractmethod
    def account_type(self) -> str:
        """Display name of the product, e.g. Savings"""

    @property
    @abstractmethod
    def interest_rate(self) -> Decimal:
        """Annual interest rate"""

    @abstractmethod
    def apply_interest(self) -> Decimal:
        """Credit one month of interest; returns the amount credited"""

    @abstractmethod
    def can_withdraw(self, amount: AmountLike) -> bool:
        """Check whether a withdrawal of ``amount`` would be permitted"""

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def available_balance(self) -> Decimal:
        """Maximum amount the account currently permits to be withdrawn"""
        return self._balance

    @property
    def transaction_history(self) -> Tuple[Transaction, ...]:
        return tuple(self._transactions)

    def recent_transactions(self, count: int) -> Tuple[Transaction, ...]:
        """Last ``count`` transactions, oldest first"""
        if count <= 0:
            return ()
        return tuple(self._transactions[-count:])

    def deposit(self, amount: AmountLike,
                transaction_type: TransactionType = TransactionType.DEPOSIT,
                description: Optional[str] = None) -> None:
        amount = self.validate_amount(amount)
        self._balance += amount
        self._record_transaction(transaction_type, amount, description or "Cash deposit")

    def withdraw(self, amount: AmountLike,
                 transaction_type: TransactionType = TransactionType.WITHDRAWAL,
                 description: Optional[str] = None) -> None:
        amount = self.validate_amount(amount)

        if not self.can_withdraw(amount):
            raise InsufficientFundsError(
                f"Cannot withdraw {format_amount(amount)}. "
                f"Available: {format_amount(self.available_balance)}"
            )

        self._balance -= amount
        self._record_transaction(transaction_type, amount, description or "Cash withdrawal")

    @classmethod
    def validate_amount(cls, amount: AmountLike) -> Decimal:
        """
        Validate a deposit, withdrawal or transfer amount

        Returns:
            The amount as Decimal

        Raises:
            InvalidAmountError: If amount is not positive or exceeds the maximum
        """
        try:
            amount = to_decimal(amount)
        except ValueError:
            raise InvalidAmountError(f"Invalid amount: {amount!r}")

        if not amount.is_finite():
            raise InvalidAmountError(f"Invalid amount: {amount}")
        if amount <= ZERO:
            raise InvalidAmountError("Amount must be positive")
        if amount > cls.MAX_TRANSACTION_AMOUNT:
            raise InvalidAmountError(
                f"Amount exceeds maximum transaction limit of "
                f"{format_amount(cls.MAX_TRANSACTION_AMOUNT)}"
            )
        return amount

    @staticmethod
    def validate_opening_balance(initial_balance: AmountLike) -> Decimal:
        try:
            opening = to_decimal(initial_balance)
        except ValueError:
            raise InvalidAmountError(f"Invalid initial balance: {initial_balance!r}")
        if not opening.is_finite() or opening < ZERO:
            raise InvalidAmountError("Initial balance cannot be negative")
        return opening

    def _generate_transaction_id(self) -> str:
        self._transaction_counter += 1
        return f"{self.account_number}-{self._transaction_counter:04d}"

    def _record_transaction(self, transaction_type: TransactionType,
                            amount: Decimal, description: str) -> Transaction:
        transaction = Transaction(
            transaction_id=self._generate_transaction_id(),
            transaction_type=transaction_type,
            amount=amount,
            balance_after=self.balance,
            description=description,
        )
        self._transactions.append(transaction)
        return transaction

    def __str__(self) -> str:
        return (f"{self.account_type} Account [{self.account_number}] - "
                f"{self.holder_name} | Balance: {format_amount(self.balance)}")

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.account_number} balance={self.balance}>"


class SavingsAccount(Account):
    """
    Interest-bearing account with a minimum balance and a monthly cap on
    withdrawals. The withdrawal counter is reset by monthly maintenance.
    """

    DEFAULT_INTEREST_RATE = Decimal('0.025')
    MAX_INTEREST_RATE = Decimal('0.20')
    MINIMUM_BALANCE = Decimal('100')
    MAX_WITHDRAWALS_PER_MONTH = 6

    product_type = ProductType.SAVINGS

    def __init__(self, account_number: str, holder_name: str,
                 initial_balance: AmountLike = ZERO,
                 interest_rate: Optional[AmountLike] = None):
        if interest_rate is None:
            interest_rate = self.DEFAULT_INTEREST_RATE
        self._interest_rate = self._validate_interest_rate(interest_rate)
        self.withdrawals_this_month = 0
        self.accumulated_interest = ZERO
        super().__init__(account_number, holder_name, initial_balance)

    @property
    def account_type(self) -> str:
        return "Savings"

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    @interest_rate.setter
    def interest_rate(self, rate: AmountLike) -> None:
        self._interest_rate = self._validate_interest_rate(rate)

    @property
    def minimum_balance(self) -> Decimal:
        return self.MINIMUM_BALANCE

    @property
    def remaining_withdrawals(self) -> int:
        return self.MAX_WITHDRAWALS_PER_MONTH - self.withdrawals_this_month

    @property
    def available_balance(self) -> Decimal:
        return max(ZERO, self._balance - self.MINIMUM_BALANCE)

    def can_withdraw(self, amount: AmountLike) -> bool:
        amount = to_decimal(amount)
        if not amount.is_finite():
            return False
        return (
            self._balance - amount >= self.MINIMUM_BALANCE
            and self.withdrawals_this_month < self.MAX_WITHDRAWALS_PER_MONTH
        )

    def withdraw(self, amount: AmountLike,
                 transaction_type: TransactionType = TransactionType.WITHDRAWAL,
                 description: Optional[str] = None) -> None:
        amount = self.validate_amount(amount)

        if self.withdrawals_this_month >= self.MAX_WITHDRAWALS_PER_MONTH:
            raise WithdrawalLimitExceededError(
                f"Monthly withdrawal limit reached "
                f"({self.withdrawals_this_month}/{self.MAX_WITHDRAWALS_PER_MONTH}). "
                f"Try again next month."
            )

        if self._balance - amount < self.MINIMUM_BALANCE:
            raise InsufficientFundsError(
                f"Withdrawal would bring balance below minimum "
                f"({format_amount(self.MINIMUM_BALANCE)}). "
                f"Available: {format_amount(self.available_balance)}"
            )

        self._balance -= amount
        self.withdrawals_this_month += 1
        count = f"({self.withdrawals_this_month}/{self.MAX_WITHDRAWALS_PER_MONTH} this month)"
        self._record_transaction(
            transaction_type, amount, f"{description or 'Withdrawal'} {count}"
        )

    def apply_interest(self) -> Decimal:
        monthly_rate = self._interest_rate / Decimal('12')
        interest = self._balance * monthly_rate

        if interest > ZERO:
            self._balance += interest
            self.accumulated_interest += interest
            self._record_transaction(
                TransactionType.INTEREST, interest,
                f"Monthly interest @ {format_rate(self._interest_rate)}"
            )
            return interest
        return ZERO

    def reset_monthly_withdrawals(self) -> None:
        self.withdrawals_this_month = 0

    def _validate_interest_rate(self, rate: AmountLike) -> Decimal:
        rate = to_decimal(rate)
        if rate < ZERO or rate > self.MAX_INTEREST_RATE:
            raise ValueError("Interest rate must be between 0% and 20%")
        return rate


class CheckingAccount(Account):
    """
    Transactional account with overdraft protection.

    Withdrawals beyond the balance draw on the overdraft up to the limit. A
    flat fee is charged once each time the account goes from clear into
    overdraft; deposits repay the overdraft before crediting the balance.
    """

    DEFAULT_OVERDRAFT_LIMIT = Decimal('500')
    MAX_OVERDRAFT_LIMIT = Decimal('10000')
    OVERDRAFT_FEE = Decimal('35')
    INTEREST_RATE = Decimal('0.001')
    MINIMUM_INTEREST = Decimal('0.01')

    product_type = ProductType.CHECKING

    def __init__(self, account_number: str, holder_name: str,
                 initial_balance: AmountLike = ZERO,
                 overdraft_limit: Optional[AmountLike] = None):
        if overdraft_limit is None:
            overdraft_limit = self.DEFAULT_OVERDRAFT_LIMIT
        self._overdraft_limit = self._validate_overdraft_limit(overdraft_limit)
        self.current_overdraft = ZERO
        self.overdraft_usage_count = 0
        self.total_overdraft_fees = ZERO
        super().__init__(account_number, holder_name, initial_balance)

    @property
    def account_type(self) -> str:
        return "Checking"

    @property
    def interest_rate(self) -> Decimal:
        return self.INTEREST_RATE

    @property
    def overdraft_limit(self) -> Decimal:
        return self._overdraft_limit

    @overdraft_limit.setter
    def overdraft_limit(self, limit: AmountLike) -> None:
        self._overdraft_limit = self._validate_overdraft_limit(limit)

    @property
    def raw_balance(self) -> Decimal:
        """Funds held, ignoring any overdraft owed"""
        return self._balance

    @property
    def balance(self) -> Decimal:
        return self._balance - self.current_overdraft

    @property
    def available_balance(self) -> Decimal:
        return self._balance + (self._overdraft_limit - self.current_overdraft)

    @property
    def remaining_overdraft(self) -> Decimal:
        return self._overdraft_limit - self.current_overdraft

    @property
    def is_in_overdraft(self) -> bool:
        return self.current_overdraft > ZERO

    def can_withdraw(self, amount: AmountLike) -> bool:
        amount = to_decimal(amount)
        return amount.is_finite() and amount <= self.available_balance

    def withdraw(self, amount: AmountLike,
                 transaction_type: TransactionType = TransactionType.WITHDRAWAL,
                 description: Optional[str] = None) -> None:
        amount = self.validate_amount(amount)

        available = self.available_balance
        if amount > available:
            raise InsufficientFundsError(
                f"Cannot withdraw {format_amount(amount)}. "
                f"Available (incl. overdraft): {format_amount(available)}"
            )

        if amount <= self._balance:
            self._balance -= amount
            self._record_transaction(transaction_type, amount, description or "Withdrawal")
            return

        shortfall = amount - self._balance
        was_in_overdraft = self.is_in_overdraft

        self.current_overdraft += shortfall
        self._balance = ZERO

        # Fee only on entering overdraft, not while already in it
        if not was_in_overdraft:
            self._charge_overdraft_fee()
            self.overdraft_usage_count += 1

        self._record_transaction(
            transaction_type, amount,
            f"{description or 'Withdrawal'} (used {format_amount(shortfall)} overdraft)"
        )

    def deposit(self, amount: AmountLike,
                transaction_type: TransactionType = TransactionType.DEPOSIT,
                description: Optional[str] = None) -> None:
        amount = self.validate_amount(amount)

        if not self.is_in_overdraft:
            self._balance += amount
            self._record_transaction(transaction_type, amount, description or "Deposit")
            return

        if amount >= self.current_overdraft:
            repaid = self.current_overdraft
            remaining = amount - repaid
            self.current_overdraft = ZERO
            self._record_transaction(
                transaction_type, repaid, self._annotate("Overdraft repayment", description)
            )

            if remaining > ZERO:
                self._balance += remaining
                self._record_transaction(transaction_type, remaining, description or "Deposit")
        else:
            self.current_overdraft -= amount
            self._record_transaction(
                transaction_type, amount,
                self._annotate(
                    f"Partial overdraft repayment "
                    f"({format_amount(self.current_overdraft)} remaining)",
                    description,
                )
            )

    def apply_interest(self) -> Decimal:
        if self._balance <= ZERO or self.is_in_overdraft:
            return ZERO

        interest = self._balance * (self.INTEREST_RATE / Decimal('12'))

        # Only apply if at least one cent
        if interest < self.MINIMUM_INTEREST:
            return ZERO

        self._balance += interest
        self._record_transaction(
            TransactionType.INTEREST, interest,
            f"Monthly interest @ {format_rate(self.INTEREST_RATE)}"
        )
        return interest

    def _charge_overdraft_fee(self) -> None:
        self.total_overdraft_fees += self.OVERDRAFT_FEE
        self.current_overdraft += self.OVERDRAFT_FEE
        self._record_transaction(TransactionType.FEE, self.OVERDRAFT_FEE, "Overdraft fee")

        log_action(
            logger, "info", f"Account {self.account_number} entered overdraft",
            action="overdraft_fee", resource=f"account:{self.account_number}",
            extra={
                "fee": str(self.OVERDRAFT_FEE),
                "current_overdraft": str(self.current_overdraft),
                "overdraft_limit": str(self._overdraft_limit),
            }
        )

    @staticmethod
    def _annotate(text: str, description: Optional[str]) -> str:
        return f"{text} - {description}" if description else text

    def _validate_overdraft_limit(self, limit: AmountLike) -> Decimal:
        limit = to_decimal(limit)
        if limit < ZERO or limit > self.MAX_OVERDRAFT_LIMIT:
            raise ValueError("Overdraft limit must be between $0 and $10,000")
        return limit
