"""
Bank Registry Module

Owns every open account for one banking session: creates accounts and
assigns their numbers, resolves account numbers, moves money between
accounts, runs interest and monthly maintenance, and closes accounts.
"""

from decimal import Decimal
from typing import Dict, List, Optional

from .accounts import Account, CheckingAccount, ProductType, SavingsAccount
from .config import LedgerConfig, get_config
from .currency import ZERO, AmountLike, format_amount
from .exceptions import (
    AccountNotFoundError, BankingError, InvalidAmountError, TransferFailedError
)
from .logging_config import get_logger, log_action
from .storage import AccountStore, InMemoryAccountStore
from .transactions import TransactionType


class Bank:
    """
    Registry of accounts keyed by account number.

    Account numbers are ``<PREFIX>-<sequence>``; the sequence is shared by
    all product types and only ever increases.
    """

    def __init__(
        self,
        bank_name: Optional[str] = None,
        store: Optional[AccountStore] = None,
        config: Optional[LedgerConfig] = None,
    ):
        config = config or get_config()

        self.bank_name = bank_name or config.bank_name
        self.store = store if store is not None else InMemoryAccountStore()
        self.default_savings_interest_rate = config.default_savings_interest_rate
        self.default_overdraft_limit = config.default_overdraft_limit
        self._account_sequence = config.account_number_start
        self.logger = get_logger("bank_ledger.bank")

    # Account creation

    def create_savings_account(
        self,
        holder_name: str,
        initial_deposit: AmountLike = ZERO,
        interest_rate: Optional[AmountLike] = None
    ) -> SavingsAccount:
        """
        Open a savings account

        Args:
            holder_name: Account holder
            initial_deposit: Opening balance, recorded as an initial deposit if positive
            interest_rate: Annual rate (defaults to the configured savings rate)

        Raises:
            InvalidAmountError: If the opening balance is negative
        """
        if interest_rate is None:
            interest_rate = self.default_savings_interest_rate

        account = SavingsAccount(
            self._generate_account_number(ProductType.SAVINGS),
            holder_name,
            initial_deposit,
            interest_rate=interest_rate,
        )
        self._register(account)
        return account

    def create_checking_account(
        self,
        holder_name: str,
        initial_deposit: AmountLike = ZERO,
        overdraft_limit: Optional[AmountLike] = None
    ) -> CheckingAccount:
        """
        Open a checking account

        Args:
            holder_name: Account holder
            initial_deposit: Opening balance, recorded as an initial deposit if positive
            overdraft_limit: Overdraft allowance (defaults to the configured limit)

        Raises:
            InvalidAmountError: If the opening balance is negative
        """
        if overdraft_limit is None:
            overdraft_limit = self.default_overdraft_limit

        account = CheckingAccount(
            self._generate_account_number(ProductType.CHECKING),
            holder_name,
            initial_deposit,
            overdraft_limit=overdraft_limit,
        )
        self._register(account)
        return account

    # Account retrieval

    def get_account(self, account_number: str) -> Account:
        """Get account by number, raising AccountNotFoundError if absent"""
        account = self.store.load(account_number)
        if account is None:
            raise AccountNotFoundError(account_number)
        return account

    def find_account(self, account_number: str) -> Optional[Account]:
        return self.store.load(account_number)

    def account_exists(self, account_number: str) -> bool:
        return self.store.exists(account_number)

    def get_all_accounts(self) -> List[Account]:
        return self.store.load_all()

    def get_accounts_by_holder(self, holder_name: str) -> List[Account]:
        """Accounts whose holder matches, ignoring case"""
        wanted = holder_name.casefold()
        return [a for a in self.store.load_all() if a.holder_name.casefold() == wanted]

    def get_savings_accounts(self) -> List[SavingsAccount]:
        return [a for a in self.store.load_all() if isinstance(a, SavingsAccount)]

    def get_checking_accounts(self) -> List[CheckingAccount]:
        return [a for a in self.store.load_all() if isinstance(a, CheckingAccount)]

    # Core banking operations

    def deposit(self, account_number: str, amount: AmountLike) -> Account:
        account = self.get_account(account_number)
        account.deposit(amount)

        log_action(
            self.logger, "info", f"Deposit to {account_number}",
            action="deposit", resource=f"account:{account_number}",
            extra={"amount": str(amount), "balance": str(account.balance)}
        )
        return account

    def withdraw(self, account_number: str, amount: AmountLike) -> Account:
        account = self.get_account(account_number)
        account.withdraw(amount)

        log_action(
            self.logger, "info", f"Withdrawal from {account_number}",
            action="withdraw", resource=f"account:{account_number}",
            extra={"amount": str(amount), "balance": str(account.balance)}
        )
        return account

    def transfer(self, from_account_number: str, to_account_number: str,
                 amount: AmountLike) -> None:
        """
        Move funds between two accounts

        The amount, both accounts and the source's eligibility are all checked
        before either account is touched. The outgoing leg is recorded as
        TRANSFER_OUT on the source and the incoming leg as TRANSFER_IN on the
        destination.

        Raises:
            TransferFailedError: Same account, ineligible source, or a failing leg
            AccountNotFoundError: If either account number is unknown
        """
        if from_account_number == to_account_number:
            raise TransferFailedError("Cannot transfer to the same account")

        source = self.get_account(from_account_number)
        destination = self.get_account(to_account_number)

        try:
            amount = Account.validate_amount(amount)
        except InvalidAmountError as e:
            raise TransferFailedError(f"Transfer failed: {e}") from e

        if not source.can_withdraw(amount):
            raise TransferFailedError(
                f"Insufficient funds for transfer. "
                f"Available: {format_amount(source.available_balance)}, "
                f"Requested: {format_amount(amount)}"
            )

        try:
            source.withdraw(
                amount, TransactionType.TRANSFER_OUT, f"Transfer to {to_account_number}"
            )
            destination.deposit(
                amount, TransactionType.TRANSFER_IN, f"Transfer from {from_account_number}"
            )
        except BankingError as e:
            log_action(
                self.logger, "error", f"Transfer failed: {e}",
                action="transfer", resource=f"account:{from_account_number}",
                extra={
                    "from_account": from_account_number,
                    "to_account": to_account_number,
                    "amount": str(amount),
                    "error": type(e).__name__,
                }
            )
            raise TransferFailedError(f"Transfer failed: {e}") from e

        log_action(
            self.logger, "info",
            f"Transferred {format_amount(amount)} from {from_account_number} to {to_account_number}",
            action="transfer", resource=f"account:{from_account_number}",
            extra={
                "from_account": from_account_number,
                "to_account": to_account_number,
                "amount": str(amount),
            }
        )

    # Interest operations

    def apply_interest_to_all_accounts(self) -> Decimal:
        """Apply one month of interest everywhere; returns the total credited"""
        total = self._apply_interest(self.store.load_all())
        log_action(
            self.logger, "info", "Interest applied to all accounts",
            action="apply_interest", extra={"total_interest": str(total)}
        )
        return total

    def apply_interest_to_savings_accounts(self) -> Decimal:
        total = self._apply_interest(self.get_savings_accounts())
        log_action(
            self.logger, "info", "Interest applied to savings accounts",
            action="apply_interest", extra={"total_interest": str(total)}
        )
        return total

    def calculate_total_interest_earned(self) -> Decimal:
        """Lifetime interest credited across savings accounts"""
        return sum((a.accumulated_interest for a in self.get_savings_accounts()), ZERO)

    def perform_monthly_maintenance(self) -> Decimal:
        """
        Credit interest to every account, then reset savings withdrawal counters.
        This is the only place the counters are reset.
        """
        total = self.apply_interest_to_all_accounts()

        savings = self.get_savings_accounts()
        for account in savings:
            account.reset_monthly_withdrawals()

        log_action(
            self.logger, "info", "Monthly maintenance completed",
            action="monthly_maintenance",
            extra={
                "total_interest": str(total),
                "savings_counters_reset": len(savings),
            }
        )
        return total

    # Reporting

    def get_total_deposits(self) -> Decimal:
        return sum((a.balance for a in self.store.load_all()), ZERO)

    def get_total_account_count(self) -> int:
        return self.store.count()

    def get_account_balance_summary(self) -> Dict[str, Decimal]:
        """Balance totals by product, in display order"""
        checking = self.get_checking_accounts()
        return {
            "Total Savings": sum((a.balance for a in self.get_savings_accounts()), ZERO),
            "Total Checking": sum((a.balance for a in checking), ZERO),
            "Total Overdraft Used": sum((a.current_overdraft for a in checking), ZERO),
            "Grand Total": self.get_total_deposits(),
        }

    # Account closure

    def close_account(self, account_number: str) -> None:
        """
        Close an account permanently

        Raises:
            BankingError: If the balance is not exactly zero
        """
        account = self.get_account(account_number)
        if account.balance != ZERO:
            raise BankingError(
                f"Cannot close account with non-zero balance: {format_amount(account.balance)}"
            )

        self.store.delete(account_number)

        log_action(
            self.logger, "info", f"Account {account_number} closed",
            action="close_account", resource=f"account:{account_number}",
            extra={"holder_name": account.holder_name}
        )

    def _apply_interest(self, accounts: List[Account]) -> Decimal:
        return sum((account.apply_interest() for account in accounts), ZERO)

    def _generate_account_number(self, product_type: ProductType) -> str:
        prefix_map = {
            ProductType.SAVINGS: "SAV",
            ProductType.CHECKING: "CHK",
        }
        self._account_sequence += 1
        return f"{prefix_map[product_type]}-{self._account_sequence}"

    def _register(self, account: Account) -> None:
        self.store.save(account)

        log_action(
            self.logger, "info", f"{account.account_type} account created",
            action="create_account", resource=f"account:{account.account_number}",
            extra={
                "account_number": account.account_number,
                "holder_name": account.holder_name,
                "product_type": account.product_type.value,
                "opening_balance": str(account.balance),
                "interest_rate": str(account.interest_rate),
            }
        )
