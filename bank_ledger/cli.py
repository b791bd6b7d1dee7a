"""
Console Front-End

Interactive numbered menu over the Bank registry. Presentation only: every
operation goes through the registry's public methods, and banking errors are
shown to the user before the menu loop continues.
"""

import argparse
import sys
from decimal import Decimal
from typing import Callable, List, Optional

from .accounts import Account
from .bank import Bank
from .config import get_config
from .currency import ZERO, decimal_from_string, format_amount
from .exceptions import BankingError
from .logging_config import setup_logging
from . import reporting


MENU = """
═══════════ MAIN MENU ══════════
  1. Create Account
  2. View Account Details
  3. Deposit Funds
  4. Withdraw Funds
  5. Transfer Funds
  6. Transaction History
  7. Monthly Maintenance (Interest)
  8. List All Accounts
  9. Bank Summary
  0. Exit"""


def seed_demo_accounts(bank: Bank) -> List[Account]:
    """Create the demo accounts used for trying the console out"""
    return [
        bank.create_savings_account("John Smith", Decimal("5000.00")),
        bank.create_savings_account("Jane Doe", Decimal("10000.00"), Decimal("0.035")),
        bank.create_checking_account("John Smith", Decimal("2500.00")),
        bank.create_checking_account("Bob Wilson", Decimal("1000.00"), Decimal("1000.00")),
    ]


class BankCLI:
    """Menu loop reading from ``input_func`` and writing to ``output_func``"""

    def __init__(
        self,
        bank: Bank,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Optional[Callable[[str], None]] = None
    ):
        self.bank = bank
        self._input = input_func or input
        self._output = output_func or print
        self._handlers = {
            1: self.create_account,
            2: self.view_account_details,
            3: self.deposit_funds,
            4: self.withdraw_funds,
            5: self.transfer_funds,
            6: self.view_transaction_history,
            7: self.monthly_maintenance,
            8: self.list_accounts,
            9: self.show_bank_summary,
        }

    def run(self) -> None:
        self._output(f"\nWelcome to {self.bank.bank_name}")

        while True:
            self._output(MENU)
            try:
                choice = self._read_int("Enter your choice: ")
                if choice == 0:
                    break
                self.handle_choice(choice)
            except EOFError:
                break

        self._output(f"\nThank you for using {self.bank.bank_name}!")

    def handle_choice(self, choice: int) -> None:
        handler = self._handlers.get(choice)
        if handler is None:
            self._print_error("Invalid choice. Please try again.")
            return

        try:
            handler()
        except BankingError as e:
            self._print_error(str(e))
        except ValueError as e:
            self._print_error(f"Invalid input: {e}")

    # Menu actions

    def create_account(self) -> None:
        self._output("\n═══════════ CREATE NEW ACCOUNT ══════════")
        self._output("  1. Savings Account\n  2. Checking Account\n  0. Back to Main Menu")

        account_type = self._read_int("Select account type: ")
        if account_type == 0:
            return
        if account_type not in (1, 2):
            self._print_error("Invalid account type")
            return

        holder_name = self._read_str("Enter account holder name: ")
        initial_deposit = self._read_amount("Enter initial deposit amount: $")

        if account_type == 1:
            account = self.bank.create_savings_account(holder_name, initial_deposit)
            self._print_success("Savings account created successfully!")
        else:
            overdraft_limit = self._read_amount(
                "Enter overdraft limit (default 500): $", allow_blank=True
            )
            if overdraft_limit is not None and overdraft_limit <= ZERO:
                overdraft_limit = None
            account = self.bank.create_checking_account(
                holder_name, initial_deposit, overdraft_limit
            )
            self._print_success("Checking account created successfully!")

        self._output("\n" + reporting.format_account_details(account))

    def view_account_details(self) -> None:
        self._output("\n═══════════ ACCOUNT DETAILS ══════════")
        account = self.bank.get_account(self._read_str("Enter account number: "))
        self._output("\n" + reporting.format_account_details(account))

    def deposit_funds(self) -> None:
        self._output("\n═══════════ DEPOSIT FUNDS ══════════")
        account_number = self._read_str("Enter account number: ")
        amount = self._read_amount("Enter deposit amount: $")

        account = self.bank.deposit(account_number, amount)
        self._print_success(f"Successfully deposited {format_amount(amount)}")
        self._output(f"  New balance: {format_amount(account.balance)}")

    def withdraw_funds(self) -> None:
        self._output("\n═══════════ WITHDRAW FUNDS ══════════")
        account_number = self._read_str("Enter account number: ")
        account = self.bank.get_account(account_number)
        self._output(f"  Available balance: {format_amount(account.available_balance)}")

        amount = self._read_amount("Enter withdrawal amount: $")
        account = self.bank.withdraw(account_number, amount)
        self._print_success(f"Successfully withdrew {format_amount(amount)}")
        self._output(f"  New balance: {format_amount(account.balance)}")

    def transfer_funds(self) -> None:
        self._output("\n═══════════ TRANSFER FUNDS ══════════")
        from_number = self._read_str("Enter source account number: ")
        source = self.bank.get_account(from_number)
        self._output(f"  Available balance: {format_amount(source.available_balance)}")

        to_number = self._read_str("Enter destination account number: ")
        amount = self._read_amount("Enter transfer amount: $")

        self.bank.transfer(from_number, to_number, amount)
        self._print_success(
            f"Successfully transferred {format_amount(amount)} from {from_number} to {to_number}"
        )
        self._output(
            f"  Source account new balance: "
            f"{format_amount(self.bank.get_account(from_number).balance)}"
        )
        self._output(
            f"  Destination account new balance: "
            f"{format_amount(self.bank.get_account(to_number).balance)}"
        )

    def view_transaction_history(self) -> None:
        self._output("\n═══════════ TRANSACTION HISTORY ══════════")
        account = self.bank.get_account(self._read_str("Enter account number: "))
        self._output("\n" + reporting.format_transaction_history(account))

    def monthly_maintenance(self) -> None:
        self._output("\n═══════════ APPLY MONTHLY INTEREST ══════════")
        self._output("This will apply interest to all accounts and reset monthly limits.")

        confirm = self._read_str("Proceed? (yes/no): ").lower()
        if confirm not in ("yes", "y"):
            self._output("  Operation cancelled.")
            return

        total = self.bank.perform_monthly_maintenance()
        self._print_success("Monthly maintenance completed!")
        self._output(f"  - Interest applied to all accounts ({format_amount(total)} total)")
        self._output("  - Savings withdrawal counters reset")

    def list_accounts(self) -> None:
        self._output("\n═══════════ ALL ACCOUNTS ══════════")
        self._output(reporting.format_account_list(self.bank))

    def show_bank_summary(self) -> None:
        self._output("\n" + reporting.format_bank_summary(self.bank))

    # Input helpers

    def _read_str(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                prompt = "Invalid input. " + prompt.removeprefix("Invalid input. ")

    def _read_amount(self, prompt: str, allow_blank: bool = False) -> Optional[Decimal]:
        while True:
            raw = self._input(prompt).strip()
            if allow_blank and not raw:
                return None
            try:
                return decimal_from_string(raw)
            except ValueError:
                prompt = "Invalid input. " + prompt.removeprefix("Invalid input. ")

    def _print_success(self, message: str) -> None:
        self._output(f"\n✓ {message}")

    def _print_error(self, message: str) -> None:
        self._output(f"\n✗ Error: {message}")


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point"""
    config = get_config()

    parser = argparse.ArgumentParser(description="Interactive bank ledger console")
    parser.add_argument("--bank-name", default=config.bank_name,
                        help="Display name of the bank")
    parser.add_argument("--no-demo", action="store_true",
                        help="Start without the demo accounts")
    parser.add_argument("--log-level", default=config.log_level,
                        help="Log level (DEBUG, INFO, WARNING, ERROR)")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_format=config.log_format)

    bank = Bank(bank_name=args.bank_name, config=config)
    if config.seed_demo_accounts and not args.no_demo:
        print("\n[Creating demo accounts for testing...]")
        for account in seed_demo_accounts(bank):
            print(f"  Created: {account}")

    try:
        BankCLI(bank).run()
    except KeyboardInterrupt:
        print(f"\nGoodbye from {bank.bank_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
