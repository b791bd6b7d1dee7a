"""
Tests for text reports
"""

from decimal import Decimal

from bank_ledger.accounts import CheckingAccount, SavingsAccount
from bank_ledger.bank import Bank
from bank_ledger.config import LedgerConfig
from bank_ledger.reporting import (
    format_account_details, format_account_list, format_bank_summary,
    format_transaction_history, format_transaction_table
)


class TestAccountDetails:
    """Test single account cards"""

    def test_savings_details(self):
        """Test savings cards show the product limits"""
        account = SavingsAccount("SAV-1001", "John Doe", Decimal('1000'))
        account.withdraw(Decimal('100'))

        details = format_account_details(account)

        assert "Account Type: Savings" in details
        assert "Account Number: SAV-1001" in details
        assert "Current Balance: $900.00" in details
        assert "Available Balance: $800.00" in details
        assert "Interest Rate: 2.50%" in details
        assert "Minimum Balance: $100.00" in details
        assert "Withdrawals This Month: 1/6" in details
        assert "Total Transactions: 2" in details

    def test_checking_clear(self):
        """Test checking card without overdraft"""
        account = CheckingAccount("CHK-1002", "Jane Doe", Decimal('500'))

        details = format_account_details(account)

        assert "Account Type: Checking" in details
        assert "Overdraft Limit: $500.00" in details
        assert "Overdraft Status: Clear" in details
        assert "Remaining Overdraft: $500.00" in details

    def test_checking_in_overdraft(self):
        """Test checking card while overdrawn"""
        account = CheckingAccount("CHK-1002", "Jane Doe", Decimal('100'))
        account.withdraw(Decimal('300'))

        details = format_account_details(account)

        assert "Current Balance: -$235.00" in details
        assert "Current Overdraft: $235.00" in details
        assert "Overdraft Status: IN OVERDRAFT" in details
        assert "Remaining Overdraft: $265.00" in details
        assert "Total Overdraft Fees: $35.00" in details


class TestTransactionReports:
    """Test transaction tables"""

    def test_empty_table(self):
        """Test message for an empty history"""
        assert format_transaction_table([]) == "  No transactions found."

    def test_history(self):
        """Test history header and rows"""
        account = SavingsAccount("SAV-1001", "John Doe", Decimal('1000'))
        account.deposit(Decimal('250'))

        history = format_transaction_history(account)

        assert history.startswith("Transaction History for SAV-1001")
        assert "Current Balance: $1,250.00" in history
        assert "Initial deposit" in history
        assert "Cash deposit" in history
        assert "Total transactions: 2" in history


class TestBankReports:
    """Test bank-wide reports"""

    def setup_method(self):
        """Set up test fixtures"""
        self.bank = Bank(config=LedgerConfig(bank_name="Report Bank", account_number_start=1000))

    def test_empty_bank(self):
        """Test listing with no accounts"""
        assert format_account_list(self.bank) == "  No accounts found."

    def test_account_list(self):
        """Test sections and the empty section marker"""
        self.bank.create_savings_account("John Doe", Decimal('1000'))

        listing = format_account_list(self.bank)

        assert "SAVINGS ACCOUNTS:" in listing
        assert "SAV-1001" in listing
        assert "CHECKING ACCOUNTS:" in listing
        assert "  None" in listing
        assert "Total Accounts: 1" in listing

    def test_summary(self):
        """Test summary box totals"""
        self.bank.create_savings_account("John Doe", Decimal('1000'))
        checking = self.bank.create_checking_account("Jane Doe", Decimal('100'))
        checking.withdraw(Decimal('300'))

        summary = format_bank_summary(self.bank)

        assert "Report Bank - Summary Report" in summary
        assert "Total Accounts: 2" in summary
        assert "Savings Accounts: 1" in summary
        assert "Checking Accounts: 1" in summary
        assert "$1,000.00" in summary
        assert "-$235.00" in summary
        assert "$765.00" in summary
        assert "Grand Total:" in summary
