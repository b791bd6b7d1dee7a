"""
Tests for the console front-end

Sessions are driven by scripted input; running out of input ends the session
the same way an end-of-file on stdin does.
"""

import builtins
from decimal import Decimal

from bank_ledger.bank import Bank
from bank_ledger.cli import BankCLI, main, seed_demo_accounts
from bank_ledger.config import LedgerConfig


class ScriptedInput:
    """Feeds answers to prompts and records the prompts shown"""

    def __init__(self, answers, output):
        self.answers = list(answers)
        self.output = output

    def __call__(self, prompt=""):
        self.output.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


class TestBankCLI:
    """Test menu sessions"""

    def setup_method(self):
        """Set up test fixtures"""
        self.bank = Bank(config=LedgerConfig(bank_name="CLI Bank", account_number_start=1000))
        self.output = []

    def run_session(self, *answers) -> str:
        cli = BankCLI(self.bank, ScriptedInput(answers, self.output), self.output.append)
        cli.run()
        return "\n".join(self.output)

    def test_welcome_and_exit(self):
        """Test choosing 0 ends the session"""
        text = self.run_session("0")

        assert "Welcome to CLI Bank" in text
        assert "Thank you for using CLI Bank!" in text

    def test_end_of_input_exits(self):
        """Test running out of input ends the session"""
        text = self.run_session()

        assert "Thank you for using CLI Bank!" in text

    def test_end_of_input_inside_action(self):
        """Test running out of input mid-action ends the session"""
        text = self.run_session("3", "SAV-1001")

        assert "Thank you for using CLI Bank!" in text

    def test_create_savings_account(self):
        """Test creating a savings account from the menu"""
        text = self.run_session("1", "1", "Alice Smith", "1000", "0")

        assert "Savings account created successfully!" in text
        account = self.bank.get_account("SAV-1001")
        assert account.holder_name == "Alice Smith"
        assert account.balance == Decimal('1000')

    def test_create_checking_with_default_overdraft(self):
        """Test a blank overdraft answer uses the default limit"""
        text = self.run_session("1", "2", "Bob Jones", "200", "", "0")

        assert "Checking account created successfully!" in text
        assert "Overdraft Limit: $500.00" in text
        assert self.bank.get_account("CHK-1001").overdraft_limit == Decimal('500')

    def test_create_checking_with_custom_overdraft(self):
        """Test a positive overdraft answer is used"""
        self.run_session("1", "2", "Bob Jones", "200", "1000", "0")

        assert self.bank.get_account("CHK-1001").overdraft_limit == Decimal('1000')

    def test_invalid_number_reprompts(self):
        """Test non-numeric input is asked for again"""
        text = self.run_session("abc", "0")

        assert "Invalid input. Enter your choice: " in self.output
        assert "Thank you for using CLI Bank!" in text

    def test_invalid_choice(self):
        """Test unknown menu numbers"""
        text = self.run_session("42", "0")

        assert "✗ Error: Invalid choice. Please try again." in text

    def test_deposit(self):
        """Test depositing from the menu"""
        self.bank.create_savings_account("Alice Smith", Decimal('1000'))

        text = self.run_session("3", "SAV-1001", "250", "0")

        assert "✓ Successfully deposited $250.00" in text
        assert "New balance: $1,250.00" in text

    def test_withdraw_error_keeps_session_running(self):
        """Test banking errors are shown and the loop continues"""
        self.bank.create_savings_account("Alice Smith", Decimal('1000'))

        text = self.run_session("4", "SAV-1001", "950", "8", "0")

        assert "Available balance: $900.00" in text
        assert "✗ Error: Withdrawal would bring balance below minimum" in text
        assert "ALL ACCOUNTS" in text
        assert self.bank.get_account("SAV-1001").balance == Decimal('1000')

    def test_negative_amount_rejected(self):
        """Test invalid amounts surface as errors"""
        self.bank.create_savings_account("Alice Smith", Decimal('1000'))

        text = self.run_session("3", "SAV-1001", "-5", "0")

        assert "✗ Error: Amount must be positive" in text

    def test_unknown_account(self):
        """Test viewing an account that does not exist"""
        text = self.run_session("2", "SAV-9999", "0")

        assert "✗ Error: Account not found: SAV-9999" in text

    def test_transfer(self):
        """Test transferring between accounts"""
        self.bank.create_savings_account("Alice Smith", Decimal('1000'))
        self.bank.create_checking_account("Alice Smith", Decimal('100'))

        text = self.run_session("5", "SAV-1001", "CHK-1002", "200", "0")

        assert "Successfully transferred $200.00 from SAV-1001 to CHK-1002" in text
        assert "Source account new balance: $800.00" in text
        assert "Destination account new balance: $300.00" in text

    def test_transaction_history(self):
        """Test viewing transaction history"""
        self.bank.create_savings_account("Alice Smith", Decimal('1000'))

        text = self.run_session("6", "SAV-1001", "0")

        assert "Transaction History for SAV-1001" in text
        assert "Initial deposit" in text

    def test_maintenance_cancelled(self):
        """Test declining monthly maintenance"""
        savings = self.bank.create_savings_account("Alice Smith", Decimal('1000'))

        text = self.run_session("7", "no", "0")

        assert "Operation cancelled." in text
        assert savings.balance == Decimal('1000')

    def test_maintenance_confirmed(self):
        """Test running monthly maintenance"""
        savings = self.bank.create_savings_account("Alice Smith", Decimal('1200'), Decimal('0.12'))
        savings.withdraw(Decimal('100'))

        text = self.run_session("7", "yes", "0")

        assert "✓ Monthly maintenance completed!" in text
        assert "($11.00 total)" in text
        assert savings.balance == Decimal('1111')
        assert savings.withdrawals_this_month == 0

    def test_bank_summary(self):
        """Test the summary report from the menu"""
        text = self.run_session("9", "0")

        assert "CLI Bank - Summary Report" in text


class TestDemoAndEntryPoint:
    """Test demo seeding and the console entry point"""

    def test_seed_demo_accounts(self):
        """Test the demo account set"""
        bank = Bank(config=LedgerConfig(bank_name="Demo Bank", account_number_start=1000))

        accounts = seed_demo_accounts(bank)

        assert [a.account_number for a in accounts] == [
            "SAV-1001", "SAV-1002", "CHK-1003", "CHK-1004"
        ]
        assert accounts[1].interest_rate == Decimal('0.035')
        assert accounts[3].overdraft_limit == Decimal('1000')
        assert bank.get_total_deposits() == Decimal('18500')

    def test_main_without_demo(self, monkeypatch, capsys):
        """Test the entry point exits cleanly at end of input"""
        def no_input(prompt=""):
            raise EOFError

        monkeypatch.setattr(builtins, "input", no_input)

        result = main(["--no-demo", "--bank-name", "Main Bank", "--log-level", "WARNING"])

        captured = capsys.readouterr()
        assert result == 0
        assert "Welcome to Main Bank" in captured.out
        assert "Created:" not in captured.out
        assert "Thank you for using Main Bank!" in captured.out
