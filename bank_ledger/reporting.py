"""
Reporting Module

Plain-text renderings of accounts, transaction histories and bank-wide
summaries. All functions are read-only.
"""

from typing import List

from .accounts import Account, CheckingAccount, SavingsAccount
from .bank import Bank
from .currency import format_amount, format_rate
from .transactions import Transaction

RULE = "═" * 50
BOX_WIDTH = 62


def format_account_details(account: Account) -> str:
    """Multi-line detail card for a single account"""
    lines = [
        RULE,
        f"  Account Type: {account.account_type}",
        f"  Account Number: {account.account_number}",
        f"  Account Holder: {account.holder_name}",
        f"  Current Balance: {format_amount(account.balance)}",
        f"  Available Balance: {format_amount(account.available_balance)}",
        f"  Interest Rate: {format_rate(account.interest_rate)}",
    ]

    if isinstance(account, SavingsAccount):
        lines += [
            f"  Minimum Balance: {format_amount(account.minimum_balance)}",
            f"  Withdrawals This Month: {account.withdrawals_this_month}/"
            f"{account.MAX_WITHDRAWALS_PER_MONTH}",
            f"  Accumulated Interest: {format_amount(account.accumulated_interest)}",
        ]
    elif isinstance(account, CheckingAccount):
        status = "IN OVERDRAFT" if account.is_in_overdraft else "Clear"
        lines += [
            f"  Overdraft Limit: {format_amount(account.overdraft_limit)}",
            f"  Current Overdraft: {format_amount(account.current_overdraft)}",
            f"  Remaining Overdraft: {format_amount(account.remaining_overdraft)}",
            f"  Overdraft Status: {status}",
            f"  Total Overdraft Fees: {format_amount(account.total_overdraft_fees)}",
        ]

    lines += [
        f"  Total Transactions: {len(account.transaction_history)}",
        RULE,
    ]
    return "\n".join(lines)


def format_transaction_table(transactions: List[Transaction]) -> str:
    if not transactions:
        return "  No transactions found."

    rows = [Transaction.table_header()]
    rows += [t.to_row() for t in transactions]
    rows.append("-" * 100)
    rows.append(f"Total transactions: {len(transactions)}")
    return "\n".join(rows)


def format_transaction_history(account: Account) -> str:
    """Header line plus the full transaction table for an account"""
    header = (
        f"Transaction History for {account.account_number}\n"
        f"Account Holder: {account.holder_name} | "
        f"Current Balance: {format_amount(account.balance)}\n"
    )
    return header + "\n" + format_transaction_table(list(account.transaction_history))


def format_account_list(bank: Bank) -> str:
    """Savings and checking accounts as two tables"""
    accounts = bank.get_all_accounts()
    if not accounts:
        return "  No accounts found."

    lines = ["SAVINGS ACCOUNTS:", "-" * 80]
    savings = bank.get_savings_accounts()
    if not savings:
        lines.append("  None")
    else:
        lines.append(f"  {'ACCOUNT #':<15} {'HOLDER':<25} {'BALANCE':>15} {'AVAILABLE':>15}")
        lines.append("-" * 80)
        for account in savings:
            lines.append(
                f"  {account.account_number:<15} {account.holder_name:<25} "
                f"{format_amount(account.balance):>15} "
                f"{format_amount(account.available_balance):>15}"
            )

    lines += ["", "CHECKING ACCOUNTS:", "-" * 80]
    checking = bank.get_checking_accounts()
    if not checking:
        lines.append("  None")
    else:
        lines.append(
            f"  {'ACCOUNT #':<15} {'HOLDER':<25} {'BALANCE':>15} "
            f"{'AVAILABLE':>15} {'OVERDRAFT':>10}"
        )
        lines.append("-" * 80)
        for account in checking:
            overdraft = (
                format_amount(account.current_overdraft)
                if account.is_in_overdraft else "Clear"
            )
            lines.append(
                f"  {account.account_number:<15} {account.holder_name:<25} "
                f"{format_amount(account.balance):>15} "
                f"{format_amount(account.available_balance):>15} {overdraft:>10}"
            )

    lines.append("-" * 80)
    lines.append(f"  Total Accounts: {len(accounts)}")
    return "\n".join(lines)


def format_bank_summary(bank: Bank) -> str:
    """Boxed summary of account counts and balance totals"""

    def row(text: str) -> str:
        return f"║  {text:<{BOX_WIDTH - 2}}║"

    top = "╔" + "═" * BOX_WIDTH + "╗"
    mid = "╠" + "═" * BOX_WIDTH + "╣"
    bottom = "╚" + "═" * BOX_WIDTH + "╝"

    lines = [
        top,
        row(f"{bank.bank_name} - Summary Report"),
        mid,
        row(f"Total Accounts: {bank.get_total_account_count()}"),
        row(f"Savings Accounts: {len(bank.get_savings_accounts())}"),
        row(f"Checking Accounts: {len(bank.get_checking_accounts())}"),
        mid,
    ]
    for label, total in bank.get_account_balance_summary().items():
        lines.append(row(f"{label + ':':<30} {format_amount(total):>20}"))
    lines.append(bottom)
    return "\n".join(lines)
