"""
Banking Errors

All ledger failures are user-facing and non-retryable. They derive from
ValueError so callers that only know about bad input still catch them.
"""


class BankingError(ValueError):
    """Base class for all banking errors"""


class InvalidAmountError(BankingError):
    """Amount is zero, negative, or above the per-transaction maximum"""


class InsufficientFundsError(BankingError):
    """Withdrawal would breach a balance floor or the overdraft limit"""


class WithdrawalLimitExceededError(BankingError):
    """Savings account has used all of its withdrawals for the period"""


class AccountNotFoundError(BankingError):
    """No open account with the given number"""

    def __init__(self, account_number: str):
        self.account_number = account_number
        super().__init__(f"Account not found: {account_number}")


class TransferFailedError(BankingError):
    """Transfer between two accounts could not be completed"""
