"""
Account Store Module

Abstract store interface and the in-memory implementation that owns every
open account for one banking session, keyed by account number.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional
import threading

from .accounts import Account


class AccountStore(ABC):
    """Abstract interface for account stores"""

    @abstractmethod
    def save(self, account: Account) -> None:
        """Store an account under its account number"""
        pass

    @abstractmethod
    def load(self, account_number: str) -> Optional[Account]:
        """Load an account, or None if absent"""
        pass

    @abstractmethod
    def load_all(self) -> List[Account]:
        """All accounts in creation order"""
        pass

    @abstractmethod
    def delete(self, account_number: str) -> bool:
        """Remove an account; returns False if it was not stored"""
        pass

    @abstractmethod
    def exists(self, account_number: str) -> bool:
        pass

    @abstractmethod
    def count(self) -> int:
        pass


class InMemoryAccountStore(AccountStore):
    """In-memory account store"""

    def __init__(self):
        self._accounts: Dict[str, Account] = {}
        self._lock = threading.RLock()

    def save(self, account: Account) -> None:
        with self._lock:
            self._accounts[account.account_number] = account

    def load(self, account_number: str) -> Optional[Account]:
        with self._lock:
            return self._accounts.get(account_number)

    def load_all(self) -> List[Account]:
        with self._lock:
            return list(self._accounts.values())

    def delete(self, account_number: str) -> bool:
        with self._lock:
            if account_number in self._accounts:
                del self._accounts[account_number]
                return True
            return False

    def exists(self, account_number: str) -> bool:
        with self._lock:
            return account_number in self._accounts

    def count(self) -> int:
        with self._lock:
            return len(self._accounts)
