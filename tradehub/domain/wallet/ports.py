"""
Port interfaces (ABCs) for the wallet bounded context.
"""

from abc import ABC, abstractmethod

from tradehub.domain.wallet.entities import (
    BitcoinWallet,
    Deposit,
    WalletBalance,
    Withdrawal,
)


class WalletRepository(ABC):
    """Port for reading a user's wallet state."""

    @abstractmethod
    def get_balance(self, user_id: str) -> WalletBalance:
        raise NotImplementedError

    @abstractmethod
    def get_bitcoin_wallet(self, user_id: str) -> BitcoinWallet:
        raise NotImplementedError

    @abstractmethod
    def list_deposits(self, user_id: str) -> list[Deposit]:
        """Return Bitcoin deposits, newest first."""
        raise NotImplementedError

    @abstractmethod
    def list_withdrawals(self, user_id: str) -> list[Withdrawal]:
        """Return withdrawal requests, newest first."""
        raise NotImplementedError
