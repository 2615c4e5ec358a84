"""
Use cases: Read-only wallet queries.

Balance, Bitcoin deposit address, deposit history and withdrawal history.
Side effects: None.
"""

from tradehub.domain.wallet.entities import (
    BitcoinWallet,
    Deposit,
    WalletBalance,
    Withdrawal,
)
from tradehub.domain.wallet.ports import WalletRepository


class GetBalanceUseCase:
    """Returns the spendable BTC and USD balances."""

    def __init__(self, wallet_repo: WalletRepository) -> None:
        self._wallet_repo = wallet_repo

    def execute(self, user_id: str) -> WalletBalance:
        return self._wallet_repo.get_balance(user_id)


class GetBitcoinWalletUseCase:
    """Returns the deposit address with on-chain and pending amounts."""

    def __init__(self, wallet_repo: WalletRepository) -> None:
        self._wallet_repo = wallet_repo

    def execute(self, user_id: str) -> BitcoinWallet:
        return self._wallet_repo.get_bitcoin_wallet(user_id)


class ListDepositsUseCase:
    def __init__(self, wallet_repo: WalletRepository) -> None:
        self._wallet_repo = wallet_repo

    def execute(self, user_id: str) -> list[Deposit]:
        return self._wallet_repo.list_deposits(user_id)


class ListWithdrawalsUseCase:
    def __init__(self, wallet_repo: WalletRepository) -> None:
        self._wallet_repo = wallet_repo

    def execute(self, user_id: str) -> list[Withdrawal]:
        return self._wallet_repo.list_withdrawals(user_id)
