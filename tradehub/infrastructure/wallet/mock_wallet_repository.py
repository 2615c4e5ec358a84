"""
Adapter: Wallet state.

Implements WalletRepository port with fixed demo figures.
There is no blockchain or banking integration; every user
sees the same wallet.
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Optional

from tradehub.domain.wallet.entities import (
    BitcoinWallet,
    Currency,
    Deposit,
    TransferStatus,
    WalletBalance,
    Withdrawal,
)
from tradehub.domain.wallet.ports import WalletRepository

DEPOSIT_ADDRESS = "bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh"
BTC_BALANCE = Decimal("0.05423789")
USD_BALANCE = Decimal("15420.50")


class MockWalletRepository(WalletRepository):
    """Serves the demo wallet. Timestamps are relative to the clock."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None) -> None:
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def get_balance(self, user_id: str) -> WalletBalance:
        return WalletBalance(btc=BTC_BALANCE, usd=USD_BALANCE)

    def get_bitcoin_wallet(self, user_id: str) -> BitcoinWallet:
        return BitcoinWallet(
            address=DEPOSIT_ADDRESS,
            balance=BTC_BALANCE,
            pending_deposits=Decimal("0.001"),
        )

    def list_deposits(self, user_id: str) -> list[Deposit]:
        now = self._clock()
        return [
            Deposit(
                id="dep1",
                amount=Decimal("0.001"),
                address=DEPOSIT_ADDRESS,
                status=TransferStatus.PENDING,
                confirmations=2,
                required_confirmations=3,
                network="Bitcoin",
                created_at=now,
            ),
            Deposit(
                id="dep2",
                amount=Decimal("0.0234"),
                address=DEPOSIT_ADDRESS,
                tx_hash="a1b2c3d4e5f6789012345678901234567890abcdef123456789012345678901234",
                status=TransferStatus.CONFIRMED,
                confirmations=6,
                required_confirmations=3,
                network="Bitcoin",
                created_at=now - timedelta(hours=1),
            ),
        ]

    def list_withdrawals(self, user_id: str) -> list[Withdrawal]:
        now = self._clock()
        return [
            Withdrawal(
                id="with1",
                amount=Decimal("0.01"),
                currency=Currency.BTC,
                address="bc1qabcdef123456789012345678901234567890xyz",
                fee=Decimal("0.0005"),
                status=TransferStatus.PROCESSING,
                created_at=now,
            ),
            Withdrawal(
                id="with2",
                amount=Decimal("500"),
                currency=Currency.USD,
                address="Bank Account ****1234",
                fee=Decimal("5"),
                status=TransferStatus.COMPLETED,
                tx_hash="TXN123456789",
                created_at=now - timedelta(days=1),
            ),
        ]
