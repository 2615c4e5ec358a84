"""
Domain entities for the wallet bounded context.

Wallet objects are transient views built per request.
Amounts are Decimal throughout the domain.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class Currency(Enum):
    """Currencies a user can withdraw."""

    BTC = "btc"
    USD = "usd"


class TransferStatus(Enum):
    """Lifecycle label shown next to a deposit or withdrawal."""

    PENDING = "pending"
    PROCESSING = "processing"
    CONFIRMED = "confirmed"
    COMPLETED = "completed"


@dataclass(frozen=True)
class WithdrawalLimits:
    """Fixed per-currency withdrawal terms."""

    minimum: Decimal
    fee: Decimal
    minimum_display: str
    fee_display: str
    estimated_arrival: str


@dataclass(frozen=True)
class WalletBalance:
    """Spendable balance per currency."""

    btc: Decimal
    usd: Decimal

    def available(self, currency: Currency) -> Decimal:
        return self.btc if currency is Currency.BTC else self.usd


@dataclass(frozen=True)
class BitcoinWallet:
    """The user's deposit address and on-chain balance."""

    address: str
    balance: Decimal
    pending_deposits: Decimal


@dataclass(frozen=True)
class Deposit:
    """An incoming Bitcoin transfer."""

    id: str
    amount: Decimal
    address: str
    status: TransferStatus
    confirmations: int
    required_confirmations: int
    network: str
    created_at: datetime
    tx_hash: Optional[str] = None


@dataclass(frozen=True)
class Withdrawal:
    """An outgoing transfer request."""

    id: str
    amount: Decimal
    currency: Currency
    address: str
    fee: Decimal
    status: TransferStatus
    created_at: datetime
    tx_hash: Optional[str] = None
