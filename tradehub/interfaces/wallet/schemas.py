"""
Pydantic schemas for the wallet API.

Withdrawal payloads are loosely typed on purpose: the withdrawal
policy, not the schema, decides what a valid amount is.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from tradehub.application.wallet.dtos import WithdrawalCheckResult
from tradehub.domain.wallet.entities import (
    BitcoinWallet,
    Deposit,
    WalletBalance,
    Withdrawal,
)
from tradehub.interfaces.schemas import CamelModel


class BalanceResponse(CamelModel):
    btc: float
    usd: float

    @classmethod
    def from_entity(cls, balance: WalletBalance) -> "BalanceResponse":
        return cls(btc=float(balance.btc), usd=float(balance.usd))


class BitcoinWalletResponse(CamelModel):
    address: str
    balance: float
    pending_deposits: float

    @classmethod
    def from_entity(cls, wallet: BitcoinWallet) -> "BitcoinWalletResponse":
        return cls(
            address=wallet.address,
            balance=float(wallet.balance),
            pending_deposits=float(wallet.pending_deposits),
        )


class DepositItem(CamelModel):
    id: str
    amount: float
    address: str
    tx_hash: Optional[str] = None
    status: str
    confirmations: int
    required_confirmations: int
    network: str
    created_at: datetime

    @classmethod
    def from_entity(cls, deposit: Deposit) -> "DepositItem":
        return cls(
            id=deposit.id,
            amount=float(deposit.amount),
            address=deposit.address,
            tx_hash=deposit.tx_hash,
            status=deposit.status.value,
            confirmations=deposit.confirmations,
            required_confirmations=deposit.required_confirmations,
            network=deposit.network,
            created_at=deposit.created_at,
        )


class WithdrawalItem(CamelModel):
    id: str
    amount: float
    currency: str
    address: str
    fee: float
    status: str
    tx_hash: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, withdrawal: Withdrawal) -> "WithdrawalItem":
        return cls(
            id=withdrawal.id,
            amount=float(withdrawal.amount),
            currency=withdrawal.currency.value,
            address=withdrawal.address,
            fee=float(withdrawal.fee),
            status=withdrawal.status.value,
            tx_hash=withdrawal.tx_hash,
            created_at=withdrawal.created_at,
        )


class WithdrawalRequest(CamelModel):
    """Request schema for POST /api/wallet/withdraw and /withdraw/validate.

    Fields accept any JSON type and are passed through untouched.

    Attributes:
        amount: Number or numeric string.
        currency: "btc" or "usd".
        address: Bitcoin address, or bank reference for USD.
    """

    amount: Any = Field(default=None, description="Amount to withdraw")
    currency: Any = Field(default=None, description="btc or usd")
    address: Any = Field(default=None, description="Destination address")


class WithdrawalResponse(CamelModel):
    """Response schema for an accepted withdrawal."""

    message: str
    withdrawal: WithdrawalItem


class WithdrawalCheckResponse(CamelModel):
    """Response schema for a dry-run of the withdrawal rules."""

    valid: bool
    errors: dict[str, str]
    fee: Optional[float] = None
    net_amount: Optional[float] = None
    estimated_arrival: Optional[str] = None

    @classmethod
    def from_result(cls, result: WithdrawalCheckResult) -> "WithdrawalCheckResponse":
        return cls(
            valid=result.valid,
            errors=result.errors,
            fee=float(result.fee) if result.fee is not None else None,
            net_amount=float(result.net_amount) if result.net_amount is not None else None,
            estimated_arrival=result.estimated_arrival,
        )
