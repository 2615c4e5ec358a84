"""
Data Transfer Objects for the wallet application layer.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class WithdrawalCommand:
    """Input DTO for a withdrawal request.

    Amount and currency are kept as received; the withdrawal policy
    decides what counts as valid.

    Attributes:
        user_id: The requesting user.
        amount: Number or numeric string.
        currency: Currency code ("btc" or "usd").
        address: Bitcoin address or bank reference.
    """

    user_id: str
    amount: object
    currency: object
    address: object


@dataclass(frozen=True)
class WithdrawalCheckResult:
    """Output DTO for a dry-run of the withdrawal rules.

    Attributes:
        valid: True when no rule failed.
        errors: Field name to message.
        fee: Network fee for the currency, if the currency is supported.
        net_amount: Amount after fee, if it could be computed.
        estimated_arrival: Human-readable arrival estimate.
    """

    valid: bool
    errors: dict[str, str] = field(default_factory=dict)
    fee: Optional[Decimal] = None
    net_amount: Optional[Decimal] = None
    estimated_arrival: Optional[str] = None
