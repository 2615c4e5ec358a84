"""
Data Transfer Objects for the trading application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from tradehub.domain.trading.entities import BotStatus


@dataclass(frozen=True)
class CreateBotCommand:
    """Input DTO for configuring a new bot.

    Every field is optional; the bot form posts whatever it has.

    Attributes:
        user_id: Owner of the bot.
        name: Display name.
        strategy: Strategy key (momentum, meanreversion, arbitrage, scalping, grid).
        capital: Capital to allocate.
        max_risk: Maximum risk per trade, percent.
        profit_target: Take-profit threshold, percent.
        stop_loss: Stop-loss threshold, percent.
    """

    user_id: str
    name: Optional[str] = None
    strategy: Optional[str] = None
    capital: Optional[Decimal] = None
    max_risk: Optional[float] = None
    profit_target: Optional[float] = None
    stop_loss: Optional[float] = None


@dataclass(frozen=True)
class BotStatusChange:
    """Output DTO acknowledging a start or pause request."""

    bot_id: str
    status: BotStatus


@dataclass(frozen=True)
class SignalExecution:
    """Output DTO acknowledging a signal execution request."""

    signal_id: str


@dataclass(frozen=True)
class FollowExpertResult:
    expert_id: str


@dataclass(frozen=True)
class CopyExpertCommand:
    """Input DTO for mirroring an expert's trades.

    Attributes:
        amount: Allocation as posted by the client, echoed back unchanged.
    """

    user_id: str
    expert_id: str
    amount: Optional[float] = None


@dataclass(frozen=True)
class CopyExpertResult:
    expert_id: str
    amount: Optional[float]
