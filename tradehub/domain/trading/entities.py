"""
Domain entities for the trading bounded context.

Everything here is a transient view object: built per request,
never persisted, no identity lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class BotStatus(Enum):
    """Run state of an automated trading bot."""

    ACTIVE = "active"
    PAUSED = "paused"
    STOPPED = "stopped"


class SignalAction(Enum):
    """Direction suggested by a trading signal."""

    BUY = "BUY"
    SELL = "SELL"


class SignalStatus(Enum):
    ACTIVE = "active"
    EXECUTED = "executed"


class Recommendation(Enum):
    """Analyst recommendation on a market instrument."""

    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class MarketSentiment(Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


class NewsImpact(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class AssetType(Enum):
    STOCK = "stock"
    CRYPTO = "crypto"
    BOND = "bond"
    COMMODITY = "commodity"
    FUND = "fund"


@dataclass(frozen=True)
class BotPerformance:
    """Aggregate results of a bot since creation."""

    total_trades: int = 0
    win_rate: float = 0.0
    total_pnl: Decimal = Decimal("0")
    monthly_return: float = 0.0


@dataclass(frozen=True)
class Bot:
    """An automated trading bot configuration.

    Attributes:
        capital: Capital allocated to the bot.
        max_risk: Maximum risk per trade, percent of capital.
        profit_target: Take-profit threshold, percent.
        stop_loss: Stop-loss threshold, percent.
    """

    id: str
    name: Optional[str]
    status: BotStatus
    strategy: Optional[str]
    capital: Optional[Decimal]
    max_risk: Optional[float]
    profit_target: Optional[float]
    stop_loss: Optional[float]
    created_at: datetime
    performance: BotPerformance = field(default_factory=BotPerformance)


@dataclass(frozen=True)
class TradingSignal:
    """A published trade idea with entry, target and stop."""

    id: str
    symbol: str
    action: SignalAction
    price: Decimal
    target_price: Decimal
    stop_loss: Decimal
    confidence: int
    timeframe: str
    strategy: str
    status: SignalStatus
    created_at: datetime
    pnl: Optional[Decimal] = None


@dataclass(frozen=True)
class ExpertPerformance:
    total_return: float
    monthly_return: float
    win_rate: float
    total_trades: int
    risk_score: float


@dataclass(frozen=True)
class CopyExpert:
    """A trader whose positions can be mirrored.

    Attributes:
        copy_fee: Share of profits charged by the expert, percent.
        min_copy_amount: Smallest allocation accepted for copying.
    """

    id: str
    name: str
    username: str
    rating: float
    followers: int
    following: bool
    performance: ExpertPerformance
    strategies: tuple[str, ...]
    description: str
    copy_fee: float
    min_copy_amount: Decimal
    avatar: Optional[str] = None


@dataclass(frozen=True)
class TechnicalAnalysis:
    recommendation: Recommendation
    confidence: int
    support_level: Decimal
    resistance_level: Decimal
    rsi: float
    macd: str
    sentiment: MarketSentiment


@dataclass(frozen=True)
class NewsItem:
    title: str
    summary: str
    impact: NewsImpact
    timestamp: datetime


@dataclass(frozen=True)
class MarketAnalysis:
    """Quote, technicals and headlines for one instrument."""

    symbol: str
    name: str
    price: Decimal
    change: Decimal
    change_percent: float
    volume: int
    market_cap: int
    analysis: TechnicalAnalysis
    news: tuple[NewsItem, ...] = ()


@dataclass(frozen=True)
class IndexQuote:
    """Level of a market index and its daily change in percent."""

    value: Decimal
    change: float


@dataclass(frozen=True)
class Asset:
    """A holding shown on the assets page."""

    id: str
    symbol: str
    name: str
    type: AssetType
    price: Decimal
    change: Decimal
    change_percent: float
    volume: str
    market_cap: Optional[str] = None
    holdings: Optional[Decimal] = None
    value: Optional[Decimal] = None
    icon: Optional[str] = None


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Headline figures at the top of the dashboard."""

    total_value: Decimal
    daily_pnl: Decimal
    daily_pnl_percent: float
    open_positions: int
    buying_power: Decimal


@dataclass(frozen=True)
class RecentTrade:
    id: int
    symbol: str
    action: str
    price: Decimal
    pnl: Decimal
    timestamp: datetime


@dataclass(frozen=True)
class WatchlistItem:
    symbol: str
    name: str
    price: Decimal
    change: float
