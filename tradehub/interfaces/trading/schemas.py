"""
Pydantic schemas for the bots, signals, copy-trading and market APIs.

Request bodies here are lenient: the dashboard forms post partial data
and the server echoes it back.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from tradehub.domain.trading.entities import (
    Asset,
    Bot,
    CopyExpert,
    MarketAnalysis,
    TradingSignal,
)
from tradehub.interfaces.schemas import CamelModel


def _optional_float(value: Optional[Decimal]) -> Optional[float]:
    return float(value) if value is not None else None


# ------------------------------------------------------------------
# Bots
# ------------------------------------------------------------------


class BotPerformanceSchema(CamelModel):
    total_trades: int
    win_rate: float
    total_pnl: float = Field(..., alias="totalPnL")
    monthly_return: float


class BotSchema(CamelModel):
    id: str
    name: Optional[str] = None
    status: str
    strategy: Optional[str] = None
    capital: Optional[float] = None
    max_risk: Optional[float] = None
    profit_target: Optional[float] = None
    stop_loss: Optional[float] = None
    created_at: datetime
    performance: BotPerformanceSchema

    @classmethod
    def from_entity(cls, bot: Bot) -> "BotSchema":
        return cls(
            id=bot.id,
            name=bot.name,
            status=bot.status.value,
            strategy=bot.strategy,
            capital=_optional_float(bot.capital),
            max_risk=bot.max_risk,
            profit_target=bot.profit_target,
            stop_loss=bot.stop_loss,
            created_at=bot.created_at,
            performance=BotPerformanceSchema(
                total_trades=bot.performance.total_trades,
                win_rate=bot.performance.win_rate,
                total_pnl=float(bot.performance.total_pnl),
                monthly_return=bot.performance.monthly_return,
            ),
        )


class CreateBotRequest(CamelModel):
    """Request schema for POST /api/bots.

    Attributes:
        name: Display name.
        strategy: momentum, meanreversion, arbitrage, scalping or grid.
        capital: Capital to allocate.
        max_risk: Max risk per trade, percent.
        profit_target: Take-profit threshold, percent.
        stop_loss: Stop-loss threshold, percent.
    """

    name: Optional[str] = None
    strategy: Optional[str] = None
    capital: Optional[Decimal] = None
    max_risk: Optional[float] = None
    profit_target: Optional[float] = None
    stop_loss: Optional[float] = None


class CreateBotResponse(CamelModel):
    message: str
    bot: BotSchema


class BotActionResponse(CamelModel):
    message: str
    bot_id: str


# ------------------------------------------------------------------
# Signals
# ------------------------------------------------------------------


class SignalSchema(CamelModel):
    id: str
    symbol: str
    action: str
    price: float
    target_price: float
    stop_loss: float
    confidence: int
    timeframe: str
    strategy: str
    status: str
    created_at: datetime
    pnl: Optional[float] = None

    @classmethod
    def from_entity(cls, signal: TradingSignal) -> "SignalSchema":
        return cls(
            id=signal.id,
            symbol=signal.symbol,
            action=signal.action.value,
            price=float(signal.price),
            target_price=float(signal.target_price),
            stop_loss=float(signal.stop_loss),
            confidence=signal.confidence,
            timeframe=signal.timeframe,
            strategy=signal.strategy,
            status=signal.status.value,
            created_at=signal.created_at,
            pnl=_optional_float(signal.pnl),
        )


class SignalActionResponse(CamelModel):
    message: str
    signal_id: str


# ------------------------------------------------------------------
# Copy trading
# ------------------------------------------------------------------


class ExpertPerformanceSchema(CamelModel):
    total_return: float
    monthly_return: float
    win_rate: float
    total_trades: int
    risk_score: float


class ExpertSchema(CamelModel):
    id: str
    name: str
    username: str
    avatar: Optional[str] = None
    rating: float
    followers: int
    following: bool
    performance: ExpertPerformanceSchema
    strategies: list[str]
    description: str
    copy_fee: float
    min_copy_amount: float

    @classmethod
    def from_entity(cls, expert: CopyExpert) -> "ExpertSchema":
        perf = expert.performance
        return cls(
            id=expert.id,
            name=expert.name,
            username=expert.username,
            avatar=expert.avatar,
            rating=expert.rating,
            followers=expert.followers,
            following=expert.following,
            performance=ExpertPerformanceSchema(
                total_return=perf.total_return,
                monthly_return=perf.monthly_return,
                win_rate=perf.win_rate,
                total_trades=perf.total_trades,
                risk_score=perf.risk_score,
            ),
            strategies=list(expert.strategies),
            description=expert.description,
            copy_fee=expert.copy_fee,
            min_copy_amount=float(expert.min_copy_amount),
        )


class CopyExpertRequest(CamelModel):
    """Request schema for POST /api/copy-experts/{id}/copy."""

    amount: Optional[float] = Field(default=None, description="Allocation to copy with")


class FollowExpertResponse(CamelModel):
    message: str
    expert_id: str


class CopyExpertResponse(CamelModel):
    message: str
    expert_id: str
    amount: Optional[float] = None


# ------------------------------------------------------------------
# Market
# ------------------------------------------------------------------


class TechnicalAnalysisSchema(CamelModel):
    recommendation: str
    confidence: int
    support_level: float
    resistance_level: float
    rsi: float
    macd: str
    sentiment: str


class NewsItemSchema(CamelModel):
    title: str
    summary: str
    impact: str
    timestamp: datetime


class MarketAnalysisSchema(CamelModel):
    symbol: str
    name: str
    price: float
    change: float
    change_percent: float
    volume: int
    market_cap: int
    analysis: TechnicalAnalysisSchema
    news: list[NewsItemSchema]

    @classmethod
    def from_entity(cls, item: MarketAnalysis) -> "MarketAnalysisSchema":
        ta = item.analysis
        return cls(
            symbol=item.symbol,
            name=item.name,
            price=float(item.price),
            change=float(item.change),
            change_percent=item.change_percent,
            volume=item.volume,
            market_cap=item.market_cap,
            analysis=TechnicalAnalysisSchema(
                recommendation=ta.recommendation.value,
                confidence=ta.confidence,
                support_level=float(ta.support_level),
                resistance_level=float(ta.resistance_level),
                rsi=ta.rsi,
                macd=ta.macd,
                sentiment=ta.sentiment.value,
            ),
            news=[
                NewsItemSchema(
                    title=n.title,
                    summary=n.summary,
                    impact=n.impact.value,
                    timestamp=n.timestamp,
                )
                for n in item.news
            ],
        )


class AssetSchema(CamelModel):
    id: str
    symbol: str
    name: str
    type: str
    price: float
    change: float
    change_percent: float
    volume: str
    market_cap: Optional[str] = None
    holdings: Optional[float] = None
    value: Optional[float] = None
    icon: Optional[str] = None

    @classmethod
    def from_entity(cls, asset: Asset) -> "AssetSchema":
        return cls(
            id=asset.id,
            symbol=asset.symbol,
            name=asset.name,
            type=asset.type.value,
            price=float(asset.price),
            change=float(asset.change),
            change_percent=asset.change_percent,
            volume=asset.volume,
            market_cap=asset.market_cap,
            holdings=_optional_float(asset.holdings),
            value=_optional_float(asset.value),
            icon=asset.icon,
        )
