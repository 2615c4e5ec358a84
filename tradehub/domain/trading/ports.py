"""
Port interfaces (ABCs) for the trading bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from tradehub.domain.trading.entities import (
    Asset,
    Bot,
    CopyExpert,
    IndexQuote,
    MarketAnalysis,
    PortfolioSnapshot,
    RecentTrade,
    TradingSignal,
    WatchlistItem,
)


class BotCatalog(ABC):
    """Port for reading a user's trading bots."""

    @abstractmethod
    def list_bots(self, user_id: str) -> list[Bot]:
        raise NotImplementedError


class SignalFeed(ABC):
    """Port for the published trading signals."""

    @abstractmethod
    def list_signals(self) -> list[TradingSignal]:
        """Return current and recently executed signals, newest first."""
        raise NotImplementedError


class ExpertDirectory(ABC):
    """Port for the copy-trading expert directory."""

    @abstractmethod
    def list_experts(self, user_id: str) -> list[CopyExpert]:
        """Return experts, flagged with whether the user already follows them."""
        raise NotImplementedError


class MarketDataProvider(ABC):
    """Port for quotes, analysis and index levels."""

    @abstractmethod
    def list_analyses(self) -> list[MarketAnalysis]:
        raise NotImplementedError

    @abstractmethod
    def get_indices(self) -> dict[str, IndexQuote]:
        """Return index quotes keyed by short name (sp500, nasdaq, dow, vix)."""
        raise NotImplementedError

    @abstractmethod
    def list_assets(self, user_id: str) -> list[Asset]:
        raise NotImplementedError


class PortfolioProvider(ABC):
    """Port for the dashboard portfolio widgets."""

    @abstractmethod
    def get_snapshot(self, user_id: str) -> PortfolioSnapshot:
        raise NotImplementedError

    @abstractmethod
    def list_recent_trades(self, user_id: str) -> list[RecentTrade]:
        raise NotImplementedError

    @abstractmethod
    def get_watchlist(self, user_id: str) -> list[WatchlistItem]:
        raise NotImplementedError
